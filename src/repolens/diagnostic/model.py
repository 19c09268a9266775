# topmark:header:start
#
#   project      : RepoLens
#   file         : model.py
#   file_relpath : src/repolens/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Core diagnostic types for RepoLens.

Sections:
    * Principle: doctrine principle explaining *why* a diagnostic was raised.
    * Severity: urgency tier (totally ordered) with associated terminal colors.
    * Category: subject-matter classification, independent of severity.
    * DiagnosticDraft: validated caller input, before identity and escalation.
    * Diagnostic: immutable stored record.

A `Diagnostic` is fully determined at construction time: the store runs the
escalation policy on the draft first and only then builds the record, so no
field (escalation included) is ever assigned after creation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, cast

from yachalk import chalk

from repolens.core.enum_mixins import KeyedStrEnum
from repolens.core.exceptions import DiagnosticValidationError

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

DiagnosticId = str
SessionId = str

_EMPTY_CONTEXT: Final[Mapping[str, Any]] = MappingProxyType({})


class Principle(KeyedStrEnum):
    """Barton doctrine principles a diagnostic can be raised under."""

    UNIVERSAL_MONITORING = ("universal_monitoring", "Universal monitoring", ("monitoring",))
    DIAGNOSTIC_TRACKING = ("diagnostic_tracking", "Diagnostic tracking", ("tracking",))
    ERROR_ESCALATION = ("error_escalation", "Error escalation", ("escalation",))
    SCHEMA_ENFORCEMENT = ("schema_enforcement", "Schema enforcement")
    VISUAL_DOCUMENTATION = ("visual_documentation", "Visual documentation")
    CROSS_LINKING = ("cross_linking", "Cross-linking")
    AUTO_RESOLUTION = ("auto_resolution", "Auto-resolution")


class Severity(KeyedStrEnum):
    """Severity levels, ordered by increasing urgency: INFO < WARNING < ERROR < CRITICAL.

    Comparison operators are inherited from ``str``; use `rank` to order severities.
    """

    INFO = ("info", "Info")
    WARNING = ("warning", "Warning", ("warn",))
    ERROR = ("error", "Error")
    CRITICAL = ("critical", "Critical")

    @property
    def rank(self) -> int:
        """Return the position of this severity in the urgency order (0 = least urgent)."""
        return _SEVERITY_ORDER.index(self)

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.INFO: chalk.blue,
                Severity.WARNING: chalk.yellow,
                Severity.ERROR: chalk.red,
                Severity.CRITICAL: chalk.red_bright.bold,
            }[self],
        )


_SEVERITY_ORDER: Final[tuple[Severity, ...]] = (
    Severity.INFO,
    Severity.WARNING,
    Severity.ERROR,
    Severity.CRITICAL,
)


class Category(KeyedStrEnum):
    """Subject-matter classification of a diagnostic."""

    ORPT = ("orpt", "ORPT")
    SCHEMA = ("schema", "Schema")
    VISUAL = ("visual", "Visual")
    ERROR = ("error", "Error")
    SYSTEM = ("system", "System")


def _require_member(enum_cls: type[KeyedStrEnum], field_name: str, raw: object) -> Any:
    member: KeyedStrEnum | None = enum_cls.parse(raw)
    if member is None:
        raise DiagnosticValidationError(
            field_name,
            raw,
            f"expected one of {', '.join(enum_cls.keys())}",
        )
    return member


def _optional_str(field_name: str, raw: object) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise DiagnosticValidationError(field_name, raw, "expected a string")
    return raw or None


@dataclass(frozen=True, slots=True)
class DiagnosticDraft:
    """Validated caller input for a diagnostic.

    Use `DiagnosticDraft.build` to construct a draft from loosely-typed input;
    it normalizes enumeration tokens and raises `DiagnosticValidationError` on
    anything malformed.
    """

    principle: Principle
    severity: Severity
    category: Category
    message: str
    context: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_CONTEXT)
    module_id: str | None = None
    barton_number: str | None = None

    @classmethod
    def build(
        cls,
        *,
        principle: Principle | str,
        severity: Severity | str,
        category: Category | str,
        message: str,
        context: Mapping[str, Any] | None = None,
        module_id: str | None = None,
        barton_number: str | None = None,
    ) -> DiagnosticDraft:
        """Validate and normalize loosely-typed diagnostic input.

        Args:
            principle: Doctrine principle (member or key/name/alias string).
            severity: Severity (member or key/name/alias string).
            category: Category (member or key/name/alias string).
            message: Human-readable description; must be a non-blank string.
            context: Optional key/value bag; shallow-copied into a read-only mapping.
            module_id: Optional subject module id.
            barton_number: Optional subject Barton number (stored as given).

        Returns:
            A validated draft.

        Raises:
            DiagnosticValidationError: If a required field is missing or out of its enumeration.
        """
        if not isinstance(message, str) or not message.strip():
            raise DiagnosticValidationError("message", message, "expected a non-empty string")
        if context is not None and not isinstance(context, Mapping):
            raise DiagnosticValidationError("context", context, "expected a mapping")

        return cls(
            principle=_require_member(Principle, "principle", principle),
            severity=_require_member(Severity, "severity", severity),
            category=_require_member(Category, "category", category),
            message=message,
            context=MappingProxyType(dict(context)) if context else _EMPTY_CONTEXT,
            module_id=_optional_str("module_id", module_id),
            barton_number=_optional_str("barton_number", barton_number),
        )


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Immutable diagnostic record as stored by `DiagnosticStore`.

    Attributes:
        diagnostic_id (str): Globally unique opaque identifier.
        session_id (str): Logging session active at creation time.
        timestamp (datetime): Timezone-aware creation instant.
        sequence (int): Insertion index within the owning store.
        principle (Principle): Why the diagnostic was raised.
        severity (Severity): Urgency tier.
        category (Category): Subject-matter classification.
        message (str): Human-readable description.
        context (Mapping[str, Any]): Read-only diagnostic-specific data.
        module_id (str | None): Subject module, if any.
        barton_number (str | None): Subject Barton number, if any.
        escalation_level (int): 0 = no escalation, >= 1 = requires attention.
        auto_resolved (bool): Resolved by the static auto-resolution rule.
        requires_manual_review (bool): Needs a human.
    """

    diagnostic_id: DiagnosticId
    session_id: SessionId
    timestamp: datetime
    sequence: int
    principle: Principle
    severity: Severity
    category: Category
    message: str
    context: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_CONTEXT)
    module_id: str | None = None
    barton_number: str | None = None
    escalation_level: int = 0
    auto_resolved: bool = False
    requires_manual_review: bool = False

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this diagnostic (context copied)."""
        return {
            "diagnostic_id": self.diagnostic_id,
            "session_id": self.session_id,
            "timestamp": self.timestamp.isoformat(),
            "principle": self.principle.value,
            "severity": self.severity.value,
            "category": self.category.value,
            "message": self.message,
            "context": dict(self.context),
            "module_id": self.module_id,
            "barton_number": self.barton_number,
            "escalation_level": self.escalation_level,
            "auto_resolved": self.auto_resolved,
            "requires_manual_review": self.requires_manual_review,
        }
