# topmark:header:start
#
#   project      : RepoLens
#   file         : filters.py
#   file_relpath : src/repolens/diagnostic/filters.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Query filters for stored diagnostics.

Each criterion is independently optional and the criteria combine with AND
semantics. An unset criterion (``None``) matches everything; a set criterion
with no members matches nothing. An empty ``module_id`` counts as unset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from repolens.core.exceptions import DiagnosticValidationError
from repolens.diagnostic.model import Category, Principle, Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from repolens.core.enum_mixins import KeyedStrEnum
    from repolens.diagnostic.model import Diagnostic

_E = TypeVar("_E", bound="KeyedStrEnum")


def _member_set(
    enum_cls: type[_E],
    field_name: str,
    raw: Iterable[_E | str] | None,
) -> frozenset[_E] | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        # A bare string is a single token, not an iterable of characters.
        raw = (raw,)
    members: set[_E] = set()
    for token in raw:
        member: _E | None = enum_cls.parse(token)
        if member is None:
            raise DiagnosticValidationError(
                field_name, token, f"expected one of {', '.join(enum_cls.keys())}"
            )
        members.add(member)
    return frozenset(members)


@dataclass(frozen=True, slots=True)
class DiagnosticFilter:
    """Conjunctive filter over severity, category, module id and principle."""

    severity: frozenset[Severity] | None = None
    category: frozenset[Category] | None = None
    module_id: str | None = None
    principle: frozenset[Principle] | None = None

    @classmethod
    def build(
        cls,
        *,
        severity: Iterable[Severity | str] | None = None,
        category: Iterable[Category | str] | None = None,
        module_id: str | None = None,
        principle: Iterable[Principle | str] | None = None,
    ) -> DiagnosticFilter:
        """Build a filter from loosely-typed criteria.

        Args:
            severity: Accepted severities (members or tokens), or None for any.
            category: Accepted categories (members or tokens), or None for any.
            module_id: Required module id, or None/empty for any.
            principle: Accepted principles (members or tokens), or None for any.

        Returns:
            The normalized filter.

        Raises:
            DiagnosticValidationError: If a token does not name an enumeration member.
        """
        return cls(
            severity=_member_set(Severity, "severity", severity),
            category=_member_set(Category, "category", category),
            module_id=module_id or None,
            principle=_member_set(Principle, "principle", principle),
        )

    @property
    def is_empty(self) -> bool:
        """Return True if no criterion is set."""
        return (
            self.severity is None
            and self.category is None
            and self.module_id is None
            and self.principle is None
        )

    def matches(self, diagnostic: Diagnostic) -> bool:
        """Return True if `diagnostic` satisfies every set criterion."""
        if self.severity is not None and diagnostic.severity not in self.severity:
            return False
        if self.category is not None and diagnostic.category not in self.category:
            return False
        if self.module_id and diagnostic.module_id != self.module_id:
            return False
        if self.principle is not None and diagnostic.principle not in self.principle:
            return False
        return True
