# topmark:header:start
#
#   project      : RepoLens
#   file         : schemas.py
#   file_relpath : src/repolens/diagnostic/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Typed payload schemas for machine-readable diagnostics.

This module defines the JSON-friendly dataclass used by diagnostics exports:

- `ExportRecord` is a flat, self-describing copy of one stored `Diagnostic`
  tagged with the downstream system it was exported for.

The three export systems (`stamped`, `spvpet`, `stacked`) share this shape;
the system name is carried as metadata only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from repolens.core.formats import ExportSystem
    from repolens.diagnostic.model import Diagnostic


@dataclass(frozen=True, slots=True)
class ExportRecord:
    """Machine-readable export of one diagnostic.

    Attributes:
        system: Export system tag.
        diagnostic_id: Identifier of the exported diagnostic.
        session_id: Session the diagnostic was created in.
        timestamp: Creation instant.
        principle: Principle key.
        severity: Severity key.
        category: Category key.
        message: Human-readable description.
        context: Copy of the diagnostic context.
        module_id: Subject module, if any.
        barton_number: Subject Barton number, if any.
        escalation_level: Escalation level set by the policy.
        auto_resolved: Whether the static rule table resolved it.
        requires_manual_review: Whether a human must look at it.
    """

    system: ExportSystem
    diagnostic_id: str
    session_id: str
    timestamp: datetime
    principle: str
    severity: str
    category: str
    message: str
    context: Mapping[str, Any]
    module_id: str | None
    barton_number: str | None
    escalation_level: int
    auto_resolved: bool
    requires_manual_review: bool

    @classmethod
    def from_diagnostic(cls, d: Diagnostic, system: ExportSystem) -> ExportRecord:
        """Create an export record from a stored diagnostic.

        Args:
            d: Stored diagnostic.
            system: Export system the record is tagged with.

        Returns:
            The flat export record.
        """
        return cls(
            system=system,
            diagnostic_id=d.diagnostic_id,
            session_id=d.session_id,
            timestamp=d.timestamp,
            principle=d.principle.value,
            severity=d.severity.value,
            category=d.category.value,
            message=d.message,
            context=dict(d.context),
            module_id=d.module_id,
            barton_number=d.barton_number,
            escalation_level=d.escalation_level,
            auto_resolved=d.auto_resolved,
            requires_manual_review=d.requires_manual_review,
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this export record."""
        return {
            "system": self.system.value,
            "diagnostic_id": self.diagnostic_id,
            "session_id": self.session_id,
            "timestamp": self.timestamp.isoformat(),
            "principle": self.principle,
            "severity": self.severity,
            "category": self.category,
            "message": self.message,
            "context": dict(self.context),
            "module_id": self.module_id,
            "barton_number": self.barton_number,
            "escalation_level": self.escalation_level,
            "auto_resolved": self.auto_resolved,
            "requires_manual_review": self.requires_manual_review,
        }
