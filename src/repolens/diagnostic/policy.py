# topmark:header:start
#
#   project      : RepoLens
#   file         : policy.py
#   file_relpath : src/repolens/diagnostic/policy.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Escalation and auto-resolution policy for new diagnostics.

The policy is a pure function of a diagnostic's severity and category:

1. ``error`` and ``critical`` diagnostics escalate to level 1 and require
   manual review. Auto-resolution is never attempted for them.
2. ``info`` and ``warning`` diagnostics stay at level 0 and are checked against
   the static auto-resolution table.

The auto-resolution table is a fixed lookup with exactly two entries; it is not
a learning system.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from repolens.core.exceptions import DiagnosticValidationError
from repolens.diagnostic.model import Category, Severity

#: Severities that escalate and always require a human.
ESCALATING_SEVERITIES: Final[frozenset[Severity]] = frozenset(
    {Severity.ERROR, Severity.CRITICAL},
)

#: `(category, severity)` pairs resolved without human action.
AUTO_RESOLUTION_RULES: Final[frozenset[tuple[Category, Severity]]] = frozenset(
    {
        (Category.SCHEMA, Severity.WARNING),
        (Category.VISUAL, Severity.INFO),
    }
)


@dataclass(frozen=True, slots=True)
class EscalationOutcome:
    """Result of running the escalation policy on one diagnostic.

    Attributes:
        escalation_level (int): 0 = no escalation, 1 = requires attention.
        requires_manual_review (bool): Whether a human must look at the diagnostic.
        auto_resolved (bool): Whether the static rule table resolved it.
    """

    escalation_level: int
    requires_manual_review: bool
    auto_resolved: bool


_ESCALATED: Final[EscalationOutcome] = EscalationOutcome(
    escalation_level=1, requires_manual_review=True, auto_resolved=False
)
_RESOLVED: Final[EscalationOutcome] = EscalationOutcome(
    escalation_level=0, requires_manual_review=False, auto_resolved=True
)
_OPEN: Final[EscalationOutcome] = EscalationOutcome(
    escalation_level=0, requires_manual_review=False, auto_resolved=False
)


def is_auto_resolvable(category: Category, severity: Severity) -> bool:
    """Return True if `(category, severity)` is in the static auto-resolution table."""
    return (category, severity) in AUTO_RESOLUTION_RULES


def escalate(severity: Severity, category: Category) -> EscalationOutcome:
    """Decide escalation level, manual-review flag and auto-resolution for a diagnostic.

    Args:
        severity: The diagnostic's severity.
        category: The diagnostic's category.

    Returns:
        The (deterministic) escalation outcome.

    Raises:
        DiagnosticValidationError: If `severity` or `category` is not a member of its
            enumeration.
    """
    if not isinstance(severity, Severity):
        raise DiagnosticValidationError("severity", severity, "not a Severity")
    if not isinstance(category, Category):
        raise DiagnosticValidationError("category", category, "not a Category")

    if severity in ESCALATING_SEVERITIES:
        return _ESCALATED
    if is_auto_resolvable(category, severity):
        return _RESOLVED
    return _OPEN
