# topmark:header:start
#
#   project      : RepoLens
#   file         : health.py
#   file_relpath : src/repolens/diagnostic/health.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""System health aggregation over stored diagnostics."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from repolens.core.enum_mixins import KeyedStrEnum
from repolens.core.numbers import percentage
from repolens.diagnostic.model import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from repolens.diagnostic.model import Diagnostic

#: Lowest health percentage still reported as green / yellow.
GREEN_THRESHOLD: Final[int] = 80
YELLOW_THRESHOLD: Final[int] = 60


class HealthStatus(KeyedStrEnum):
    """Traffic-light band for a health or compliance percentage."""

    GREEN = ("green", "Compliant")
    YELLOW = ("yellow", "Warning")
    RED = ("red", "Non-compliant")

    @classmethod
    def from_percentage(cls, value: int) -> HealthStatus:
        """Return the band a percentage falls into."""
        if value >= GREEN_THRESHOLD:
            return cls.GREEN
        if value >= YELLOW_THRESHOLD:
            return cls.YELLOW
        return cls.RED

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this band (human output only)."""
        return cast(
            "Callable[[str], str]",
            {
                HealthStatus.GREEN: chalk.green,
                HealthStatus.YELLOW: chalk.yellow,
                HealthStatus.RED: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True, slots=True)
class SystemHealth:
    """Snapshot aggregate over every stored diagnostic.

    Attributes:
        total (int): Number of diagnostics.
        critical (int): Critical diagnostics.
        error (int): Error diagnostics.
        warning (int): Warning diagnostics.
        info (int): Info diagnostics.
        auto_resolved_count (int): Diagnostics resolved by the static rule table.
        manual_review_count (int): Diagnostics requiring manual review.
        health_percentage (int): Share of diagnostics that are neither error nor
            critical; 100 when there are no diagnostics.
    """

    total: int
    critical: int
    error: int
    warning: int
    info: int
    auto_resolved_count: int
    manual_review_count: int
    health_percentage: int

    @property
    def status(self) -> HealthStatus:
        """Traffic-light band of `health_percentage`."""
        return HealthStatus.from_percentage(self.health_percentage)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this snapshot."""
        return {
            "total": self.total,
            "critical": self.critical,
            "error": self.error,
            "warning": self.warning,
            "info": self.info,
            "auto_resolved_count": self.auto_resolved_count,
            "manual_review_count": self.manual_review_count,
            "health_percentage": self.health_percentage,
            "status": self.status.value,
        }


def compute_system_health(diagnostics: Iterable[Diagnostic]) -> SystemHealth:
    """Aggregate counts and the health percentage for a collection of diagnostics.

    Args:
        diagnostics: The full, unfiltered diagnostic collection.

    Returns:
        The health snapshot.
    """
    counts: dict[Severity, int] = dict.fromkeys(Severity, 0)
    auto_resolved: int = 0
    manual_review: int = 0
    total: int = 0
    for d in diagnostics:
        total += 1
        counts[d.severity] += 1
        auto_resolved += d.auto_resolved
        manual_review += d.requires_manual_review

    healthy: int = total - counts[Severity.CRITICAL] - counts[Severity.ERROR]
    return SystemHealth(
        total=total,
        critical=counts[Severity.CRITICAL],
        error=counts[Severity.ERROR],
        warning=counts[Severity.WARNING],
        info=counts[Severity.INFO],
        auto_resolved_count=auto_resolved,
        manual_review_count=manual_review,
        health_percentage=percentage(healthy, total),
    )
