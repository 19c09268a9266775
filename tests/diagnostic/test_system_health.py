# topmark:header:start
#
#   project      : RepoLens
#   file         : test_system_health.py
#   file_relpath : tests/diagnostic/test_system_health.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Tests for system health aggregation."""

from __future__ import annotations

from datetime import datetime, timezone

from repolens.diagnostic.health import HealthStatus, compute_system_health
from repolens.diagnostic.model import Category, Diagnostic, Principle, Severity
from repolens.diagnostic.policy import escalate
from tests.conftest import parametrize


def _diag(severity: Severity, category: Category = Category.SYSTEM) -> Diagnostic:
    outcome = escalate(severity, category)
    return Diagnostic(
        diagnostic_id=f"{severity.value}-{category.value}",
        session_id="s",
        timestamp=datetime(2025, 1, 1, tzinfo=timezone.utc),
        sequence=0,
        principle=Principle.UNIVERSAL_MONITORING,
        severity=severity,
        category=category,
        message="m",
        escalation_level=outcome.escalation_level,
        auto_resolved=outcome.auto_resolved,
        requires_manual_review=outcome.requires_manual_review,
    )


def test_empty_collection_is_fully_healthy() -> None:
    """No diagnostics means 100% health and all-zero counts."""
    health = compute_system_health([])
    assert health.total == 0
    assert health.health_percentage == 100
    assert health.status is HealthStatus.GREEN
    assert health.manual_review_count == 0


def test_counts_and_percentage() -> None:
    """Counts per severity plus the rounded share of non-error diagnostics."""
    health = compute_system_health(
        [
            _diag(Severity.INFO, Category.VISUAL),
            _diag(Severity.WARNING, Category.SCHEMA),
            _diag(Severity.ERROR),
        ]
    )
    assert (health.critical, health.error, health.warning, health.info) == (0, 1, 1, 1)
    assert health.total == 3
    assert health.auto_resolved_count == 2
    assert health.manual_review_count == 1
    # 2 of 3 healthy: 66.67 rounds to 67.
    assert health.health_percentage == 67
    assert health.status is HealthStatus.YELLOW


def test_only_errors_is_zero_health() -> None:
    """Error and critical diagnostics both count against health."""
    health = compute_system_health([_diag(Severity.ERROR), _diag(Severity.CRITICAL)])
    assert health.health_percentage == 0
    assert health.status is HealthStatus.RED
    assert health.manual_review_count == 2


@parametrize(
    "value, expected",
    [
        (100, HealthStatus.GREEN),
        (80, HealthStatus.GREEN),
        (79, HealthStatus.YELLOW),
        (60, HealthStatus.YELLOW),
        (59, HealthStatus.RED),
        (0, HealthStatus.RED),
    ],
)
def test_status_bands(value: int, expected: HealthStatus) -> None:
    """Traffic-light bands: >= 80 green, >= 60 yellow, otherwise red."""
    assert HealthStatus.from_percentage(value) is expected


def test_to_dict_includes_status() -> None:
    """The machine mapping carries counts plus the status key."""
    payload = compute_system_health([_diag(Severity.WARNING)]).to_dict()
    assert payload["total"] == 1
    assert payload["health_percentage"] == 100
    assert payload["status"] == "green"
