# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Diagnostic records, escalation policy, storage and health aggregation.

Public surface:
    - `Principle`, `Severity`, `Category`: enumerations.
    - `DiagnosticDraft`, `Diagnostic`: validated input and the stored record.
    - `escalate`, `is_auto_resolvable`: the escalation policy.
    - `DiagnosticFilter`, `DiagnosticStore`: querying and storage.
    - `SystemHealth`, `HealthStatus`: health aggregation.
    - `SessionManager`: session identifiers.
"""

from __future__ import annotations

from repolens.diagnostic.filters import DiagnosticFilter
from repolens.diagnostic.health import HealthStatus, SystemHealth, compute_system_health
from repolens.diagnostic.model import (
    Category,
    Diagnostic,
    DiagnosticDraft,
    DiagnosticId,
    Principle,
    SessionId,
    Severity,
)
from repolens.diagnostic.policy import EscalationOutcome, escalate, is_auto_resolvable
from repolens.diagnostic.session import SessionManager
from repolens.diagnostic.store import DiagnosticStore

__all__ = [
    "Category",
    "Diagnostic",
    "DiagnosticDraft",
    "DiagnosticFilter",
    "DiagnosticId",
    "DiagnosticStore",
    "EscalationOutcome",
    "HealthStatus",
    "Principle",
    "SessionId",
    "SessionManager",
    "Severity",
    "SystemHealth",
    "compute_system_health",
    "escalate",
    "is_auto_resolvable",
]
