# topmark:header:start
#
#   project      : RepoLens
#   file         : system.py
#   file_relpath : src/repolens/api/system.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""The `BartonSystem` facade: one object owning the whole diagnostics engine.

A `BartonSystem` is constructed explicitly and passed to whoever needs it;
there is no process-wide singleton. Tests build a fresh instance (optionally
with a deterministic clock and id factory) instead of resetting global state.

Example:
    ```python
    from repolens.api import BartonSystem

    system = BartonSystem()
    system.log_diagnostic("schema_enforcement", "warning", "schema", "Missing schema")
    assert system.get_system_health().total == 1
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from repolens.compliance.registry import BlueprintRegistry
from repolens.compliance.validator import ComplianceValidator
from repolens.config.logging import get_logger
from repolens.config.model import Config
from repolens.core.formats import ExportSystem
from repolens.diagnostic.filters import DiagnosticFilter
from repolens.diagnostic.machine.schemas import ExportRecord
from repolens.diagnostic.model import Category, DiagnosticDraft, Severity
from repolens.diagnostic.session import SessionManager
from repolens.diagnostic.store import DiagnosticStore

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from repolens.compliance.model import Blueprint, Module
    from repolens.compliance.validator import ComplianceReport
    from repolens.config.logging import RepolensLogger
    from repolens.diagnostic.health import SystemHealth
    from repolens.diagnostic.model import (
        Diagnostic,
        DiagnosticId,
        Principle,
        SessionId,
    )

logger: RepolensLogger = get_logger(__name__)

FilterLike = DiagnosticFilter | Mapping[str, Any]


def _as_filter(filters: FilterLike | None) -> DiagnosticFilter | None:
    if filters is None or isinstance(filters, DiagnosticFilter):
        return filters
    return DiagnosticFilter.build(
        severity=filters.get("severity"),
        category=filters.get("category"),
        module_id=filters.get("module_id"),
        principle=filters.get("principle"),
    )


class BartonSystem:
    """Diagnostics engine facade.

    Args:
        config (Config | None): Runtime configuration; built-in defaults when omitted.
        clock (Callable[[], datetime] | None): Timestamp source for diagnostics and
            blueprint registration.
        id_factory (Callable[[], str] | None): Diagnostic id source.
        session_clock_ns (Callable[[], int] | None): Nanosecond clock for session ids.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
        session_clock_ns: Callable[[], int] | None = None,
    ) -> None:
        self.config: Config = config or Config.defaults()
        self.sessions = SessionManager(
            prefix=self.config.session_prefix,
            clock_ns=session_clock_ns,
        )
        self.store = DiagnosticStore(
            sessions=self.sessions,
            clock=clock,
            id_factory=id_factory,
            id_prefix=self.config.id_prefix,
        )
        self.registry = BlueprintRegistry()
        self.validator = ComplianceValidator(
            self.store,
            self.registry,
            min_documentation_length=self.config.min_documentation_length,
            clock=clock,
        )
        logger.debug("BartonSystem started, session %s", self.sessions.current())

    # ------------------------------ Logging ------------------------------

    def log_diagnostic(
        self,
        principle: Principle | str,
        severity: Severity | str,
        category: Category | str,
        message: str,
        context: Mapping[str, Any] | None = None,
        module_id: str | None = None,
        barton_number: str | None = None,
    ) -> DiagnosticId:
        """Record a diagnostic and return its id.

        Enumerated fields accept members or their keys (case-insensitive).

        Raises:
            DiagnosticValidationError: If an enumerated field is unknown, the
                message is empty, or `context` is not a mapping.
        """
        draft: DiagnosticDraft = DiagnosticDraft.build(
            principle=principle,
            severity=severity,
            category=category,
            message=message,
            context=context,
            module_id=module_id,
            barton_number=barton_number,
        )
        return self.store.append(draft)

    def log_event(
        self,
        principle: Principle | str,
        message: str,
        severity: Severity | str = Severity.INFO,
        category: Category | str = Category.SYSTEM,
        context: Mapping[str, Any] | None = None,
    ) -> DiagnosticId:
        """Record a system event; shorthand for `log_diagnostic` with info/system defaults."""
        return self.log_diagnostic(principle, severity, category, message, context)

    # ----------------------------- Compliance -----------------------------

    def register_blueprint(self, blueprint: Blueprint) -> None:
        """Score and upsert a blueprint, writing `compliance` back onto it."""
        self.validator.register_blueprint(blueprint)

    def validate_module(self, module: Module) -> list[Diagnostic]:
        """Validate a module; return the diagnostics recorded for it."""
        return self.validator.validate_module(module)

    def score_module(self, module: Module) -> ComplianceReport:
        """Score a module without recording diagnostics."""
        return self.validator.score_module(module)

    def get_blueprint(self, blueprint_id: str) -> Blueprint | None:
        """Return a registered blueprint, or None."""
        return self.registry.get(blueprint_id)

    def list_blueprints(self) -> list[Blueprint]:
        """Return all registered blueprints."""
        return self.registry.list()

    # ------------------------------ Queries ------------------------------

    def get_diagnostics(self, filters: FilterLike | None = None) -> list[Diagnostic]:
        """Return diagnostics matching `filters`, most recent first.

        Args:
            filters: A `DiagnosticFilter`, or a mapping with any of the keys
                ``severity``, ``category``, ``module_id``, ``principle``.

        Returns:
            Matching diagnostics; equal timestamps keep insertion order.
        """
        return self.store.query(_as_filter(filters))

    def get_system_health(self) -> SystemHealth:
        """Return a health snapshot over all diagnostics."""
        return self.store.health()

    def export_diagnostics(self, system: ExportSystem | str | None = None) -> list[ExportRecord]:
        """Export every diagnostic (query order) tagged with `system`.

        Args:
            system: ``stamped``, ``spvpet`` or ``stacked``; the configured default
                when omitted.

        Returns:
            One flat record per diagnostic.

        Raises:
            ValueError: If `system` is not a known export system.
        """
        resolved: ExportSystem | None = (
            self.config.default_system if system is None else ExportSystem.parse(system)
        )
        if resolved is None:
            allowed: str = ", ".join(ExportSystem.keys())
            raise ValueError(f"Unknown export system {system!r} - valid choices: {allowed}")
        records: list[ExportRecord] = [
            ExportRecord.from_diagnostic(d, resolved) for d in self.store.query()
        ]
        logger.debug("Exported %d diagnostic(s) for %s", len(records), resolved.value)
        return records

    # ------------------------------ Sessions ------------------------------

    def current_session(self) -> SessionId:
        """Return the active session id."""
        return self.sessions.current()

    def clear_session(self) -> None:
        """Start a new session; existing diagnostics keep their session tag."""
        self.sessions.rotate()
