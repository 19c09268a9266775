# topmark:header:start
#
#   project      : RepoLens
#   file         : validator.py
#   file_relpath : src/repolens/compliance/validator.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Structural compliance scoring for blueprints and modules.

Scoring is pure (`score_blueprint`, `score_module`). `ComplianceValidator`
ties scoring to a `DiagnosticStore`: structural shortfalls are *recorded* as
diagnostics and never raised.

Blueprint checks:
    - one check per schema sub-shape (``stamped``, ``spvpet``, ``stacked``),
      passed when the sub-shape is present and a mapping;
    - one check per listed module, passed when its Barton number, name and
      description are all non-empty.

Module checks:
    - the Barton number is syntactically valid;
    - a visual diagram with a non-empty file path is attached;
    - documentation is attached and its trimmed markdown is at least
      ``min_documentation_length`` characters long.

``compliance = round_half_up(100 * passed / total)``; an empty check set is
vacuously 100.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from repolens.compliance.barton import is_valid_barton_number
from repolens.compliance.model import SCHEMA_SHAPES
from repolens.config.logging import get_logger
from repolens.constants import DEFAULT_MIN_DOCUMENTATION_LENGTH
from repolens.core.numbers import percentage
from repolens.diagnostic.model import Category, DiagnosticDraft, Principle, Severity

if TYPE_CHECKING:
    from collections.abc import Callable

    from repolens.compliance.model import Blueprint, Module
    from repolens.compliance.registry import BlueprintRegistry
    from repolens.config.logging import RepolensLogger
    from repolens.diagnostic.model import Diagnostic, DiagnosticId
    from repolens.diagnostic.store import DiagnosticStore

logger: RepolensLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ComplianceReport:
    """Outcome of a structural compliance check.

    Attributes:
        passed (int): Number of checks passed.
        total (int): Number of checks performed.
        compliance (int): Rounded percentage of passed checks (100 when `total` is 0).
        deficiencies (tuple[str, ...]): One human-readable line per failed check.
    """

    passed: int
    total: int
    compliance: int
    deficiencies: tuple[str, ...] = ()

    @property
    def is_compliant(self) -> bool:
        """Return True if every check passed."""
        return self.compliance == 100

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this report."""
        return {
            "passed": self.passed,
            "total": self.total,
            "compliance": self.compliance,
            "deficiencies": list(self.deficiencies),
        }


def _report(passed: int, total: int, deficiencies: list[str]) -> ComplianceReport:
    return ComplianceReport(
        passed=passed,
        total=total,
        compliance=percentage(passed, total),
        deficiencies=tuple(deficiencies),
    )


def score_blueprint(blueprint: Blueprint) -> ComplianceReport:
    """Score a blueprint's schema shape and module descriptions.

    Args:
        blueprint: The blueprint to score; it is not modified.

    Returns:
        The compliance report.
    """
    passed: int = 0
    total: int = 0
    deficiencies: list[str] = []

    for name in SCHEMA_SHAPES:
        total += 1
        if blueprint.schema.is_present(name):
            passed += 1
        else:
            deficiencies.append(f"schema '{name}' is missing or not a mapping")

    for module in blueprint.modules:
        total += 1
        if module.is_fully_described():
            passed += 1
        else:
            deficiencies.append(
                f"module '{module.id}' lacks a Barton number, name or description"
            )

    return _report(passed, total, deficiencies)


def _documentation_length(module: Module) -> tuple[int, int]:
    """Return (raw length, trimmed length) of the module's markdown; 0 when absent."""
    if module.documentation is None:
        return 0, 0
    markdown: str = module.documentation.markdown or ""
    return len(markdown), len(markdown.strip())


def _has_diagram(module: Module) -> bool:
    return module.visual_diagram is not None and bool(module.visual_diagram.file_path)


def score_module(
    module: Module,
    *,
    min_documentation_length: int = DEFAULT_MIN_DOCUMENTATION_LENGTH,
) -> ComplianceReport:
    """Score a module's metadata completeness (Barton number, diagram, documentation)."""
    deficiencies: list[str] = []
    if not is_valid_barton_number(module.barton_number):
        deficiencies.append(f"Invalid Barton number format: {module.barton_number}")
    if not _has_diagram(module):
        deficiencies.append(f"Missing visual diagram for module {module.id}")
    if _documentation_length(module)[1] < min_documentation_length:
        deficiencies.append(f"Insufficient documentation for module {module.id}")
    total: int = 3
    return _report(total - len(deficiencies), total, deficiencies)


class ComplianceValidator:
    """Scores blueprints and modules and records shortfalls as diagnostics.

    Args:
        store (DiagnosticStore): Where shortfall diagnostics are appended.
        registry (BlueprintRegistry): Where registered blueprints are kept.
        min_documentation_length (int): Minimum trimmed markdown length.
        clock (Callable[[], datetime] | None): Source of `Blueprint.last_updated`.
    """

    def __init__(
        self,
        store: DiagnosticStore,
        registry: BlueprintRegistry,
        *,
        min_documentation_length: int = DEFAULT_MIN_DOCUMENTATION_LENGTH,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.store: DiagnosticStore = store
        self.registry: BlueprintRegistry = registry
        self.min_documentation_length: int = min_documentation_length
        self._clock: Callable[[], datetime] = clock or (lambda: datetime.now(timezone.utc))

    def register_blueprint(self, blueprint: Blueprint) -> ComplianceReport:
        """Score, stamp and upsert a blueprint.

        Writes `compliance` and `last_updated` onto `blueprint`. When compliance
        is below 100, one schema-enforcement warning is logged.

        Args:
            blueprint: The blueprint to register.

        Returns:
            The compliance report that produced `blueprint.compliance`.
        """
        report: ComplianceReport = score_blueprint(blueprint)
        blueprint.compliance = report.compliance
        blueprint.last_updated = self._clock()
        self.registry.upsert(blueprint)

        if report.is_compliant:
            logger.debug("Blueprint %s is fully compliant", blueprint.id)
            return report

        logger.info(
            "Blueprint %s compliance %d%% (%d/%d checks passed)",
            blueprint.id,
            report.compliance,
            report.passed,
            report.total,
        )
        self.store.append(
            DiagnosticDraft.build(
                principle=Principle.SCHEMA_ENFORCEMENT,
                severity=Severity.WARNING,
                category=Category.SCHEMA,
                message=(
                    f"Blueprint {blueprint.id} has {100 - report.compliance}% compliance issues"
                ),
                context={"blueprint_id": blueprint.id, "compliance": report.compliance},
            )
        )
        return report

    def validate_module(self, module: Module) -> list[Diagnostic]:
        """Check a module's metadata and record one diagnostic per shortfall.

        Args:
            module: The module to validate.

        Returns:
            The recorded diagnostics, as stored (escalation applied), in check order.
        """
        drafts: list[DiagnosticDraft] = []
        subject: dict[str, Any] = {
            "module_id": module.id or None,
            "barton_number": module.barton_number or None,
        }

        if not is_valid_barton_number(module.barton_number):
            drafts.append(
                DiagnosticDraft.build(
                    principle=Principle.SCHEMA_ENFORCEMENT,
                    severity=Severity.ERROR,
                    category=Category.SCHEMA,
                    message=f"Invalid Barton number format: {module.barton_number}",
                    context={"module_id": module.id, "barton_number": module.barton_number},
                    **subject,
                )
            )

        if not _has_diagram(module):
            drafts.append(
                DiagnosticDraft.build(
                    principle=Principle.VISUAL_DOCUMENTATION,
                    severity=Severity.WARNING,
                    category=Category.VISUAL,
                    message=f"Missing visual diagram for module {module.id}",
                    context={"module_id": module.id},
                    **subject,
                )
            )

        raw_length, trimmed_length = _documentation_length(module)
        if trimmed_length < self.min_documentation_length:
            drafts.append(
                DiagnosticDraft.build(
                    principle=Principle.VISUAL_DOCUMENTATION,
                    severity=Severity.WARNING,
                    category=Category.ORPT,
                    message=f"Insufficient documentation for module {module.id}",
                    context={"module_id": module.id, "doc_length": raw_length},
                    **subject,
                )
            )

        ids: list[DiagnosticId] = [self.store.append(draft) for draft in drafts]
        recorded: list[Diagnostic] = []
        for diagnostic_id in ids:
            diagnostic: Diagnostic | None = self.store.get(diagnostic_id)
            if diagnostic is not None:
                recorded.append(diagnostic)
        logger.debug("Module %s: %d compliance diagnostic(s)", module.id, len(recorded))
        return recorded

    def score_module(self, module: Module) -> ComplianceReport:
        """Score a module without recording diagnostics."""
        return score_module(module, min_documentation_length=self.min_documentation_length)
