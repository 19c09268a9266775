# topmark:header:start
#
#   project      : RepoLens
#   file         : test_compliance_validator.py
#   file_relpath : tests/compliance/test_compliance_validator.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Tests for blueprint and module compliance scoring and validation."""

from __future__ import annotations

from repolens.compliance.model import (
    BlueprintModule,
    BlueprintSchema,
    Module,
    ModuleDocumentation,
)
from repolens.compliance.registry import BlueprintRegistry
from repolens.compliance.validator import ComplianceValidator, score_blueprint, score_module
from repolens.diagnostic.model import Category, Principle, Severity
from repolens.diagnostic.store import DiagnosticStore
from tests.conftest import (
    BASE_TIME,
    counting_ids,
    described_module,
    frozen_clock,
    make_blueprint,
    make_module,
    parametrize,
)


def _validator(min_doc: int = 100) -> ComplianceValidator:
    store = DiagnosticStore(clock=frozen_clock(), id_factory=counting_ids())
    return ComplianceValidator(
        store, BlueprintRegistry(), min_documentation_length=min_doc, clock=frozen_clock()
    )


def test_fully_described_blueprint_is_100() -> None:
    """Three schema shapes plus two described modules score 5/5."""
    report = score_blueprint(
        make_blueprint(modules=(described_module("m1"), described_module("m2")))
    )
    assert (report.passed, report.total, report.compliance) == (5, 5, 100)
    assert report.is_compliant
    assert report.deficiencies == ()


def test_missing_shape_scores_80() -> None:
    """A missing schema shape fails one of five checks: 80%."""
    bp = make_blueprint(
        shapes=("stamped", "spvpet"),
        modules=(described_module("m1"), described_module("m2")),
    )
    report = score_blueprint(bp)
    assert (report.passed, report.total, report.compliance) == (4, 5, 80)
    assert report.deficiencies == ("schema 'stacked' is missing or not a mapping",)


def test_blueprint_without_modules_counts_schema_only() -> None:
    """With no modules only the three schema checks count."""
    report = score_blueprint(make_blueprint(shapes=("stamped",)))
    assert (report.passed, report.total, report.compliance) == (1, 3, 33)


def test_non_mapping_shape_and_undescribed_module_fail() -> None:
    """Non-mapping shapes and modules lacking a field are deficiencies."""
    bp = make_blueprint(modules=(BlueprintModule(id="bare", name="Bare"),))
    bp.schema = BlueprintSchema(stamped={}, spvpet=["not", "a", "table"], stacked={})
    report = score_blueprint(bp)
    assert (report.passed, report.total) == (2, 4)
    assert report.compliance == 50
    assert any("bare" in d for d in report.deficiencies)


def test_register_compliant_blueprint_records_nothing() -> None:
    """A compliant blueprint is stamped and stored without diagnostics."""
    v = _validator()
    bp = make_blueprint(modules=(described_module(),))
    v.register_blueprint(bp)
    assert bp.compliance == 100
    assert bp.last_updated == BASE_TIME
    assert v.registry.get(bp.id) is bp
    assert len(v.store) == 0


def test_register_non_compliant_blueprint_records_auto_resolved_warning() -> None:
    """A shortfall produces one schema warning, auto-resolved by the static table."""
    v = _validator()
    bp = make_blueprint(shapes=("stamped", "spvpet"), modules=(described_module(),) * 2)
    report = v.register_blueprint(bp)
    assert report.compliance == 80
    assert bp.compliance == 80

    (d,) = v.store.snapshot()
    assert d.severity is Severity.WARNING
    assert d.category is Category.SCHEMA
    assert d.principle is Principle.SCHEMA_ENFORCEMENT
    assert d.message == "Blueprint bp-1 has 20% compliance issues"
    assert dict(d.context) == {"blueprint_id": "bp-1", "compliance": 80}
    assert d.auto_resolved is True
    assert d.requires_manual_review is False


def test_register_upserts_by_id() -> None:
    """Registering the same id again replaces the stored blueprint."""
    v = _validator()
    v.register_blueprint(make_blueprint("bp"))
    replacement = make_blueprint("bp", shapes=())
    v.register_blueprint(replacement)
    assert len(v.registry) == 1
    assert v.registry.get("bp") is replacement
    assert replacement.compliance == 0


def test_compliant_module_records_nothing() -> None:
    """A module with a valid number, a diagram and enough docs is clean."""
    v = _validator()
    assert v.validate_module(make_module()) == []
    assert v.score_module(make_module()).compliance == 100


@parametrize("barton_number", ["39.2a", "39.02.01", "a.b.c.d"])
def test_invalid_barton_number_is_escalated_error(barton_number: str) -> None:
    """A malformed Barton number is a schema error requiring manual review."""
    v = _validator()
    (d,) = v.validate_module(make_module("m1", barton_number=barton_number))
    assert d.severity is Severity.ERROR
    assert d.category is Category.SCHEMA
    assert d.principle is Principle.SCHEMA_ENFORCEMENT
    assert d.message == f"Invalid Barton number format: {barton_number}"
    assert dict(d.context) == {"module_id": "m1", "barton_number": barton_number}
    assert d.module_id == "m1"
    assert d.barton_number == barton_number
    assert d.escalation_level == 1
    assert d.requires_manual_review is True


def test_missing_diagram_and_short_docs_are_warnings() -> None:
    """Missing diagram and short documentation yield two warnings, in check order."""
    v = _validator()
    module = make_module("m2", diagram=False, markdown="  short  ")
    diagnostics = v.validate_module(module)
    assert [d.message for d in diagnostics] == [
        "Missing visual diagram for module m2",
        "Insufficient documentation for module m2",
    ]
    diagram, docs = diagnostics
    assert diagram.category is Category.VISUAL
    assert diagram.principle is Principle.VISUAL_DOCUMENTATION
    assert dict(diagram.context) == {"module_id": "m2"}
    assert docs.category is Category.ORPT
    # The recorded length is the raw markdown length.
    assert dict(docs.context) == {"module_id": "m2", "doc_length": 9}
    assert not any(d.requires_manual_review for d in diagnostics)
    assert score_module(module).compliance == 33


def test_documentation_threshold_uses_trimmed_length() -> None:
    """Whitespace padding does not count towards the documentation threshold."""
    v = _validator(min_doc=10)
    padded = Module(
        id="m3",
        barton_number="39.01.01.01",
        name="M3",
        documentation=ModuleDocumentation(markdown=" " * 20 + "abc" + " " * 20),
    )
    assert [d.message for d in v.validate_module(make_module("m3", markdown="0123456789"))] == []
    messages = [d.message for d in v.validate_module(padded)]
    assert "Insufficient documentation for module m3" in messages


def test_module_without_anything_fails_all_three_checks() -> None:
    """An empty module fails every check and scores 0."""
    v = _validator()
    bare = Module(id="m4", barton_number="", name="M4")
    diagnostics = v.validate_module(bare)
    assert len(diagnostics) == 3
    assert diagnostics[0].barton_number is None
    assert v.score_module(bare).compliance == 0
