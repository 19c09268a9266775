# topmark:header:start
#
#   project      : RepoLens
#   file         : test_diagnostic_machine.py
#   file_relpath : tests/diagnostic/test_diagnostic_machine.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Tests for diagnostic machine output (export records, JSON and NDJSON)."""

from __future__ import annotations

import json
from typing import Any

import pytest

from repolens.core.formats import ExportSystem, OutputFormat
from repolens.core.machine.schemas import build_meta_payload
from repolens.diagnostic.machine import ExportRecord, serialize_diagnostics, serialize_export
from repolens.diagnostic.model import DiagnosticDraft
from repolens.diagnostic.store import DiagnosticStore
from tests.conftest import counting_ids, make_blueprint, step_clock


def _store() -> DiagnosticStore:
    store = DiagnosticStore(clock=step_clock(), id_factory=counting_ids())
    store.append(
        DiagnosticDraft.build(
            principle="schema_enforcement",
            severity="error",
            category="schema",
            message="Invalid Barton number format: x",
            context={"module_id": "m1"},
            module_id="m1",
            barton_number="x",
        )
    )
    store.append(
        DiagnosticDraft.build(
            principle="visual_documentation",
            severity="warning",
            category="visual",
            message="Missing visual diagram for module m1",
            module_id="m1",
        )
    )
    return store


def test_export_record_flattens_diagnostic() -> None:
    """Export records carry the system tag first plus every diagnostic field."""
    d = _store().query()[0]
    payload = ExportRecord.from_diagnostic(d, ExportSystem.SPVPET).to_dict()
    assert next(iter(payload)) == "system"
    assert payload["system"] == "spvpet"
    assert payload["diagnostic_id"] == d.diagnostic_id
    assert payload["severity"] == "warning"
    assert payload["category"] == "visual"
    assert payload["timestamp"] == d.timestamp.isoformat()


def test_serialize_diagnostics_json_envelope() -> None:
    """The JSON envelope holds meta, blueprint, diagnostics and health."""
    store = _store()
    blueprint = make_blueprint()
    out = serialize_diagnostics(
        meta=build_meta_payload(),
        fmt=OutputFormat.JSON,
        diagnostics=store.query(),
        health=store.health(),
        blueprint=blueprint,
    )
    doc: dict[str, Any] = json.loads(out)
    assert list(doc) == ["meta", "blueprint", "diagnostics", "health"]
    assert doc["meta"]["tool"] == "repolens"
    assert [d["diagnostic_id"] for d in doc["diagnostics"]] == ["d-1", "d-0"]
    assert doc["diagnostics"][1]["context"] == {"module_id": "m1"}
    assert doc["health"]["total"] == 2
    assert doc["blueprint"]["id"] == blueprint.id


def test_serialize_diagnostics_ndjson_records() -> None:
    """NDJSON holds one record per diagnostic followed by one health record."""
    store = _store()
    out = serialize_diagnostics(
        meta=build_meta_payload(),
        fmt=OutputFormat.NDJSON,
        diagnostics=store.query(),
        health=store.health(),
    )
    assert out.endswith("\n")
    records = [json.loads(line) for line in out.splitlines()]
    assert [r["kind"] for r in records] == ["diagnostic", "diagnostic", "health"]
    assert all("meta" in r for r in records)
    assert records[-1]["health"]["manual_review_count"] == 1


def test_serialize_export_json_and_empty_ndjson() -> None:
    """Exports carry the system; an empty NDJSON export is empty."""
    store = _store()
    records = [ExportRecord.from_diagnostic(d, ExportSystem.STACKED) for d in store.query()]
    doc = json.loads(
        serialize_export(
            meta=build_meta_payload(),
            fmt=OutputFormat.JSON,
            system=ExportSystem.STACKED,
            records=records,
        )
    )
    assert doc["system"] == "stacked"
    assert {r["system"] for r in doc["export"]} == {"stacked"}

    empty = serialize_export(
        meta=build_meta_payload(), fmt=OutputFormat.NDJSON, system=ExportSystem.STACKED, records=[]
    )
    assert empty == ""


def test_human_formats_are_rejected() -> None:
    """Only JSON and NDJSON are machine formats."""
    store = _store()
    with pytest.raises(ValueError, match="Unsupported"):
        serialize_diagnostics(
            meta=build_meta_payload(),
            fmt=OutputFormat.TEXT,
            diagnostics=[],
            health=store.health(),
        )
