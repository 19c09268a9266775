# topmark:header:start
#
#   project      : RepoLens
#   file         : serializers.py
#   file_relpath : src/repolens/diagnostic/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""JSON/NDJSON serialization of diagnostics, health and exports.

Separation of concerns:
- `repolens.diagnostic.machine.schemas` defines payload objects.
- `repolens.diagnostic.machine.shapes` builds NDJSON records.
- This module serializes envelopes and records to strings.

JSON envelopes:
    `{"meta": {...}, "diagnostics": [...], "health": {...}}`, optionally with
    `"blueprint"` and `"compliance"` payloads ahead of `"diagnostics"`
    `{"meta": {...}, "system": "stamped", "export": [...]}`
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from repolens.core.formats import OutputFormat
from repolens.core.machine.schemas import MachineKey
from repolens.core.machine.serializers import serialize_json_envelope, serialize_ndjson
from repolens.diagnostic.machine.shapes import (
    build_blueprint_ndjson_record,
    build_health_ndjson_record,
    iter_diagnostic_ndjson_records,
    iter_export_ndjson_records,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from repolens.compliance.model import Blueprint
    from repolens.compliance.validator import ComplianceReport
    from repolens.core.formats import ExportSystem
    from repolens.core.machine.schemas import MetaPayload
    from repolens.diagnostic.health import SystemHealth
    from repolens.diagnostic.machine.schemas import ExportRecord
    from repolens.diagnostic.model import Diagnostic


def serialize_diagnostics(
    *,
    meta: MetaPayload,
    fmt: OutputFormat,
    diagnostics: Sequence[Diagnostic],
    health: SystemHealth,
    blueprint: Blueprint | None = None,
    compliance: ComplianceReport | None = None,
) -> str:
    """Serialize diagnostics plus a health summary in JSON or NDJSON form.

    The NDJSON stream holds an optional leading `blueprint` record, one
    `diagnostic` record per diagnostic and a single trailing `health` record.
    The compliance report (with its deficiencies) is only carried by the JSON
    envelope; NDJSON consumers read the score from the blueprint record.

    Args:
        meta: Metadata payload.
        fmt: Output format; only JSON and NDJSON are supported.
        diagnostics: Diagnostics in output order.
        health: Health snapshot over the full store.
        blueprint: Registered blueprint the diagnostics were produced for, if any.
        compliance: Blueprint compliance report, if any (JSON only).

    Returns:
        The serialized document.

    Raises:
        ValueError: If `fmt` is not a machine format.
    """
    if fmt == OutputFormat.JSON:
        payloads: dict[str, object] = {}
        if blueprint is not None:
            payloads[MachineKey.BLUEPRINT] = blueprint
        if compliance is not None:
            payloads[MachineKey.COMPLIANCE] = compliance
        payloads[MachineKey.DIAGNOSTICS] = diagnostics
        payloads[MachineKey.HEALTH] = health
        return serialize_json_envelope(meta=meta, **payloads)
    if fmt == OutputFormat.NDJSON:
        leading: tuple[dict[str, object], ...] = (
            (build_blueprint_ndjson_record(meta=meta, blueprint=blueprint),)
            if blueprint is not None
            else ()
        )
        return serialize_ndjson(
            itertools.chain(
                leading,
                iter_diagnostic_ndjson_records(meta=meta, diagnostics=diagnostics),
                (build_health_ndjson_record(meta=meta, health=health),),
            )
        )
    raise ValueError(f"Unsupported machine output format: {fmt!r}")


def serialize_export(
    *,
    meta: MetaPayload,
    fmt: OutputFormat,
    system: ExportSystem,
    records: Sequence[ExportRecord],
) -> str:
    """Serialize a diagnostics export in JSON or NDJSON form.

    Args:
        meta: Metadata payload.
        fmt: Output format; only JSON and NDJSON are supported.
        system: Export system the records are tagged with.
        records: Export records in query order.

    Returns:
        The serialized document. An empty NDJSON export is the empty string.

    Raises:
        ValueError: If `fmt` is not a machine format.
    """
    if fmt == OutputFormat.JSON:
        return serialize_json_envelope(
            meta=meta,
            **{MachineKey.SYSTEM: system, MachineKey.EXPORT: records},
        )
    if fmt == OutputFormat.NDJSON:
        return serialize_ndjson(iter_export_ndjson_records(meta=meta, records=records))
    raise ValueError(f"Unsupported machine output format: {fmt!r}")
