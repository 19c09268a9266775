# topmark:header:start
#
#   project      : RepoLens
#   file         : machine_emitters.py
#   file_relpath : src/repolens/cli/machine_emitters.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""CLI helpers for emitting machine-readable output.

This module is Click/console-aware and is responsible only for writing already
rendered machine-output strings (JSON or NDJSON) to the active ConsoleLike.

All shaping and serialization lives in `repolens.core.machine` and
`repolens.diagnostic.machine`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from repolens.cli.console_helpers import get_console_safely
from repolens.core.formats import OutputFormat, is_machine_format
from repolens.core.machine.schemas import MachineKey, MachineKind
from repolens.core.machine.serializers import serialize_json_envelope, serialize_ndjson
from repolens.core.machine.shapes import build_ndjson_record
from repolens.diagnostic.machine import serialize_diagnostics, serialize_export

if TYPE_CHECKING:
    from collections.abc import Sequence

    from repolens.cli.console_api import ConsoleLike
    from repolens.compliance.model import Blueprint
    from repolens.compliance.validator import ComplianceReport
    from repolens.core.formats import ExportSystem
    from repolens.core.machine.schemas import MetaPayload
    from repolens.diagnostic.health import SystemHealth
    from repolens.diagnostic.machine import ExportRecord
    from repolens.diagnostic.model import Diagnostic


def emit_machine(serialized: str) -> None:
    """Emit the serialized machine document to the ConsoleLike.

    JSON documents get a trailing newline; NDJSON streams already end with one.
    An empty document prints nothing.
    """
    if not serialized:
        return
    console: ConsoleLike = get_console_safely()
    console.print(serialized, nl=not serialized.endswith("\n"))


def _require_machine_format(fmt: OutputFormat) -> None:
    if not is_machine_format(fmt):
        raise ValueError(f"Unsupported machine output format: {fmt!r}")


def emit_check_machine(
    *,
    meta: MetaPayload,
    fmt: OutputFormat,
    blueprint: Blueprint | None,
    compliance: ComplianceReport | None,
    diagnostics: Sequence[Diagnostic],
    health: SystemHealth,
) -> None:
    """Emit the result of `repolens check` in JSON or NDJSON form.

    Raises:
        ValueError: if `fmt` is not a machine format.
    """
    _require_machine_format(fmt)
    emit_machine(
        serialize_diagnostics(
            meta=meta,
            fmt=fmt,
            diagnostics=diagnostics,
            health=health,
            blueprint=blueprint,
            compliance=compliance,
        )
    )


def emit_export_machine(
    *,
    meta: MetaPayload,
    fmt: OutputFormat,
    system: ExportSystem,
    records: Sequence[ExportRecord],
) -> None:
    """Emit a diagnostics export in JSON or NDJSON form.

    Raises:
        ValueError: if `fmt` is not a machine format.
    """
    _require_machine_format(fmt)
    emit_machine(serialize_export(meta=meta, fmt=fmt, system=system, records=records))


def emit_version_machine(*, meta: MetaPayload, fmt: OutputFormat) -> None:
    """Emit the version information in JSON or NDJSON form.

    The version block is the `meta` payload itself (tool, version, doctrine).

    Raises:
        ValueError: if `fmt` is not a machine format.
    """
    _require_machine_format(fmt)
    payload: dict[str, str] = {
        MachineKey.VERSION: meta["version"],
        "doctrine": meta["doctrine"],
    }
    if fmt == OutputFormat.JSON:
        emit_machine(serialize_json_envelope(meta, **{MachineKey.VERSION: payload}))
    else:
        emit_machine(
            serialize_ndjson(
                [build_ndjson_record(kind=MachineKind.VERSION, meta=meta, payload=payload)]
            )
        )
