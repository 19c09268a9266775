# topmark:header:start
#
#   project      : RepoLens
#   file         : shapes.py
#   file_relpath : src/repolens/diagnostic/machine/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""NDJSON shape builders for diagnostic machine output.

Scope:
    - One record per stored diagnostic (`kind="diagnostic"`).
    - One registered blueprint record (`kind="blueprint"`).
    - One health summary record (`kind="health"`).
    - One record per export entry (`kind="export"`).

Records are yielded as plain mappings; serialization to strings is handled by
`repolens.diagnostic.machine.serializers`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from repolens.core.machine.schemas import MachineKind
from repolens.core.machine.shapes import build_ndjson_record

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from repolens.compliance.model import Blueprint
    from repolens.core.machine.schemas import MetaPayload
    from repolens.diagnostic.health import SystemHealth
    from repolens.diagnostic.machine.schemas import ExportRecord
    from repolens.diagnostic.model import Diagnostic


def iter_diagnostic_ndjson_records(
    *,
    meta: MetaPayload,
    diagnostics: Iterable[Diagnostic],
) -> Iterator[dict[str, object]]:
    """Yield one NDJSON record per diagnostic, in the given order."""
    for d in diagnostics:
        yield build_ndjson_record(kind=MachineKind.DIAGNOSTIC, meta=meta, payload=d)


def build_blueprint_ndjson_record(
    *,
    meta: MetaPayload,
    blueprint: Blueprint,
) -> dict[str, object]:
    """Build the NDJSON record carrying a registered blueprint (compliance included)."""
    return build_ndjson_record(kind=MachineKind.BLUEPRINT, meta=meta, payload=blueprint)


def build_health_ndjson_record(*, meta: MetaPayload, health: SystemHealth) -> dict[str, object]:
    """Build the NDJSON record carrying a system health snapshot."""
    return build_ndjson_record(kind=MachineKind.HEALTH, meta=meta, payload=health)


def iter_export_ndjson_records(
    *,
    meta: MetaPayload,
    records: Iterable[ExportRecord],
) -> Iterator[dict[str, object]]:
    """Yield one NDJSON record per export entry.

    Args:
        meta: Shared metadata payload.
        records: Export records, already tagged with their system.

    Yields:
        Mappings shaped as `{"kind": "export", "meta": {...}, "export": {...}}`.
    """
    for record in records:
        yield build_ndjson_record(kind=MachineKind.EXPORT, meta=meta, payload=record)
