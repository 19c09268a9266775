# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/diagnostic/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Machine-output helpers for diagnostics (schemas, shapes, serializers)."""

from __future__ import annotations

from repolens.diagnostic.machine.schemas import ExportRecord
from repolens.diagnostic.machine.serializers import serialize_diagnostics, serialize_export
from repolens.diagnostic.machine.shapes import (
    build_blueprint_ndjson_record,
    build_health_ndjson_record,
    iter_diagnostic_ndjson_records,
    iter_export_ndjson_records,
)

__all__ = [
    "ExportRecord",
    "build_blueprint_ndjson_record",
    "build_health_ndjson_record",
    "iter_diagnostic_ndjson_records",
    "iter_export_ndjson_records",
    "serialize_diagnostics",
    "serialize_export",
]
