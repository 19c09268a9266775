# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/core/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Shared machine-output primitives (keys/kinds, envelopes/records, serialization).

Layers:

- **schemas**: canonical keys, kinds, `MetaPayload` and payload normalization.
- **shapes**: JSON envelopes and NDJSON records built around payloads.
- **serializers**: turn shaped envelopes/records into JSON/NDJSON strings.

Domain packages (e.g. `repolens.diagnostic.machine`) build payloads and rely on
these layers for the envelope and serialization.
"""

from __future__ import annotations

from repolens.core.machine.schemas import (
    MachineKey,
    MachineKind,
    MetaPayload,
    build_meta_payload,
    normalize_payload,
)
from repolens.core.machine.serializers import (
    serialize_json_envelope,
    serialize_json_object,
    serialize_ndjson,
)
from repolens.core.machine.shapes import build_json_envelope, build_ndjson_record

__all__ = [
    "MachineKey",
    "MachineKind",
    "MetaPayload",
    "build_json_envelope",
    "build_meta_payload",
    "build_ndjson_record",
    "normalize_payload",
    "serialize_json_envelope",
    "serialize_json_object",
    "serialize_ndjson",
]
