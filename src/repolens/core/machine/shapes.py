# topmark:header:start
#
#   project      : RepoLens
#   file         : shapes.py
#   file_relpath : src/repolens/core/machine/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Envelope and record shaping utilities for machine output.

This module defines *shape builders* for RepoLens machine output:
- JSON envelopes (single JSON objects) containing `"meta"` plus named payloads.
- NDJSON record objects containing `"kind"`, `"meta"`, and a payload container.

This module is intentionally console-free, Click-free and serialization-free
(no `json.dumps`).

NDJSON convention:
- Every record includes `"kind"` and `"meta"`.
- Prefer omitting `container_key` so the container key equals `kind`.
"""

from __future__ import annotations

from repolens.core.machine.schemas import (
    MachineKey,
    MetaPayload,
    normalize_payload,
    validate_machine_kind,
)


def build_json_envelope(
    *,
    meta: MetaPayload,
    **payloads: object,
) -> dict[str, object]:
    """Build a JSON envelope with `meta` plus one or more named payloads.

    Args:
        meta: Metadata payload (tool/version).
        **payloads: One or more named payload objects.

    Returns:
        JSON-serializable envelope dict.
    """
    out: dict[str, object] = {MachineKey.META: dict(meta)}
    for name, payload in payloads.items():
        out[name] = normalize_payload(payload)
    return out


def build_ndjson_record(
    *,
    kind: str,
    meta: MetaPayload,
    container_key: str | None = None,
    payload: object,
) -> dict[str, object]:
    """Build a single NDJSON record with a uniform envelope.

    Shape:
        `{"kind": <kind>, "meta": <meta>, <container_key>: <payload>}`

    Where `<container_key>` defaults to `kind` when omitted.

    Args:
        kind: NDJSON record kind.
        meta: NDJSON payload meta.
        container_key: Optional payload container key; defaults to `kind`.
        payload: The payload object (dict-like or object exposing `.to_dict()`).

    Returns:
        NDJSON record dict in canonical envelope shape.
    """
    validate_machine_kind(kind)
    resolved_payload_name: str = container_key if container_key else kind
    return {
        MachineKey.KIND: kind,
        MachineKey.META: dict(meta),
        resolved_payload_name: normalize_payload(payload),
    }
