# topmark:header:start
#
#   project      : RepoLens
#   file         : serializers.py
#   file_relpath : src/repolens/core/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

r"""Pure JSON/NDJSON serialization utilities for machine output.

This module converts *already-shaped* machine output objects (envelopes or NDJSON
record mappings) into strings.

Conventions:
- `json.dumps()` does not append a trailing newline.
- `serialize_ndjson()` returns a string that *does* end with a final `\\n`,
  which is convenient for CLI printing and piping.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from repolens.core.machine.schemas import (
    MetaPayload,
    normalize_payload,
)
from repolens.core.machine.shapes import build_json_envelope

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


def serialize_json_object(obj: object) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline).

    Args:
        obj: The object to serialize.

    Returns:
        A pretty-printed JSON string (no trailing newline).
    """
    return json.dumps(normalize_payload(obj), indent=2)


def serialize_json_envelope(meta: MetaPayload, **payloads: object) -> str:
    """Serialize a JSON envelope with `meta` plus named payloads.

    Args:
        meta: Metadata payload (tool/version).
        **payloads: Named payload objects. Each value may be a dict-like object or
            an object exposing `to_dict()`.

    Returns:
        Pretty-printed JSON string (no trailing newline).
    """
    envelope: dict[str, object] = build_json_envelope(meta=meta, **payloads)
    return serialize_json_object(envelope)


def iter_ndjson_strings(records: Iterable[Mapping[str, object]]) -> Iterator[str]:
    """Serialize shaped NDJSON records into per-line JSON strings.

    Args:
        records: Shaped NDJSON record mappings (already carrying `"kind"` and `"meta"`).

    Yields:
        One JSON string per record (no trailing newline).
    """
    for record in records:
        yield json.dumps(record)


def serialize_ndjson(records: Iterable[Mapping[str, object]]) -> str:
    """Serialize NDJSON record mappings into a newline-delimited string.

    Args:
        records: Shaped NDJSON record mappings.

    Returns:
        A string containing one JSON object per line, ending with a trailing newline.
        An empty input yields an empty string.
    """
    lines: list[str] = list(iter_ndjson_strings(records))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
