# topmark:header:start
#
#   project      : RepoLens
#   file         : schemas.py
#   file_relpath : src/repolens/core/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Canonical schema primitives for RepoLens machine output.

This module centralizes:
- canonical *keys* used in JSON envelopes and NDJSON records (`MachineKey`)
- canonical NDJSON *kinds* (`MachineKind`)
- helper types used across machine formats (`MetaPayload`)
- payload normalization (`normalize_payload`)

Design goals:
- Pure (no Click / no Console / no serialization side-effects).
- Stable, shared constants to avoid “stringly-typed” drift across commands.
- Conservative normalization to keep payload shaping predictable.

Normalization rules:
- `Path` -> `str`
- `datetime` -> ISO 8601 string
- string-valued `Enum` -> `.value`; other `Enum` -> `.name`
- objects with `.to_dict()` -> normalize of that mapping
- mappings -> dict with stringified keys and normalized values
- sequences/sets -> lists of normalized values
"""

from __future__ import annotations

import platform
from collections.abc import Iterator, Mapping
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Final, TypedDict, cast

from repolens.constants import DOCTRINE_VERSION, REPOLENS_VERSION


class MachineKey:
    """Canonical keys used in machine-readable JSON/NDJSON envelopes.

    These are shared constants to avoid stringly-typed key drift across emitters.
    """

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"

    # standard payload container keys
    DIAGNOSTIC: Final[str] = "diagnostic"
    DIAGNOSTICS: Final[str] = "diagnostics"
    HEALTH: Final[str] = "health"
    BLUEPRINT: Final[str] = "blueprint"
    COMPLIANCE: Final[str] = "compliance"
    EXPORT: Final[str] = "export"

    # common fields
    SYSTEM: Final[str] = "system"
    SESSION_ID: Final[str] = "session_id"
    VERSION: Final[str] = "version"
    FORMAT: Final[str] = "format"


class MachineKind:
    """Canonical `kind` values for NDJSON records."""

    DIAGNOSTIC: Final[str] = "diagnostic"
    HEALTH: Final[str] = "health"
    BLUEPRINT: Final[str] = "blueprint"
    EXPORT: Final[str] = "export"
    VERSION: Final[str] = "version"


class MetaPayload(TypedDict):
    """Metadata describing the RepoLens runtime environment for machine output."""

    tool: str
    version: str
    doctrine: str
    platform: str


_KNOWN_KINDS: Final[set[str]] = {
    MachineKind.DIAGNOSTIC,
    MachineKind.HEALTH,
    MachineKind.BLUEPRINT,
    MachineKind.EXPORT,
    MachineKind.VERSION,
}


def build_meta_payload() -> MetaPayload:
    """Return the metadata block attached to every machine-output document."""
    return MetaPayload(
        tool="repolens",
        version=REPOLENS_VERSION,
        doctrine=DOCTRINE_VERSION,
        platform=platform.python_version(),
    )


def validate_machine_kind(kind: str) -> None:
    """Validate that `kind` is a known machine record kind.

    Args:
        kind: Candidate kind string.

    Raises:
        ValueError: If `kind` is empty or not a known kind.
    """
    if not kind:
        raise ValueError("machine kind must be a non-empty string")
    if kind not in _KNOWN_KINDS:
        raise ValueError(
            f"Unknown machine kind '{kind}' - valid choices: {', '.join(sorted(_KNOWN_KINDS))}"
        )


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Notes:
      - This function is intentionally conservative. It does not attempt arbitrary
        dataclass conversion; payload objects should implement `to_dict()` if they
        want custom serialization.
      - Mapping keys are stringified to keep JSON object keys valid.

    Args:
        obj: The payload object to normalize.

    Returns:
        A JSON-serializable representation of `obj`.
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, datetime):
        return obj.isoformat()

    if isinstance(obj, Enum):
        return obj.value if isinstance(obj, str) else obj.name

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterator[object] = cast("Iterator[object]", iter(obj))
        return [normalize_payload(v) for v in seq]

    return obj
