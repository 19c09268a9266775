# topmark:header:start
#
#   project      : RepoLens
#   file         : loaders.py
#   file_relpath : src/repolens/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading RepoLens configuration from:
- the runtime defaults defined in code, and
- on-disk TOML files (`repolens.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from repolens.config.keys import Toml
from repolens.config.logging import get_logger
from repolens.constants import (
    DEFAULT_DIAGNOSTIC_ID_PREFIX,
    DEFAULT_MIN_DOCUMENTATION_LENGTH,
    DEFAULT_SESSION_PREFIX,
)
from repolens.core.formats import ExportSystem

if TYPE_CHECKING:
    from pathlib import Path

    from repolens.config.logging import RepolensLogger

    from .types import TomlTable

logger: RepolensLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return RepoLens's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely. Sections/keys align with `repolens.config.keys.Toml`.
    """
    return {
        Toml.SECTION_DIAGNOSTICS: {
            Toml.KEY_MIN_DOCUMENTATION_LENGTH: DEFAULT_MIN_DOCUMENTATION_LENGTH,
            Toml.KEY_ID_PREFIX: DEFAULT_DIAGNOSTIC_ID_PREFIX,
        },
        Toml.SECTION_SESSION: {
            Toml.KEY_PREFIX: DEFAULT_SESSION_PREFIX,
        },
        Toml.SECTION_EXPORT: {
            Toml.KEY_DEFAULT_SYSTEM: ExportSystem.STAMPED.value,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``repolens.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TOMLKitError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}
