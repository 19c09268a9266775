# topmark:header:start
#
#   project      : RepoLens
#   file         : guards.py
#   file_relpath : src/repolens/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Type guards and normalization helpers for TOML parsing.

`TypeGuard`-based predicates narrow values coming from `tomlkit` (after
``unwrap()``) into the plain-Python shapes used by RepoLens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

from repolens.config.logging import get_logger

if TYPE_CHECKING:
    from repolens.config.logging import RepolensLogger

    from .types import TomlTable, TomlTableList

logger: RepolensLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table (a ``dict[str, Any]``)."""
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value; item types are not checked."""
    return isinstance(obj, list)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a ``list[str]``."""
    return is_any_list(obj) and all(isinstance(x, str) for x in obj)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table `key`, or a new empty dict if missing or not a table.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def as_toml_table(obj: object) -> TomlTable | None:
    """Return `obj` as a TOML table when it is one, otherwise ``None``."""
    if is_toml_table(obj):
        return obj

    logger.debug("Not a TOML table: %r", obj)
    return None


def as_toml_table_list(obj: object) -> TomlTableList:
    """Return the tables of an array of tables (``[[...]]``).

    Non-table entries are dropped with a debug log; anything that is not a
    list yields an empty list.
    """
    out: TomlTableList = []
    if not is_any_list(obj):
        return out
    for item in cast("list[object]", obj):
        if is_toml_table(item):
            out.append(item)
        else:
            logger.debug("Ignoring non-table entry: %r", item)
    return out
