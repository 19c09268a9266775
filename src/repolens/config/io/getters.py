# topmark:header:start
#
#   project      : RepoLens
#   file         : getters.py
#   file_relpath : src/repolens/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape of one value. A wrong type or value
is logged as a warning, appended to the caller's `warnings` list, and
``None`` is returned so the caller keeps its default. Missing keys return
``None`` silently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar

from repolens.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from repolens.config.logging import RepolensLogger

    from .types import TomlTable

E = TypeVar("E", bound=KeyedStrEnum)


def get_string_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
    logger: RepolensLogger,
    allow_empty: bool = False,
) -> str | None:
    """Return a string value, recording a warning when the type is not `str`.

    Ints, floats and bools are **not** coerced. An empty string is rejected
    unless `allow_empty` is set.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, str):
        logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
        warnings.append(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
        return None
    if not value and not allow_empty:
        logger.warning("Empty string in %s ignored", loc)
        warnings.append(f"Empty string in {loc} ignored")
        return None
    return value


def get_int_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
    logger: RepolensLogger,
    minimum: int | None = None,
) -> int | None:
    """Return an int value, warning when present but not an `int` (or below `minimum`).

    Notes:
        `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        warnings.append(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
        return None

    if minimum is not None and value < minimum:
        logger.warning("Value for %s must be >= %d, got %d", loc, minimum, value)
        warnings.append(f"Value for {loc} must be >= {minimum}, got {value}")
        return None
    return value


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    warnings: list[str],
    logger: RepolensLogger,
) -> E | None:
    """Parse a `KeyedStrEnum` value from TOML.

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r",
            loc,
            type(raw).__name__,
            raw,
        )
        warnings.append(f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}")
        return None

    member: E | None = enum_cls.parse(raw)
    if member is None:
        allowed: str = ", ".join(enum_cls.keys())
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        warnings.append(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
    return member
