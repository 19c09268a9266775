# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""TOML I/O helpers for RepoLens configuration.

This package centralizes **pure** helpers for reading and validating TOML used
by RepoLens's configuration layer and manifest loader. Keeping these utilities
separate helps avoid import cycles and keeps the model classes small.

TOML parsing:
    RepoLens uses `tomlkit` for parsing; `load_toml_dict()` returns plain dicts.

Typical flow:
    1. Start from the runtime defaults (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``).
    3. Read values with the checked getters, collecting warnings.
"""

from __future__ import annotations

from .getters import get_enum_value_checked, get_int_value_checked, get_string_value_checked
from .guards import (
    as_toml_table,
    as_toml_table_list,
    get_table_value,
    is_any_list,
    is_str_list,
    is_toml_table,
)
from .loaders import load_defaults_dict, load_toml_dict
from .types import TomlTable, TomlTableList

__all__ = [
    "TomlTable",
    "TomlTableList",
    "as_toml_table",
    "as_toml_table_list",
    "get_enum_value_checked",
    "get_int_value_checked",
    "get_string_value_checked",
    "get_table_value",
    "is_any_list",
    "is_str_list",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
]
