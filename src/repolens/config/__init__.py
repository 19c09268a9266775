# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Configuration handling for RepoLens.

Settings come from the built-in defaults, ``repolens.toml`` or the
``[tool.repolens]`` table of ``pyproject.toml``, explicit ``--config`` files
and CLI overrides. See `repolens.config.model` for the merge policy.

This package must not import `repolens.diagnostic` or `repolens.compliance`:
both depend on `repolens.config.logging`.
"""

from __future__ import annotations

from repolens.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
