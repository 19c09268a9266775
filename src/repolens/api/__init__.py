# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Public RepoLens API (stable surface).

Integrations construct a `BartonSystem` and feed it modules, blueprints and
observations; the CLI is a thin layer over the same object.

Versioning policy
-----------------
- The signatures in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change.
"""

from __future__ import annotations

from repolens.api.system import BartonSystem, FilterLike

__all__ = [
    "BartonSystem",
    "FilterLike",
]
