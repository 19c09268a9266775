# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""RepoLens package.

RepoLens records compliance and health observations ("diagnostics") about
Barton-numbered modules, escalates them by severity, auto-resolves a small
static set of low-severity issues, scores blueprints against their required
schema, and serves filtered views and multi-format exports. It exposes both a
CLI and a small typed API (`repolens.api.BartonSystem`).
"""

from __future__ import annotations
