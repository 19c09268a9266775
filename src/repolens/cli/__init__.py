# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Command-line interface for RepoLens (Click-based).

Entry point: `repolens.cli.main.cli`.
"""
