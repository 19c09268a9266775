# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""RepoLens CLI subcommands."""
