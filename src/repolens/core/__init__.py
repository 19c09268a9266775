# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Core, dependency-light building blocks shared by all RepoLens layers.

This package holds enum helpers, output-format vocabularies, exceptions and
the machine-output primitives. It must not import from `repolens.diagnostic`,
`repolens.compliance` or `repolens.cli`.
"""
