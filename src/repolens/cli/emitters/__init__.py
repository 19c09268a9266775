# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/cli/emitters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Human-facing CLI emitters for RepoLens.

Responsibilities are split as follows:

- `repolens.cli.emitters.text`: ANSI-capable TEXT output (colors via yachalk).
- `repolens.cli.emitters.markdown`: Markdown documents.
- `repolens.cli.machine_emitters`: printing of already-serialized JSON/NDJSON.

No emitter decides exit codes or mutates engine state.
"""
