# topmark:header:start
#
#   project      : RepoLens
#   file         : __main__.py
#   file_relpath : src/repolens/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Allow `python -m repolens`."""

from repolens.cli.main import cli

if __name__ == "__main__":
    cli()
