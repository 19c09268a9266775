# topmark:header:start
#
#   project      : RepoLens
#   file         : constants.py
#   file_relpath : src/repolens/constants.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""RepoLens Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

REPOLENS_VERSION: str = get_version("repolens")

# Name of the project-local config file and the pyproject section it may live in:
REPOLENS_TOML_NAME: str = "repolens.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "repolens"

# Environment variable consulted for the internal log level:
REPOLENS_LOG_LEVEL_ENV: str = "REPOLENS_LOG_LEVEL"

# Barton doctrine defaults
DEFAULT_BLUEPRINT_ID: int = 39
DOCTRINE_VERSION: str = "2.0.0"

# Identifier prefixes
DEFAULT_DIAGNOSTIC_ID_PREFIX: str = "barton"
DEFAULT_SESSION_PREFIX: str = "session"

# Module documentation shorter than this (after trimming) is reported as insufficient.
DEFAULT_MIN_DOCUMENTATION_LENGTH: int = 100
