# topmark:header:start
#
#   project      : RepoLens
#   file         : keys.py
#   file_relpath : src/repolens/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Canonical TOML section and key names for RepoLens configuration and manifests.

Centralizing TOML keys:
    - Avoids hard-coded strings scattered across the config and manifest layers
    - Keeps defaults, parsing and validation aligned

Keys defined here represent *external* API: renaming or removing one is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Sections and keys of ``repolens.toml`` / ``[tool.repolens]``."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [diagnostics]
    SECTION_DIAGNOSTICS: Final[str] = "diagnostics"

    KEY_MIN_DOCUMENTATION_LENGTH: Final[str] = "min_documentation_length"
    KEY_ID_PREFIX: Final[str] = "id_prefix"

    # [session]
    SECTION_SESSION: Final[str] = "session"

    KEY_PREFIX: Final[str] = "prefix"

    # [export]
    SECTION_EXPORT: Final[str] = "export"

    KEY_DEFAULT_SYSTEM: Final[str] = "default_system"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"


class ManifestToml:
    """Sections and keys of a module manifest."""

    # [blueprint]
    SECTION_BLUEPRINT: Final[str] = "blueprint"

    KEY_ID: Final[str] = "id"
    KEY_NAME: Final[str] = "name"
    KEY_VERSION: Final[str] = "version"

    # [blueprint.schema.<shape>]
    SECTION_SCHEMA: Final[str] = "schema"

    # [[blueprint.modules]] and [[modules]]
    SECTION_MODULES: Final[str] = "modules"

    KEY_BARTON_NUMBER: Final[str] = "barton_number"
    KEY_DESCRIPTION: Final[str] = "description"
    KEY_DEPENDENCIES: Final[str] = "dependencies"
    KEY_BLUEPRINT_ID: Final[str] = "blueprint_id"

    # [modules.visual_diagram]
    SECTION_VISUAL_DIAGRAM: Final[str] = "visual_diagram"

    KEY_FILE_PATH: Final[str] = "file_path"
    KEY_TYPE: Final[str] = "type"
    KEY_DEPTH: Final[str] = "depth"
    KEY_CLICKABLE: Final[str] = "clickable"

    # [modules.documentation]
    SECTION_DOCUMENTATION: Final[str] = "documentation"

    KEY_MARKDOWN: Final[str] = "markdown"
    KEY_MARKDOWN_FILE: Final[str] = "markdown_file"
    KEY_CROSS_LINKS: Final[str] = "cross_links"
