# topmark:header:start
#
#   project      : RepoLens
#   file         : manifest.py
#   file_relpath : src/repolens/compliance/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Load blueprints and modules from a TOML manifest.

Manifest layout::

    [blueprint]
    id = "39"
    name = "Repo Lens"
    version = "2.0.0"

    [blueprint.schema.stamped]     # likewise spvpet / stacked
    source = "..."

    [[blueprint.modules]]
    id = "github-index"
    barton_number = "39.01.01.01"
    name = "GitHub Index"
    description = "..."
    dependencies = []

    [[modules]]
    id = "github-index"
    barton_number = "39.01.01.01"
    name = "GitHub Index"

    [modules.visual_diagram]
    file_path = "docs/diagrams/github-index.mmd"
    type = "flow"
    depth = "30k"

    [modules.documentation]
    markdown_file = "docs/github-index.md"   # or: markdown = "..."

Structural *non-compliance* (missing schema shapes, empty descriptions,
malformed Barton numbers) is preserved so that scoring can report it. Only an
unreadable or malformed manifest raises `ManifestError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from repolens.compliance.model import (
    SCHEMA_SHAPES,
    Blueprint,
    BlueprintModule,
    BlueprintSchema,
    DiagramDepth,
    DiagramType,
    Module,
    ModuleDocumentation,
    VisualDiagram,
)
from repolens.config.io import as_toml_table, as_toml_table_list, get_table_value, is_str_list
from repolens.config.keys import ManifestToml as M
from repolens.config.logging import get_logger
from repolens.core.exceptions import ManifestError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from repolens.config.io import TomlTable
    from repolens.config.logging import RepolensLogger
    from repolens.core.enum_mixins import KeyedStrEnum

logger: RepolensLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Manifest:
    """Parsed manifest.

    Attributes:
        blueprint (Blueprint | None): The declared blueprint, if any.
        modules (tuple[Module, ...]): Declared modules, in file order.
        source (Path | None): File the manifest was read from.
    """

    blueprint: Blueprint | None
    modules: tuple[Module, ...] = ()
    source: Path | None = None


def _require_str(table: TomlTable, key: str, where: str) -> str:
    value: Any | None = table.get(key)
    if not isinstance(value, str) or not value:
        raise ManifestError(f"{where}: '{key}' must be a non-empty string")
    return value


def _optional_str(table: TomlTable, key: str, where: str, default: str = "") -> str:
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ManifestError(f"{where}: '{key}' must be a string, got {type(value).__name__}")
    return value


def _str_tuple(table: TomlTable, key: str, where: str) -> tuple[str, ...]:
    value: Any | None = table.get(key)
    if value is None:
        return ()
    if not is_str_list(value):
        raise ManifestError(f"{where}: '{key}' must be a list of strings")
    return tuple(value)


def _optional_enum(
    enum_cls: type[KeyedStrEnum], table: TomlTable, key: str, where: str
) -> Any:
    raw: Any | None = table.get(key)
    if raw is None:
        return None
    member: KeyedStrEnum | None = enum_cls.parse(raw)
    if member is None:
        raise ManifestError(
            f"{where}: invalid '{key}' {raw!r} (allowed: {', '.join(enum_cls.keys())})"
        )
    return member


def _parse_blueprint(table: TomlTable) -> Blueprint:
    where: str = f"[{M.SECTION_BLUEPRINT}]"
    # Blueprint ids are commonly numeric (e.g. 39); keep them as text.
    blueprint_id: str = _optional_str(table, M.KEY_ID, where)
    if not blueprint_id:
        raise ManifestError(f"{where}: '{M.KEY_ID}' is required")

    schema_tbl: TomlTable = get_table_value(table, M.SECTION_SCHEMA)
    schema = BlueprintSchema(**{name: schema_tbl.get(name) for name in SCHEMA_SHAPES})

    modules: list[BlueprintModule] = []
    for i, entry in enumerate(as_toml_table_list(table.get(M.SECTION_MODULES))):
        entry_where: str = f"[[{M.SECTION_BLUEPRINT}.{M.SECTION_MODULES}]] #{i + 1}"
        modules.append(
            BlueprintModule(
                id=_require_str(entry, M.KEY_ID, entry_where),
                barton_number=_optional_str(entry, M.KEY_BARTON_NUMBER, entry_where),
                name=_optional_str(entry, M.KEY_NAME, entry_where),
                description=_optional_str(entry, M.KEY_DESCRIPTION, entry_where),
                dependencies=_str_tuple(entry, M.KEY_DEPENDENCIES, entry_where),
            )
        )

    return Blueprint(
        id=blueprint_id,
        name=_optional_str(table, M.KEY_NAME, where),
        version=_optional_str(table, M.KEY_VERSION, where, default="1.0.0"),
        modules=modules,
        schema=schema,
    )


def _parse_diagram(table: TomlTable | None, where: str) -> VisualDiagram | None:
    if table is None:
        return None
    where = f"{where}.{M.SECTION_VISUAL_DIAGRAM}"
    clickable: Any = table.get(M.KEY_CLICKABLE, False)
    if not isinstance(clickable, bool):
        raise ManifestError(f"{where}: '{M.KEY_CLICKABLE}' must be a boolean")
    return VisualDiagram(
        file_path=_optional_str(table, M.KEY_FILE_PATH, where),
        diagram_type=_optional_enum(DiagramType, table, M.KEY_TYPE, where),
        depth=_optional_enum(DiagramDepth, table, M.KEY_DEPTH, where),
        clickable=clickable,
    )


def _parse_documentation(
    table: TomlTable | None, where: str, base_dir: Path | None
) -> ModuleDocumentation | None:
    if table is None:
        return None
    where = f"{where}.{M.SECTION_DOCUMENTATION}"
    markdown: str = _optional_str(table, M.KEY_MARKDOWN, where)
    markdown_file: str = _optional_str(table, M.KEY_MARKDOWN_FILE, where)
    if markdown and markdown_file:
        raise ManifestError(
            f"{where}: '{M.KEY_MARKDOWN}' and '{M.KEY_MARKDOWN_FILE}' are mutually exclusive"
        )
    if markdown_file:
        path = Path(markdown_file)
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        try:
            markdown = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestError(f"{where}: cannot read {path}: {e}") from e
        logger.trace("Read %d characters of documentation from %s", len(markdown), path)
    return ModuleDocumentation(
        markdown=markdown,
        cross_links=_str_tuple(table, M.KEY_CROSS_LINKS, where),
        version=_optional_str(table, M.KEY_VERSION, where) or None,
    )


def _parse_module(
    table: TomlTable, index: int, default_blueprint_id: str, base_dir: Path | None
) -> Module:
    where: str = f"[[{M.SECTION_MODULES}]] #{index + 1}"
    return Module(
        id=_require_str(table, M.KEY_ID, where),
        barton_number=_optional_str(table, M.KEY_BARTON_NUMBER, where),
        name=_optional_str(table, M.KEY_NAME, where),
        blueprint_id=_optional_str(table, M.KEY_BLUEPRINT_ID, where, default=default_blueprint_id),
        version=_optional_str(table, M.KEY_VERSION, where, default="1.0.0"),
        visual_diagram=_parse_diagram(
            as_toml_table(table.get(M.SECTION_VISUAL_DIAGRAM)), where
        ),
        documentation=_parse_documentation(
            as_toml_table(table.get(M.SECTION_DOCUMENTATION)), where, base_dir
        ),
    )


def parse_manifest(
    data: Mapping[str, Any],
    *,
    base_dir: Path | None = None,
    source: Path | None = None,
) -> Manifest:
    """Build a `Manifest` from an already-parsed TOML mapping.

    Args:
        data: The manifest as plain Python data.
        base_dir: Directory against which relative ``markdown_file`` paths resolve.
        source: Originating file, recorded on the result.

    Returns:
        The parsed manifest.

    Raises:
        ManifestError: If the data declares neither a blueprint nor modules, or a
            value has the wrong shape.
    """
    root: TomlTable = dict(data)
    blueprint_tbl: TomlTable | None = as_toml_table(root.get(M.SECTION_BLUEPRINT))
    module_tbls: list[TomlTable] = as_toml_table_list(root.get(M.SECTION_MODULES))
    if blueprint_tbl is None and not module_tbls:
        raise ManifestError(
            f"Manifest declares neither [{M.SECTION_BLUEPRINT}] nor [[{M.SECTION_MODULES}]]"
        )

    blueprint: Blueprint | None = (
        _parse_blueprint(blueprint_tbl) if blueprint_tbl is not None else None
    )
    default_blueprint_id: str = blueprint.id if blueprint else ""
    modules: tuple[Module, ...] = tuple(
        _parse_module(tbl, i, default_blueprint_id, base_dir) for i, tbl in enumerate(module_tbls)
    )
    logger.debug(
        "Parsed manifest %s: blueprint=%s, %d module(s)",
        source or "<data>",
        blueprint.id if blueprint else None,
        len(modules),
    )
    return Manifest(blueprint=blueprint, modules=modules, source=source)


def load_manifest(path: Path) -> Manifest:
    """Read and parse a TOML manifest file.

    Unlike config loading, manifest errors are fatal: a manifest that cannot be
    read or parsed raises instead of degrading to an empty result.

    Args:
        path: Manifest file.

    Returns:
        The parsed manifest.

    Raises:
        ManifestError: If the file cannot be read, is not valid TOML, or does not
            describe a blueprint or modules.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}") from e
    try:
        data: Any = tomlkit.parse(text).unwrap()
    except TOMLKitError as e:
        raise ManifestError(f"Invalid TOML in manifest {path}: {e}") from e
    return parse_manifest(data, base_dir=path.parent, source=path)
