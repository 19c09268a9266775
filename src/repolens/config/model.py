# topmark:header:start
#
#   project      : RepoLens
#   file         : model.py
#   file_relpath : src/repolens/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Layered configuration for RepoLens.

`MutableConfig` is the builder used while discovering and merging config
sources; every setting is ``None`` until some layer sets it. `freeze`
produces the immutable `Config` snapshot consumed at runtime, filling any
remaining gaps with the built-in defaults.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward **root → current**; within a directory
       `pyproject.toml` (``[tool.repolens]``) is merged first, then `repolens.toml`
    3) Extra config files passed explicitly via ``--config``
    4) CLI / API overrides (`apply_cli_args`)

Invalid values never abort loading: they are logged, recorded in
``warnings`` and the previous layer's value is kept.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from repolens.config.io import (
    get_enum_value_checked,
    get_int_value_checked,
    get_string_value_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from repolens.config.keys import Toml
from repolens.config.logging import RepolensLogger, get_logger
from repolens.constants import (
    DEFAULT_DIAGNOSTIC_ID_PREFIX,
    DEFAULT_MIN_DOCUMENTATION_LENGTH,
    DEFAULT_SESSION_PREFIX,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    REPOLENS_TOML_NAME,
)
from repolens.core.formats import ExportSystem

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: RepolensLogger = get_logger(__name__)

CLI_OVERRIDE_STR: str = "<CLI overrides>"

# Argument key for the session prefix (the TOML key is `[session] prefix`).
ARG_SESSION_PREFIX: str = "session_prefix"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for RepoLens.

    Attributes:
        timestamp (str): ISO-formatted timestamp when the builder was created.
        min_documentation_length (int): Minimum trimmed markdown length of a module.
        id_prefix (str): Prefix of generated diagnostic ids.
        session_prefix (str): Prefix of generated session ids.
        default_system (ExportSystem): Export system used when none is requested.
        config_files (tuple[Path | str, ...]): Config sources merged, in order.
        warnings (tuple[str, ...]): Problems found while loading config sources.
    """

    timestamp: str
    min_documentation_length: int
    id_prefix: str
    session_prefix: str
    default_system: ExportSystem
    config_files: tuple[Path | str, ...] = ()
    warnings: tuple[str, ...] = ()

    @classmethod
    def defaults(cls) -> Config:
        """Return a snapshot holding only the built-in defaults (no I/O)."""
        return MutableConfig.from_defaults().freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            timestamp=self.timestamp,
            min_documentation_length=self.min_documentation_length,
            id_prefix=self.id_prefix,
            session_prefix=self.session_prefix,
            default_system=self.default_system,
            config_files=list(self.config_files),
            warnings=list(self.warnings),
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping, nested like the TOML sections."""
        return {
            Toml.SECTION_DIAGNOSTICS: {
                Toml.KEY_MIN_DOCUMENTATION_LENGTH: self.min_documentation_length,
                Toml.KEY_ID_PREFIX: self.id_prefix,
            },
            Toml.SECTION_SESSION: {Toml.KEY_PREFIX: self.session_prefix},
            Toml.SECTION_EXPORT: {Toml.KEY_DEFAULT_SYSTEM: self.default_system.value},
        }


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        timestamp (str): ISO-formatted timestamp when the builder was created.
        min_documentation_length (int | None): None = inherit.
        id_prefix (str | None): None = inherit.
        session_prefix (str | None): None = inherit.
        default_system (ExportSystem | None): None = inherit.
        config_files (list[Path | str]): Config sources merged, in order.
        warnings (list[str]): Problems found while loading config sources.
    """

    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    min_documentation_length: int | None = None
    id_prefix: str | None = None
    session_prefix: str | None = None
    default_system: ExportSystem | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, defaulting unset values."""
        return Config(
            timestamp=self.timestamp,
            min_documentation_length=(
                self.min_documentation_length
                if self.min_documentation_length is not None
                else DEFAULT_MIN_DOCUMENTATION_LENGTH
            ),
            id_prefix=self.id_prefix or DEFAULT_DIAGNOSTIC_ID_PREFIX,
            session_prefix=self.session_prefix or DEFAULT_SESSION_PREFIX,
            default_system=self.default_system or ExportSystem.STAMPED,
            config_files=tuple(self.config_files),
            warnings=tuple(self.warnings),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a builder from a parsed TOML dict.

        Args:
            data: The parsed TOML table (``repolens.toml`` root or ``[tool.repolens]``).
            config_file: Source of `data`, used in warning locations.

        Returns:
            The builder; unknown keys are ignored and invalid values are recorded
            in ``warnings``.
        """
        draft = cls()
        where_prefix: str = f"{config_file}: " if config_file else ""
        table: dict[str, Any] = dict(data)

        diagnostics_tbl: dict[str, Any] = get_table_value(table, Toml.SECTION_DIAGNOSTICS)
        where: str = f"{where_prefix}[{Toml.SECTION_DIAGNOSTICS}]"
        draft.min_documentation_length = get_int_value_checked(
            diagnostics_tbl,
            Toml.KEY_MIN_DOCUMENTATION_LENGTH,
            where=where,
            warnings=draft.warnings,
            logger=logger,
            minimum=0,
        )
        draft.id_prefix = get_string_value_checked(
            diagnostics_tbl,
            Toml.KEY_ID_PREFIX,
            where=where,
            warnings=draft.warnings,
            logger=logger,
        )

        session_tbl: dict[str, Any] = get_table_value(table, Toml.SECTION_SESSION)
        draft.session_prefix = get_string_value_checked(
            session_tbl,
            Toml.KEY_PREFIX,
            where=f"{where_prefix}[{Toml.SECTION_SESSION}]",
            warnings=draft.warnings,
            logger=logger,
        )

        export_tbl: dict[str, Any] = get_table_value(table, Toml.SECTION_EXPORT)
        draft.default_system = get_enum_value_checked(
            export_tbl,
            Toml.KEY_DEFAULT_SYSTEM,
            ExportSystem,
            where=f"{where_prefix}[{Toml.SECTION_EXPORT}]",
            warnings=draft.warnings,
            logger=logger,
        )
        return draft

    @classmethod
    def _tool_section(cls, path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
        """Return the RepoLens table of a parsed config file, or None if it has none."""
        if path.name != PYPROJECT_TOML_NAME:
            return data
        tool: dict[str, Any] = get_table_value(data, Toml.SECTION_TOOL)
        section: dict[str, Any] = get_table_value(tool, PYPROJECT_TOOL_SECTION)
        return section or None

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``repolens.toml`` and ``pyproject.toml``; for the latter the
        ``[tool.repolens]`` section is used.

        Args:
            path: Path to the TOML file.

        Returns:
            The builder if successful; None if a pyproject file has no
            ``[tool.repolens]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        section: dict[str, Any] | None = cls._tool_section(path, load_toml_dict(path))
        if section is None:
            logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
            return None

        draft: MutableConfig = cls.from_toml_dict(section, config_file=path)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from `start`.

        Files are returned root-most first, nearest last; within one directory
        `pyproject.toml` comes before `repolens.toml` so the tool file wins. A
        config setting ``root = true`` stops the upward walk after its directory.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here: bool = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, REPOLENS_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                section: dict[str, Any] | None = cls._tool_section(p, load_toml_dict(p))
                if section is None:
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if section.get(Toml.KEY_ROOT) is True:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor: Directory (or file) where upward discovery starts; CWD if None.
            extra_config_files: Explicit config files merged after discovery, in order.
            no_config: If True, skip discovery (explicit files are still merged).

        Returns:
            A mutable configuration draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in `other` override this draft."""
        return MutableConfig(
            timestamp=self.timestamp,
            min_documentation_length=(
                other.min_documentation_length
                if other.min_documentation_length is not None
                else self.min_documentation_length
            ),
            id_prefix=other.id_prefix if other.id_prefix is not None else self.id_prefix,
            session_prefix=(
                other.session_prefix if other.session_prefix is not None else self.session_prefix
            ),
            default_system=(
                other.default_system if other.default_system is not None else self.default_system
            ),
            config_files=self.config_files + other.config_files,
            warnings=self.warnings + other.warnings,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API).

        Recognized keys: ``min_documentation_length``, ``id_prefix``,
        ``session_prefix`` and ``default_system``. Keys that are absent or None
        leave the current value untouched.

        Args:
            args: Parsed arguments mapping.

        Returns:
            This builder, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        overrides: dict[str, Any] = {
            k: args[k]
            for k in (
                Toml.KEY_MIN_DOCUMENTATION_LENGTH,
                Toml.KEY_ID_PREFIX,
                ARG_SESSION_PREFIX,
                Toml.KEY_DEFAULT_SYSTEM,
            )
            if args.get(k) is not None
        }
        if not overrides:
            return self

        self.config_files.append(CLI_OVERRIDE_STR)
        where: str = CLI_OVERRIDE_STR
        min_doc: int | None = get_int_value_checked(
            overrides,
            Toml.KEY_MIN_DOCUMENTATION_LENGTH,
            where=where,
            warnings=self.warnings,
            logger=logger,
            minimum=0,
        )
        if min_doc is not None:
            self.min_documentation_length = min_doc
        id_prefix: str | None = get_string_value_checked(
            overrides, Toml.KEY_ID_PREFIX, where=where, warnings=self.warnings, logger=logger
        )
        if id_prefix is not None:
            self.id_prefix = id_prefix
        session_prefix: str | None = get_string_value_checked(
            overrides, ARG_SESSION_PREFIX, where=where, warnings=self.warnings, logger=logger
        )
        if session_prefix is not None:
            self.session_prefix = session_prefix
        raw_system: Any = overrides.get(Toml.KEY_DEFAULT_SYSTEM)
        system: ExportSystem | None = (
            raw_system
            if isinstance(raw_system, ExportSystem)
            else get_enum_value_checked(
                overrides,
                Toml.KEY_DEFAULT_SYSTEM,
                ExportSystem,
                where=where,
                warnings=self.warnings,
                logger=logger,
            )
        )
        if system is not None:
            self.default_system = system
        return self
