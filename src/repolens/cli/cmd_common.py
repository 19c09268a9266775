# topmark:header:start
#
#   project      : RepoLens
#   file         : cmd_common.py
#   file_relpath : src/repolens/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Shared helpers for RepoLens CLI commands.

These helpers resolve configuration from the Click context, load manifests
(mapping engine errors to CLI errors) and run a manifest through a
`BartonSystem`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from repolens.api import BartonSystem
from repolens.cli.console_helpers import get_console_safely
from repolens.cli.errors import RepolensConfigError, RepolensFileNotFoundError
from repolens.compliance.manifest import load_manifest
from repolens.compliance.validator import score_blueprint
from repolens.config.logging import get_logger
from repolens.config.model import MutableConfig
from repolens.core.exceptions import ManifestError

if TYPE_CHECKING:
    from repolens.cli.console_api import ConsoleLike
    from repolens.compliance.manifest import Manifest
    from repolens.compliance.model import Blueprint, Module
    from repolens.compliance.validator import ComplianceReport
    from repolens.config.logging import RepolensLogger
    from repolens.config.model import ArgsLike, Config

logger: RepolensLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the `cli` group (0 if unset)."""
    obj: Any = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def build_config(
    ctx: click.Context,
    *,
    anchor: Path | None,
    overrides: ArgsLike | None = None,
) -> Config:
    """Materialize the runtime `Config` for a command.

    Layers: built-in defaults, discovered project config (unless ``--no-config``),
    explicit ``--config`` files, then `overrides`. Config warnings are printed to
    stderr unless the command runs quiet.

    Args:
        ctx: Current Click context (holds the group-level config options).
        anchor: Directory where upward config discovery starts.
        overrides: Command-line overrides (see `MutableConfig.apply_cli_args`).

    Returns:
        The frozen configuration.
    """
    obj: dict[str, Any] = ctx.obj if isinstance(ctx.obj, dict) else {}
    config_paths: list[Path] = [Path(p) for p in obj.get("config_paths", ())]
    draft: MutableConfig = MutableConfig.load_merged(
        anchor=anchor,
        extra_config_files=config_paths,
        no_config=bool(obj.get("no_config", False)),
    )
    if overrides:
        draft.apply_cli_args(overrides)
    config: Config = draft.freeze()
    logger.debug("Resolved config from %s", [str(p) for p in config.config_files])

    if config.warnings and get_effective_verbosity(ctx) >= 0:
        console: ConsoleLike = get_console_safely()
        for warning in config.warnings:
            console.warn(f"config: {warning}")
    return config


def load_manifest_or_fail(path: Path) -> Manifest:
    """Load a manifest, translating failures into CLI errors.

    Raises:
        RepolensFileNotFoundError: If `path` does not exist.
        RepolensConfigError: If the manifest is unreadable or malformed.
    """
    if not path.exists():
        raise RepolensFileNotFoundError(f"Manifest not found: {path}")
    try:
        return load_manifest(path)
    except ManifestError as e:
        raise RepolensConfigError(str(e)) from e


@dataclass
class ManifestRun:
    """Outcome of running a manifest through a `BartonSystem`.

    Attributes:
        blueprint (Blueprint | None): The registered blueprint, if the manifest declares one.
        report (ComplianceReport | None): Its compliance report.
        scores (list[tuple[Module, ComplianceReport]]): Per-module compliance, in manifest order.
    """

    blueprint: Blueprint | None = None
    report: ComplianceReport | None = None
    scores: list[tuple[Module, ComplianceReport]] = field(default_factory=list)


def run_manifest(system: BartonSystem, manifest: Manifest) -> ManifestRun:
    """Register the manifest's blueprint and validate each of its modules."""
    run = ManifestRun()
    if manifest.blueprint is not None:
        system.register_blueprint(manifest.blueprint)
        run.blueprint = manifest.blueprint
        run.report = score_blueprint(manifest.blueprint)
    for module in manifest.modules:
        system.validate_module(module)
        run.scores.append((module, system.score_module(module)))
    logger.debug(
        "Ran manifest %s: %d module(s), %d diagnostic(s)",
        manifest.source,
        len(manifest.modules),
        len(system.store),
    )
    return run
