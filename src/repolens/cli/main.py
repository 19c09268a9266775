# topmark:header:start
#
#   project      : RepoLens
#   file         : main.py
#   file_relpath : src/repolens/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""RepoLens command-line entry point.

Key ideas:
- Group-level options (verbosity, color, config sources) are initialized once
  and placed into ``ctx.obj``.
- Subcommands read the console and the config sources from ``ctx.obj`` and
  build their own `Config` and `BartonSystem`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from repolens.cli.commands.check import check_command
from repolens.cli.commands.export import export_command
from repolens.cli.commands.version import version_command
from repolens.cli.console import ClickConsole
from repolens.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from repolens.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from repolens.cli.console_api import ConsoleLike
    from repolens.config.logging import RepolensLogger

logger: RepolensLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...] = (),
    no_config: bool = False,
) -> None:
    """Initialize shared state (verbosity, color, config sources) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): Explicit ``--config`` files, in order.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["config_paths"] = tuple(config_paths)
    ctx.obj["no_config"] = no_config

    # Tests may inject their own console through `obj`.
    if "console" not in ctx.obj:
        ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug(
        "CLI state: verbosity=%d color=%s config_paths=%s no_config=%s",
        ctx.obj["verbosity_level"],
        enable_color,
        list(config_paths),
        no_config,
    )


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,  # Always invoke the cli() function
    help="RepoLens - Barton doctrine diagnostics and compliance CLI",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the RepoLens CLI."""
    # Initialize verbosity, color and config state once for all subcommands
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'repolens check MANIFEST' to validate a manifest.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(export_command)

if __name__ == "__main__":
    cli()
