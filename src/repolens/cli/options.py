# topmark:header:start
#
#   project      : RepoLens
#   file         : options.py
#   file_relpath : src/repolens/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Common CLI option utilities for the Click-based RepoLens CLI.

This module centralizes reusable options (verbosity, color, configuration,
diagnostic filters) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from repolens.cli.cli_types import EnumChoiceParam
from repolens.cli.errors import RepolensUsageError
from repolens.core.formats import OutputFormat
from repolens.diagnostic.model import Category, Severity

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, the verbose count otherwise.

    Raises:
        RepolensUsageError: If both verbose and quiet flags are used simultaneously.
    """
    # They are mutually exclusive
    if verbose_count > 0 and quiet_count > 0:
        raise RepolensUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (show diagnostic context). Can be repeated.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        output_format: Output format, if already known.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for JSON/NDJSON output formats.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format in {OutputFormat.JSON, OutputFormat.NDJSON}:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        isatty: Callable[[], bool] | None = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty()) if isatty is not None else False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config/-c`` options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered project config files (explicit --config files still apply).",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def output_format_option(
    *,
    allowed: tuple[OutputFormat, ...] = tuple(OutputFormat),
    default: OutputFormat | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return a ``--format`` option restricted to `allowed` output formats.

    Args:
        allowed: Output formats accepted by the command.
        default: Default format; None lets the command decide.

    Returns:
        A decorator compatible with Click's option stacking.
    """
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat, allowed=allowed),
        default=default,
        help=f"Output format ({', '.join(v.value for v in allowed)}).",
    )


def diagnostic_filter_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply ``--severity``, ``--category`` and ``--module`` query filters.

    Repeating ``--severity`` or ``--category`` accepts any of the given values;
    different options combine with AND semantics.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--severity",
        "severities",
        multiple=True,
        type=EnumChoiceParam(Severity),
        help=f"Only show diagnostics of this severity ({', '.join(Severity.keys())}).",
    )(f)
    f = click.option(
        "--category",
        "categories",
        multiple=True,
        type=EnumChoiceParam(Category),
        help=f"Only show diagnostics of this category ({', '.join(Category.keys())}).",
    )(f)
    f = click.option(
        "--module",
        "module_id",
        default=None,
        metavar="ID",
        help="Only show diagnostics raised for this module id.",
    )(f)
    return f
