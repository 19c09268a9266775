# topmark:header:start
#
#   project      : RepoLens
#   file         : console_helpers.py
#   file_relpath : src/repolens/cli/console_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Utilities for obtaining the program-output console.

`get_console_safely` returns the console stored on the active Click context,
or a colorless `ClickConsole` when no context is active (e.g. when an emitter is
called directly from tests).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from repolens.cli.console import ClickConsole

if TYPE_CHECKING:
    from repolens.cli.console_api import ConsoleLike


def get_console_safely() -> ConsoleLike:
    """Return a ConsoleLike using the active Click context when available."""
    ctx: click.Context | None = click.get_current_context(silent=True)
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return ClickConsole(enable_color=False)
