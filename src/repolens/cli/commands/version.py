# topmark:header:start
#
#   project      : RepoLens
#   file         : version.py
#   file_relpath : src/repolens/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""RepoLens `version` command.

Prints the current RepoLens version as installed in the active Python environment,
together with the Barton doctrine version it implements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from repolens.cli.cmd_common import get_effective_verbosity
from repolens.cli.emitters.markdown import emit_version_markdown
from repolens.cli.emitters.text import emit_version_text
from repolens.cli.machine_emitters import emit_version_machine
from repolens.cli.options import output_format_option
from repolens.constants import DOCTRINE_VERSION, REPOLENS_VERSION
from repolens.core.formats import OutputFormat, is_machine_format
from repolens.core.machine.schemas import build_meta_payload

if TYPE_CHECKING:
    from repolens.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of RepoLens.",
)
@output_format_option()
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of RepoLens.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if is_machine_format(fmt):
        console.enable_color = False
        emit_version_machine(meta=build_meta_payload(), fmt=fmt)
    elif fmt == OutputFormat.MARKDOWN:
        emit_version_markdown(version=REPOLENS_VERSION, doctrine=DOCTRINE_VERSION)
    else:
        emit_version_text(
            version=REPOLENS_VERSION,
            doctrine=DOCTRINE_VERSION,
            verbosity=get_effective_verbosity(ctx),
        )
