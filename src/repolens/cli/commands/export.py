# topmark:header:start
#
#   project      : RepoLens
#   file         : export.py
#   file_relpath : src/repolens/cli/commands/export.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""RepoLens `export` command.

Runs a manifest through the diagnostics engine (as `check` does) and prints the
recorded diagnostics as flat export records tagged for a downstream system.
Export output is machine-only (JSON or NDJSON).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from repolens.api import BartonSystem
from repolens.cli.cli_types import EnumChoiceParam
from repolens.cli.cmd_common import build_config, load_manifest_or_fail, run_manifest
from repolens.cli.machine_emitters import emit_export_machine
from repolens.cli.options import output_format_option
from repolens.core.formats import ExportSystem, OutputFormat
from repolens.core.machine.schemas import build_meta_payload

if TYPE_CHECKING:
    from repolens.cli.console_api import ConsoleLike
    from repolens.config.model import Config
    from repolens.diagnostic.machine import ExportRecord


@click.command(
    name="export",
    help=(
        "Export the diagnostics recorded for a manifest, tagged for a downstream system "
        f"({', '.join(ExportSystem.keys())}). The default system comes from the config."
    ),
)
@click.argument(
    "manifest",
    type=click.Path(dir_okay=False, path_type=Path),
    metavar="MANIFEST",
)
@click.option(
    "--system",
    "export_system",
    type=EnumChoiceParam(ExportSystem),
    default=None,
    help=f"Export system ({', '.join(ExportSystem.keys())}).",
)
@output_format_option(
    allowed=(OutputFormat.JSON, OutputFormat.NDJSON),
    default=OutputFormat.JSON,
)
@click.pass_context
def export_command(
    ctx: click.Context,
    *,
    manifest: Path,
    export_system: ExportSystem | None,
    output_format: OutputFormat,
) -> None:
    """Export diagnostics for a manifest.

    Args:
        ctx: Click context (holds the console and group-level options).
        manifest: Path to the TOML manifest.
        export_system: Export system; the configured default when omitted.
        output_format: JSON or NDJSON.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.enable_color = False

    config: Config = build_config(ctx, anchor=manifest.resolve().parent)
    loaded = load_manifest_or_fail(manifest)

    system = BartonSystem(config)
    run_manifest(system, loaded)

    resolved: ExportSystem = export_system or config.default_system
    records: list[ExportRecord] = system.export_diagnostics(resolved)
    emit_export_machine(
        meta=build_meta_payload(),
        fmt=output_format,
        system=resolved,
        records=records,
    )
