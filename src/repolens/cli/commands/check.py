# topmark:header:start
#
#   project      : RepoLens
#   file         : check.py
#   file_relpath : src/repolens/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""RepoLens `check` command.

Loads a manifest, registers its blueprint, validates its modules and prints the
recorded diagnostics plus a system health summary.

Input modes supported:
  * One manifest path (TOML).

Exit codes:
  * ``SUCCESS`` (0): no diagnostic requires manual review.
  * ``FAILURE`` (1): at least one diagnostic requires manual review.
  * ``FILE_NOT_FOUND`` (66): the manifest does not exist.
  * ``CONFIG_ERROR`` (78): the manifest is unreadable or malformed.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from repolens.api import BartonSystem
from repolens.cli.cmd_common import (
    build_config,
    get_effective_verbosity,
    load_manifest_or_fail,
    run_manifest,
)
from repolens.cli.emitters.markdown import render_check_markdown
from repolens.cli.emitters.text import (
    emit_blueprint_text,
    emit_check_banner_text,
    emit_diagnostics_text,
    emit_health_text,
    emit_module_scores_text,
)
from repolens.cli.exit_codes import ExitCode
from repolens.cli.machine_emitters import emit_check_machine
from repolens.cli.options import diagnostic_filter_options, output_format_option
from repolens.config.logging import get_logger
from repolens.core.formats import OutputFormat, is_machine_format
from repolens.core.machine.schemas import build_meta_payload
from repolens.diagnostic.filters import DiagnosticFilter

if TYPE_CHECKING:
    from repolens.cli.cmd_common import ManifestRun
    from repolens.cli.console_api import ConsoleLike
    from repolens.config.logging import RepolensLogger
    from repolens.config.model import Config
    from repolens.diagnostic.health import SystemHealth
    from repolens.diagnostic.model import Category, Diagnostic, Severity

logger: RepolensLogger = get_logger(__name__)


@click.command(
    name="check",
    help=(
        "Validate a RepoLens manifest against the Barton doctrine.\n\n"
        "Registers the manifest's blueprint, validates each declared module and prints "
        "the recorded diagnostics (most recent first) plus a system health summary. "
        "Exits with 1 when any diagnostic requires manual review."
    ),
)
@click.argument(
    "manifest",
    type=click.Path(dir_okay=False, path_type=Path),
    metavar="MANIFEST",
)
@output_format_option()
@diagnostic_filter_options
@click.option(
    "--min-doc-length",
    "min_documentation_length",
    type=click.IntRange(min=0),
    default=None,
    help="Minimum trimmed documentation length per module (overrides config).",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    manifest: Path,
    output_format: OutputFormat | None,
    severities: tuple[Severity, ...],
    categories: tuple[Category, ...],
    module_id: str | None,
    min_documentation_length: int | None,
) -> None:
    """Validate a manifest and report diagnostics.

    Args:
        ctx: Click context (holds the console and group-level options).
        manifest: Path to the TOML manifest.
        output_format: Output format; TEXT when omitted.
        severities: Severity filter; empty means any.
        categories: Category filter; empty means any.
        module_id: Module id filter.
        min_documentation_length: Override of the documentation threshold.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if is_machine_format(fmt):
        console.enable_color = False
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config(
        ctx,
        anchor=manifest.resolve().parent,
        overrides={"min_documentation_length": min_documentation_length},
    )
    loaded = load_manifest_or_fail(manifest)

    system = BartonSystem(config)
    run: ManifestRun = run_manifest(system, loaded)

    # Repeated options widen a criterion; an absent option leaves it unset.
    filters = DiagnosticFilter.build(
        severity=severities or None,
        category=categories or None,
        module_id=module_id,
    )
    diagnostics: list[Diagnostic] = system.get_diagnostics(filters)
    health: SystemHealth = system.get_system_health()

    if is_machine_format(fmt):
        emit_check_machine(
            meta=build_meta_payload(),
            fmt=fmt,
            blueprint=run.blueprint,
            compliance=run.report,
            diagnostics=diagnostics,
            health=health,
        )
    elif fmt == OutputFormat.MARKDOWN:
        console.print(
            render_check_markdown(
                manifest=manifest,
                blueprint=run.blueprint,
                report=run.report,
                scores=run.scores,
                diagnostics=diagnostics,
                health=health,
                verbosity=vlevel,
            )
        )
    else:
        emit_check_banner_text(manifest=manifest, verbosity=vlevel)
        if run.blueprint is not None and run.report is not None:
            emit_blueprint_text(blueprint=run.blueprint, report=run.report, verbosity=vlevel)
        emit_module_scores_text(scores=run.scores, verbosity=vlevel)
        emit_diagnostics_text(diagnostics=diagnostics, total=health.total, verbosity=vlevel)
        emit_health_text(health=health)

    # The exit status reflects the whole store, not the filtered view.
    if health.manual_review_count > 0:
        logger.info("%d diagnostic(s) require manual review", health.manual_review_count)
        ctx.exit(ExitCode.FAILURE)
