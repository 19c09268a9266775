# topmark:header:start
#
#   project      : RepoLens
#   file         : text.py
#   file_relpath : src/repolens/cli/emitters/text.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Text (ANSI-capable) emitters for the RepoLens CLI.

These helpers print to the active `ConsoleLike` obtained via
`repolens.cli.console_helpers.get_console_safely`. Severity and health colors
come from `yachalk` (see `Severity.color` and `HealthStatus.color`) and are only
applied when the console has color enabled.

Verbosity levels:
    * ``-1`` (quiet): only the health line.
    * ``0``: blueprint score, module scores and one line per diagnostic.
    * ``1``: adds deficiencies and diagnostic context.
    * ``2+``: adds diagnostic ids, sessions and timestamps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from yachalk import chalk

from repolens.cli.console_helpers import get_console_safely
from repolens.cli.emitters.utils import format_context, maybe_colorize, subject_of
from repolens.diagnostic.health import HealthStatus
from repolens.diagnostic.model import Severity

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from repolens.cli.console_api import ConsoleLike
    from repolens.compliance.model import Blueprint, Module
    from repolens.compliance.validator import ComplianceReport
    from repolens.diagnostic.health import SystemHealth
    from repolens.diagnostic.model import Diagnostic

SEVERITY_ICONS: Final[dict[Severity, str]] = {
    Severity.INFO: "ℹ",
    Severity.WARNING: "⚠",
    Severity.ERROR: "✖",
    Severity.CRITICAL: "‼",
}


def emit_check_banner_text(*, manifest: Path, verbosity: int) -> None:
    """Emit the banner for the `check` command (TEXT format)."""
    if verbosity < 0:
        return
    console: ConsoleLike = get_console_safely()
    console.print(console.styled(f"🔍 Checking {manifest}", fg="blue"))
    console.print()


def emit_blueprint_text(
    *,
    blueprint: Blueprint,
    report: ComplianceReport,
    verbosity: int,
) -> None:
    """Emit the compliance score of a registered blueprint (TEXT format)."""
    if verbosity < 0:
        return
    console: ConsoleLike = get_console_safely()
    status: HealthStatus = HealthStatus.from_percentage(report.compliance)
    title: str = f"{blueprint.id} ({blueprint.name})" if blueprint.name else blueprint.id
    score: str = maybe_colorize(
        status.color,
        f"{report.compliance}% ({report.passed}/{report.total} checks, {status.label})",
        enabled=console.enable_color,
    )
    console.print(console.styled("📋 Blueprint", bold=True, underline=True))
    console.print(f"  {title} v{blueprint.version}: {score}")
    if verbosity > 0:
        for deficiency in report.deficiencies:
            console.print(console.styled(f"    - {deficiency}", fg="yellow"))
    console.print()


def emit_module_scores_text(
    *,
    scores: Sequence[tuple[Module, ComplianceReport]],
    verbosity: int,
) -> None:
    """Emit one compliance line per validated module (TEXT format)."""
    if verbosity < 0 or not scores:
        return
    console: ConsoleLike = get_console_safely()
    console.print(console.styled(f"🧩 Modules ({len(scores)})", bold=True, underline=True))
    id_width: int = max(len(m.id) for m, _ in scores)
    for module, report in scores:
        status: HealthStatus = HealthStatus.from_percentage(report.compliance)
        score: str = maybe_colorize(
            status.color, f"{report.compliance:>3}%", enabled=console.enable_color
        )
        console.print(f"  {module.id:<{id_width}}  {module.barton_number or '-':<12}  {score}")
        if verbosity > 0:
            for deficiency in report.deficiencies:
                console.print(console.styled(f"      - {deficiency}", fg="yellow"))
    console.print()


def render_diagnostic_line(diagnostic: Diagnostic, *, color: bool) -> str:
    """Render the one-line summary of a diagnostic."""
    sev: Severity = diagnostic.severity
    head: str = maybe_colorize(
        sev.color,
        f"{SEVERITY_ICONS[sev]} [{sev.label.upper()}]",
        enabled=color,
    )
    subject: str = subject_of(diagnostic)
    where: str = f"{diagnostic.category.value}/{diagnostic.principle.value}"
    line: str = f"  {head} {where}"
    if subject:
        line += f" {subject}"
    line += f": {diagnostic.message}"
    if diagnostic.requires_manual_review:
        line += " " + maybe_colorize(chalk.red_bright, "(manual review)", enabled=color)
    elif diagnostic.auto_resolved:
        line += " " + maybe_colorize(chalk.green, "(auto-resolved)", enabled=color)
    return line


def emit_diagnostics_text(
    *,
    diagnostics: Sequence[Diagnostic],
    total: int,
    verbosity: int,
) -> None:
    """Emit the queried diagnostics, most recent first (TEXT format).

    Args:
        diagnostics: Diagnostics selected by the query filters.
        total: Number of diagnostics in the store (before filtering).
        verbosity: Program-output verbosity.
    """
    if verbosity < 0:
        return
    console: ConsoleLike = get_console_safely()
    heading: str = (
        f"🩺 Diagnostics ({len(diagnostics)})"
        if len(diagnostics) == total
        else f"🩺 Diagnostics ({len(diagnostics)} of {total})"
    )
    console.print(console.styled(heading, bold=True, underline=True))
    if not diagnostics:
        console.print(console.styled("  No diagnostics.", fg="green"))
    for d in diagnostics:
        console.print(render_diagnostic_line(d, color=console.enable_color))
        if verbosity > 0 and d.context:
            console.print(console.styled(f"      context: {format_context(d.context)}", dim=True))
        if verbosity > 1:
            console.print(
                console.styled(
                    f"      id: {d.diagnostic_id}  session: {d.session_id}"
                    f"  at: {d.timestamp.isoformat()}",
                    dim=True,
                )
            )
    console.print()


def emit_health_text(*, health: SystemHealth) -> None:
    """Emit the system health summary (TEXT format). Printed even in quiet mode."""
    console: ConsoleLike = get_console_safely()
    status: HealthStatus = health.status
    console.print(
        f"{console.styled('System health:', bold=True)} "
        + maybe_colorize(
            status.color,
            f"{health.health_percentage}% ({status.label})",
            enabled=console.enable_color,
        )
    )
    console.print(
        f"  total {health.total} | critical {health.critical} | error {health.error}"
        f" | warning {health.warning} | info {health.info}"
    )
    console.print(
        f"  auto-resolved {health.auto_resolved_count}"
        f" | manual review {health.manual_review_count}"
    )


def emit_version_text(*, version: str, doctrine: str, verbosity: int) -> None:
    """Emit the RepoLens version (TEXT format)."""
    console: ConsoleLike = get_console_safely()
    if verbosity > 0:
        console.print(console.styled("RepoLens version:", bold=True, underline=True))
        console.print(f"    {console.styled(version, bold=True)}")
        console.print(f"    Barton doctrine {doctrine}")
    else:
        console.print(console.styled(version, bold=True))
