# topmark:header:start
#
#   project      : RepoLens
#   file         : markdown.py
#   file_relpath : src/repolens/cli/emitters/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Markdown emitters for the RepoLens CLI.

Markdown output is colorless and does not vary with verbosity beyond
including the diagnostic context column at ``-v``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from repolens.cli.console_helpers import get_console_safely
from repolens.cli.emitters.utils import escape_markdown_cell, format_context

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from repolens.cli.console_api import ConsoleLike
    from repolens.compliance.model import Blueprint, Module
    from repolens.compliance.validator import ComplianceReport
    from repolens.diagnostic.health import SystemHealth
    from repolens.diagnostic.model import Diagnostic


def render_check_markdown(
    *,
    manifest: Path,
    blueprint: Blueprint | None,
    report: ComplianceReport | None,
    scores: Sequence[tuple[Module, ComplianceReport]],
    diagnostics: Sequence[Diagnostic],
    health: SystemHealth,
    verbosity: int,
) -> str:
    """Render the result of `repolens check` as a Markdown document."""
    lines: list[str] = ["# RepoLens Check", "", f"Manifest: `{manifest}`", ""]

    if blueprint is not None and report is not None:
        lines += [
            f"## Blueprint `{blueprint.id}`",
            "",
            f"**Compliance:** {report.compliance}% ({report.passed}/{report.total} checks)",
            "",
        ]
        lines += [f"- {escape_markdown_cell(d)}" for d in report.deficiencies]
        if report.deficiencies:
            lines.append("")

    if scores:
        lines += ["## Modules", "", "| Module | Barton number | Compliance |", "|---|---|---:|"]
        for module, module_report in scores:
            lines.append(
                f"| `{escape_markdown_cell(module.id)}` | {module.barton_number or '-'}"
                f" | {module_report.compliance}% |"
            )
        lines.append("")

    lines += ["## Diagnostics", ""]
    if diagnostics:
        header: str = "| Severity | Category | Principle | Module | Message | Review |"
        rule: str = "|---|---|---|---|---|---|"
        if verbosity > 0:
            header += " Context |"
            rule += "---|"
        lines += [header, rule]
        for d in diagnostics:
            review: str = (
                "manual" if d.requires_manual_review else "auto-resolved" if d.auto_resolved else ""
            )
            row: str = (
                f"| {d.severity.label} | {d.category.label} | {d.principle.label}"
                f" | {escape_markdown_cell(d.module_id or '')}"
                f" | {escape_markdown_cell(d.message)} | {review} |"
            )
            if verbosity > 0:
                row += f" {escape_markdown_cell(format_context(d.context))} |"
            lines.append(row)
    else:
        lines.append("_No diagnostics._")
    lines.append("")

    lines += [
        "## System health",
        "",
        f"**{health.health_percentage}%** ({health.status.label})",
        "",
        "| Metric | Count |",
        "|---|---:|",
        f"| Total | {health.total} |",
        f"| Critical | {health.critical} |",
        f"| Error | {health.error} |",
        f"| Warning | {health.warning} |",
        f"| Info | {health.info} |",
        f"| Auto-resolved | {health.auto_resolved_count} |",
        f"| Manual review | {health.manual_review_count} |",
    ]
    return "\n".join(lines)


def emit_version_markdown(*, version: str, doctrine: str) -> None:
    """Emit the RepoLens version as Markdown."""
    console: ConsoleLike = get_console_safely()
    console.print("# RepoLens Version\n")
    console.print(f"**RepoLens version: {version}** (Barton doctrine {doctrine})")
