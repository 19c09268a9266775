# topmark:header:start
#
#   project      : RepoLens
#   file         : utils.py
#   file_relpath : src/repolens/cli/emitters/utils.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Small formatting helpers shared by the human-facing emitters.

The helpers are Click-free and console-free: they operate on plain strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from repolens.diagnostic.model import Diagnostic


def maybe_colorize(styler: Callable[[str], str], text: str, *, enabled: bool) -> str:
    """Conditionally apply a styling function.

    Args:
        styler: Callable that applies styling to a string (for example, a `chalk.*` function).
        text: Input text to render.
        enabled: When False, return `text` unchanged.

    Returns:
        Styled text when enabled; otherwise the original `text`.
    """
    return styler(text) if enabled else text


def format_context(context: Mapping[str, object]) -> str:
    """Render a diagnostic context bag as ``key=value`` pairs in key order."""
    return ", ".join(f"{k}={context[k]!r}" for k in sorted(context))


def subject_of(diagnostic: Diagnostic) -> str:
    """Return the module id and Barton number a diagnostic is about, or an empty string."""
    if diagnostic.module_id and diagnostic.barton_number:
        return f"{diagnostic.module_id} ({diagnostic.barton_number})"
    return diagnostic.module_id or diagnostic.barton_number or ""


def escape_markdown_cell(text: str) -> str:
    """Escape characters that would break a Markdown table cell."""
    return text.replace("\\", "\\\\").replace("|", "\\|").replace("\n", " ")
