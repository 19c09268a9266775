# topmark:header:start
#
#   project      : RepoLens
#   file         : formats.py
#   file_relpath : src/repolens/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Shared output format definitions used across RepoLens frontends.

This module centralizes two vocabularies so the CLI, the machine emitters and
the configuration layer agree on them without introducing `Click` or console
dependencies:

- `OutputFormat`: how a frontend renders results (text, markdown, JSON, NDJSON).
- `ExportSystem`: the downstream system a diagnostics export is tagged for
  (`stamped`, `spvpet`, `stacked`). The three systems share one record shape;
  the name is carried as metadata only.

Machine formats (JSON, NDJSON) are intended to be stable and colorless.
"""

from __future__ import annotations

from enum import Enum

from repolens.core.enum_mixins import KeyedStrEnum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable).
        NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).

    Notes:
        - Machine formats (``JSON`` and ``NDJSON``) must not include ANSI color.
        - Use with `repolens.cli.cli_types.EnumChoiceParam` to parse ``--format`` from Click.
    """

    # Human formats:
    TEXT = "text"
    MARKDOWN = "markdown"

    # Machine formats:
    JSON = "json"
    NDJSON = "ndjson"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption.

    Args:
        fmt: the output format to be checked.

    Returns:
        `True` if the format provided is a machine format, else `False`.
    """
    return fmt in {OutputFormat.JSON, OutputFormat.NDJSON}


class ExportSystem(KeyedStrEnum):
    """Downstream systems a diagnostics export can be tagged for."""

    STAMPED = ("stamped", "STAMPED")
    SPVPET = ("spvpet", "SPVPET")
    STACKED = ("stacked", "STACKED")
