# topmark:header:start
#
#   project      : RepoLens
#   file         : errors.py
#   file_relpath : src/repolens/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Exceptions for the RepoLens CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. They print through the project console when one is present on
the Click context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from repolens.cli.exit_codes import ExitCode


class RepolensCliError(click.ClickException):
    """Base class for all RepoLens CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: object = getattr(ctx, "obj", None) if ctx is not None else None
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(self.format_message(), fg="bright_red"))
            return
        super().show(file)


class RepolensUsageError(RepolensCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RepolensConfigError(RepolensCliError):
    """Error for unreadable or malformed manifests and config files."""

    exit_code = ExitCode.CONFIG_ERROR


class RepolensFileNotFoundError(RepolensCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
