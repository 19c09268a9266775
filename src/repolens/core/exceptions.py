# topmark:header:start
#
#   project      : RepoLens
#   file         : exceptions.py
#   file_relpath : src/repolens/core/exceptions.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Exceptions raised by the RepoLens engine.

Only failures of the *reporting system itself* are raised. Problems RepoLens
exists to surface (bad Barton numbers, missing documentation, schema gaps) are
recorded as diagnostics and never raised.
"""

from __future__ import annotations


class RepolensError(Exception):
    """Base class for all RepoLens engine errors."""


class DiagnosticValidationError(RepolensError, ValueError):
    """Malformed input to `log_diagnostic` (unknown enumeration value, empty message).

    Attributes:
        field (str): Name of the offending field.
        value (object): The rejected value.
    """

    def __init__(self, field: str, value: object, reason: str | None = None) -> None:
        self.field = field
        self.value = value
        detail: str = reason or "invalid value"
        super().__init__(f"Invalid diagnostic field '{field}': {detail} ({value!r})")


class BartonNumberError(RepolensError, ValueError):
    """Raised by `BartonNumber.parse` for text that is not a four-component Barton number."""


class ManifestError(RepolensError):
    """Raised when a module manifest cannot be read or does not describe a blueprint."""
