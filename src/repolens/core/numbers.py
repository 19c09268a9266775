# topmark:header:start
#
#   project      : RepoLens
#   file         : numbers.py
#   file_relpath : src/repolens/core/numbers.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Integer percentage helpers."""

from __future__ import annotations


def percentage(part: int, total: int, *, empty: int = 100) -> int:
    """Return ``100 * part / total`` rounded half up to an integer.

    Python's ``round()`` rounds half to even; scores are rounded half up so that
    e.g. 5 of 8 checks reads as 63, not 62. Integer arithmetic keeps the result
    exact.

    Args:
        part: Numerator (e.g. passed checks).
        total: Denominator (e.g. total checks).
        empty: Value returned when ``total`` is zero.

    Returns:
        The rounded percentage, or ``empty`` when there is nothing to measure.
    """
    if total <= 0:
        return empty
    return (200 * part + total) // (2 * total)
