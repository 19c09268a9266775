# topmark:header:start
#
#   project      : RepoLens
#   file         : barton.py
#   file_relpath : src/repolens/compliance/barton.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Barton numbers: hierarchical ``blueprint.module.submodule.step`` identifiers.

A Barton number is four dot-separated, non-negative decimal integers, for
example ``39.02.01.01``. Components may be written with or without leading
zeros; the canonical rendering pads module, submodule and step to two digits.

Validation is purely syntactic (`is_valid_barton_number`). The stricter
doctrine check (`BartonNumber.is_doctrine_compliant`) additionally pins the
blueprint id and bounds the other components to ``1..99``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from repolens.constants import DEFAULT_BLUEPRINT_ID
from repolens.core.exceptions import BartonNumberError

# ASCII digits only; `\d` would also accept other Unicode decimal digits.
_BARTON_RE: Final[re.Pattern[str]] = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)\.([0-9]+)")

_COMPONENT_MIN: Final[int] = 1
_COMPONENT_MAX: Final[int] = 99


def is_valid_barton_number(text: object) -> bool:
    """Return True if `text` is a syntactically valid Barton number.

    Anything that is not a string (``None`` included) is invalid.
    """
    return isinstance(text, str) and _BARTON_RE.fullmatch(text) is not None


@dataclass(frozen=True, slots=True, order=True)
class BartonNumber:
    """Parsed Barton number.

    Attributes:
        blueprint (int): Blueprint id.
        module (int): Module index within the blueprint.
        submodule (int): Submodule index within the module.
        step (int): Step (file) index within the submodule.
    """

    blueprint: int
    module: int
    submodule: int
    step: int

    @classmethod
    def parse(cls, text: str) -> BartonNumber:
        """Parse a Barton number.

        Args:
            text: Candidate text, e.g. ``"39.02.01.01"``.

        Returns:
            The parsed number.

        Raises:
            BartonNumberError: If `text` is not four dot-separated decimal integers.
        """
        match: re.Match[str] | None = (
            _BARTON_RE.fullmatch(text) if isinstance(text, str) else None
        )
        if match is None:
            raise BartonNumberError(f"Invalid Barton number format: {text!r}")
        blueprint, module, submodule, step = (int(g) for g in match.groups())
        return cls(blueprint=blueprint, module=module, submodule=submodule, step=step)

    @classmethod
    def try_parse(cls, text: object) -> BartonNumber | None:
        """Parse a Barton number, returning None instead of raising."""
        if not is_valid_barton_number(text):
            return None
        return cls.parse(str(text))

    @classmethod
    def for_module(
        cls,
        module: int,
        submodule: int,
        step: int,
        *,
        blueprint: int = DEFAULT_BLUEPRINT_ID,
    ) -> BartonNumber:
        """Build a Barton number under the default blueprint."""
        return cls(blueprint=blueprint, module=module, submodule=submodule, step=step)

    def __str__(self) -> str:
        return f"{self.blueprint}.{self.module:02d}.{self.submodule:02d}.{self.step:02d}"

    def is_doctrine_compliant(self, *, blueprint: int = DEFAULT_BLUEPRINT_ID) -> bool:
        """Return True if this number belongs to `blueprint` with components in ``1..99``."""
        return self.blueprint == blueprint and all(
            _COMPONENT_MIN <= c <= _COMPONENT_MAX
            for c in (self.module, self.submodule, self.step)
        )

    def describe(self) -> str:
        """Return a human-readable description, e.g. ``Blueprint 39, Module 2, ...``."""
        return (
            f"Blueprint {self.blueprint}, Module {self.module}, "
            f"Submodule {self.submodule}, Step {self.step}"
        )
