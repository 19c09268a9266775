# topmark:header:start
#
#   project      : RepoLens
#   file         : cli_types.py
#   file_relpath : src/repolens/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Custom Click parameter types for RepoLens."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

from repolens.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    `KeyedStrEnum` members are matched through `KeyedStrEnum.parse` (key, name or
    alias); other string enums are matched case-insensitively on their value.

    Args:
        enum_cls: The enumeration to convert to.
        allowed: Optional subset of members to accept.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E], *, allowed: Iterable[E] | None = None) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.allowed: tuple[E, ...] = tuple(allowed) if allowed is not None else tuple(enum_cls)
        self.choices = [cast("str", e.value) for e in self.allowed]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def _lookup(self, value: str) -> E | None:
        if issubclass(self.enum_cls, KeyedStrEnum):
            return cast("E | None", self.enum_cls.parse(value))
        key: str = value.lower()
        for choice in self.enum_cls:
            if str(choice.value).lower() == key:
                return choice
        return None

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        member: E | None = self._lookup(str(value))
        if member is not None and member in self.allowed:
            return member

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_REPOLENS_COMPLETE=bash_source repolens)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"
