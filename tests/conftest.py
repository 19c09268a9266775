# topmark:header:start
#
#   project      : RepoLens
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Pytest configuration for the RepoLens test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests never share engine state: build a fresh `BartonSystem` (or store) per
    test, preferably through the `make_system` helper which injects a
    deterministic clock and id factory.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from repolens.api import BartonSystem
from repolens.compliance.model import (
    Blueprint,
    BlueprintModule,
    BlueprintSchema,
    Module,
    ModuleDocumentation,
    VisualDiagram,
)
from repolens.config import MutableConfig
from repolens.config import logging as rl_logging

if TYPE_CHECKING:
    from collections.abc import Iterator

    from repolens.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

settings.register_profile("thorough", max_examples=2000, deadline=None)

BASE_TIME: datetime = datetime(2025, 1, 1, tzinfo=timezone.utc)

LONG_DOC: str = "x" * 120


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_property: DecoratorType[Any] = as_typed_mark(pytest.mark.property)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_repolens_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure RepoLens' runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("REPOLENS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    rl_logging.setup_logging(level=rl_logging.TRACE_LEVEL)


# ---------------------------------------------------------------------------
# Deterministic clocks and ids
# ---------------------------------------------------------------------------


def step_clock(
    start: datetime = BASE_TIME,
    step: timedelta = timedelta(seconds=1),
) -> Callable[[], datetime]:
    """Return a clock yielding `start`, `start + step`, `start + 2*step`, ..."""
    counter: Iterator[int] = itertools.count()
    return lambda: start + step * next(counter)


def frozen_clock(at: datetime = BASE_TIME) -> Callable[[], datetime]:
    """Return a clock that always yields `at`."""
    return lambda: at


def counting_ids(prefix: str = "d") -> Callable[[], str]:
    """Return an id factory yielding ``<prefix>-0``, ``<prefix>-1``, ..."""
    counter: Iterator[int] = itertools.count()
    return lambda: f"{prefix}-{next(counter)}"


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and attribute overrides."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def make_system(
    *,
    clock: Callable[[], datetime] | None = None,
    config: Config | None = None,
) -> BartonSystem:
    """Return a fresh `BartonSystem` with a stepping clock and counting ids."""
    return BartonSystem(
        config,
        clock=clock or step_clock(),
        id_factory=counting_ids(),
    )


# ---------------------------------------------------------------------------
# Compliance fixtures
# ---------------------------------------------------------------------------


def make_module(
    module_id: str = "mod-a",
    *,
    barton_number: str = "39.02.01.01",
    diagram: bool = True,
    markdown: str = LONG_DOC,
) -> Module:
    """Return a module; defaults satisfy every metadata check."""
    return Module(
        id=module_id,
        barton_number=barton_number,
        name=module_id.title(),
        visual_diagram=VisualDiagram(file_path=f"diagrams/{module_id}.svg") if diagram else None,
        documentation=ModuleDocumentation(markdown=markdown),
    )


def make_blueprint(
    blueprint_id: str = "bp-1",
    *,
    shapes: tuple[str, ...] = ("stamped", "spvpet", "stacked"),
    modules: tuple[BlueprintModule, ...] = (),
) -> Blueprint:
    """Return a blueprint with the given schema shapes present as (empty) mappings."""
    schema = BlueprintSchema(**{name: {} for name in shapes})
    return Blueprint(id=blueprint_id, name="Repo Lens", modules=list(modules), schema=schema)


def described_module(module_id: str = "m1") -> BlueprintModule:
    """Return a fully described blueprint module."""
    return BlueprintModule(
        id=module_id,
        barton_number="39.01.01.01",
        name=module_id.upper(),
        description=f"{module_id} description",
    )
