# topmark:header:start
#
#   project      : RepoLens
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""CLI test helpers for running RepoLens in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative manifest paths and upward config
discovery resolve against the temporary test directory.

`write_manifest()` writes a small manifest whose blueprint is fully compliant
and whose modules can be made to fail individual metadata checks.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from repolens.cli.exit_codes import ExitCode
from repolens.cli.main import cli
from tests.conftest import LONG_DOC

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

BLUEPRINT_TOML: str = """\
[blueprint]
id = "39"
name = "Repo Lens"
version = "2.0.0"

[blueprint.schema.stamped]
source = "stamped.json"

[blueprint.schema.spvpet]
source = "spvpet.json"

[blueprint.schema.stacked]
source = "stacked.json"

[[blueprint.modules]]
id = "github-index"
barton_number = "39.01.01.01"
name = "GitHub Index"
description = "Indexes repositories"
"""


def module_toml(
    module_id: str,
    *,
    barton_number: str = "39.01.01.01",
    diagram: bool = True,
    markdown: str = LONG_DOC,
) -> str:
    """Return a ``[[modules]]`` TOML block; defaults pass every metadata check."""
    block: str = (
        f'\n[[modules]]\nid = "{module_id}"\n'
        f'barton_number = "{barton_number}"\nname = "{module_id.title()}"\n'
    )
    if diagram:
        block += f'\n[modules.visual_diagram]\nfile_path = "diagrams/{module_id}.mmd"\n'
    block += f'\n[modules.documentation]\nmarkdown = "{markdown}"\n'
    return block


def write_manifest(
    directory: Path,
    *modules: str,
    name: str = "repolens-manifest.toml",
    blueprint: bool = True,
) -> Path:
    """Write a manifest made of the blueprint block and the given module blocks."""
    path: Path = directory / name
    path.write_text((BLUEPRINT_TOML if blueprint else "") + "".join(modules), encoding="utf-8")
    return path


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["check", "repolens-manifest.toml"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, obj={})
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on files created in
    ``tmp_path`` (e.g. ``--help`` or ``version``) or when all paths are absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1): manual review required."""
    # FAILURE is a *normal* outcome of `check`; do not assert on exception.
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
