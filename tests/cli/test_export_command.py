# topmark:header:start
#
#   project      : RepoLens
#   file         : test_export_command.py
#   file_relpath : tests/cli/test_export_command.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Tests for `repolens export`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from repolens.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, module_toml, run_cli_in, write_manifest
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

MANIFEST: str = "repolens-manifest.toml"


@mark_cli
@parametrize("system", ["stamped", "spvpet", "stacked"])
def test_json_export_is_tagged(tmp_path: Path, system: str) -> None:
    write_manifest(tmp_path, module_toml("broken", barton_number="39", diagram=False))
    result: Result = run_cli_in(tmp_path, ["export", MANIFEST, "--system", system])

    # Export reports; it never fails on manual-review diagnostics.
    assert_SUCCESS(result)
    payload = json.loads(result.stdout)
    assert payload["system"] == system
    assert len(payload["export"]) == 2
    assert {r["system"] for r in payload["export"]} == {system}
    assert {r["severity"] for r in payload["export"]} == {"error", "warning"}


@mark_cli
def test_ndjson_export(tmp_path: Path) -> None:
    write_manifest(tmp_path, module_toml("a", diagram=False), module_toml("b", diagram=False))
    result: Result = run_cli_in(
        tmp_path, ["export", MANIFEST, "--system", "SPVPET", "--format", "ndjson"]
    )

    assert_SUCCESS(result)
    records = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["kind"] for r in records] == ["export", "export"]
    assert {r["export"]["module_id"] for r in records} == {"a", "b"}
    assert all(r["export"]["system"] == "spvpet" for r in records)


@mark_cli
def test_empty_ndjson_export_prints_nothing(tmp_path: Path) -> None:
    write_manifest(tmp_path, module_toml("fine"))
    result: Result = run_cli_in(tmp_path, ["export", MANIFEST, "--format", "ndjson"])

    assert_SUCCESS(result)
    assert result.stdout == ""


@mark_cli
def test_default_system_comes_from_config(tmp_path: Path) -> None:
    (tmp_path / "repolens.toml").write_text(
        "root = true\n[export]\ndefault_system = 'stacked'\n", encoding="utf-8"
    )
    write_manifest(tmp_path, module_toml("fine"))
    result: Result = run_cli_in(tmp_path, ["export", MANIFEST])

    assert_SUCCESS(result)
    assert json.loads(result.stdout)["system"] == "stacked"


@mark_cli
def test_default_system_without_config(tmp_path: Path) -> None:
    write_manifest(tmp_path, module_toml("fine"))
    result: Result = run_cli_in(tmp_path, ["--no-config", "export", MANIFEST])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {
        "meta": json.loads(result.stdout)["meta"],
        "system": "stamped",
        "export": [],
    }


@mark_cli
def test_unknown_system_is_rejected(tmp_path: Path) -> None:
    write_manifest(tmp_path, module_toml("fine"))
    result: Result = run_cli_in(tmp_path, ["export", MANIFEST, "--system", "pyramid"])
    assert result.exit_code == 2, result.output
    assert "Invalid value 'pyramid'" in result.output


@mark_cli
def test_text_format_is_not_offered(tmp_path: Path) -> None:
    write_manifest(tmp_path, module_toml("fine"))
    result: Result = run_cli_in(tmp_path, ["export", MANIFEST, "--format", "text"])
    assert result.exit_code == 2, result.output


@mark_cli
def test_missing_manifest(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["export", "absent.toml"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
