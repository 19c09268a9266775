# topmark:header:start
#
#   project      : RepoLens
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Tests for `Config` / `MutableConfig` building, merging and discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repolens.config import Config, MutableConfig
from repolens.config.io.loaders import load_toml_dict
from repolens.config.model import CLI_OVERRIDE_STR
from repolens.constants import (
    DEFAULT_DIAGNOSTIC_ID_PREFIX,
    DEFAULT_MIN_DOCUMENTATION_LENGTH,
    DEFAULT_SESSION_PREFIX,
)
from repolens.core.formats import ExportSystem
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    cfg: Config = Config.defaults()
    assert cfg.min_documentation_length == DEFAULT_MIN_DOCUMENTATION_LENGTH
    assert cfg.id_prefix == DEFAULT_DIAGNOSTIC_ID_PREFIX
    assert cfg.session_prefix == DEFAULT_SESSION_PREFIX
    assert cfg.default_system is ExportSystem.STAMPED
    assert cfg.config_files == ()
    assert cfg.warnings == ()


def test_empty_builder_freezes_to_defaults() -> None:
    assert MutableConfig().freeze().to_dict() == Config.defaults().to_dict()


def test_freeze_thaw_round_trip() -> None:
    cfg: Config = Config.defaults()
    m: MutableConfig = cfg.thaw()
    m.id_prefix = "lens"
    again: Config = m.freeze()
    assert again.id_prefix == "lens"
    assert cfg.id_prefix == DEFAULT_DIAGNOSTIC_ID_PREFIX
    assert again.timestamp == cfg.timestamp


def test_to_dict_mirrors_toml_sections() -> None:
    assert Config.defaults().to_dict() == {
        "diagnostics": {
            "min_documentation_length": DEFAULT_MIN_DOCUMENTATION_LENGTH,
            "id_prefix": DEFAULT_DIAGNOSTIC_ID_PREFIX,
        },
        "session": {"prefix": DEFAULT_SESSION_PREFIX},
        "export": {"default_system": "stamped"},
    }


def test_from_toml_dict_reads_every_section() -> None:
    m: MutableConfig = MutableConfig.from_toml_dict(
        {
            "diagnostics": {"min_documentation_length": 20, "id_prefix": "lens"},
            "session": {"prefix": "run"},
            "export": {"default_system": "SPVPET"},
        }
    )
    assert m.min_documentation_length == 20
    assert m.id_prefix == "lens"
    assert m.session_prefix == "run"
    assert m.default_system is ExportSystem.SPVPET
    assert m.warnings == []


@parametrize(
    "data,fragment",
    [
        ({"diagnostics": {"min_documentation_length": "long"}}, "Expected int"),
        ({"diagnostics": {"min_documentation_length": True}}, "Expected int"),
        ({"diagnostics": {"min_documentation_length": -1}}, "must be >= 0"),
        ({"diagnostics": {"id_prefix": 7}}, "Expected string"),
        ({"session": {"prefix": ""}}, "Empty string"),
        ({"export": {"default_system": "pyramid"}}, "Invalid value"),
        ({"export": {"default_system": 3}}, "Expected string enum value"),
    ],
)
def test_from_toml_dict_records_warnings(data: dict[str, object], fragment: str) -> None:
    m: MutableConfig = MutableConfig.from_toml_dict(data)
    assert len(m.warnings) == 1
    assert fragment in m.warnings[0]
    assert m.freeze().to_dict() == Config.defaults().to_dict()


def test_unknown_keys_are_ignored() -> None:
    m: MutableConfig = MutableConfig.from_toml_dict({"colour": "blue", "session": {"x": 1}})
    assert m.warnings == []
    assert m.session_prefix is None


def test_merge_with_prefers_set_values() -> None:
    base: MutableConfig = MutableConfig.from_defaults()
    layer: MutableConfig = MutableConfig(id_prefix="lens", warnings=["w"])
    merged: MutableConfig = base.merge_with(layer)
    assert merged.id_prefix == "lens"
    assert merged.session_prefix == DEFAULT_SESSION_PREFIX
    assert merged.warnings == ["w"]


def test_from_toml_file_repolens_toml(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "repolens.toml", "[session]\nprefix = 'audit'\n")
    m: MutableConfig | None = MutableConfig.from_toml_file(path)
    assert m is not None
    assert m.session_prefix == "audit"
    assert m.config_files == [path]


def test_pyproject_without_tool_section_is_skipped(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "pyproject.toml", "[project]\nname = 'x'\n")
    assert MutableConfig.from_toml_file(path) is None
    assert MutableConfig.discover_local_config_files(tmp_path) == []


def test_pyproject_tool_section_is_used(tmp_path: Path) -> None:
    path: Path = _write(
        tmp_path / "pyproject.toml",
        "[tool.repolens.diagnostics]\nmin_documentation_length = 5\n",
    )
    m: MutableConfig | None = MutableConfig.from_toml_file(path)
    assert m is not None
    assert m.min_documentation_length == 5


def test_discovery_orders_root_most_first(tmp_path: Path) -> None:
    outer: Path = _write(tmp_path / "repolens.toml", "root = true\n")
    inner_py: Path = _write(
        tmp_path / "pkg" / "pyproject.toml", "[tool.repolens]\n[tool.repolens.session]\n"
    )
    inner: Path = _write(tmp_path / "pkg" / "repolens.toml", "[session]\nprefix = 'x'\n")

    found: list[Path] = MutableConfig.discover_local_config_files(tmp_path / "pkg")
    assert found == [outer.resolve(), inner_py.resolve(), inner.resolve()]


def test_discovery_stops_at_root(tmp_path: Path) -> None:
    _write(tmp_path / "repolens.toml", "[session]\nprefix = 'outer'\n")
    stop: Path = _write(tmp_path / "proj" / "repolens.toml", "root = true\n")
    found: list[Path] = MutableConfig.discover_local_config_files(tmp_path / "proj" / "src")
    assert found == [stop.resolve()]


def test_load_merged_nearest_wins(tmp_path: Path) -> None:
    _write(
        tmp_path / "repolens.toml",
        "root = true\n[session]\nprefix = 'outer'\n[diagnostics]\nid_prefix = 'o'\n",
    )
    _write(tmp_path / "proj" / "repolens.toml", "[session]\nprefix = 'inner'\n")

    cfg: Config = MutableConfig.load_merged(anchor=tmp_path / "proj").freeze()
    assert cfg.session_prefix == "inner"
    assert cfg.id_prefix == "o"
    assert len(cfg.config_files) == 2


@parametrize(
    "content",
    [b"[session]\nprefix = \"\xff\"\n", b"[session]\nprefix = 'a'\nprefix = 'b'\n"],
    ids=["invalid-utf8", "duplicate-key"],
)
def test_unreadable_config_falls_back_to_defaults(tmp_path: Path, content: bytes) -> None:
    _write(tmp_path / "repolens.toml", "root = true\n")
    bad: Path = tmp_path / "proj" / "repolens.toml"
    bad.parent.mkdir()
    bad.write_bytes(content)

    assert load_toml_dict(bad) == {}
    cfg: Config = MutableConfig.load_merged(anchor=tmp_path / "proj").freeze()
    assert cfg.session_prefix == DEFAULT_SESSION_PREFIX
    assert cfg.min_documentation_length == DEFAULT_MIN_DOCUMENTATION_LENGTH


def test_load_merged_no_config_keeps_explicit_files(tmp_path: Path) -> None:
    _write(tmp_path / "repolens.toml", "root = true\n[session]\nprefix = 'found'\n")
    extra: Path = _write(tmp_path / "extra.toml", "[session]\nprefix = 'explicit'\n")

    cfg: Config = MutableConfig.load_merged(
        anchor=tmp_path, extra_config_files=[extra], no_config=True
    ).freeze()
    assert cfg.session_prefix == "explicit"
    assert cfg.config_files == (extra,)


def test_apply_cli_args_overrides() -> None:
    m: MutableConfig = MutableConfig.from_defaults().apply_cli_args(
        {"min_documentation_length": 10, "default_system": "stacked", "id_prefix": None}
    )
    assert m.min_documentation_length == 10
    assert m.default_system is ExportSystem.STACKED
    assert m.id_prefix == DEFAULT_DIAGNOSTIC_ID_PREFIX
    assert m.config_files == [CLI_OVERRIDE_STR]


def test_apply_cli_args_keeps_previous_value_on_bad_input() -> None:
    m: MutableConfig = MutableConfig.from_defaults().apply_cli_args(
        {"min_documentation_length": -5, "session_prefix": "cli"}
    )
    assert m.min_documentation_length == DEFAULT_MIN_DOCUMENTATION_LENGTH
    assert m.session_prefix == "cli"
    assert len(m.warnings) == 1


def test_apply_cli_args_without_overrides_is_a_no_op() -> None:
    m: MutableConfig = MutableConfig.from_defaults()
    assert m.apply_cli_args({}) is m
    assert m.config_files == []
