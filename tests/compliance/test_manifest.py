# topmark:header:start
#
#   project      : RepoLens
#   file         : test_manifest.py
#   file_relpath : tests/compliance/test_manifest.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Tests for TOML manifest parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from repolens.compliance.manifest import load_manifest, parse_manifest
from repolens.compliance.model import DiagramDepth, DiagramType
from repolens.core.exceptions import ManifestError

if TYPE_CHECKING:
    from pathlib import Path

MANIFEST = """
[blueprint]
id = 39
name = "Repo Lens"
version = "2.0.0"

[blueprint.schema.stamped]
fields = ["id"]

[blueprint.schema.spvpet]

[[blueprint.modules]]
id = "core"
barton_number = "39.01.01.01"
name = "Core"
description = "Core module"
dependencies = ["util"]

[[modules]]
id = "core"
barton_number = "39.01.01.01"
name = "Core"

[modules.visual_diagram]
file_path = "diagrams/core.svg"
type = "flow"
depth = "30k"
clickable = true

[modules.documentation]
markdown_file = "docs/core.md"
cross_links = ["util"]

[[modules]]
id = "util"
barton_number = "39.1"
blueprint_id = "other"
"""


def test_load_manifest(tmp_path: Path) -> None:
    """Blueprint, schema shapes and modules are read; documentation files resolve locally."""
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "core.md").write_text("# Core\n" + "text " * 30, encoding="utf-8")
    path = tmp_path / "repolens-manifest.toml"
    path.write_text(MANIFEST, encoding="utf-8")

    manifest = load_manifest(path)

    assert manifest.source == path
    bp = manifest.blueprint
    assert bp is not None
    assert bp.id == "39"
    assert bp.version == "2.0.0"
    assert bp.schema.is_present("stamped")
    assert bp.schema.is_present("spvpet")
    assert not bp.schema.is_present("stacked")
    assert [m.id for m in bp.modules] == ["core"]
    assert bp.modules[0].dependencies == ("util",)

    core, util = manifest.modules
    assert core.blueprint_id == "39"
    assert core.visual_diagram is not None
    assert core.visual_diagram.diagram_type is DiagramType.FLOW
    assert core.visual_diagram.depth is DiagramDepth.FT_30K
    assert core.visual_diagram.clickable is True
    assert core.documentation is not None
    assert core.documentation.markdown.startswith("# Core")
    assert core.documentation.cross_links == ("util",)

    assert util.blueprint_id == "other"
    assert util.barton_number == "39.1"
    assert util.visual_diagram is None
    assert util.documentation is None


def test_modules_only_manifest() -> None:
    """A manifest may declare modules without a blueprint."""
    manifest = parse_manifest({"modules": [{"id": "m", "barton_number": "39.01.01.01"}]})
    assert manifest.blueprint is None
    assert manifest.modules[0].blueprint_id == ""


@pytest.mark.parametrize(
    "data, match",
    [
        ({}, "neither"),
        ({"blueprint": {}}, "'id' is required"),
        ({"blueprint": {"id": "b", "modules": [{"name": "x"}]}}, "'id'"),
        ({"modules": [{"id": "m", "visual_diagram": {"clickable": "yes"}}]}, "boolean"),
        ({"modules": [{"id": "m", "visual_diagram": {"depth": "1k"}}]}, "invalid 'depth'"),
        (
            {"modules": [{"id": "m", "documentation": {"markdown": "a", "markdown_file": "b"}}]},
            "mutually exclusive",
        ),
        ({"modules": [{"id": "m", "name": ["x"]}]}, "must be a string"),
    ],
)
def test_parse_manifest_errors(data: dict[str, object], match: str) -> None:
    """Malformed manifests raise `ManifestError` with a pointed message."""
    with pytest.raises(ManifestError, match=match):
        parse_manifest(data)


def test_missing_documentation_file(tmp_path: Path) -> None:
    """An unreadable `markdown_file` is a manifest error."""
    data = {"modules": [{"id": "m", "documentation": {"markdown_file": "nope.md"}}]}
    with pytest.raises(ManifestError, match="cannot read"):
        parse_manifest(data, base_dir=tmp_path)


def test_load_manifest_io_and_syntax_errors(tmp_path: Path) -> None:
    """Missing files and invalid TOML are reported as `ManifestError`."""
    with pytest.raises(ManifestError, match="Cannot read"):
        load_manifest(tmp_path / "missing.toml")
    bad = tmp_path / "bad.toml"
    bad.write_text("[blueprint\nid = 1\n", encoding="utf-8")
    with pytest.raises(ManifestError, match="Invalid TOML"):
        load_manifest(bad)
