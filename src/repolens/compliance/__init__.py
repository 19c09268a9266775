# topmark:header:start
#
#   project      : RepoLens
#   file         : __init__.py
#   file_relpath : src/repolens/compliance/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Barton numbers, modules/blueprints and structural compliance scoring."""

from __future__ import annotations

from repolens.compliance.barton import BartonNumber, is_valid_barton_number
from repolens.compliance.manifest import Manifest, load_manifest, parse_manifest
from repolens.compliance.model import (
    Blueprint,
    BlueprintModule,
    BlueprintSchema,
    DiagramDepth,
    DiagramType,
    Module,
    ModuleDocumentation,
    VisualDiagram,
)
from repolens.compliance.registry import BlueprintRegistry
from repolens.compliance.validator import (
    ComplianceReport,
    ComplianceValidator,
    score_blueprint,
    score_module,
)

__all__ = [
    "BartonNumber",
    "Blueprint",
    "BlueprintModule",
    "BlueprintRegistry",
    "BlueprintSchema",
    "ComplianceReport",
    "ComplianceValidator",
    "DiagramDepth",
    "DiagramType",
    "Manifest",
    "Module",
    "ModuleDocumentation",
    "VisualDiagram",
    "is_valid_barton_number",
    "load_manifest",
    "parse_manifest",
    "score_blueprint",
    "score_module",
]
