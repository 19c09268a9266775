# topmark:header:start
#
#   project      : RepoLens
#   file         : model.py
#   file_relpath : src/repolens/compliance/model.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Modules and blueprints: the subjects of compliance checks.

Sections:
    * VisualDiagram / ModuleDocumentation: optional attachments of a module,
      consulted only by compliance checks.
    * Module: an independently-versioned unit of the codebase.
    * BlueprintModule / BlueprintSchema / Blueprint: a named, versioned
      collection of modules plus the three-part structural schema.

`Module` and its attachments are immutable values. `Blueprint` is a mutable
builder: registration writes the computed `compliance` and `last_updated`
back onto the instance.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from repolens.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from datetime import datetime

#: Names of the three schema sub-shapes every blueprint is checked for.
SCHEMA_SHAPES: Final[tuple[str, ...]] = ("stamped", "spvpet", "stacked")


class DiagramType(KeyedStrEnum):
    """Kind of visual diagram attached to a module."""

    FLOW = ("flow", "Flow")
    DEPENDENCY = ("dependency", "Dependency")
    COMPONENT = ("component", "Component")
    ARCHITECTURE = ("architecture", "Architecture")


class DiagramDepth(KeyedStrEnum):
    """Altitude of a visual diagram, from overview (30k) to detail (5k)."""

    FT_30K = ("30k", "30,000 ft")
    FT_20K = ("20k", "20,000 ft")
    FT_10K = ("10k", "10,000 ft")
    FT_5K = ("5k", "5,000 ft")


@dataclass(frozen=True, slots=True)
class VisualDiagram:
    """Reference to a module's visual diagram.

    Attributes:
        file_path (str): Location of the diagram source; empty means missing.
        diagram_type (DiagramType | None): Kind of diagram.
        depth (DiagramDepth | None): Diagram altitude.
        clickable (bool): Whether nodes link to the underlying files.
    """

    file_path: str
    diagram_type: DiagramType | None = None
    depth: DiagramDepth | None = None
    clickable: bool = False

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this diagram reference."""
        return {
            "file_path": self.file_path,
            "diagram_type": self.diagram_type.value if self.diagram_type else None,
            "depth": self.depth.value if self.depth else None,
            "clickable": self.clickable,
        }


@dataclass(frozen=True, slots=True)
class ModuleDocumentation:
    """Markdown documentation of a module.

    Attributes:
        markdown (str): Documentation body.
        cross_links (tuple[str, ...]): Ids of related modules.
        version (str | None): Documentation version, if tracked separately.
    """

    markdown: str = ""
    cross_links: tuple[str, ...] = ()
    version: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this documentation."""
        return {
            "markdown": self.markdown,
            "cross_links": list(self.cross_links),
            "version": self.version,
        }


@dataclass(frozen=True, slots=True)
class Module:
    """An independently-versioned unit subject to compliance checks.

    Attributes:
        id (str): Module identifier.
        barton_number (str): Barton number as declared (may be malformed).
        name (str): Display name.
        blueprint_id (str): Owning blueprint.
        version (str): Module version.
        visual_diagram (VisualDiagram | None): Attached diagram, if any.
        documentation (ModuleDocumentation | None): Attached documentation, if any.
    """

    id: str
    barton_number: str
    name: str
    blueprint_id: str = ""
    version: str = "1.0.0"
    visual_diagram: VisualDiagram | None = None
    documentation: ModuleDocumentation | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this module."""
        return {
            "id": self.id,
            "barton_number": self.barton_number,
            "name": self.name,
            "blueprint_id": self.blueprint_id,
            "version": self.version,
            "visual_diagram": self.visual_diagram.to_dict() if self.visual_diagram else None,
            "documentation": self.documentation.to_dict() if self.documentation else None,
        }


@dataclass(frozen=True, slots=True)
class BlueprintModule:
    """A module entry as listed by a blueprint."""

    id: str
    barton_number: str = ""
    name: str = ""
    description: str = ""
    dependencies: tuple[str, ...] = ()

    def is_fully_described(self) -> bool:
        """Return True if Barton number, name and description are all non-empty."""
        return bool(self.barton_number and self.name and self.description)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this entry."""
        return {
            "id": self.id,
            "barton_number": self.barton_number,
            "name": self.name,
            "description": self.description,
            "dependencies": list(self.dependencies),
        }


@dataclass(frozen=True, slots=True)
class BlueprintSchema:
    """The three named schema sub-shapes of a blueprint.

    Each sub-shape is either absent (``None``) or an arbitrary object; only
    mappings count as structurally present.
    """

    stamped: object | None = None
    spvpet: object | None = None
    stacked: object | None = None

    def shape(self, name: str) -> object | None:
        """Return the sub-shape called `name` (one of `SCHEMA_SHAPES`)."""
        if name not in SCHEMA_SHAPES:
            raise KeyError(name)
        return getattr(self, name)

    def is_present(self, name: str) -> bool:
        """Return True if the sub-shape `name` is present and a mapping."""
        return isinstance(self.shape(name), Mapping)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of the sub-shapes."""
        return {name: self.shape(name) for name in SCHEMA_SHAPES}


@dataclass(slots=True)
class Blueprint:
    """A named, versioned collection of modules with a structural schema.

    Attributes:
        id (str): Blueprint identifier (registration upserts by id).
        name (str): Display name.
        version (str): Blueprint version.
        modules (list[BlueprintModule]): Listed modules.
        schema (BlueprintSchema): The three schema sub-shapes.
        last_updated (datetime | None): Set on registration.
        compliance (int | None): Percentage in ``0..100``, set on registration.
    """

    id: str
    name: str = ""
    version: str = "1.0.0"
    modules: list[BlueprintModule] = field(default_factory=list)
    schema: BlueprintSchema = field(default_factory=BlueprintSchema)
    last_updated: datetime | None = None
    compliance: int | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this blueprint."""
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "modules": [m.to_dict() for m in self.modules],
            "schema": self.schema.to_dict(),
            "last_updated": self.last_updated.isoformat() if self.last_updated else None,
            "compliance": self.compliance,
        }
