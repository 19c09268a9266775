# topmark:header:start
#
#   project      : RepoLens
#   file         : registry.py
#   file_relpath : src/repolens/compliance/registry.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Registry of blueprints, keyed by blueprint id."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from repolens.config.logging import get_logger

if TYPE_CHECKING:
    from repolens.compliance.model import Blueprint
    from repolens.config.logging import RepolensLogger

logger: RepolensLogger = get_logger(__name__)


class BlueprintRegistry:
    """Lock-guarded mapping of blueprint id to the most recently registered blueprint."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._blueprints: dict[str, Blueprint] = {}

    def upsert(self, blueprint: Blueprint) -> bool:
        """Insert or replace a blueprint.

        Returns:
            True if a blueprint with the same id was replaced.
        """
        with self._lock:
            replaced: bool = blueprint.id in self._blueprints
            self._blueprints[blueprint.id] = blueprint
        logger.debug("%s blueprint %s", "Replaced" if replaced else "Registered", blueprint.id)
        return replaced

    def get(self, blueprint_id: str) -> Blueprint | None:
        """Return the blueprint registered under `blueprint_id`, or None."""
        with self._lock:
            return self._blueprints.get(blueprint_id)

    def list(self) -> list[Blueprint]:
        """Return all registered blueprints in first-registration order."""
        with self._lock:
            return list(self._blueprints.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._blueprints)

    def __contains__(self, blueprint_id: object) -> bool:
        with self._lock:
            return blueprint_id in self._blueprints
