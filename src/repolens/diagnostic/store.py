# topmark:header:start
#
#   project      : RepoLens
#   file         : store.py
#   file_relpath : src/repolens/diagnostic/store.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Append-only, process-lifetime store of diagnostics.

The store is shared mutable state reachable from concurrent request handlers.
All mutation is append-only, so a single `threading.Lock` guarding the
underlying collection for the duration of one insert or one snapshot read is
sufficient. No I/O happens while the lock is held.

Records are immutable: `append` validates the draft, runs the escalation policy
and only then constructs the `Diagnostic`.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from repolens.config.logging import get_logger
from repolens.constants import DEFAULT_DIAGNOSTIC_ID_PREFIX
from repolens.diagnostic.health import compute_system_health
from repolens.diagnostic.model import Diagnostic
from repolens.diagnostic.policy import escalate
from repolens.diagnostic.session import SessionManager

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from repolens.config.logging import RepolensLogger
    from repolens.diagnostic.filters import DiagnosticFilter
    from repolens.diagnostic.health import SystemHealth
    from repolens.diagnostic.model import DiagnosticDraft, DiagnosticId, SessionId
    from repolens.diagnostic.policy import EscalationOutcome

logger: RepolensLogger = get_logger(__name__)


def utc_now() -> datetime:
    """Return the current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class DiagnosticStore:
    """Keyed, append-only collection of diagnostics.

    Args:
        sessions (SessionManager | None): Source of the session tag applied on append.
            A fresh manager is created when omitted.
        clock (Callable[[], datetime] | None): Timestamp source; defaults to `utc_now`.
        id_factory (Callable[[], str] | None): Identifier source; defaults to
            ``"<id_prefix>-<uuid4 hex>"``.
        id_prefix (str): Prefix for generated identifiers.
    """

    def __init__(
        self,
        *,
        sessions: SessionManager | None = None,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
        id_prefix: str = DEFAULT_DIAGNOSTIC_ID_PREFIX,
    ) -> None:
        self.sessions: SessionManager = sessions or SessionManager()
        self._clock: Callable[[], datetime] = clock or utc_now
        self._id_factory: Callable[[], str] = id_factory or (
            lambda: f"{id_prefix}-{uuid.uuid4().hex}"
        )
        self._lock = threading.Lock()
        self._items: dict[DiagnosticId, Diagnostic] = {}

    def append(
        self, draft: DiagnosticDraft, *, session_id: SessionId | None = None
    ) -> DiagnosticId:
        """Store a new diagnostic and return its identifier.

        Assigns identity, timestamp, session tag and insertion sequence, and
        applies the escalation policy before the record is constructed.

        Args:
            draft: Validated caller input (see `DiagnosticDraft.build`).
            session_id: Session tag to apply; defaults to the active session of `sessions`.

        Returns:
            The identifier assigned to the new diagnostic.

        Raises:
            ValueError: If the identifier factory produced an id already in use.
        """
        outcome: EscalationOutcome = escalate(draft.severity, draft.category)

        with self._lock:
            diagnostic_id: DiagnosticId = self._id_factory()
            if diagnostic_id in self._items:
                raise ValueError(f"Diagnostic id {diagnostic_id!r} is already in use")
            diagnostic = Diagnostic(
                diagnostic_id=diagnostic_id,
                session_id=session_id or self.sessions.current(),
                timestamp=self._clock(),
                sequence=len(self._items),
                principle=draft.principle,
                severity=draft.severity,
                category=draft.category,
                message=draft.message,
                context=draft.context,
                module_id=draft.module_id,
                barton_number=draft.barton_number,
                escalation_level=outcome.escalation_level,
                auto_resolved=outcome.auto_resolved,
                requires_manual_review=outcome.requires_manual_review,
            )
            self._items[diagnostic_id] = diagnostic

        logger.trace(
            "Appended [%s/%s] %s: %r",
            diagnostic.severity.value,
            diagnostic.category.value,
            diagnostic_id,
            diagnostic.message,
        )
        if outcome.requires_manual_review:
            logger.debug(
                "Escalated %s to level %d (manual review)", diagnostic_id, outcome.escalation_level
            )
        elif outcome.auto_resolved:
            logger.debug("Auto-resolved %s", diagnostic_id)
        return diagnostic_id

    def get(self, diagnostic_id: DiagnosticId) -> Diagnostic | None:
        """Return the diagnostic with the given id, or None."""
        with self._lock:
            return self._items.get(diagnostic_id)

    def snapshot(self) -> list[Diagnostic]:
        """Return all diagnostics in insertion order."""
        with self._lock:
            return list(self._items.values())

    def query(self, filters: DiagnosticFilter | None = None) -> list[Diagnostic]:
        """Return matching diagnostics, most recent first.

        Args:
            filters: Conjunctive criteria; None (or an empty filter) selects everything.

        Returns:
            Matching diagnostics sorted by timestamp descending. Diagnostics with
            equal timestamps keep their insertion order.
        """
        items: list[Diagnostic] = self.snapshot()
        if filters is not None and not filters.is_empty:
            items = [d for d in items if filters.matches(d)]
        return sorted(items, key=lambda d: d.timestamp, reverse=True)

    def health(self) -> SystemHealth:
        """Return a health snapshot over the full, unfiltered collection."""
        return compute_system_health(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over a snapshot of the diagnostics in insertion order."""
        return iter(self.snapshot())
