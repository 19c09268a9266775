# topmark:header:start
#
#   project      : RepoLens
#   file         : test_session_manager.py
#   file_relpath : tests/diagnostic/test_session_manager.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Tests for session id generation and rotation."""

from __future__ import annotations

from repolens.diagnostic.model import DiagnosticDraft
from repolens.diagnostic.session import SessionManager
from repolens.diagnostic.store import DiagnosticStore


def test_session_ids_use_prefix_and_clock() -> None:
    """Session ids are `<prefix>-<clock ns>`."""
    sessions = SessionManager(prefix="run", clock_ns=lambda: 42)
    assert sessions.current() == "run-42"


def test_rotation_yields_distinct_ids_within_one_tick() -> None:
    """Rotations inside one clock tick still produce strictly increasing ids."""
    sessions = SessionManager(clock_ns=lambda: 7)
    seen = [sessions.current(), sessions.rotate(), sessions.rotate()]
    assert seen == ["session-7", "session-8", "session-9"]
    assert sessions.current() == "session-9"


def test_rotation_does_not_retag_existing_diagnostics() -> None:
    """Diagnostics keep the session that was active when they were created."""
    sessions = SessionManager(clock_ns=lambda: 1)
    store = DiagnosticStore(sessions=sessions)
    draft = DiagnosticDraft.build(
        principle="diagnostic_tracking", severity="info", category="system", message="m"
    )
    before = store.append(draft)
    sessions.rotate()
    after = store.append(draft)

    first, second = store.get(before), store.get(after)
    assert first is not None and second is not None
    assert first.session_id == "session-1"
    assert second.session_id == "session-2"
