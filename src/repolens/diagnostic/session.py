# topmark:header:start
#
#   project      : RepoLens
#   file         : session.py
#   file_relpath : src/repolens/diagnostic/session.py
#   license      : MIT
#   copyright    : (c) 2025 RepoLens contributors
#
# topmark:header:end

"""Logging session identifiers.

A session id tags every diagnostic created while it is active. Rotating the
session segments the log without deleting history: diagnostics created before
the rotation keep their original tag.
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING

from repolens.config.logging import get_logger
from repolens.constants import DEFAULT_SESSION_PREFIX

if TYPE_CHECKING:
    from collections.abc import Callable

    from repolens.config.logging import RepolensLogger
    from repolens.diagnostic.model import SessionId

logger: RepolensLogger = get_logger(__name__)


class SessionManager:
    """Holds the active session id and rotates it on demand.

    Session ids are ``<prefix>-<n>`` where ``n`` derives from the wall clock in
    nanoseconds. Consecutive ids are strictly increasing within a process, so two
    rotations inside one clock tick still yield distinct ids.

    Args:
        prefix (str): Id prefix. Defaults to ``"session"``.
        clock_ns (Callable[[], int] | None): Nanosecond clock; defaults to `time.time_ns`.
    """

    def __init__(
        self,
        *,
        prefix: str = DEFAULT_SESSION_PREFIX,
        clock_ns: Callable[[], int] | None = None,
    ) -> None:
        self._prefix: str = prefix
        self._clock_ns: Callable[[], int] = clock_ns or time.time_ns
        self._lock = threading.Lock()
        self._last_tick: int = -1
        self._current: SessionId = self._next_id()

    def _next_id(self) -> SessionId:
        # Caller holds the lock (or is __init__).
        tick: int = max(self._clock_ns(), self._last_tick + 1)
        self._last_tick = tick
        return f"{self._prefix}-{tick}"

    def current(self) -> SessionId:
        """Return the active session id."""
        return self._current

    def rotate(self) -> SessionId:
        """Replace the active session id with a fresh one and return it."""
        with self._lock:
            previous: SessionId = self._current
            self._current = self._next_id()
            new: SessionId = self._current
        logger.debug("Rotated session %s -> %s", previous, new)
        return new
