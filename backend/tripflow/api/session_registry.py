"""
In-process registry of live ImportSessions for the HTTP API.

Sessions expire IMPORT_SESSION_TTL_SEC after their last access and the
registry holds at most IMPORT_SESSION_MAX_ITEMS (oldest dropped first).
A session that is committing is never pruned.
"""

from __future__ import annotations

import threading
import time

from tripflow.core.config import settings
from tripflow.core.constants import ImportSessionState
from tripflow.importer.session import ImportSession


class SessionRegistry:
    def __init__(self, *, ttl_sec: float | None = None, max_items: int | None = None) -> None:
        self.ttl_sec = float(ttl_sec if ttl_sec is not None else settings.IMPORT_SESSION_TTL_SEC)
        self.max_items = int(max_items if max_items is not None else settings.IMPORT_SESSION_MAX_ITEMS)
        self._lock = threading.Lock()
        self._sessions: dict[str, tuple[float, ImportSession]] = {}

    def _prune(self, now: float) -> None:
        expired = [
            key for key, (touched, session) in self._sessions.items()
            if (now - touched) >= self.ttl_sec and session.state != ImportSessionState.COMMITTING
        ]
        for key in expired:
            self._sessions.pop(key, None)
        while len(self._sessions) > self.max_items:
            candidates = [
                key for key, (_, session) in self._sessions.items()
                if session.state != ImportSessionState.COMMITTING
            ]
            if not candidates:
                break
            oldest = min(candidates, key=lambda key: self._sessions[key][0])
            self._sessions.pop(oldest, None)

    def add(self, session: ImportSession) -> ImportSession:
        now = time.monotonic()
        with self._lock:
            self._sessions[session.session_id] = (now, session)
            self._prune(now)
        return session

    def get(self, session_id: str) -> ImportSession | None:
        now = time.monotonic()
        with self._lock:
            self._prune(now)
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            _, session = entry
            self._sessions[session_id] = (now, session)
            return session

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


session_registry = SessionRegistry()
