from __future__ import annotations

import threading
from collections import OrderedDict, deque
from contextlib import contextmanager
from typing import TYPE_CHECKING, Optional, List

from pydantic import TypeAdapter

from . import config
from .models.session import DungeonSession

if TYPE_CHECKING:
    from collections.abc import Iterator

_adapter = TypeAdapter(DungeonSession)


class MemorySessionStore:
    """In-process session store; least-recently-touched sessions are evicted past the cap.

    Sessions are kept as JSON so callers always work on their own copy and
    must ``save`` to publish changes. Wrap a get/mutate/save sequence in
    ``locked(sid)`` so concurrent turns on one session apply one at a time.
    """

    def __init__(self, max_sessions: int = 50, evict_on_get: bool = True) -> None:
        self.max_sessions = max_sessions
        self.evict_on_get = evict_on_get
        self._data: OrderedDict[str, str] = OrderedDict()
        self._lock = threading.Lock()
        self._session_locks: dict[str, threading.Lock] = {}

    @contextmanager
    def locked(self, sid: str) -> Iterator[None]:
        with self._lock:
            lock = self._session_locks.setdefault(sid, threading.Lock())
        with lock:
            yield

    def _forget(self, sid: str) -> None:
        self._session_locks.pop(sid, None)

    def _enforce_cap(self) -> list[str]:
        evicted = []
        while len(self._data) > self.max_sessions:
            sid, _ = self._data.popitem(last=False)
            self._forget(sid)
            evicted.append(sid)
        return evicted

    def save(self, sess: DungeonSession) -> list[str]:
        raw = sess.model_dump_json()
        with self._lock:
            self._data[sess.id] = raw
            self._data.move_to_end(sess.id)
            return self._enforce_cap()

    def get(self, sid: str) -> Optional[DungeonSession]:
        with self._lock:
            raw = self._data.get(sid)
            if raw is None:
                return None
            if self.evict_on_get:
                self._data.move_to_end(sid)  # makes policy LRU
        return _adapter.validate_json(raw)

    def delete(self, sid: str) -> bool:
        with self._lock:
            self._forget(sid)
            return self._data.pop(sid, None) is not None

    def list_all(self) -> List[DungeonSession]:
        # most recently touched first
        with self._lock:
            raws = list(reversed(self._data.values()))
        return [_adapter.validate_json(raw) for raw in raws]


class MemoryLogStore:
    """Per-session ring buffers of JSON log entries."""

    def __init__(self, limit: int = 1000) -> None:
        self.limit = limit
        self._data: dict[str, deque[str]] = {}
        self._lock = threading.Lock()

    def append(self, sid: str, raw: str) -> None:
        with self._lock:
            self._data.setdefault(sid, deque(maxlen=self.limit)).append(raw)

    def list(self, sid: str, limit: int) -> List[str]:
        with self._lock:
            entries = list(self._data.get(sid, ()))
        return entries[-limit:]

    def drop(self, sid: str) -> None:
        with self._lock:
            self._data.pop(sid, None)


sessions = MemorySessionStore(config.MAX_SESSIONS, config.EVICT_ON_GET)
logs = MemoryLogStore(config.LOG_LIMIT)


def save(sess: DungeonSession) -> None:
    for sid in sessions.save(sess):
        logs.drop(sid)


def get(sid: str) -> Optional[DungeonSession]:
    return sessions.get(sid)


def delete(sid: str) -> bool:
    logs.drop(sid)
    return sessions.delete(sid)


def list_all() -> List[DungeonSession]:
    return sessions.list_all()


def locked(sid: str):
    return sessions.locked(sid)
