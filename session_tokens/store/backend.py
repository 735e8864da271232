"""Session token storage backends."""

from __future__ import annotations

import heapq
import time
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class SessionStore(Protocol):
    """Key-value store with per-entry expiry.

    Keys are session ids, values are hex tokens.
    """

    async def put(self, key: str, value: str, ttl: int) -> None:
        """Store ``value`` under ``key``, expiring after ``ttl`` seconds."""
        ...

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if not found or expired."""
        ...


class InMemoryStore:
    """In-memory store for development/testing.

    Not suitable for production: entries are lost on restart and not
    shared across processes. Expired entries are dropped on read and swept
    on every write.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._store: dict[str, tuple[str, float]] = {}
        self._expiry: list[tuple[float, str]] = []
        self._clock = clock

    async def put(self, key: str, value: str, ttl: int) -> None:
        now = self._clock()
        self._sweep(now)
        expires_at = now + ttl
        self._store[key] = (value, expires_at)
        heapq.heappush(self._expiry, (expires_at, key))

    async def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._store[key]
            return None
        return value

    def _sweep(self, now: float) -> None:
        while self._expiry and self._expiry[0][0] <= now:
            expires_at, key = heapq.heappop(self._expiry)
            entry = self._store.get(key)
            # A re-put key has a newer heap entry; only drop the matching one.
            if entry is not None and entry[1] == expires_at:
                del self._store[key]

    def __len__(self) -> int:
        return len(self._store)
