"""In-memory cache with per-key expiry, owned by the component that uses it."""

import asyncio
import time
import weakref
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CacheEntry:
    """Cached value and the monotonic time after which it is stale."""

    value: Any
    expires_at: float


@dataclass
class TtlCache:
    """Key -> value cache where every entry lives for `ttl_seconds`.

    Entries are only invalidated by expiry or an explicit `invalidate`;
    writes to the store never touch it.
    """

    ttl_seconds: float
    clock: Callable[[], float] = time.monotonic
    _entries: dict[str, CacheEntry] = field(default_factory=dict)
    # event loop -> key -> lock; asyncio locks cannot cross loops
    _locks: weakref.WeakKeyDictionary = field(default_factory=weakref.WeakKeyDictionary)

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() >= entry.expires_at:
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, expires_at=self.clock() + self.ttl_seconds)

    def invalidate(self, key: str | None = None) -> None:
        """Drop one key, or everything."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def lock(self, key: str) -> asyncio.Lock:
        """Lock serializing the load of `key` for every user of this cache in the running loop."""
        locks = self._locks.setdefault(asyncio.get_running_loop(), {})
        return locks.setdefault(key, asyncio.Lock())

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
