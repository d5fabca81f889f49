"""Time-bounded memoisation keyed by content identifier."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class _Entry(Generic[T]):
    value: T
    expires_at: float


@dataclass(slots=True)
class _KeyLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    waiters: int = 0


class TTLCache(Generic[T]):
    """Fixed-TTL cache where at most one computation per key runs at a time.

    Failed computations are not cached; the exception propagates to every
    caller that triggered it. Expired entries are dropped on every write, and
    a key's lock only lives while callers are computing or waiting on it.
    """

    def __init__(self, ttl_seconds: float, *, clock: Callable[[], float] = time.monotonic):
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be non-negative.")
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[Hashable, _Entry[T]] = {}
        self._lock = threading.Lock()
        self._key_locks: dict[Hashable, _KeyLock] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: Hashable, default: Any = None) -> T | Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            if entry.expires_at <= self._clock():
                del self._entries[key]
                return default
            return entry.value

    def set(self, key: Hashable, value: T) -> None:
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            self._entries[key] = _Entry(value=value, expires_at=now + self._ttl)

    def invalidate(self, key: Hashable) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        missing = object()
        cached = self.get(key, missing)
        if cached is not missing:
            logger.debug("Cache hit for %r", key)
            return cached
        key_lock = self._acquire(key)
        try:
            with key_lock.lock:
                cached = self.get(key, missing)
                if cached is not missing:
                    return cached
                value = compute()
                self.set(key, value)
                return value
        finally:
            self._release(key, key_lock)

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]

    def _acquire(self, key: Hashable) -> _KeyLock:
        with self._lock:
            key_lock = self._key_locks.get(key)
            if key_lock is None:
                key_lock = self._key_locks[key] = _KeyLock()
            key_lock.waiters += 1
            return key_lock

    def _release(self, key: Hashable, key_lock: _KeyLock) -> None:
        with self._lock:
            key_lock.waiters -= 1
            if key_lock.waiters == 0:
                del self._key_locks[key]


__all__ = ["TTLCache"]
