from __future__ import annotations

import threading

import pytest

from block_bridge.cache import TTLCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_entries_expire_after_ttl() -> None:
    clock = FakeClock()
    cache: TTLCache[str] = TTLCache(10, clock=clock)
    cache.set("a", "value")

    clock.now = 9.9
    assert cache.get("a") == "value"

    clock.now = 10.0
    assert cache.get("a") is None


def test_get_or_compute_memoises_until_expiry() -> None:
    clock = FakeClock()
    cache: TTLCache[int] = TTLCache(5, clock=clock)
    calls: list[int] = []

    def compute() -> int:
        calls.append(1)
        return len(calls)

    assert cache.get_or_compute("k", compute) == 1
    assert cache.get_or_compute("k", compute) == 1
    clock.now = 6
    assert cache.get_or_compute("k", compute) == 2
    assert len(calls) == 2


def test_failed_computation_is_not_cached() -> None:
    cache: TTLCache[str] = TTLCache(60)

    def boom() -> str:
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        cache.get_or_compute("k", boom)

    assert cache.get_or_compute("k", lambda: "ok") == "ok"


def test_invalidate_and_clear() -> None:
    cache: TTLCache[str] = TTLCache(60)
    cache.set("a", "1")
    cache.set("b", "2")

    cache.invalidate("a")
    assert cache.get("a") is None
    assert cache.get("b") == "2"

    cache.clear()
    assert cache.get("b") is None


def test_concurrent_callers_share_one_computation() -> None:
    cache: TTLCache[str] = TTLCache(60)
    started = threading.Event()
    release = threading.Event()
    calls: list[int] = []

    def slow() -> str:
        calls.append(1)
        started.set()
        release.wait(timeout=5)
        return "done"

    results: list[str] = []
    first = threading.Thread(target=lambda: results.append(cache.get_or_compute("k", slow)))
    first.start()
    assert started.wait(timeout=5)
    second = threading.Thread(target=lambda: results.append(cache.get_or_compute("k", slow)))
    second.start()
    release.set()
    first.join(timeout=5)
    second.join(timeout=5)

    assert results == ["done", "done"]
    assert len(calls) == 1


def test_negative_ttl_is_rejected() -> None:
    with pytest.raises(ValueError):
        TTLCache(-1)


def test_writes_evict_expired_entries() -> None:
    clock = FakeClock()
    cache: TTLCache[str] = TTLCache(10, clock=clock)
    for key in ("a", "b", "c"):
        cache.set(key, key)

    clock.now = 11
    cache.set("d", "d")

    assert len(cache) == 1
    assert cache.get("d") == "d"


def test_key_locks_are_released_after_computation() -> None:
    cache: TTLCache[str] = TTLCache(60)

    def boom() -> str:
        raise RuntimeError("down")

    for key in range(100):
        cache.get_or_compute(key, lambda: "value")
    with pytest.raises(RuntimeError):
        cache.get_or_compute("failing", boom)

    assert cache._key_locks == {}
