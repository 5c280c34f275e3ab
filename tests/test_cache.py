from __future__ import annotations

import threading
import time

import pytest

from inflector.cache import Cache
from inflector.schema import CacheStats


class CountingCompute:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def __call__(self, key: str) -> str:
        self.calls.append(key)
        return key.upper()


@pytest.fixture()
def compute() -> CountingCompute:
    return CountingCompute()


def test_get_computes_once_per_key(compute: CountingCompute):
    cache = Cache(10, compute)
    assert cache.get("alpha") == "ALPHA"
    assert cache.get("alpha") == "ALPHA"
    assert compute.calls == ["alpha"]
    assert cache.hits == 1
    assert cache.misses == 1
    assert cache.size == 1


def test_empty_string_is_a_valid_key(compute: CountingCompute):
    cache = Cache(2, compute)
    assert cache.get("") == ""
    assert "" in cache


def test_inserting_past_limit_evicts_first_inserted(compute: CountingCompute):
    cache = Cache(3, compute)
    for key in ("a", "b", "c", "d"):
        cache.get(key)

    assert "a" not in cache
    assert all(key in cache for key in ("b", "c", "d"))
    assert len(cache) == 3

    cache.get("a")
    assert compute.calls == ["a", "b", "c", "d", "a"]
    assert "b" not in cache


def test_reads_do_not_refresh_recency(compute: CountingCompute):
    cache = Cache(2, compute)
    cache.get("first")
    cache.get("second")
    cache.get("first")
    cache.get("third")

    assert "first" not in cache
    assert "second" in cache
    assert "third" in cache


def test_failed_compute_is_not_stored():
    def explode(key: str) -> str:
        if key == "bad":
            raise RuntimeError("boom")
        return key

    cache = Cache(2, explode)
    cache.get("one")
    cache.get("two")

    with pytest.raises(RuntimeError):
        cache.get("bad")

    assert "bad" not in cache
    assert "one" in cache and "two" in cache
    assert cache.size == 2
    assert cache.misses == 3

    cache.get("three")
    assert "one" not in cache
    assert "two" in cache and "three" in cache


def test_set_overwrite_keeps_insertion_position(compute: CountingCompute):
    cache = Cache(2, compute)
    cache.set("a", "first")
    cache.set("b", "second")
    cache.set("a", "replaced")
    cache.set("c", "third")

    assert "a" not in cache
    assert cache.get("b") == "second"
    assert compute.calls == []


def test_key_function_controls_storage(compute: CountingCompute):
    cache = Cache(5, compute, key=str.lower)
    assert cache.get("Alpha") == "ALPHA"
    assert cache.get("ALPHA") == "ALPHA"
    assert compute.calls == ["Alpha"]


def test_purge_resets_entries_and_counters(compute: CountingCompute):
    cache = Cache(5, compute)
    cache.get("a")
    cache.get("a")
    cache.purge()

    assert cache.size == 0
    assert cache.hits == 0
    assert cache.misses == 0


def test_stats_snapshot(compute: CountingCompute):
    cache = Cache(4, compute, name="upper")
    cache.get("a")
    cache.get("a")
    cache.get("b")

    stats = cache.stats()
    assert isinstance(stats, CacheStats)
    assert stats.name == "upper"
    assert stats.limit == 4
    assert stats.size == 2
    assert stats.hits == 1
    assert stats.misses == 2


@pytest.mark.parametrize("limit", [0, -1, 1.5, True])
def test_rejects_invalid_limit(limit):
    with pytest.raises(ValueError):
        Cache(limit, str)


def _run_workers(worker, count: int) -> None:
    threads = [threading.Thread(target=worker, args=(index,)) for index in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
    assert not any(thread.is_alive() for thread in threads)


def test_concurrent_callers_compute_once():
    started = threading.Barrier(8)
    calls: list[str] = []

    def slow(key: str) -> str:
        calls.append(key)
        time.sleep(0.05)
        return key * 2

    cache = Cache(10, slow)

    def worker(index: int) -> None:
        started.wait()
        for _ in range(10):
            assert cache.get("shared") == "sharedshared"

    _run_workers(worker, 8)

    assert calls == ["shared"]
    assert cache.misses == 1
    assert cache.hits == 79


def test_concurrent_distinct_keys_keep_fifo_bookkeeping():
    started = threading.Barrier(8)
    calls: list[str] = []

    def slow(key: str) -> str:
        calls.append(key)
        time.sleep(0.001)
        return key.upper()

    cache = Cache(5, slow)

    def worker(index: int) -> None:
        started.wait()
        for item in range(25):
            cache.get(f"worker{index}-{item}")

    _run_workers(worker, 8)

    assert len(calls) == 200
    assert len(set(calls)) == 200
    assert cache.misses == 200
    assert len(cache) == cache.limit
    assert [key for key in calls if key in cache] == calls[-5:]


def test_compute_may_reenter_its_own_cache():
    calls: list[int] = []

    def fib(n: int) -> int:
        calls.append(n)
        if n < 2:
            return n
        return cache.get(n - 1) + cache.get(n - 2)

    cache: Cache[int, int] = Cache(10, fib)
    results: list[int] = []

    thread = threading.Thread(target=lambda: results.append(cache.get(5)), daemon=True)
    thread.start()
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert results == [5]
    assert sorted(calls) == [0, 1, 2, 3, 4, 5]
    assert cache.get(3) == 2
    assert len(calls) == 6
