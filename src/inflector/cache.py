"""Bounded memoizing cache with first-in-first-out eviction."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable, Generic, Hashable, TypeVar

from .schema import CacheStats

__all__ = ["Cache"]


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")


class Cache(Generic[T, V]):
    """Memoize ``func`` for up to ``limit`` distinct keys.

    Entries are evicted strictly in insertion order once the cache is full.
    Reads never refresh an entry, so this is not an LRU cache: the oldest
    resident key is always the next one to go.

    Parameters
    ----------
    limit:
        Maximum number of resident entries. Must be a positive integer.
    func:
        Compute function invoked on a miss. Whatever it raises propagates to
        the caller and nothing is stored. It may call back into the same cache
        for other keys, as recursive memoization does.
    key:
        Optional callable mapping the argument passed to :meth:`get` to the
        key used for storage. Defaults to the argument itself.
    name:
        Label used in log messages and :class:`CacheStats` snapshots.
    """

    def __init__(
        self,
        limit: int,
        func: Callable[[T], V],
        *,
        key: Callable[[T], Hashable] | None = None,
        name: str | None = None,
    ) -> None:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError("limit must be a positive integer")

        self.limit = limit
        self.func = func
        self.key = key
        self.name = name or getattr(func, "__name__", "cache")
        self.hits = 0
        self.misses = 0
        self._store: OrderedDict[Hashable, V] = OrderedDict()
        self._lock = threading.RLock()

    @property
    def size(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, obj: object) -> bool:
        return self._key_for(obj) in self._store  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Cache(name={self.name!r}, limit={self.limit}, size={self.size})"

    def _key_for(self, obj: T) -> Hashable:
        return obj if self.key is None else self.key(obj)

    def get(self, obj: T) -> V:
        """Return the cached value for ``obj``, computing it on a miss."""

        key = self._key_for(obj)
        with self._lock:
            try:
                value = self._store[key]
            except KeyError:
                pass
            else:
                self.hits += 1
                return value

            self.misses += 1
            value = self.func(obj)
            self._insert(key, value)
            return value

    def set(self, obj: T, value: V) -> V:
        """Store ``value`` for ``obj`` without calling the compute function."""

        key = self._key_for(obj)
        with self._lock:
            self._insert(key, value)
        return value

    def purge(self) -> None:
        """Drop every entry and reset the hit and miss counters."""

        with self._lock:
            dropped = len(self._store)
            self._store.clear()
            self.hits = 0
            self.misses = 0
        LOGGER.debug("purged %d entries from cache %s", dropped, self.name)

    def stats(self) -> CacheStats:
        """Return a snapshot of the cache counters."""

        with self._lock:
            return CacheStats(
                name=self.name,
                limit=self.limit,
                size=len(self._store),
                hits=self.hits,
                misses=self.misses,
            )

    def _insert(self, key: Hashable, value: V) -> None:
        # Overwriting a resident key keeps its place in the eviction order.
        if key in self._store:
            self._store[key] = value
            return

        if len(self._store) >= self.limit:
            evicted, _ = self._store.popitem(last=False)
            LOGGER.debug("cache %s full (%d), evicted %r", self.name, self.limit, evicted)

        self._store[key] = value
