"""Manifest cache – thread-safe single-flight memoization.

For a given key only one thread runs ``compute_fn``; every other thread
asking for the same key while it runs blocks and receives the same object
(or the same exception). Failed computations are not cached.
"""
from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

from feature_manifest.cache.store import CacheStats, EntryStore
from feature_manifest.observability.logging import get_logger

__all__ = ["ManifestCache"]

T = TypeVar("T")

logger = get_logger(__name__)


class _Pending:
    __slots__ = ("done", "error", "value")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.value: object = None
        self.error: BaseException | None = None

    def wait(self) -> object:
        self.done.wait()
        if self.error is not None:
            raise self.error
        return self.value


class ManifestCache(Generic[T]):
    """Memoize resolved manifests by cache key across threads.

    Parameters
    ----------
    capacity:
        ``None`` (default) keeps every manifest until :meth:`clear`;
        a positive integer turns the cache into an LRU of that size.
    """

    def __init__(self, capacity: int | None = None) -> None:
        self._store = EntryStore(capacity)
        self._inflight: dict[str, _Pending] = {}
        self._lock = threading.Lock()
        self._generation = 0
        self.stats = CacheStats()

    @property
    def capacity(self) -> int | None:
        return self._store.capacity

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        with self._lock:
            found, value = self._store.lookup(key)
            if found:
                self.stats.hits += 1
                return value  # type: ignore[no-any-return]
            pending = self._inflight.get(key)
            owner = pending is None
            if pending is None:
                pending = self._inflight[key] = _Pending()
                self.stats.misses += 1
            else:
                self.stats.coalesced += 1
            generation = self._generation

        if not owner:
            return pending.wait()  # type: ignore[return-value]

        try:
            value = compute_fn()
        except BaseException as exc:
            with self._lock:
                self._inflight.pop(key, None)
                self.stats.failures += 1
            pending.error = exc
            pending.done.set()
            logger.warning("manifest_cache_compute_failed", key=key, error=repr(exc))
            raise

        with self._lock:
            self._inflight.pop(key, None)
            self.stats.computations += 1
            if generation == self._generation:
                self.stats.evictions += self._store.put(key, value)
        pending.value = value
        pending.done.set()
        logger.debug("manifest_cache_filled", key=key, size=len(self._store))
        return value

    def __getitem__(self, key: str) -> T:
        """Cached value for *key*; ``KeyError`` if absent (a stored ``None`` is a hit)."""
        with self._lock:
            found, value = self._store.lookup(key)
        if not found:
            raise KeyError(key)
        return value  # type: ignore[no-any-return]

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._store.discard(key)

    def clear(self) -> None:
        """Drop every entry; computations already running are not stored."""
        with self._lock:
            self._store.clear()
            self._generation += 1
        logger.info("manifest_cache_cleared")

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
