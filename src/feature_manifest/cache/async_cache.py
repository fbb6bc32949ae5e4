"""Manifest cache – asyncio variant with the same single-flight contract.

If the task running a computation is cancelled, the computation is dropped
and one of the tasks waiting on that key starts its own; waiters never see
another task's cancellation.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

from feature_manifest.cache.store import CacheStats, EntryStore
from feature_manifest.observability.logging import get_logger

__all__ = ["AsyncManifestCache"]

T = TypeVar("T")

logger = get_logger(__name__)

_ABANDONED = object()


class _Pending:
    __slots__ = ("done", "error", "value")

    def __init__(self) -> None:
        self.done = asyncio.Event()
        self.value: object = None
        self.error: BaseException | None = None

    async def wait(self) -> object:
        await self.done.wait()
        if self.error is not None:
            raise self.error
        return self.value


class AsyncManifestCache(Generic[T]):
    """Coroutine-safe twin of :class:`ManifestCache` for a single event loop."""

    def __init__(self, capacity: int | None = None) -> None:
        self._store = EntryStore(capacity)
        self._inflight: dict[str, _Pending] = {}
        self._generation = 0
        self.stats = CacheStats()

    @property
    def capacity(self) -> int | None:
        return self._store.capacity

    async def get_or_compute(self, key: str, compute_fn: Callable[[], Awaitable[T]]) -> T:
        while True:
            found, value = self._store.lookup(key)
            if found:
                self.stats.hits += 1
                return value  # type: ignore[no-any-return]

            pending = self._inflight.get(key)
            if pending is None:
                return await self._compute(key, compute_fn)

            self.stats.coalesced += 1
            outcome = await pending.wait()
            if outcome is not _ABANDONED:
                return outcome  # type: ignore[return-value]

    async def _compute(self, key: str, compute_fn: Callable[[], Awaitable[T]]) -> T:
        pending = self._inflight[key] = _Pending()
        self.stats.misses += 1
        generation = self._generation
        try:
            value = await compute_fn()
        except asyncio.CancelledError:
            self._inflight.pop(key, None)
            pending.value = _ABANDONED
            pending.done.set()
            logger.debug("manifest_cache_compute_cancelled", key=key)
            raise
        except BaseException as exc:
            self._inflight.pop(key, None)
            self.stats.failures += 1
            pending.error = exc
            pending.done.set()
            logger.warning("manifest_cache_compute_failed", key=key, error=repr(exc))
            raise

        self._inflight.pop(key, None)
        self.stats.computations += 1
        if generation == self._generation:
            self.stats.evictions += self._store.put(key, value)
        pending.value = value
        pending.done.set()
        return value

    def __getitem__(self, key: str) -> T:
        found, value = self._store.lookup(key)
        if not found:
            raise KeyError(key)
        return value  # type: ignore[no-any-return]

    def invalidate(self, key: str) -> bool:
        return self._store.discard(key)

    def clear(self) -> None:
        self._store.clear()
        self._generation += 1

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)
