"""Manifest cache – bounded/unbounded entry store and counters."""
from __future__ import annotations

import dataclasses
from collections import OrderedDict
from typing import Any

from feature_manifest.config.validation import ConfigError


@dataclasses.dataclass
class CacheStats:
    """Counters exposed by the manifest caches."""

    hits: int = 0
    misses: int = 0
    coalesced: int = 0
    computations: int = 0
    failures: int = 0
    evictions: int = 0


class EntryStore:
    """Insertion store with optional LRU eviction. Not synchronized.

    ``capacity=None`` keeps every entry until :meth:`clear` (i.e. until the
    next configuration reload); an integer capacity evicts the least
    recently used entry once exceeded.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 1:
            raise ConfigError(
                f"Cache capacity must be a positive integer or None, got {capacity!r}",
                detail={"capacity": capacity},
            )
        self.capacity = capacity
        self._entries: OrderedDict[str, Any] = OrderedDict()

    def lookup(self, key: str) -> tuple[bool, Any]:
        if key not in self._entries:
            return False, None
        self._entries.move_to_end(key)
        return True, self._entries[key]

    def put(self, key: str, value: Any) -> int:
        """Store *value*; return how many entries were evicted."""
        self._entries[key] = value
        self._entries.move_to_end(key)
        evicted = 0
        if self.capacity is not None:
            while len(self._entries) > self.capacity:
                self._entries.popitem(last=False)
                evicted += 1
        return evicted

    def discard(self, key: str) -> bool:
        if key not in self._entries:
            return False
        del self._entries[key]
        return True

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["CacheStats", "EntryStore"]
