"""Toggles – SettingsStore port and in-memory implementation."""
from __future__ import annotations

import threading
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class SettingsStore(Protocol):
    """Port: supplies the raw per-feature settings for one resolution pass."""

    def snapshot(self) -> Mapping[Any, Mapping[str, Any]]: ...


class InMemorySettingsStore:
    """Thread-safe dict-backed store – for tests and static configuration."""

    def __init__(self, settings: Mapping[Any, Mapping[str, Any]] | None = None) -> None:
        self._settings: dict[Any, dict[str, Any]] = {
            feature: dict(values) for feature, values in (settings or {}).items()
        }
        self._lock = threading.Lock()

    def set(self, feature: Any, key: str, value: Any) -> None:
        with self._lock:
            self._settings.setdefault(feature, {})[key] = value

    def replace(self, feature: Any, values: Mapping[str, Any]) -> None:
        with self._lock:
            self._settings[feature] = dict(values)

    def remove(self, feature: Any) -> None:
        with self._lock:
            self._settings.pop(feature, None)

    def snapshot(self) -> dict[Any, dict[str, Any]]:
        with self._lock:
            return {feature: dict(values) for feature, values in self._settings.items()}


__all__ = ["InMemorySettingsStore", "SettingsStore"]
