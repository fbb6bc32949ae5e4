"""Resolver – Manifest: the resolved descriptors of one evaluation context."""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

from feature_manifest.kernel.errors import UnknownFeatureError
from feature_manifest.kernel.types import FeatureSettings
from feature_manifest.resolver.descriptor import FeatureDescriptor


class Manifest(Mapping[Any, FeatureDescriptor]):
    """Immutable feature → :class:`FeatureDescriptor` mapping.

    Iterates in resolution order (dependencies first). The mapping protocol
    raises ``KeyError`` for unknown features; the lookup helpers
    (:meth:`descriptor`, :meth:`is_enabled`, :meth:`settings_for`) raise
    :class:`UnknownFeatureError` instead.
    """

    __slots__ = ("_descriptors",)

    def __init__(self, descriptors: Iterable[FeatureDescriptor] = ()) -> None:
        self._descriptors: dict[Any, FeatureDescriptor] = {d.feature: d for d in descriptors}

    def __getitem__(self, feature: Any) -> FeatureDescriptor:
        return self._descriptors[feature]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        flags = ", ".join(f"{f}={d.is_available}" for f, d in self._descriptors.items())
        return f"Manifest({flags})"

    def descriptor(self, feature: Any) -> FeatureDescriptor:
        try:
            return self._descriptors[feature]
        except KeyError:
            raise UnknownFeatureError(feature) from None

    def is_enabled(self, feature: Any) -> bool:
        return self.descriptor(feature).is_available

    def settings_for(self, feature: Any) -> FeatureSettings:
        return self.descriptor(feature).settings

    def available(self) -> tuple[Any, ...]:
        return tuple(f for f, d in self._descriptors.items() if d.is_available)

    def unavailable(self) -> tuple[Any, ...]:
        return tuple(f for f, d in self._descriptors.items() if not d.is_available)

    def as_flags(self) -> dict[Any, bool]:
        return {f: d.is_available for f, d in self._descriptors.items()}


EMPTY_MANIFEST = Manifest()

__all__ = ["EMPTY_MANIFEST", "Manifest"]
