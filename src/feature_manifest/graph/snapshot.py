"""GraphSnapshot – immutable view of a feature graph at one version."""

from __future__ import annotations

import hashlib
import json
from typing import Generic, Hashable, Iterable, Iterator, Mapping, TypeVar

from feature_manifest.graph.ordering import find_path, topological_order
from feature_manifest.kernel.errors import UnknownFeatureError
from feature_manifest.kernel.types import feature_identity

F = TypeVar("F", bound=Hashable)


class GraphSnapshot(Generic[F]):
    """Read-only feature → dependencies mapping handed to the resolver.

    Dependencies that are not themselves keys are registered with no
    dependencies of their own. The snapshot is *not* validated for cycles
    on construction; :meth:`topological_order` raises :class:`CycleError`.
    """

    __slots__ = ("_edges", "_fingerprint", "_order", "_version")

    def __init__(self, edges: Mapping[F, Iterable[F]], version: int = 0) -> None:
        normalized: dict[F, tuple[F, ...]] = {
            feature: tuple(dict.fromkeys(deps)) for feature, deps in edges.items()
        }
        for deps in list(normalized.values()):
            for dep in deps:
                normalized.setdefault(dep, ())
        self._edges = normalized
        self._version = version
        self._order: tuple[F, ...] | None = None
        self._fingerprint: str | None = None

    @property
    def version(self) -> int:
        return self._version

    @property
    def fingerprint(self) -> str:
        """Digest of the features, their declaration order and their edges.

        Equal graphs share a fingerprint whatever mutation history produced
        them; part of the manifest cache key.
        """
        if self._fingerprint is None:
            canonical = json.dumps(
                [[feature_identity(f), [feature_identity(d) for d in deps]] for f, deps in self._edges.items()],
                separators=(",", ":"),
            )
            self._fingerprint = hashlib.sha256(canonical.encode()).hexdigest()[:32]
        return self._fingerprint

    def __contains__(self, feature: object) -> bool:
        return feature in self._edges

    def __iter__(self) -> Iterator[F]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"GraphSnapshot(features={len(self._edges)}, version={self._version})"

    def features(self) -> tuple[F, ...]:
        """All features in declaration order."""
        return tuple(self._edges)

    def dependencies_of(self, feature: F) -> tuple[F, ...]:
        try:
            return self._edges[feature]
        except KeyError:
            raise UnknownFeatureError(feature) from None

    def dependents_of(self, feature: F) -> tuple[F, ...]:
        """Features that declare *feature* as a direct dependency."""
        if feature not in self._edges:
            raise UnknownFeatureError(feature)
        return tuple(f for f, deps in self._edges.items() if feature in deps)

    def transitive_dependencies_of(self, feature: F) -> tuple[F, ...]:
        """Every feature reachable from *feature*, dependencies first."""
        wanted = set(self._reachable(feature))
        return tuple(f for f in self.topological_order() if f in wanted)

    def depends_on(self, feature: F, other: F) -> bool:
        """True if *feature* requires *other*, directly or transitively."""
        if feature not in self._edges:
            raise UnknownFeatureError(feature)
        return feature != other and find_path(self._edges, feature, other) is not None

    def topological_order(self) -> tuple[F, ...]:
        if self._order is None:
            self._order = topological_order(self._edges)
        return self._order

    def as_dict(self) -> dict[F, list[F]]:
        return {feature: list(deps) for feature, deps in self._edges.items()}

    def _reachable(self, feature: F) -> Iterator[F]:
        seen: set[F] = set()
        stack = list(self.dependencies_of(feature))
        while stack:
            dep = stack.pop()
            if dep in seen:
                continue
            seen.add(dep)
            yield dep
            stack.extend(self._edges[dep])


__all__ = ["GraphSnapshot"]
