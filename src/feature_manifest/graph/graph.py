"""FeatureGraph – mutable, always-acyclic feature dependency graph."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, Mapping, TypeVar

from feature_manifest.graph.ordering import find_path, topological_order
from feature_manifest.graph.snapshot import GraphSnapshot
from feature_manifest.kernel.errors import CycleError, UnknownFeatureError
from feature_manifest.observability.logging import get_logger

F = TypeVar("F", bound=Hashable)

logger = get_logger(__name__)


class FeatureGraph(Generic[F]):
    """Declared dependencies per feature.

    The graph can never hold a cycle: :meth:`add_dependency` checks the new
    edge first and raises :class:`CycleError` without touching the graph.
    Mutation is not thread-safe; callers synchronize reloads themselves and
    hand :meth:`snapshot` results to concurrent readers.

    Example::

        graph = FeatureGraph.from_mapping({
            Feature.CHECKOUT: [],
            Feature.ONE_CLICK: [Feature.CHECKOUT],
        })
        graph.topological_order()   # (CHECKOUT, ONE_CLICK)
    """

    def __init__(self) -> None:
        self._edges: dict[F, list[F]] = {}
        self._version = 0
        self._snapshot: GraphSnapshot[F] | None = None

    @classmethod
    def from_mapping(cls, definition: Mapping[F, Iterable[F]]) -> "FeatureGraph[F]":
        """Build a graph from ``{feature: [dependencies, ...]}``.

        Features are declared in key order. Raises :class:`CycleError` at
        load time if the definition is cyclic.
        """
        graph: FeatureGraph[F] = cls()
        for feature in definition:
            graph.add_feature(feature)
        for feature, deps in definition.items():
            for dep in deps:
                graph.add_dependency(feature, dep)
        return graph

    @property
    def version(self) -> int:
        """Incremented on every mutation."""
        return self._version

    @property
    def fingerprint(self) -> str:
        """Content digest of the current graph, see :attr:`GraphSnapshot.fingerprint`."""
        return self.snapshot().fingerprint

    def add_feature(self, feature: F) -> None:
        """Register *feature* with no dependencies (no-op if already known)."""
        if feature in self._edges:
            return
        self._edges[feature] = []
        self._touch()

    def add_dependency(self, feature: F, depends_on: F) -> None:
        """Declare that *feature* requires *depends_on*.

        Unknown features are registered on the fly, *feature* first.
        Duplicate edges are ignored.
        """
        if depends_on in self._edges.get(feature, ()):
            return
        path = find_path(self._edges, depends_on, feature)
        if path is not None:
            logger.error("dependency_cycle_rejected", feature=str(feature), depends_on=str(depends_on))
            raise CycleError([feature, *path])
        self._edges.setdefault(feature, [])
        self._edges.setdefault(depends_on, [])
        self._edges[feature].append(depends_on)
        self._touch()

    def dependencies_of(self, feature: F) -> tuple[F, ...]:
        try:
            return tuple(self._edges[feature])
        except KeyError:
            raise UnknownFeatureError(feature) from None

    def dependents_of(self, feature: F) -> tuple[F, ...]:
        return self.snapshot().dependents_of(feature)

    def transitive_dependencies_of(self, feature: F) -> tuple[F, ...]:
        return self.snapshot().transitive_dependencies_of(feature)

    def topological_order(self) -> tuple[F, ...]:
        return topological_order(self._edges)

    def features(self) -> tuple[F, ...]:
        return tuple(self._edges)

    def snapshot(self) -> GraphSnapshot[F]:
        """Immutable copy of the current graph, reused until the next mutation."""
        if self._snapshot is None:
            self._snapshot = GraphSnapshot(self._edges, version=self._version)
        return self._snapshot

    def __contains__(self, feature: object) -> bool:
        return feature in self._edges

    def __iter__(self) -> Iterator[F]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"FeatureGraph(features={len(self._edges)}, version={self._version})"

    def _touch(self) -> None:
        self._version += 1
        self._snapshot = None


__all__ = ["FeatureGraph"]
