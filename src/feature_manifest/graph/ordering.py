"""Graph algorithms shared by :class:`FeatureGraph` and :class:`GraphSnapshot`.

``edges`` always maps a feature to its declared dependencies; dict insertion
order is the declaration order used to break ties.
"""

from __future__ import annotations

import heapq
from typing import Hashable, Mapping, Sequence, TypeVar

from feature_manifest.kernel.errors import CycleError

F = TypeVar("F", bound=Hashable)


def find_path(edges: Mapping[F, Sequence[F]], start: F, target: F) -> list[F] | None:
    """Depth-first search along dependency edges from *start* to *target*.

    Returns the path ``[start, ..., target]`` or ``None`` when unreachable.
    """
    if start == target:
        return [start]
    parents: dict[F, F] = {}
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for dep in edges.get(node, ()):
            if dep in seen:
                continue
            parents[dep] = node
            if dep == target:
                path = [dep]
                while path[-1] != start:
                    path.append(parents[path[-1]])
                path.reverse()
                return path
            seen.add(dep)
            stack.append(dep)
    return None


def topological_order(edges: Mapping[F, Sequence[F]]) -> tuple[F, ...]:
    """Order features so that each one follows all of its dependencies.

    Kahn's algorithm; among features that are ready at the same time the one
    declared first wins. Raises :class:`CycleError` if the edges are cyclic.
    """
    index = {feature: i for i, feature in enumerate(edges)}
    pending = {feature: len(set(deps)) for feature, deps in edges.items()}
    dependents: dict[F, list[F]] = {feature: [] for feature in edges}
    for feature, deps in edges.items():
        for dep in dict.fromkeys(deps):
            dependents[dep].append(feature)

    ready = [index[f] for f, count in pending.items() if count == 0]
    heapq.heapify(ready)
    features = list(edges)
    order: list[F] = []
    while ready:
        feature = features[heapq.heappop(ready)]
        order.append(feature)
        for dependent in dependents[feature]:
            pending[dependent] -= 1
            if pending[dependent] == 0:
                heapq.heappush(ready, index[dependent])

    if len(order) != len(features):
        raise CycleError(_cycle_among(edges, [f for f in features if pending[f] > 0]))
    return tuple(order)


def _cycle_among(edges: Mapping[F, Sequence[F]], stuck: list[F]) -> list[F]:
    for feature in stuck:
        for dep in edges.get(feature, ()):
            path = find_path(edges, dep, feature)
            if path is not None:
                return [feature, *path]
    return stuck


__all__ = ["find_path", "topological_order"]
