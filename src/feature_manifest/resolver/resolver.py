"""Resolver – ManifestResolver: one topological pass over the feature graph.

Each feature's own rule is evaluated, then AND-ed with the already resolved
availability of its declared dependencies, so a feature can never be on
while something it requires is off. Resolution is all-or-nothing: any error
aborts the pass and no partial manifest escapes.
"""
from __future__ import annotations

import time
from typing import Any, Mapping

from feature_manifest.graph import FeatureGraph, GraphSnapshot
from feature_manifest.kernel.errors import BaseError, MissingRuleError, OrderingInvariantError
from feature_manifest.kernel.types import EMPTY_SETTINGS, FeatureSettings
from feature_manifest.observability.logging import get_logger
from feature_manifest.resolver.descriptor import FeatureDescriptor
from feature_manifest.resolver.manifest import Manifest
from feature_manifest.resolver.policy import MissingRulePolicy
from feature_manifest.rules import AlwaysUnavailable, AvailabilityRule, RuleSet

logger = get_logger(__name__)

_FALLBACK_RULE = AlwaysUnavailable()

type GraphLike = FeatureGraph[Any] | GraphSnapshot[Any] | Mapping[Any, Any]
type RawSettings = Mapping[Any, Mapping[str, Any] | None]


class ManifestResolver:
    """Turn a feature graph, raw settings and rules into a :class:`Manifest`.

    Parameters
    ----------
    missing_rule_policy:
        Applied to features with neither a rule of their own nor a
        ``RuleSet.default``. Defaults to :attr:`MissingRulePolicy.RAISE`.
    """

    def __init__(self, missing_rule_policy: MissingRulePolicy | str = MissingRulePolicy.RAISE) -> None:
        self.missing_rule_policy = MissingRulePolicy(missing_rule_policy)

    def resolve(
        self,
        graph: GraphLike,
        settings: RawSettings | None,
        rules: RuleSet | Mapping[Any, AvailabilityRule],
    ) -> Manifest:
        """Resolve every feature of *graph*.

        Raises
        ------
        CycleError
            The graph (re-validated here) contains a cycle.
        MissingRuleError
            A feature has no rule and the policy is ``RAISE``.
        InvalidSettingError
            A raw setting value is not a supported variant.
        OrderingInvariantError
            A dependency was not resolved before its dependent (a bug).
        """
        snapshot = _snapshot_of(graph)
        rule_set = RuleSet.coerce(rules)
        started = time.perf_counter()
        try:
            manifest = self._resolve(snapshot, settings or {}, rule_set)
        except BaseError as exc:
            logger.error(
                "manifest_resolution_failed",
                code=exc.code,
                error=exc.message,
                graph_version=snapshot.version,
                rules_version=rule_set.version,
            )
            raise
        logger.info(
            "manifest_resolved",
            features=len(manifest),
            available=len(manifest.available()),
            graph_version=snapshot.version,
            rules_version=rule_set.version,
            duration_ms=round((time.perf_counter() - started) * 1000, 3),
        )
        return manifest

    def _resolve(self, snapshot: GraphSnapshot[Any], settings: RawSettings, rules: RuleSet) -> Manifest:
        resolved: dict[Any, FeatureDescriptor] = {}
        for feature in snapshot.topological_order():
            dependencies = snapshot.dependencies_of(feature)
            blocked_by: list[Any] = []
            for dependency in dependencies:
                upstream = resolved.get(dependency)
                if upstream is None:
                    raise OrderingInvariantError(feature, dependency)
                if not upstream.is_available:
                    blocked_by.append(dependency)

            feature_settings = _settings_of(settings, feature)
            rule_result = self._rule_for(feature, rules).evaluate(feature, feature_settings)
            descriptor = FeatureDescriptor(
                feature=feature,
                is_available=rule_result.to_bool() and not blocked_by,
                dependencies=dependencies,
                settings=feature_settings,
                rule_result=rule_result,
                blocked_by=tuple(blocked_by),
            )
            resolved[feature] = descriptor
            logger.debug(
                "feature_resolved",
                feature=str(feature),
                available=descriptor.is_available,
                rule_result=rule_result.value,
                blocked_by=[str(d) for d in blocked_by],
            )
        return Manifest(resolved.values())

    def _rule_for(self, feature: Any, rules: RuleSet) -> AvailabilityRule:
        rule = rules.rule_for(feature)
        if rule is not None:
            return rule
        if self.missing_rule_policy is MissingRulePolicy.RAISE:
            raise MissingRuleError(feature)
        logger.warning("missing_rule_defaulted", feature=str(feature), fallback="unavailable")
        return _FALLBACK_RULE


def resolve(
    graph: GraphLike,
    settings: RawSettings | None,
    rules: RuleSet | Mapping[Any, AvailabilityRule],
    *,
    missing_rule_policy: MissingRulePolicy | str = MissingRulePolicy.RAISE,
) -> Manifest:
    """Shorthand for ``ManifestResolver(missing_rule_policy).resolve(...)``."""
    return ManifestResolver(missing_rule_policy).resolve(graph, settings, rules)


def _snapshot_of(graph: GraphLike) -> GraphSnapshot[Any]:
    if isinstance(graph, GraphSnapshot):
        return graph
    if isinstance(graph, FeatureGraph):
        return graph.snapshot()
    return GraphSnapshot(graph)


def _settings_of(settings: RawSettings, feature: Any) -> FeatureSettings:
    raw = settings.get(feature)
    if raw is None:
        return EMPTY_SETTINGS
    if isinstance(raw, FeatureSettings):
        return raw
    return FeatureSettings(raw, feature=feature)


__all__ = ["ManifestResolver", "resolve"]
