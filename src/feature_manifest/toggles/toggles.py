"""Toggles – FeatureToggles: the fail-safe lookup API for application code."""
from __future__ import annotations

from typing import Any, Mapping

from feature_manifest.cache import ManifestCache, manifest_cache_key
from feature_manifest.config import ResolverConfig
from feature_manifest.graph import FeatureGraph, GraphSnapshot
from feature_manifest.kernel.types import EMPTY_SETTINGS, FeatureSettings
from feature_manifest.observability.logging import get_logger
from feature_manifest.resolver import Manifest, ManifestResolver
from feature_manifest.rules import AvailabilityRule, RuleSet
from feature_manifest.toggles.store import SettingsStore

logger = get_logger(__name__)


class FeatureToggles:
    """Answer ``is_enabled`` / ``settings_for`` from a cached manifest.

    Every lookup resolves (or reuses) the manifest for the current graph
    version, settings snapshot and rule-set version. Lookups never raise:
    any failure is logged and the feature is reported off with no settings.
    Use :meth:`manifest` to see resolution errors.

    Example::

        toggles = FeatureToggles.from_config(graph, rules, store, config=ResolverConfig())
        if toggles.is_enabled(Feature.ONE_CLICK):
            ...
    """

    def __init__(
        self,
        graph: FeatureGraph[Any] | GraphSnapshot[Any],
        rules: RuleSet | Mapping[Any, AvailabilityRule],
        settings_store: SettingsStore | None = None,
        *,
        resolver: ManifestResolver | None = None,
        cache: ManifestCache[Manifest] | None = None,
    ) -> None:
        self._graph = graph
        self._rules = RuleSet.coerce(rules)
        self._store = settings_store
        self._resolver = resolver or ManifestResolver()
        self._cache = cache

    @classmethod
    def from_config(
        cls,
        graph: FeatureGraph[Any] | GraphSnapshot[Any],
        rules: RuleSet | Mapping[Any, AvailabilityRule],
        settings_store: SettingsStore | None = None,
        *,
        config: ResolverConfig | None = None,
    ) -> "FeatureToggles":
        config = config or ResolverConfig()
        return cls(
            graph,
            rules,
            settings_store,
            resolver=ManifestResolver(config.policy),
            cache=ManifestCache(config.capacity),
        )

    @property
    def cache(self) -> ManifestCache[Manifest] | None:
        return self._cache

    def manifest(self) -> Manifest:
        """Resolve the current manifest, raising on any resolution error."""
        graph = self._graph.snapshot() if isinstance(self._graph, FeatureGraph) else self._graph
        settings = self._store.snapshot() if self._store is not None else {}
        rules = self._rules

        def compute() -> Manifest:
            return self._resolver.resolve(graph, settings, rules)

        if self._cache is None:
            return compute()
        key = manifest_cache_key(graph.fingerprint, settings, rules.version)
        return self._cache.get_or_compute(key, compute)

    def is_enabled(self, feature: Any) -> bool:
        try:
            return self.manifest().is_enabled(feature)
        except Exception as exc:
            self._log_failure("is_enabled", feature, exc)
            return False

    def settings_for(self, feature: Any) -> FeatureSettings:
        try:
            return self.manifest().settings_for(feature)
        except Exception as exc:
            self._log_failure("settings_for", feature, exc)
            return EMPTY_SETTINGS

    def reload(
        self,
        *,
        graph: FeatureGraph[Any] | GraphSnapshot[Any] | None = None,
        rules: RuleSet | Mapping[Any, AvailabilityRule] | None = None,
    ) -> None:
        """Swap in new configuration and drop every cached manifest."""
        if graph is not None:
            self._graph = graph
        if rules is not None:
            self._rules = RuleSet.coerce(rules)
        if self._cache is not None:
            self._cache.clear()
        logger.info("feature_toggles_reloaded", rules_version=self._rules.version)

    def _log_failure(self, operation: str, feature: Any, exc: Exception) -> None:
        logger.error(
            "feature_lookup_failed",
            operation=operation,
            feature=str(feature),
            code=getattr(exc, "code", type(exc).__name__),
            error=str(getattr(exc, "message", exc)),
            exc_info=exc,
        )


__all__ = ["FeatureToggles"]
