"""Unit tests for FeatureToggles and InMemorySettingsStore."""

from __future__ import annotations

from enum import Enum
from typing import Any

from structlog.testing import capture_logs

from feature_manifest.cache import ManifestCache
from feature_manifest.config import ResolverConfig
from feature_manifest.graph import FeatureGraph
from feature_manifest.kernel.types import EMPTY_SETTINGS, FeatureSettings
from feature_manifest.resolver import MissingRulePolicy
from feature_manifest.rules import AlwaysAvailable, AlwaysUnavailable, FunctionRule, RuleSet, SettingEquals
from feature_manifest.toggles import FeatureToggles, InMemorySettingsStore, SettingsStore


class Feature(str, Enum):
    SEARCH = "search"
    SUGGEST = "suggest"
    BETA = "beta"


def _graph() -> FeatureGraph[Feature]:
    return FeatureGraph.from_mapping({Feature.SEARCH: [], Feature.SUGGEST: [Feature.SEARCH]})


def _rules() -> dict[Feature, Any]:
    return {Feature.SEARCH: SettingEquals("enabled", True), Feature.SUGGEST: AlwaysAvailable()}


class TestInMemorySettingsStore:
    def test_is_a_settings_store(self) -> None:
        assert isinstance(InMemorySettingsStore(), SettingsStore)

    def test_set_replace_remove(self) -> None:
        store = InMemorySettingsStore({Feature.SEARCH: {"enabled": True}})
        store.set(Feature.SEARCH, "limit", 3)
        store.replace(Feature.SUGGEST, {"x": 1})
        assert store.snapshot() == {Feature.SEARCH: {"enabled": True, "limit": 3}, Feature.SUGGEST: {"x": 1}}
        store.remove(Feature.SUGGEST)
        assert Feature.SUGGEST not in store.snapshot()

    def test_snapshot_is_a_copy(self) -> None:
        store = InMemorySettingsStore({Feature.SEARCH: {"enabled": True}})
        snapshot = store.snapshot()
        snapshot[Feature.SEARCH]["enabled"] = False
        assert store.snapshot()[Feature.SEARCH]["enabled"] is True


class TestFeatureToggles:
    def test_is_enabled(self) -> None:
        store = InMemorySettingsStore({Feature.SEARCH: {"enabled": True}})
        toggles = FeatureToggles(_graph(), _rules(), store)
        assert toggles.is_enabled(Feature.SEARCH) is True
        assert toggles.is_enabled(Feature.SUGGEST) is True

    def test_dependency_switches_dependent_off(self) -> None:
        store = InMemorySettingsStore({Feature.SEARCH: {"enabled": False}})
        toggles = FeatureToggles(_graph(), _rules(), store)
        assert toggles.is_enabled(Feature.SUGGEST) is False

    def test_settings_for(self) -> None:
        store = InMemorySettingsStore({Feature.SEARCH: {"enabled": True, "limit": 10}})
        toggles = FeatureToggles(_graph(), _rules(), store)
        assert toggles.settings_for(Feature.SEARCH) == FeatureSettings({"enabled": True, "limit": 10})

    def test_without_store_or_cache(self) -> None:
        toggles = FeatureToggles(_graph(), {Feature.SEARCH: AlwaysAvailable(), Feature.SUGGEST: AlwaysAvailable()})
        assert toggles.cache is None
        assert toggles.manifest().available() == (Feature.SEARCH, Feature.SUGGEST)

    def test_unknown_feature_is_off_and_logged(self) -> None:
        toggles = FeatureToggles(_graph(), _rules(), InMemorySettingsStore())
        with capture_logs() as logs:
            assert toggles.is_enabled(Feature.BETA) is False
        failure = next(e for e in logs if e["event"] == "feature_lookup_failed")
        assert failure["code"] == "unknown_feature"
        assert failure["log_level"] == "error"

    def test_resolution_failure_is_fail_safe(self) -> None:
        toggles = FeatureToggles(_graph(), {Feature.SUGGEST: AlwaysAvailable()})
        with capture_logs() as logs:
            assert toggles.is_enabled(Feature.SUGGEST) is False
            assert toggles.settings_for(Feature.SUGGEST) is EMPTY_SETTINGS
        codes = [e["code"] for e in logs if e["event"] == "feature_lookup_failed"]
        assert codes == ["missing_rule", "missing_rule"]

    def test_broken_rule_is_fail_safe(self) -> None:
        def broken(feature: Any, settings: Any) -> bool:
            raise RuntimeError("rule bug")

        toggles = FeatureToggles(_graph(), {Feature.SEARCH: FunctionRule(broken), Feature.SUGGEST: AlwaysAvailable()})
        with capture_logs() as logs:
            assert toggles.is_enabled(Feature.SEARCH) is False
        assert any(e.get("code") == "RuntimeError" for e in logs)

    def test_manifest_is_cached_per_inputs(self) -> None:
        store = InMemorySettingsStore({Feature.SEARCH: {"enabled": True}})
        cache = ManifestCache()
        toggles = FeatureToggles(_graph(), _rules(), store, cache=cache)
        toggles.is_enabled(Feature.SEARCH)
        toggles.is_enabled(Feature.SUGGEST)
        assert cache.stats.computations == 1

        store.set(Feature.SEARCH, "enabled", False)
        assert toggles.is_enabled(Feature.SEARCH) is False
        assert cache.stats.computations == 2

    def test_graph_mutation_changes_cache_key(self) -> None:
        graph = _graph()
        cache = ManifestCache()
        rules = {**_rules(), Feature.BETA: AlwaysAvailable()}
        toggles = FeatureToggles(graph, rules, InMemorySettingsStore({Feature.SEARCH: {"enabled": True}}), cache=cache)
        assert toggles.is_enabled(Feature.BETA) is False
        graph.add_dependency(Feature.BETA, Feature.SEARCH)
        assert toggles.is_enabled(Feature.BETA) is True
        assert cache.stats.computations == 2

    def test_shared_cache_keeps_graphs_apart(self) -> None:
        cache = ManifestCache()
        rules = RuleSet(default=AlwaysAvailable())
        first = FeatureToggles(FeatureGraph.from_mapping({"a": []}), rules, cache=cache)
        second = FeatureToggles(FeatureGraph.from_mapping({"b": []}), rules, cache=cache)
        assert first.is_enabled("a") is True
        assert second.is_enabled("b") is True
        assert cache.stats.computations == 2
        assert second.is_enabled("a") is False

    def test_shared_cache_keeps_enum_and_string_settings_apart(self) -> None:
        class Plain(Enum):
            X = "x"

        cache = ManifestCache()
        rules = RuleSet({Plain.X: SettingEquals("on", True), "x": SettingEquals("on", True)})
        enum_toggles = FeatureToggles(
            FeatureGraph.from_mapping({Plain.X: [], "x": []}),
            rules,
            InMemorySettingsStore({Plain.X: {"on": True}}),
            cache=cache,
        )
        string_toggles = FeatureToggles(
            FeatureGraph.from_mapping({Plain.X: [], "x": []}),
            rules,
            InMemorySettingsStore({"x": {"on": True}}),
            cache=cache,
        )
        assert enum_toggles.is_enabled(Plain.X) is True
        assert string_toggles.is_enabled(Plain.X) is False
        assert string_toggles.is_enabled("x") is True

    def test_reload_swaps_rules_and_clears_cache(self) -> None:
        cache = ManifestCache()
        toggles = FeatureToggles(_graph(), _rules(), InMemorySettingsStore({Feature.SEARCH: {"enabled": True}}), cache=cache)
        assert toggles.is_enabled(Feature.SUGGEST) is True
        toggles.reload(rules={Feature.SEARCH: AlwaysAvailable(), Feature.SUGGEST: AlwaysUnavailable()})
        assert len(cache) == 0
        assert toggles.is_enabled(Feature.SUGGEST) is False

    def test_from_config(self) -> None:
        config = ResolverConfig(missing_rule_policy="unavailable", cache_capacity=4)
        toggles = FeatureToggles.from_config(_graph(), {Feature.SEARCH: AlwaysAvailable()}, config=config)
        assert toggles.cache is not None
        assert toggles.cache.capacity == 4
        assert toggles.is_enabled(Feature.SEARCH) is True
        assert toggles.is_enabled(Feature.SUGGEST) is False
        assert config.policy is MissingRulePolicy.UNAVAILABLE

    def test_from_default_config_is_unbounded(self) -> None:
        toggles = FeatureToggles.from_config(_graph(), _rules())
        assert toggles.cache is not None
        assert toggles.cache.capacity is None
