"""Unit tests for ResolverConfig, EnvSettingsLoader and SettingsFactory."""

from __future__ import annotations

import dataclasses
from typing import ClassVar

import pytest
from structlog.testing import capture_logs

from feature_manifest.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    ResolverConfig,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from feature_manifest.resolver import MissingRulePolicy


@dataclasses.dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    endpoint: str
    retries: int = 3


class FailingLoader(SettingsLoader):
    def load(self, settings_class):  # type: ignore[no-untyped-def]
        raise ConfigError("source unavailable")


# ---------------------------------------------------------------------------
# ResolverConfig
# ---------------------------------------------------------------------------


class TestResolverConfig:
    def test_defaults(self) -> None:
        config = ResolverConfig()
        assert config.policy is MissingRulePolicy.RAISE
        assert config.capacity is None
        assert config.log_level == "INFO"
        assert config.log_json is True

    def test_capacity_property(self) -> None:
        assert ResolverConfig(cache_capacity=16).capacity == 16

    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ResolverConfig(missing_rule_policy="ignore")
        assert exc_info.value.setting_name == "missing_rule_policy"

    def test_rejects_negative_capacity(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ResolverConfig(cache_capacity=-1)

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ResolverConfig(log_level="LOUD")

    def test_prefix_is_not_a_field(self) -> None:
        assert "_prefix" not in {f.name for f in dataclasses.fields(ResolverConfig)}


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEATURE_MANIFEST_MISSING_RULE_POLICY", "unavailable")
        monkeypatch.setenv("FEATURE_MANIFEST_CACHE_CAPACITY", "32")
        monkeypatch.setenv("FEATURE_MANIFEST_LOG_JSON", "false")
        config = EnvSettingsLoader().load(ResolverConfig)
        assert config.policy is MissingRulePolicy.UNAVAILABLE
        assert config.cache_capacity == 32
        assert config.log_json is False

    def test_loads_from_mapping(self) -> None:
        config = EnvSettingsLoader({"FEATURE_MANIFEST_LOG_LEVEL": "debug"}).load(ResolverConfig)
        assert config.log_level == "debug"

    def test_bad_integer(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"FEATURE_MANIFEST_CACHE_CAPACITY": "lots"}).load(ResolverConfig)

    def test_validation_error_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"FEATURE_MANIFEST_MISSING_RULE_POLICY": "shrug"}).load(ResolverConfig)

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_ENDPOINT"


# ---------------------------------------------------------------------------
# SettingsFactory
# ---------------------------------------------------------------------------


class TestSettingsFactory:
    def test_later_loaders_and_overrides_win(self) -> None:
        config = SettingsFactory.create(
            ResolverConfig,
            loaders=[
                EnvSettingsLoader({"FEATURE_MANIFEST_CACHE_CAPACITY": "8"}),
                EnvSettingsLoader({"FEATURE_MANIFEST_LOG_LEVEL": "WARNING"}),
            ],
            overrides={"missing_rule_policy": "unavailable"},
        )
        assert config.log_level == "WARNING"
        assert config.policy is MissingRulePolicy.UNAVAILABLE

    def test_failing_loader_is_logged_and_skipped(self) -> None:
        with capture_logs() as logs:
            config = SettingsFactory.create(ResolverConfig, loaders=[FailingLoader()])
        assert config == ResolverConfig()
        skipped = [e for e in logs if e["event"] == "settings_loader_skipped"]
        assert skipped[0]["loader"] == "FailingLoader"

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(RequiredSettings, loaders=[])

    def test_overrides_fill_required(self) -> None:
        settings = SettingsFactory.create(RequiredSettings, overrides={"endpoint": "http://flags"})
        assert settings.endpoint == "http://flags"
        assert settings.retries == 3

    def test_invalid_override_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(ResolverConfig, overrides={"cache_capacity": -5})
