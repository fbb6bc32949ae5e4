"""Config settings – 12-factor env-based configuration."""
from feature_manifest.config.settings.base import Settings
from feature_manifest.config.settings.factory import SettingsFactory
from feature_manifest.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from feature_manifest.config.settings.resolver_config import ResolverConfig

__all__ = ["EnvSettingsLoader", "ResolverConfig", "Settings", "SettingsFactory", "SettingsLoader"]
