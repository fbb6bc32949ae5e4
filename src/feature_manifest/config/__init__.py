"""Config – 12-factor settings and loaders."""

from feature_manifest.config.settings import (
    EnvSettingsLoader,
    ResolverConfig,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from feature_manifest.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ResolverConfig",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
