"""Kernel value types – public re-export surface.

Modules:
  absent.py   – ABSENT sentinel
  ids.py      – feature_token, feature_identity
  settings.py – SettingValue, FeatureSettings
"""

from feature_manifest.kernel.types.absent import ABSENT
from feature_manifest.kernel.types.ids import feature_identity, feature_token
from feature_manifest.kernel.types.settings import (
    EMPTY_SETTINGS,
    FeatureSettings,
    SettingScalar,
    SettingValue,
    freeze_setting,
    same_setting,
    thaw_setting,
)

__all__ = [
    "ABSENT",
    "EMPTY_SETTINGS",
    "FeatureSettings",
    "SettingScalar",
    "SettingValue",
    "feature_identity",
    "feature_token",
    "freeze_setting",
    "same_setting",
    "thaw_setting",
]
