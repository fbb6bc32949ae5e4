"""Toggles – fail-safe feature lookups over cached manifests."""
from feature_manifest.toggles.store import InMemorySettingsStore, SettingsStore
from feature_manifest.toggles.toggles import FeatureToggles

__all__ = ["FeatureToggles", "InMemorySettingsStore", "SettingsStore"]
