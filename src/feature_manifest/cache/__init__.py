"""Manifest cache – keys and single-flight caches."""
from feature_manifest.cache.async_cache import AsyncManifestCache
from feature_manifest.cache.keys import cache_key_for, manifest_cache_key
from feature_manifest.cache.manifest_cache import ManifestCache
from feature_manifest.cache.store import CacheStats

__all__ = [
    "AsyncManifestCache",
    "CacheStats",
    "ManifestCache",
    "cache_key_for",
    "manifest_cache_key",
]
