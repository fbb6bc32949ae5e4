"""
feature_manifest – resolves feature-flag manifests from a dependency graph.

Import path convention::

    from feature_manifest.graph import FeatureGraph
    from feature_manifest.rules import AlwaysAvailable, SettingEquals, RuleSet
    from feature_manifest.resolver import ManifestResolver, Manifest
    from feature_manifest.cache import ManifestCache
    from feature_manifest.toggles import FeatureToggles
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
