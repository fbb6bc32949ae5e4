"""Manifest resolver – descriptors, manifests, resolution pass."""
from feature_manifest.resolver.descriptor import FeatureDescriptor
from feature_manifest.resolver.manifest import EMPTY_MANIFEST, Manifest
from feature_manifest.resolver.policy import MissingRulePolicy
from feature_manifest.resolver.resolver import ManifestResolver, resolve

__all__ = [
    "EMPTY_MANIFEST",
    "FeatureDescriptor",
    "Manifest",
    "ManifestResolver",
    "MissingRulePolicy",
    "resolve",
]
