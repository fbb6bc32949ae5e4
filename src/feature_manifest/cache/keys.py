"""Manifest cache – deterministic cache keys."""
from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping

from feature_manifest.kernel.types import FeatureSettings, feature_identity

__all__ = ["cache_key_for", "manifest_cache_key"]


def manifest_cache_key(
    graph_fingerprint: str,
    settings: Mapping[Any, Mapping[str, Any] | None] | None,
    rules_version: str,
) -> str:
    """Digest of everything a resolution pass depends on.

    *graph_fingerprint* is :attr:`GraphSnapshot.fingerprint`, so two graphs
    with different content never share a key. Features and setting keys are
    sorted before hashing, so two settings snapshots with the same content
    always map to the same key regardless of insertion order. Feature ids
    are type-qualified: ``{P.X: ...}`` and ``{"x": ...}`` hash differently.
    """
    canonical = json.dumps(
        {
            "graph": graph_fingerprint,
            "rules": rules_version,
            "settings": _canonical_settings(settings or {}),
        },
        sort_keys=True,
        separators=(",", ":"),
        default=str,
    )
    digest = hashlib.sha256(canonical.encode()).hexdigest()[:32]
    return f"manifest:{digest}"


def cache_key_for(graph: Any, settings: Mapping[Any, Any] | None, rules: Any) -> str:
    """Build the key from a live graph (``.fingerprint``) and rule set (``.version``)."""
    return manifest_cache_key(graph.fingerprint, settings, rules.version)


def _canonical_settings(settings: Mapping[Any, Mapping[str, Any] | None]) -> list[list[Any]]:
    entries = []
    for feature, raw in settings.items():
        values = raw if isinstance(raw, FeatureSettings) else FeatureSettings(raw, feature=feature)
        entries.append([feature_identity(feature), values.to_dict()])
    entries.sort(key=lambda entry: entry[0])
    return entries
