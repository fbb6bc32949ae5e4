"""Codec – lossless JSON form of a Manifest.

Payload layout::

    {
      "format": 1,
      "features": [
        {"feature": "checkout", "is_available": true, "dependencies": [],
         "settings": {...}, "rule_result": "available", "blocked_by": []},
        ...
      ]
    }

Features are listed in resolution order. Feature ids are written as their
enum value (or as themselves when already a JSON scalar, else ``str``) and
rebuilt with ``feature_type`` on the way back; an ``Enum`` ``feature_type``
also accepts member names, which stand in for values JSON cannot hold.
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Callable

from feature_manifest.kernel.errors import BaseError, ManifestSerializationError
from feature_manifest.kernel.types import FeatureSettings
from feature_manifest.resolver import FeatureDescriptor, Manifest
from feature_manifest.rules import Tristate

FORMAT_VERSION = 1


class ManifestCodec:
    """Encode / decode manifests for storage across process boundaries.

    Parameters
    ----------
    feature_type:
        Callable turning an encoded feature token back into a feature id,
        typically the feature ``Enum`` class (values and member names are
        both accepted). Defaults to plain strings.
    """

    def __init__(self, feature_type: Callable[[str], Any] | None = None) -> None:
        self._feature_type = feature_type or str

    def to_dict(self, manifest: Manifest) -> dict[str, Any]:
        return {
            "format": FORMAT_VERSION,
            "features": [self._encode_descriptor(d) for d in manifest.values()],
        }

    def from_dict(self, payload: Any) -> Manifest:
        try:
            if payload.get("format") != FORMAT_VERSION:
                raise ManifestSerializationError(
                    f"Unsupported manifest format {payload.get('format')!r}",
                    payload_type="manifest",
                )
            return Manifest(self._decode_descriptor(entry) for entry in payload["features"])
        except ManifestSerializationError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError, BaseError) as exc:
            raise ManifestSerializationError(
                f"Malformed manifest payload: {exc!r}", payload_type="manifest", cause=exc
            ) from exc

    def dumps(self, manifest: Manifest, *, indent: int | None = None) -> str:
        try:
            return json.dumps(self.to_dict(manifest), indent=indent, ensure_ascii=False, allow_nan=False)
        except ValueError as exc:
            raise ManifestSerializationError(
                f"Manifest is not JSON-serialisable: {exc}", payload_type="manifest", cause=exc
            ) from exc

    def loads(self, text: str | bytes) -> Manifest:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestSerializationError(
                f"Invalid manifest JSON: {exc}", payload_type="manifest", cause=exc
            ) from exc
        return self.from_dict(payload)

    def _encode_descriptor(self, descriptor: FeatureDescriptor) -> dict[str, Any]:
        return {
            "feature": _encode_feature(descriptor.feature),
            "is_available": descriptor.is_available,
            "dependencies": [_encode_feature(d) for d in descriptor.dependencies],
            "settings": descriptor.settings.to_dict(),
            "rule_result": descriptor.rule_result.value,
            "blocked_by": [_encode_feature(d) for d in descriptor.blocked_by],
        }

    def _decode_descriptor(self, entry: dict[str, Any]) -> FeatureDescriptor:
        feature = self._decode_feature(entry["feature"])
        is_available = entry["is_available"]
        if not isinstance(is_available, bool):
            raise TypeError(f"is_available must be a bool, got {is_available!r}")
        return FeatureDescriptor(
            feature=feature,
            is_available=is_available,
            dependencies=tuple(self._decode_feature(d) for d in entry.get("dependencies", [])),
            settings=FeatureSettings(entry.get("settings") or {}, feature=feature),
            rule_result=Tristate(entry.get("rule_result", Tristate.INDETERMINATE.value)),
            blocked_by=tuple(self._decode_feature(d) for d in entry.get("blocked_by", [])),
        )

    def _decode_feature(self, token: Any) -> Any:
        feature_type = self._feature_type
        if isinstance(feature_type, type) and issubclass(feature_type, Enum):
            try:
                return feature_type(token)
            except ValueError:
                if isinstance(token, str) and token in feature_type.__members__:
                    return feature_type[token]
                raise
        return feature_type(token)


def _encode_feature(feature: Any) -> Any:
    if isinstance(feature, Enum):
        value = feature.value
        return value if isinstance(value, (str, int, float)) else feature.name
    return feature if isinstance(feature, (str, int, float)) else str(feature)


__all__ = ["FORMAT_VERSION", "ManifestCodec"]
