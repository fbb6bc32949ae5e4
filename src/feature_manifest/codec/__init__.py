"""Codec – manifest serialization."""
from feature_manifest.codec.json_codec import FORMAT_VERSION, ManifestCodec

__all__ = ["FORMAT_VERSION", "ManifestCodec"]
