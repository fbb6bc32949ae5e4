"""Kernel – framework-agnostic building blocks."""

from feature_manifest.kernel.errors import (
    BaseError,
    ConfigurationError,
    CycleError,
    InternalError,
    InvalidSettingError,
    LookupFailedError,
    ManifestSerializationError,
    MissingRuleError,
    OrderingInvariantError,
    UnknownFeatureError,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "CycleError",
    "InternalError",
    "InvalidSettingError",
    "LookupFailedError",
    "ManifestSerializationError",
    "MissingRuleError",
    "OrderingInvariantError",
    "UnknownFeatureError",
]
