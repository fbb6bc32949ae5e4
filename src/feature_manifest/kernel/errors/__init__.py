"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ConfigurationError          (configuration.py)
    │   ├── CycleError
    │   ├── MissingRuleError
    │   ├── InvalidSettingError
    │   └── ConfigError             (config/validation/errors.py)
    ├── LookupFailedError           (lookup.py)
    │   └── UnknownFeatureError
    ├── InternalError               (internal.py)
    │   └── OrderingInvariantError
    └── ManifestSerializationError  (internal.py)
"""

from feature_manifest.kernel.errors.base import BaseError
from feature_manifest.kernel.errors.configuration import (
    ConfigurationError,
    CycleError,
    InvalidSettingError,
    MissingRuleError,
)
from feature_manifest.kernel.errors.internal import (
    InternalError,
    ManifestSerializationError,
    OrderingInvariantError,
)
from feature_manifest.kernel.errors.lookup import LookupFailedError, UnknownFeatureError

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
