"""Internal errors – defects in this library, I/O encoding failures."""

from __future__ import annotations

from typing import Any

from feature_manifest.kernel.errors.base import BaseError


class InternalError(BaseError):
    """An internal invariant was broken. Always indicates a bug."""

    default_code = "internal_error"


class OrderingInvariantError(InternalError):
    """A dependency was visited after the feature that requires it."""

    default_code = "ordering_invariant"

    def __init__(self, feature: Any, dependency: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Feature '{feature}' evaluated before its dependency '{dependency}'",
            **kwargs,
        )
        self.feature = feature
        self.dependency = dependency
        self.detail.setdefault("feature", str(feature))
        self.detail.setdefault("dependency", str(dependency))


class ManifestSerializationError(BaseError):
    """Failed to serialize or deserialize a manifest payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = ["InternalError", "ManifestSerializationError", "OrderingInvariantError"]
