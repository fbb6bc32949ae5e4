"""Lookup errors – recoverable; the caller decides the fallback."""

from __future__ import annotations

from typing import Any

from feature_manifest.kernel.errors.base import BaseError


class LookupFailedError(BaseError):
    """A query referenced something that does not exist."""

    default_code = "lookup_failed"


class UnknownFeatureError(LookupFailedError):
    """The feature was never registered in the graph or manifest."""

    default_code = "unknown_feature"

    def __init__(self, feature: Any, **kwargs: Any) -> None:
        super().__init__(f"Feature '{feature}' is not registered", **kwargs)
        self.feature = feature
        self.detail.setdefault("feature", str(feature))


__all__ = ["LookupFailedError", "UnknownFeatureError"]
