"""Feature identifier helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any


def feature_token(feature: Any) -> str:
    """Stable string form of a feature id: the enum value, else ``str()``."""
    if isinstance(feature, Enum):
        return str(feature.value)
    return str(feature)


def feature_identity(feature: Any) -> str:
    """Type-qualified form of a feature id for digests.

    Unlike :func:`feature_token`, ``P.X`` and ``"x"`` (or ``1`` and ``"1"``)
    never share an identity.
    """
    cls = type(feature)
    qualname = f"{cls.__module__}.{cls.__qualname__}"
    if isinstance(feature, Enum):
        return f"{qualname}.{feature.name}"
    return f"{qualname}:{feature!r}"


__all__ = ["feature_identity", "feature_token"]
