"""Configuration errors – the feature graph or rule set cannot be used as loaded.

These are fatal: they surface at load / validation time and are never
swallowed by the resolver.
"""

from __future__ import annotations

from typing import Any, Sequence

from feature_manifest.kernel.errors.base import BaseError


class ConfigurationError(BaseError):
    """The feature configuration violates a load-time invariant."""

    default_code = "configuration_error"


class CycleError(ConfigurationError):
    """Adding an edge (or loading a graph) would make the feature graph cyclic.

    ``cycle`` lists the features forming the loop, starting and ending with
    the same feature, e.g. ``[A, B, A]``.
    """

    default_code = "dependency_cycle"

    def __init__(self, cycle: Sequence[Any], **kwargs: Any) -> None:
        path = " -> ".join(str(f) for f in cycle)
        super().__init__(f"Dependency cycle detected: {path}", **kwargs)
        self.cycle: list[Any] = list(cycle)
        self.detail.setdefault("cycle", [str(f) for f in cycle])


class MissingRuleError(ConfigurationError):
    """A feature in the graph has no associated availability rule."""

    default_code = "missing_rule"

    def __init__(self, feature: Any, **kwargs: Any) -> None:
        super().__init__(f"No availability rule configured for feature '{feature}'", **kwargs)
        self.feature = feature
        self.detail.setdefault("feature", str(feature))


class InvalidSettingError(ConfigurationError):
    """A raw setting value is not one of the supported setting variants."""

    default_code = "invalid_setting"

    def __init__(self, key: str, value: Any, *, feature: Any = None, **kwargs: Any) -> None:
        where = f" of feature '{feature}'" if feature is not None else ""
        super().__init__(
            f"Setting '{key}'{where} has unsupported value {value!r} "
            f"({type(value).__name__})",
            **kwargs,
        )
        self.key = key
        self.value = value
        self.feature = feature


__all__ = [
    "ConfigurationError",
    "CycleError",
    "InvalidSettingError",
    "MissingRuleError",
]
