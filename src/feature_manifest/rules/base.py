"""Rules – AvailabilityRule port."""
from __future__ import annotations

import abc
from typing import Any

from feature_manifest.kernel.types import FeatureSettings
from feature_manifest.rules.tristate import Tristate


class AvailabilityRule(abc.ABC):
    """Port: decide whether a feature should be on, ignoring its dependencies.

    Implementations must be pure functions of ``(feature, settings)`` so that
    resolving the same inputs twice gives the same manifest. Settings keys
    that were never set read as :data:`~feature_manifest.kernel.types.ABSENT`.

    Rules compose with ``&`` (all), ``|`` (any) and ``~`` (not).
    """

    @abc.abstractmethod
    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate: ...

    def __and__(self, other: "AvailabilityRule") -> "AvailabilityRule":
        from feature_manifest.rules.composite import CompositeAll

        return CompositeAll([self, other])

    def __or__(self, other: "AvailabilityRule") -> "AvailabilityRule":
        from feature_manifest.rules.composite import CompositeAny

        return CompositeAny([self, other])

    def __invert__(self) -> "AvailabilityRule":
        from feature_manifest.rules.composite import Not

        return Not(self)


__all__ = ["AvailabilityRule"]
