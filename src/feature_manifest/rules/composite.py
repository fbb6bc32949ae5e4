"""Rules – CompositeAll, CompositeAny, Not."""
from __future__ import annotations

from typing import Any, Iterable

from feature_manifest.kernel.types import FeatureSettings
from feature_manifest.rules.base import AvailabilityRule
from feature_manifest.rules.tristate import Tristate


class CompositeAll(AvailabilityRule):
    """AVAILABLE only if every sub-rule is; UNAVAILABLE if any sub-rule is.

    An empty composite is AVAILABLE.
    """

    def __init__(self, rules: Iterable[AvailabilityRule]) -> None:
        self.rules: tuple[AvailabilityRule, ...] = tuple(rules)

    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:
        return Tristate.all_of(rule.evaluate(feature, settings) for rule in self.rules)

    def __repr__(self) -> str:
        return f"CompositeAll({list(self.rules)!r})"


class CompositeAny(AvailabilityRule):
    """Dual of :class:`CompositeAll`. An empty composite is UNAVAILABLE."""

    def __init__(self, rules: Iterable[AvailabilityRule]) -> None:
        self.rules: tuple[AvailabilityRule, ...] = tuple(rules)

    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:
        return Tristate.any_of(rule.evaluate(feature, settings) for rule in self.rules)

    def __repr__(self) -> str:
        return f"CompositeAny({list(self.rules)!r})"


class Not(AvailabilityRule):
    """Swap AVAILABLE and UNAVAILABLE; INDETERMINATE stays INDETERMINATE."""

    def __init__(self, rule: AvailabilityRule) -> None:
        self.rule = rule

    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:
        return self.rule.evaluate(feature, settings).negate()

    def __repr__(self) -> str:
        return f"Not({self.rule!r})"


__all__ = ["CompositeAll", "CompositeAny", "Not"]
