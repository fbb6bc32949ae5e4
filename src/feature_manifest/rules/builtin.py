"""Rules – constant and settings-driven built-in rules."""
from __future__ import annotations

from typing import Any, Callable

from feature_manifest.kernel.types import ABSENT, FeatureSettings, freeze_setting, same_setting
from feature_manifest.rules.base import AvailabilityRule
from feature_manifest.rules.tristate import Tristate


class AlwaysAvailable(AvailabilityRule):
    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:  # noqa: ARG002
        return Tristate.AVAILABLE

    def __repr__(self) -> str:
        return "AlwaysAvailable()"


class AlwaysUnavailable(AvailabilityRule):
    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:  # noqa: ARG002
        return Tristate.UNAVAILABLE

    def __repr__(self) -> str:
        return "AlwaysUnavailable()"


class SettingEquals(AvailabilityRule):
    """AVAILABLE when ``settings[key] == expected``.

    An absent key is INDETERMINATE; any other value is UNAVAILABLE. Booleans
    never match numbers (``True`` is not ``1``).
    """

    def __init__(self, key: str, expected: Any) -> None:
        self.key = key
        self.expected = freeze_setting(key, expected)

    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:  # noqa: ARG002
        actual = settings[self.key]
        if actual is ABSENT:
            return Tristate.INDETERMINATE
        return Tristate.of(same_setting(actual, self.expected))

    def __repr__(self) -> str:
        return f"SettingEquals({self.key!r}, {self.expected!r})"


class SettingPresent(AvailabilityRule):
    """AVAILABLE when *key* is set (to anything, ``None`` included)."""

    def __init__(self, key: str) -> None:
        self.key = key

    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:  # noqa: ARG002
        return Tristate.of(self.key in settings)

    def __repr__(self) -> str:
        return f"SettingPresent({self.key!r})"


class FunctionRule(AvailabilityRule):
    """Extension point: wrap ``fn(feature, settings) -> Tristate | bool``.

    Example::

        beta_only = FunctionRule(lambda f, s: s["cohort"] == "beta", name="beta_only")
    """

    def __init__(
        self,
        fn: Callable[[Any, FeatureSettings], Tristate | bool],
        *,
        name: str | None = None,
    ) -> None:
        self._fn = fn
        self.name = name or getattr(fn, "__qualname__", repr(fn))

    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:
        return Tristate.of(self._fn(feature, settings))

    def __repr__(self) -> str:
        return f"FunctionRule({self.name})"


__all__ = [
    "AlwaysAvailable",
    "AlwaysUnavailable",
    "FunctionRule",
    "SettingEquals",
    "SettingPresent",
]
