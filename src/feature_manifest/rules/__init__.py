"""Availability rules – Tristate predicates over a feature's settings."""
from feature_manifest.rules.base import AvailabilityRule
from feature_manifest.rules.builtin import (
    AlwaysAvailable,
    AlwaysUnavailable,
    FunctionRule,
    SettingEquals,
    SettingPresent,
)
from feature_manifest.rules.composite import CompositeAll, CompositeAny, Not
from feature_manifest.rules.rollout import ActiveWindow, PercentageRollout, rollout_bucket
from feature_manifest.rules.rule_set import RuleSet
from feature_manifest.rules.tristate import Tristate

__all__ = [
    "ActiveWindow",
    "AlwaysAvailable",
    "AlwaysUnavailable",
    "AvailabilityRule",
    "CompositeAll",
    "CompositeAny",
    "FunctionRule",
    "Not",
    "PercentageRollout",
    "RuleSet",
    "SettingEquals",
    "SettingPresent",
    "Tristate",
    "rollout_bucket",
]
