"""Resolver – MissingRulePolicy enum."""
from __future__ import annotations

from enum import Enum


class MissingRulePolicy(str, Enum):
    """What to do with a feature that has no availability rule.

    ``RAISE`` fails the whole pass with :class:`MissingRuleError`;
    ``UNAVAILABLE`` resolves the feature as ``AlwaysUnavailable`` and logs a
    warning.
    """

    RAISE = "raise"
    UNAVAILABLE = "unavailable"


__all__ = ["MissingRulePolicy"]
