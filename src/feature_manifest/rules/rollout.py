"""Rules – gradual rollout and time-window rules.

Percentage rollouts hash ``feature:subject`` so the same subject always lands
in the same bucket for a given feature, and different features roll out to
independent slices of subjects.
"""
from __future__ import annotations

import hashlib
from datetime import UTC, datetime
from typing import Any

from feature_manifest.kernel.errors import ConfigurationError
from feature_manifest.kernel.time import Clock, SystemClock
from feature_manifest.kernel.types import ABSENT, FeatureSettings, feature_token
from feature_manifest.rules.base import AvailabilityRule
from feature_manifest.rules.tristate import Tristate


def rollout_bucket(feature: Any, subject: Any) -> float:
    """Deterministic bucket in ``[0, 100)`` with two-decimal resolution."""
    digest = hashlib.sha256(f"{feature_token(feature)}:{subject}".encode()).hexdigest()
    return (int(digest[:8], 16) % 10_000) / 100


class PercentageRollout(AvailabilityRule):
    """AVAILABLE for *percentage* percent of subjects.

    The subject (user id, tenant id, cookie value, …) is read from
    ``settings[subject_key]``; when it is absent the rule is INDETERMINATE.
    """

    def __init__(self, percentage: float, subject_key: str = "subject") -> None:
        if not 0 <= percentage <= 100:
            raise ConfigurationError(
                f"Rollout percentage must be within [0, 100], got {percentage!r}",
                detail={"percentage": percentage},
            )
        self.percentage = float(percentage)
        self.subject_key = subject_key

    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:
        subject = settings[self.subject_key]
        if subject is ABSENT or subject is None:
            return Tristate.INDETERMINATE
        return Tristate.of(rollout_bucket(feature, subject) < self.percentage)

    def __repr__(self) -> str:
        return f"PercentageRollout({self.percentage!r}, subject_key={self.subject_key!r})"


class ActiveWindow(AvailabilityRule):
    """AVAILABLE while ``start <= now < end``.

    Bounds are ISO-8601 strings read from the feature's settings; a missing
    bound leaves that side of the window open and naive timestamps are taken
    as UTC. A bound that cannot be parsed makes the rule INDETERMINATE.
    """

    def __init__(
        self,
        start_key: str = "start",
        end_key: str = "end",
        *,
        clock: Clock | None = None,
    ) -> None:
        self.start_key = start_key
        self.end_key = end_key
        self._clock = clock or SystemClock()

    def evaluate(self, feature: Any, settings: FeatureSettings) -> Tristate:  # noqa: ARG002
        try:
            start = _parse_bound(settings[self.start_key])
            end = _parse_bound(settings[self.end_key])
        except (TypeError, ValueError):
            return Tristate.INDETERMINATE
        now = self._clock.now()
        if start is not None and now < start:
            return Tristate.UNAVAILABLE
        if end is not None and now >= end:
            return Tristate.UNAVAILABLE
        return Tristate.AVAILABLE

    def __repr__(self) -> str:
        return f"ActiveWindow({self.start_key!r}, {self.end_key!r})"


def _parse_bound(raw: Any) -> datetime | None:
    if raw is ABSENT or raw is None:
        return None
    if not isinstance(raw, str):
        raise TypeError(f"expected ISO-8601 string, got {type(raw).__name__}")
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


__all__ = ["ActiveWindow", "PercentageRollout", "rollout_bucket"]
