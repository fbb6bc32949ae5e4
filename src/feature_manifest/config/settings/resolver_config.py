"""Config settings – ResolverConfig."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from feature_manifest.config.settings.base import Settings
from feature_manifest.config.validation import InvalidSettingValueError
from feature_manifest.observability.logging import configure_logging
from feature_manifest.resolver.policy import MissingRulePolicy


@dataclasses.dataclass
class ResolverConfig(Settings):
    """Runtime knobs for resolution, caching and logging.

    Environment variables: ``FEATURE_MANIFEST_MISSING_RULE_POLICY``,
    ``FEATURE_MANIFEST_CACHE_CAPACITY`` (``0`` = unbounded until reload),
    ``FEATURE_MANIFEST_LOG_LEVEL``, ``FEATURE_MANIFEST_LOG_JSON``.
    """

    _prefix: ClassVar[str] = "FEATURE_MANIFEST"

    missing_rule_policy: str = MissingRulePolicy.RAISE.value
    cache_capacity: int = 0
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        allowed = {p.value for p in MissingRulePolicy}
        if self.missing_rule_policy not in allowed:
            raise InvalidSettingValueError(
                "missing_rule_policy", self.missing_rule_policy, f"expected one of {sorted(allowed)}"
            )
        if self.cache_capacity < 0:
            raise InvalidSettingValueError("cache_capacity", self.cache_capacity, "must be >= 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def policy(self) -> MissingRulePolicy:
        return MissingRulePolicy(self.missing_rule_policy)

    @property
    def capacity(self) -> int | None:
        """Cache capacity as the caches expect it (``None`` = unbounded)."""
        return self.cache_capacity or None

    def apply_logging(self) -> None:
        """Configure structlog output from ``log_level`` / ``log_json``."""
        configure_logging(self.log_level, json=self.log_json)


__all__ = ["ResolverConfig"]
