"""Rules – RuleSet: the availability rule of every feature, versioned."""
from __future__ import annotations

import hashlib
from typing import Any, Iterator, Mapping

from feature_manifest.kernel.types import feature_identity
from feature_manifest.rules.base import AvailabilityRule


class RuleSet(Mapping[Any, AvailabilityRule]):
    """Immutable feature → :class:`AvailabilityRule` mapping.

    ``version`` takes part in manifest cache keys. When not given it is
    derived from the rules' ``repr``, so built-in rules with equal
    parameters produce equal versions; pass an explicit version when rules
    carry state their ``repr`` does not show (e.g. :class:`FunctionRule`).

    ``default`` applies to features without a rule of their own.
    """

    __slots__ = ("_rules", "_version", "default")

    def __init__(
        self,
        rules: Mapping[Any, AvailabilityRule] | None = None,
        *,
        version: str | None = None,
        default: AvailabilityRule | None = None,
    ) -> None:
        self._rules: dict[Any, AvailabilityRule] = dict(rules or {})
        self.default = default
        self._version = version if version is not None else self._fingerprint()

    @classmethod
    def coerce(cls, rules: "RuleSet | Mapping[Any, AvailabilityRule]") -> "RuleSet":
        return rules if isinstance(rules, RuleSet) else cls(rules)

    @property
    def version(self) -> str:
        return self._version

    def rule_for(self, feature: Any) -> AvailabilityRule | None:
        return self._rules.get(feature, self.default)

    def __getitem__(self, feature: Any) -> AvailabilityRule:
        return self._rules[feature]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet(rules={len(self._rules)}, version={self._version!r})"

    def _fingerprint(self) -> str:
        lines = sorted(f"{feature_identity(f)}={rule!r}" for f, rule in self._rules.items())
        lines.append(f"*={self.default!r}")
        return hashlib.sha256("\n".join(lines).encode()).hexdigest()[:16]


__all__ = ["RuleSet"]
