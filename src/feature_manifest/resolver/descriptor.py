"""Resolver – FeatureDescriptor value object."""
from __future__ import annotations

import dataclasses
from typing import Any

from feature_manifest.kernel.types import EMPTY_SETTINGS, FeatureSettings
from feature_manifest.rules.tristate import Tristate


@dataclasses.dataclass(frozen=True, slots=True)
class FeatureDescriptor:
    """Resolved state of one feature, produced fresh by each resolution pass.

    ``is_available`` implies every feature in ``dependencies`` resolved
    available too. ``rule_result`` is the feature's own rule outcome before
    dependency reduction and ``blocked_by`` lists the dependencies that
    forced it off.
    """

    feature: Any
    is_available: bool
    dependencies: tuple[Any, ...] = ()
    settings: FeatureSettings = EMPTY_SETTINGS
    rule_result: Tristate = Tristate.INDETERMINATE
    blocked_by: tuple[Any, ...] = ()


__all__ = ["FeatureDescriptor"]
