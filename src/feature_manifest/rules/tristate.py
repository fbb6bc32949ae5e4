"""Rules – Tristate result of a single availability rule."""
from __future__ import annotations

from enum import Enum
from typing import Iterable


class Tristate(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    INDETERMINATE = "indeterminate"

    @classmethod
    def of(cls, value: "Tristate | bool") -> "Tristate":
        if isinstance(value, Tristate):
            return value
        return cls.AVAILABLE if value else cls.UNAVAILABLE

    @classmethod
    def all_of(cls, results: Iterable["Tristate"]) -> "Tristate":
        """Kleene AND: any UNAVAILABLE wins, then any INDETERMINATE."""
        outcome = cls.AVAILABLE
        for result in results:
            if result is cls.UNAVAILABLE:
                return cls.UNAVAILABLE
            if result is cls.INDETERMINATE:
                outcome = cls.INDETERMINATE
        return outcome

    @classmethod
    def any_of(cls, results: Iterable["Tristate"]) -> "Tristate":
        """Kleene OR: any AVAILABLE wins, then any INDETERMINATE."""
        outcome = cls.UNAVAILABLE
        for result in results:
            if result is cls.AVAILABLE:
                return cls.AVAILABLE
            if result is cls.INDETERMINATE:
                outcome = cls.INDETERMINATE
        return outcome

    def negate(self) -> "Tristate":
        if self is Tristate.AVAILABLE:
            return Tristate.UNAVAILABLE
        if self is Tristate.UNAVAILABLE:
            return Tristate.AVAILABLE
        return self

    def to_bool(self) -> bool:
        """Top-level reduction: only an explicit AVAILABLE counts as on."""
        return self is Tristate.AVAILABLE


__all__ = ["Tristate"]
