"""Setting values and the read-only per-feature settings mapping.

A setting value is one variant of a small tagged union::

    SettingValue = str | int | float | bool | None
                 | tuple[SettingValue, ...]      # from lists / tuples
                 | FeatureSettings               # from nested mappings

Anything else is rejected with :class:`InvalidSettingError` when the
:class:`FeatureSettings` is built, so every manifest is JSON-representable.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from feature_manifest.kernel.errors.configuration import InvalidSettingError
from feature_manifest.kernel.types.absent import ABSENT

type SettingScalar = str | int | float | bool | None
type SettingValue = SettingScalar | tuple[SettingValue, ...] | FeatureSettings

_SCALARS = (str, int, float, bool, type(None))


def freeze_setting(key: str, value: Any, *, feature: Any = None) -> SettingValue:
    """Validate *value* and convert it to its immutable representation."""
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, FeatureSettings):
        return value
    if isinstance(value, Mapping):
        return FeatureSettings(value, feature=feature)
    if isinstance(value, (list, tuple)):
        return tuple(freeze_setting(key, item, feature=feature) for item in value)
    raise InvalidSettingError(key, value, feature=feature)


def thaw_setting(value: SettingValue) -> Any:
    """Inverse of :func:`freeze_setting`: plain ``dict`` / ``list`` / scalars."""
    if isinstance(value, FeatureSettings):
        return value.to_dict()
    if isinstance(value, tuple):
        return [thaw_setting(item) for item in value]
    return value


def same_setting(actual: Any, expected: Any) -> bool:
    """Variant-aware equality: ``True`` never equals ``1``."""
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return actual == expected


class FeatureSettings(Mapping[str, SettingValue]):
    """Immutable ``str`` → :data:`SettingValue` mapping for one feature.

    Reading a key that was never set yields :data:`ABSENT` instead of raising,
    so availability rules can probe optional settings freely. Use ``in`` to
    test presence.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Mapping[str, Any] | None = None, *, feature: Any = None) -> None:
        frozen: dict[str, SettingValue] = {}
        for key, value in (data or {}).items():
            if not isinstance(key, str):
                raise InvalidSettingError(repr(key), value, feature=feature)
            frozen[key] = freeze_setting(key, value, feature=feature)
        self._data = frozen
        self._hash: int | None = None

    def __getitem__(self, key: str) -> Any:
        return self._data.get(key, ABSENT)

    def get(self, key: str, default: Any = ABSENT) -> Any:  # type: ignore[override]
        return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"FeatureSettings({self._data!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, mutable, JSON-compatible copy."""
        return {key: thaw_setting(value) for key, value in self._data.items()}


EMPTY_SETTINGS = FeatureSettings()

__all__ = [
    "EMPTY_SETTINGS",
    "FeatureSettings",
    "SettingScalar",
    "SettingValue",
    "freeze_setting",
    "same_setting",
    "thaw_setting",
]
