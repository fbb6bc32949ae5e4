"""The ``ABSENT`` sentinel returned for settings keys that were never set."""

from __future__ import annotations

from typing import Any


class _Absent:
    """Singleton marker for a missing setting.

    Falsy, and distinct from ``None`` (``None`` is a legitimate setting value).
    """

    __slots__ = ()
    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> tuple[Any, ...]:
        return (_Absent, ())


ABSENT = _Absent()

__all__ = ["ABSENT"]
