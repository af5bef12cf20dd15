"""Sentinel for "field not supplied" in partial updates.

``None`` is a legitimate value for nullable columns (it clears them), so
partial-update objects use ``UNSET`` to mean "leave as is".
"""

from typing import Final, TypeVar, Union


class _Unset:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()

T = TypeVar("T")
Maybe = Union[T, _Unset]


def is_set(value: object) -> bool:
    return value is not UNSET
