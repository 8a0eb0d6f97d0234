"""Option layer: one canonical notion of absence.

Python spells "no value" in more than one way. ``None`` is the usual null,
``msgspec.UNSET`` plays the role of an undefined/missing marker (handy as a
``getattr`` or ``dict.get`` default), and ``Nothing`` is the explicit Option
variant. ``to_option`` folds all of them into ``Nothing`` so presence checks
only ever look at one case.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

__all__ = [
    'UNSET',
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'is_absent',
    'to_option',
]

UNSET = msgspec.UNSET
"""Undefined-style absence marker (re-exported from msgspec)."""


class Some[T](msgspec.Struct, frozen=True):
    """Present variant of Option.

    Examples:
        >>> Some(0).is_some()
        True
        >>> Some('x').map(str.upper)
        Some(value='X')
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply ``f`` to the contained value."""
        return Some(f(self.value))


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option. Use the ``Nothing`` singleton."""

    def is_some(self) -> TypeIs[Some[object]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        return default

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def to_option[T](value: T | None | Any) -> Option[T]:
    """Normalize a nullable value into an Option.

    ``None``, ``UNSET`` and ``Nothing`` all become ``Nothing``. An existing
    ``Some`` is returned as is; every other value, falsy or not, is wrapped
    in ``Some``.

    Examples:
        >>> to_option(None)
        NothingType()
        >>> to_option(UNSET)
        NothingType()
        >>> to_option(0)
        Some(value=0)
    """
    if value is None or value is UNSET or isinstance(value, NothingType):
        return Nothing
    if isinstance(value, Some):
        return value
    return Some(value)


def is_absent(value: object) -> bool:
    """Return True if ``value`` is any of the recognised absence forms."""
    return to_option(value).is_none()
