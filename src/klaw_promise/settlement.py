"""Settlement outcomes: Resolved[T] | Rejected[E]."""

from __future__ import annotations

import msgspec

from klaw_promise.errors import Rejected

__all__ = ['Rejected', 'Resolved', 'Settlement']


class Resolved[T](msgspec.Struct, frozen=True):
    """Successful settlement carrying the resolved value.

    Examples:
        >>> Resolved('candy').unwrap()
        'candy'
    """

    value: T

    def is_resolved(self) -> bool:
        return True

    def is_rejected(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


type Settlement[T, E] = Resolved[T] | Rejected[E]
