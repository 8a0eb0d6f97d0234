"""Rejection types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

from typing import Any, NoReturn

import msgspec

__all__ = [
    'Rejected',
    'RejectedError',
]


class Rejected[E](msgspec.Struct, frozen=True):
    """Failed settlement carrying the caller-supplied reason."""

    reason: E

    def is_resolved(self) -> bool:
        return False

    def is_rejected(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise a fresh ``RejectedError`` for this rejection.

        An exception reason is attached as ``__cause__`` but never raised
        itself, so its traceback and context stay as the caller left them.
        """
        error = self.to_exception()
        if isinstance(self.reason, BaseException):
            raise error from self.reason
        raise error

    def to_exception(self) -> RejectedError:
        """Convert to exception for raise-based code."""
        return RejectedError(self.reason)


class RejectedError(Exception):
    """Raised when awaiting a rejected promise. The payload is ``reason``."""

    def __init__(self, reason: Any) -> None:
        self.reason = reason
        super().__init__(f'Promise rejected with {reason!r}')

    def to_struct(self) -> Rejected[Any]:
        """Convert to struct for value-based code."""
        return Rejected(self.reason)
