"""Promise: an awaitable handle over a fixed settlement.

A Promise is created already settled and never changes afterwards. Awaiting
it returns the resolved value or raises the rejection, and can be repeated
any number of times with the same outcome.

Example:
    ```python
    async def main():
        assert await Promise.resolve('candy') == 'candy'
        assert await Promise.reject('mud').catch(lambda reason: reason) == 'mud'
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator
from typing import Any

import anyio.lowlevel

from klaw_promise._config import get_config
from klaw_promise._logging import get_logger
from klaw_promise.errors import Rejected
from klaw_promise.settlement import Resolved, Settlement

__all__ = ['Promise']

logger = get_logger(__name__)


class Promise[T, E]:
    """Settled asynchronous result.

    Awaiting performs a single ``anyio.lowlevel.checkpoint()`` first, so other
    ready tasks get to run before the continuation, much like a microtask
    tick. The checkpoint can be switched off through ``init(checkpoint=False)``.

    Combinators (``then``, ``catch``, ``finally_``) run their handlers
    synchronously and return new settled promises.
    """

    __slots__ = ('_settlement',)

    def __init__(self, settlement: Settlement[T, E]) -> None:
        if not isinstance(settlement, Resolved | Rejected):
            msg = f'Promise expects a Resolved or Rejected settlement, got {type(settlement).__name__}'
            raise TypeError(msg)
        self._settlement = settlement

    @classmethod
    def resolve(cls, value: T) -> Promise[T, E]:
        """Create a promise resolved with ``value``."""
        return cls(Resolved(value))

    @classmethod
    def reject(cls, reason: E) -> Promise[T, E]:
        """Create a promise rejected with ``reason``."""
        return cls(Rejected(reason))

    @property
    def settlement(self) -> Settlement[T, E]:
        """The fixed outcome, as a value."""
        return self._settlement

    def is_resolved(self) -> bool:
        return self._settlement.is_resolved()

    def is_rejected(self) -> bool:
        return self._settlement.is_rejected()

    def __await__(self) -> Generator[Any, Any, T]:
        return self._wait().__await__()

    async def _wait(self) -> T:
        if get_config().checkpoint:
            await anyio.lowlevel.checkpoint()
        return self._settlement.unwrap()

    def then[U](
        self,
        on_resolved: Callable[[T], U] | None = None,
        on_rejected: Callable[[E], U] | None = None,
    ) -> Promise[Any, Any]:
        """Derive a new promise from this one's outcome.

        The matching handler is called with the value or reason. Its return
        value resolves the new promise; a returned Promise is adopted as is;
        an exception it raises rejects the new promise. Without a matching
        handler the outcome passes through unchanged.

        Handlers must be synchronous. For async recovery, await the promise
        and handle ``RejectedError`` in your own coroutine.

        Args:
            on_resolved: Called with the resolved value.
            on_rejected: Called with the rejection reason.

        Returns:
            A new settled Promise.

        Raises:
            TypeError: If a handler is a coroutine function or returns an
                awaitable other than a Promise.
        """
        _check_sync(on_resolved)
        _check_sync(on_rejected)
        settlement = self._settlement
        if isinstance(settlement, Resolved):
            if on_resolved is None:
                return self
            return _call_handler(on_resolved, settlement.value)
        if on_rejected is None:
            return self
        return _call_handler(on_rejected, settlement.reason)

    def catch[U](self, on_rejected: Callable[[E], U]) -> Promise[T | U, Any]:
        """Recover from a rejection. Shorthand for ``then(None, on_rejected)``."""
        return self.then(None, on_rejected)

    def finally_(self, callback: Callable[[], object]) -> Promise[T, Any]:
        """Run ``callback`` regardless of outcome and keep the original outcome.

        The returned promise is rejected instead if ``callback`` raises or
        returns a rejected Promise. A resolved Promise returned by
        ``callback`` is ignored.
        """
        _check_sync(callback)
        try:
            outcome = callback()
        except Exception as exc:
            logger.debug('promise handler raised', handler=_handler_name(callback), error=type(exc).__name__)
            return Promise(Rejected(exc))
        outcome = _ensure_not_awaitable(callback, outcome)
        if isinstance(outcome, Promise) and outcome.is_rejected():
            return outcome
        return self

    def __repr__(self) -> str:
        settlement = self._settlement
        if isinstance(settlement, Resolved):
            return f'Promise(<resolved: {settlement.value!r}>)'
        return f'Promise(<rejected: {settlement.reason!r}>)'


def _handler_name(handler: Callable[..., object]) -> str:
    return getattr(handler, '__qualname__', repr(handler))


def _check_sync(handler: Callable[..., object] | None) -> None:
    if handler is not None and inspect.iscoroutinefunction(handler):
        msg = f'Promise handlers must be synchronous, got coroutine function {_handler_name(handler)}'
        raise TypeError(msg)


def _ensure_not_awaitable(handler: Callable[..., object], outcome: Any) -> Any:
    if isinstance(outcome, Promise) or not inspect.isawaitable(outcome):
        return outcome
    if inspect.iscoroutine(outcome):
        outcome.close()
    msg = f'Promise handler {_handler_name(handler)} returned an awaitable; handlers must be synchronous'
    raise TypeError(msg)


def _call_handler(handler: Callable[[Any], Any], argument: Any) -> Promise[Any, Any]:
    try:
        outcome = handler(argument)
    except Exception as exc:
        logger.debug('promise handler raised', handler=_handler_name(handler), error=type(exc).__name__)
        return Promise(Rejected(exc))
    outcome = _ensure_not_awaitable(handler, outcome)
    if isinstance(outcome, Promise):
        return outcome
    return Promise(Resolved(outcome))
