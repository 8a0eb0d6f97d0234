"""Resolvers: turn a condition or a nullable value into a settled Promise."""

from __future__ import annotations

from typing import Any

from klaw_promise._logging import get_logger
from klaw_promise.option import is_absent
from klaw_promise.promise import Promise

__all__ = ['from_condition', 'from_nullable']

logger = get_logger(__name__)


def from_condition[T, E](condition: object, resolve_to: T, reject_to: E) -> Promise[T, E]:
    """Resolve with ``resolve_to`` if ``condition`` is truthy, else reject with ``reject_to``.

    The condition is evaluated once, at call time. If its truthiness cannot
    be decided (``__bool__`` raises, as with multi-element NumPy arrays), the
    promise is rejected with that exception instead; nothing is raised here.

    Examples:
        >>> from_condition(True, 'candy', 'mud')
        Promise(<resolved: 'candy'>)
        >>> from_condition(False, 'candy', 'mud')
        Promise(<rejected: 'mud'>)
    """
    try:
        truthy = bool(condition)
    except Exception as exc:
        logger.debug('condition truthiness raised', condition_type=type(condition).__name__, error=type(exc).__name__)
        return Promise.reject(exc)
    if truthy:
        return Promise.resolve(resolve_to)
    return Promise.reject(reject_to)


def from_nullable[T, E](nullable: T | None | Any, reject_to: E) -> Promise[T, E]:
    """Resolve with ``nullable`` if present, else reject with ``reject_to``.

    ``None``, ``UNSET`` and ``Nothing`` count as absent. Falsy values such as
    ``0``, ``False`` or ``''`` are present and resolve unchanged.

    Examples:
        >>> from_nullable(0, 'zero-reject')
        Promise(<resolved: 0>)
        >>> from_nullable(None, 'nob')
        Promise(<rejected: 'nob'>)
    """
    if is_absent(nullable):
        return Promise.reject(reject_to)
    return Promise.resolve(nullable)
