"""Package configuration: PromiseConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_promise._logging import configure_logging, get_logger

__all__ = [
    'PromiseConfig',
    'get_config',
    'init',
    'reset',
]

CHECKPOINT_ENV = 'KLAW_PROMISE_CHECKPOINT'

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})

logger = get_logger(__name__)


@dataclass(frozen=True)
class PromiseConfig:
    """Configuration for klaw-promise.

    Attributes:
        checkpoint: Yield to the event loop once on every await of a promise.
        log_level: Logging level (e.g. "DEBUG"). None leaves logging untouched.
    """

    checkpoint: bool = True
    log_level: str | None = None


_config: PromiseConfig | None = None


def _detect_checkpoint() -> bool:
    """Read the checkpoint flag from ``KLAW_PROMISE_CHECKPOINT``.

    Unset or empty means on. Unknown values warn and fall back to on.
    """
    raw = os.environ.get(CHECKPOINT_ENV, '').strip().lower()
    if not raw or raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    logging.warning("Unknown %s value '%s', defaulting to on", CHECKPOINT_ENV, raw)
    return True


def init(checkpoint: bool | None = None, log_level: str | None = None) -> PromiseConfig:
    """Set the global configuration.

    Args:
        checkpoint: Override for the await checkpoint. Read from the
            environment if None.
        log_level: Configure logging at this level if given.

    Returns:
        The PromiseConfig that was set.
    """
    global _config  # noqa: PLW0603

    _config = PromiseConfig(
        checkpoint=_detect_checkpoint() if checkpoint is None else checkpoint,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    logger.debug('promise config initialised', checkpoint=_config.checkpoint, log_level=log_level)
    return _config


def get_config() -> PromiseConfig:
    """Return the active configuration, initialising defaults on first use."""
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the active configuration so the next get_config() re-reads it."""
    global _config  # noqa: PLW0603
    _config = None
