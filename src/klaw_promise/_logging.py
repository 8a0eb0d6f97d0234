"""Structured logging for klaw-promise.

Library events are structlog event dicts handed to stdlib loggers under the
``klaw_promise`` namespace. Applications that already run structlog's
``ProcessorFormatter`` render them natively; ``configure_logging`` gives
everyone else a ready-made handler on the package logger only.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'PACKAGE_LOGGER',
    'configure_logging',
    'get_logger',
]

PACKAGE_LOGGER = 'klaw_promise'

_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt='iso'),
    structlog.processors.StackInfoRenderer(),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]

_handler: logging.Handler | None = None


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger backed by the stdlib logger ``name``.

    The processor chain is fixed here rather than taken from the global
    structlog config, so the host application's configuration is untouched.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> logging.Handler:
    """Attach a stderr handler to the ``klaw_promise`` logger.

    Calling it again replaces the previous handler. The root logger and any
    other handlers are left alone; the package logger stops propagating so
    events are not emitted twice.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...).
        json_output: Emit JSON lines if True, console output otherwise.

    Returns:
        The installed handler.
    """
    global _handler  # noqa: PLW0603

    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False
    _handler = handler
    return handler
