"""Pytest configuration and shared fixtures for klaw-promise tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from unittest.mock import patch

import pytest
from klaw_promise import _logging, reset
from klaw_promise._config import CHECKPOINT_ENV


def _reset_package_logger() -> None:
    package_logger = logging.getLogger(_logging.PACKAGE_LOGGER)
    if _logging._handler is not None:
        package_logger.removeHandler(_logging._handler)
        _logging._handler = None
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture(autouse=True)
def fresh_config() -> Generator[None]:
    """Start every test from the default configuration and package logger."""
    env = {k: v for k, v in os.environ.items() if k != CHECKPOINT_ENV}
    with patch.dict(os.environ, env, clear=True):
        reset()
        _reset_package_logger()
        yield
        reset()
        _reset_package_logger()
