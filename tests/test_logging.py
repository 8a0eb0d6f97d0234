"""Tests for logging configuration and library events."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
from klaw_promise import Promise, from_condition, init
from klaw_promise._logging import PACKAGE_LOGGER, configure_logging, get_logger


def events(caplog: pytest.LogCaptureFixture, name: str) -> list[dict[str, Any]]:
    """Event dicts recorded under the package logger with the given event name."""
    return [
        record.msg
        for record in caplog.records
        if isinstance(record.msg, dict) and record.msg.get('event') == name
    ]


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_root_logger_untouched(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        configure_logging('DEBUG')
        assert logging.getLogger().handlers == root_handlers

    def test_package_logger_configured(self) -> None:
        handler = configure_logging('debug')
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert package_logger.handlers == [handler]
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False

    def test_reconfigure_replaces_handler(self) -> None:
        first = configure_logging('DEBUG')
        second = configure_logging('INFO', json_output=False)
        assert logging.getLogger(PACKAGE_LOGGER).handlers == [second]
        assert first is not second

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('DEBUG', json_output=True)
        get_logger('klaw_promise.test').info('Test message', extra_field='extra_value')

        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line]
        entry = next(line for line in lines if line['event'] == 'Test message')
        assert entry['extra_field'] == 'extra_value'
        assert entry['level'] == 'info'
        assert entry['logger'] == 'klaw_promise.test'


class TestLibraryEvents:
    """Events emitted by klaw-promise itself."""

    def test_init_logs_config(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            init(checkpoint=False)

        entries = events(caplog, 'promise config initialised')
        assert entries
        assert entries[0]['checkpoint'] is False

    def test_raising_handler_logged_without_payload(self, caplog: pytest.LogCaptureFixture) -> None:
        def boom(_: object) -> None:
            raise ValueError('secret')

        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            Promise.reject('mud-reason').catch(boom)

        entries = events(caplog, 'promise handler raised')
        assert len(entries) == 1
        assert entries[0]['error'] == 'ValueError'
        assert 'mud-reason' not in str(entries[0])

    def test_truthiness_error_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        class Ambiguous:
            def __bool__(self) -> bool:
                raise ValueError('ambiguous')

        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            from_condition(Ambiguous(), 'candy', 'mud')

        entries = events(caplog, 'condition truthiness raised')
        assert entries[0]['condition_type'] == 'Ambiguous'

    def test_plain_rejection_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            Promise.reject('unobserved')

        assert not any('unobserved' in str(record.msg) for record in caplog.records)

    def test_silent_when_unconfigured(self, capsys: pytest.CaptureFixture[str]) -> None:
        init(checkpoint=True)
        captured = capsys.readouterr()
        assert 'promise config initialised' not in captured.out
        assert 'promise config initialised' not in captured.err
