"""Tests for logging configuration and the events emitted at capture boundaries."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from fx_result import configure_logging, get_logger, safe, try_catch, wrap


@pytest.fixture
def restore_logging():
    """Undo configure_logging() side effects on structlog and the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging() and get_logger()."""

    @pytest.mark.usefixtures('restore_logging')
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('DEBUG', json_output=True)
        get_logger('fx_result.test').info('hello', answer=42)

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        entry = json.loads(lines[-1])
        assert entry['event'] == 'hello'
        assert entry['answer'] == 42
        assert entry['level'] == 'info'
        assert entry['logger'] == 'fx_result.test'
        assert 'timestamp' in entry

    @pytest.mark.usefixtures('restore_logging')
    def test_level_filters_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('WARNING')
        get_logger('fx_result.test').info('quiet')

        assert 'quiet' not in capsys.readouterr().err

    @pytest.mark.usefixtures('restore_logging')
    def test_stdlib_logs_are_structured(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('INFO')
        logging.getLogger('third.party').warning('from stdlib')

        entry = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert entry['event'] == 'from stdlib'
        assert entry['level'] == 'warning'


class TestCaptureEvents:
    """Capture boundaries emit one debug event per converted exception."""

    def test_wrap_logs_unhandled_error(self) -> None:
        def explode():
            raise KeyError('missing')

        with capture_logs() as logs:
            wrap(explode)()

        assert logs == [
            {
                'event': 'unhandled_error_captured',
                'log_level': 'debug',
                'callable': explode.__qualname__,
                'error_type': 'KeyError',
            }
        ]

    def test_try_catch_logs_captured_exception(self) -> None:
        with capture_logs() as logs:
            try_catch(lambda: 1 / 0)

        assert len(logs) == 1
        assert logs[0]['event'] == 'exception_captured'
        assert logs[0]['error_type'] == 'ZeroDivisionError'

    def test_safe_logs_captured_exception(self) -> None:
        @safe
        def parse(raw: str) -> int:
            return int(raw)

        with capture_logs() as logs:
            parse('x')

        assert [entry['error_type'] for entry in logs] == ['ValueError']

    def test_success_paths_are_silent(self) -> None:
        with capture_logs() as logs:
            try_catch(lambda: 1)
            wrap(lambda: None)()

        assert logs == []
