"""Tests for configuration and initialization."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from fx_result import FxConfig, get_config, init, reset_config
from fx_result._config import LOG_LEVEL_ENV, _detect_log_level


class TestFxConfig:
    """Tests for the FxConfig dataclass."""

    def test_default_values(self) -> None:
        config = FxConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.capture == (Exception,)

    def test_config_is_frozen(self) -> None:
        config = FxConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for reading the log level from the environment."""

    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert _detect_log_level() is None

    def test_valid_value_is_upper_cased(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, 'debug')
        assert _detect_log_level() == 'DEBUG'

    def test_unknown_value_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, 'chatty')
        assert _detect_log_level() is None


class TestInit:
    """Tests for init(), get_config() and reset_config()."""

    def test_get_config_defaults_without_init(self) -> None:
        assert get_config() == FxConfig()

    def test_init_without_level_leaves_logging_alone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        with patch('fx_result._config.configure_logging') as configure:
            config = init()
        configure.assert_not_called()
        assert config == FxConfig()
        assert get_config() is config

    def test_init_with_level_configures_logging(self) -> None:
        with patch('fx_result._config.configure_logging') as configure:
            config = init(log_level='debug', json_logs=False)
        configure.assert_called_once_with('DEBUG', json_output=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False

    def test_init_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, 'WARNING')
        with patch('fx_result._config.configure_logging') as configure:
            config = init()
        configure.assert_called_once_with('WARNING', json_output=True)
        assert config.log_level == 'WARNING'

    def test_init_capture(self) -> None:
        config = init(capture=(ValueError, KeyError))
        assert config.capture == (ValueError, KeyError)
        assert get_config().capture == (ValueError, KeyError)

    def test_init_capture_rejects_non_exceptions(self) -> None:
        with pytest.raises(TypeError, match='exception types'):
            init(capture=(ValueError, 'KeyError'))  # type: ignore[arg-type]

    def test_init_capture_rejects_empty(self) -> None:
        with pytest.raises(ValueError, match='at least one'):
            init(capture=())
        assert get_config().capture == (Exception,)

    def test_reset_config(self) -> None:
        init(capture=(ValueError,))
        reset_config()
        assert get_config() == FxConfig()
