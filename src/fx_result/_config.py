"""Library configuration: FxConfig, init and get_config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fx_result._logging import configure_logging

__all__ = [
    'FxConfig',
    'get_config',
    'init',
    'reset_config',
]

LOG_LEVEL_ENV = 'FX_RESULT_LOG_LEVEL'

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class FxConfig:
    """Configuration for fx_result.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = logging left alone.
        json_logs: Render logs as JSON when True, console lines otherwise.
        capture: Exception types converted into Err by try_catch and safe.
    """

    log_level: str | None = None
    json_logs: bool = True
    capture: tuple[type[BaseException], ...] = (Exception,)


_DEFAULT_CONFIG = FxConfig()

# Global configuration (set by init())
_config: FxConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from FX_RESULT_LOG_LEVEL, if set and valid."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown %s value '%s', ignoring", LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    capture: tuple[type[BaseException], ...] | None = None,
) -> FxConfig:
    """Initialize fx_result with the given configuration.

    Args:
        log_level: Logging level. Read from FX_RESULT_LOG_LEVEL if None.
        json_logs: Emit JSON logs when logging gets configured.
        capture: Exception types intercepted by try_catch and safe. Defaults
            to (Exception,). wrap always captures every Exception.

    Returns:
        The FxConfig that was set.

    Raises:
        TypeError: If capture contains something that is not an exception type.
        ValueError: If capture is empty.

    Example:
        ```python
        import fx_result

        fx_result.init(log_level='DEBUG', json_logs=False)
        fx_result.init(capture=(ValueError, KeyError))
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    if capture is None:
        resolved_capture: tuple[type[BaseException], ...] = (Exception,)
    else:
        resolved_capture = tuple(capture)
        if not resolved_capture:
            msg = 'capture must name at least one exception type'
            raise ValueError(msg)
        for exc_type in resolved_capture:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                msg = f'capture entries must be exception types, got {exc_type!r}'
                raise TypeError(msg)

    _config = FxConfig(
        log_level=resolved_level,
        json_logs=json_logs,
        capture=resolved_capture,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> FxConfig:
    """Get the active configuration, or the defaults if init() was never called."""
    if _config is None:
        return _DEFAULT_CONFIG
    return _config


def reset_config() -> None:
    """Drop any configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
