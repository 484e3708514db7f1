"""Pytest configuration and shared fixtures for fx_result tests."""

import pytest

from fx_result import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fx_result import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fx_result import Err

    return Err(ValueError('test error'))


@pytest.fixture
def call_log():
    """A list plus a recording function, for call-count instrumentation."""
    calls: list[object] = []

    def record(value: object) -> object:
        calls.append(value)
        return value

    return calls, record
