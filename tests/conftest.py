"""Pytest configuration and shared fixtures for eaux tests."""

import pytest


@pytest.fixture
def sample_something():
    """Sample Something value for testing."""
    from eaux import something

    return something("hello")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from eaux import nothing

    return nothing()


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from eaux import success

    return success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from eaux import failure

    return failure(ValueError("test error"))


@pytest.fixture
def call_log():
    """A recording callback: append every argument it is called with."""
    calls: list[object] = []

    def record(value: object) -> None:
        calls.append(value)

    record.calls = calls  # type: ignore[attr-defined]
    return record


@pytest.fixture
def fresh_config():
    """Reset package configuration around each test."""
    from eaux._config import reset_config

    reset_config()
    yield
    reset_config()
