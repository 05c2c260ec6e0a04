"""Pytest configuration and shared fixtures for klaw-option tests."""

import pytest


@pytest.fixture
def sample_present():
    """Sample present Option for testing."""
    from klaw_option import Present

    return Present('hello')


@pytest.fixture
def sample_absent():
    """Sample absent Option for testing."""
    from klaw_option import Absent

    return Absent()


@pytest.fixture
def fresh_config(monkeypatch):
    """Clear configuration and the environment variables it reads, before and after a test."""
    from klaw_option._config import reset_config

    monkeypatch.delenv('KLAW_OPTION_EXHAUSTIVE', raising=False)
    monkeypatch.delenv('KLAW_OPTION_LOG_LEVEL', raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def reset_logging():
    """Undo configure_logging(): structlog defaults and the package logger's handlers."""
    import logging

    import structlog

    yield
    structlog.reset_defaults()
    library_logger = logging.getLogger('klaw_option')
    library_logger.handlers.clear()
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True


@pytest.fixture(scope='module')
def isolated_config():
    """Module-wide variant of fresh_config, usable alongside hypothesis tests."""
    from klaw_option._config import reset_config

    with pytest.MonkeyPatch.context() as mp:
        mp.delenv('KLAW_OPTION_EXHAUSTIVE', raising=False)
        mp.delenv('KLAW_OPTION_LOG_LEVEL', raising=False)
        reset_config()
        yield
    reset_config()
