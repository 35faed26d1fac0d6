"""Pytest configuration and fixtures for freedom_config tests."""

import loguru
import pytest

from freedom_config import ATLAS_ENV_VAR, ATLAS_KEY_VAR, ATLAS_SECRET_VAR
from freedom_config.config.settings import LogLevel, Settings
from freedom_config.infrastructure.logging import reset_logging


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(log_level=LogLevel.CRITICAL)


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def atlas_env(monkeypatch):
    """Start every test with the ATLAS variables unset.

    Tests set the variables they need through the returned monkeypatch.
    """
    for name in (ATLAS_ENV_VAR, ATLAS_KEY_VAR, ATLAS_SECRET_VAR):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def full_atlas_env(atlas_env):
    """Set all three ATLAS variables to valid values."""
    atlas_env.setenv(ATLAS_ENV_VAR, "test")
    atlas_env.setenv(ATLAS_KEY_VAR, "env_key")
    atlas_env.setenv(ATLAS_SECRET_VAR, "env_secret")
    return atlas_env
