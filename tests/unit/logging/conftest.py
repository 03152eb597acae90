"""Fixtures for localekit.logging tests."""

from unittest.mock import Mock, patch

import pytest

from localekit.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance patched into the logging setup module."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    with patch("localekit.logging.setup.settings", settings):
        yield settings


@pytest.fixture
def configure_calls():
    """Record structlog.configure and logging.basicConfig without applying them."""
    with patch("localekit.logging.setup.structlog.configure") as configure, patch(
        "localekit.logging.setup.logging.basicConfig"
    ) as basic_config:
        yield configure, basic_config
