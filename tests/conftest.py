"""Shared fixtures for the localekit test suite."""

import logging

import pytest
import structlog

from localekit.i18n import I18n
from tests.factories.i18n import make_translations


def pytest_configure(config):
    """Keep log events out of test output."""
    logging.root.setLevel(logging.CRITICAL + 1)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


@pytest.fixture
def translations():
    """Raw locale -> name -> text map used across the suite."""
    return make_translations()


@pytest.fixture
def i18n(translations):
    """I18n core with zh-tw as default locale and the sample translations loaded."""
    core = I18n("zh-tw")
    core.load_map(translations)
    return core


@pytest.fixture
def zh_tw(i18n):
    """Locale view bound to zh-tw."""
    return i18n.new_locale("zh-tw")
