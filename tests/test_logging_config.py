# tests/test_logging_config.py
import logging

import pytest

from contact_manager_api.app.core.config import Settings
from contact_manager_api.app.core.logging_config import PACKAGE_LOGGER, package_level, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous = logger.level
    yield logger
    logger.setLevel(previous)


@pytest.mark.parametrize(
    "debug,level,expected",
    [
        (False, "warning", logging.WARNING),
        (False, "INFO", logging.INFO),
        (False, "chatty", logging.INFO),
        (True, "ERROR", logging.DEBUG),
    ],
)
def test_package_level_follows_settings(debug, level, expected):
    assert package_level(Settings(debug=debug, log_level=level)) == expected


def test_setup_logging_sets_package_level_on_every_call(package_logger):
    setup_logging(Settings(debug=False, log_level="ERROR"))
    assert package_logger.level == logging.ERROR

    setup_logging(Settings(debug=True, log_level="ERROR"))
    assert package_logger.level == logging.DEBUG
    assert logging.getLogger("contact_manager_api.app.core.views").isEnabledFor(logging.DEBUG)
