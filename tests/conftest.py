"""
Pytest configuration and fixtures
"""
import logging

import pytest

from upc_checker.core.logging_config import PACKAGE_LOGGER
from upc_checker.models import UPCCode


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package logger after tests that call setup_logging"""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def valid_upc():
    """Printed code 036000241457"""
    return UPCCode(digits=[0, 3, 6, 0, 0, 0, 2, 4, 1, 4, 5], check_digit=7)


@pytest.fixture
def sequential_digits():
    return [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 0]
