import logging

import pytest

from housing_regression.exceptions import ConfigurationError
from housing_regression.logging_config import configure_logging, resolve_level


@pytest.mark.parametrize("name, expected", [("info", logging.INFO), (" DEBUG ", logging.DEBUG)])
def test_resolve_level_accepts_standard_names(name, expected):
    assert resolve_level(name) == expected


def test_unknown_level_raises_configuration_error():
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging("verbose")
    assert excinfo.value.error_code == "INVALID_CONFIGURATION"
    assert excinfo.value.details == {"setting": "HOUSING_LOG_LEVEL", "value": "verbose"}


def test_configure_logging_sets_package_level():
    logger = configure_logging("warning")
    assert logger.name == "housing_regression"
    assert logger.level == logging.WARNING
    configure_logging("info")
