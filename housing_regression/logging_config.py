"""Console logging setup shared by the CLI and scripts."""

import logging

from housing_regression.config import LOG_LEVEL, LOG_FORMAT
from housing_regression.exceptions import ConfigurationError


def resolve_level(level: str) -> int:
    """
    Map a level name such as "info" to its numeric value.

    Raises
    ------
    ConfigurationError
        If `level` is not a standard logging level name.
    """
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(
            "HOUSING_LOG_LEVEL", level, "expected DEBUG, INFO, WARNING, ERROR or CRITICAL"
        )
    return resolved


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Configure root logging once for the process and return the package logger.

    Parameters
    ----------
    level : str
        Logging level name, e.g. "INFO" or "DEBUG".
    """
    numeric_level = resolve_level(level)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logger = logging.getLogger("housing_regression")
    logger.setLevel(numeric_level)
    return logger
