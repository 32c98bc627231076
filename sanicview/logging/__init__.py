"""
Logging Package
Structured logging for the view layer

Provides a drop-in replacement for logging.getLogger that keeps every
logger under the package namespace so one LoggerConfig call configures them.
"""
from sanicview.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Names outside the package namespace are nested under it, so
    getLogger('views') returns the 'sanicview.views' logger.
    Sanic's own loggers are passed through untouched.

    Args:
        name: Logger name (package root logger if None)

    Returns:
        Logger instance

    Example:
        from sanicview.logging import getLogger
        logger = getLogger(__name__)
        logger.warning("Template missing", extra={'template': 'home'})
    """
    from sanicview.defaults import DEFAULT_LOGGER_NAME

    if name and name.startswith('sanic.'):
        return logging.getLogger(name)

    if not name:
        return logging.getLogger(DEFAULT_LOGGER_NAME)

    if name != DEFAULT_LOGGER_NAME and not name.startswith(DEFAULT_LOGGER_NAME + '.'):
        name = f"{DEFAULT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
