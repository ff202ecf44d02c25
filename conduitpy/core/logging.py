"""Logging utilities for conduitpy modules."""

import logging

ROOT_LOGGER_NAME = 'conduitpy'


def get_logger(name: str) -> logging.Logger:
    """Get a package logger that defers to the root logger.

    Short names are placed under the package namespace, so
    ``get_logger('request')`` and ``get_logger('conduitpy.request')``
    return the same logger and setup_logging() reaches both.

    Loggers returned here propagate to the root logger, so a plain
    basicConfig() in a test session is enough to see their output.
    While the root logger has no handlers, a logger without a level of
    its own is held at WARNING so composed URLs and dispatch lines stay
    quiet by default.

    Args:
        name: Logger name, e.g. 'request' or 'conduitpy.request'

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    logger.propagate = True

    if not logging.getLogger().handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    return logger
