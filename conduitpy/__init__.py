"""
conduitpy - Fluent request building for Conduit API tests.

Usage:
    >>> from conduitpy import RequestBuilder
    >>>
    >>> api = RequestBuilder()
    >>> api.set_path('/api/articles').set_query_params({'limit': 10}).compose_url()
    'https://conduit-api.bondaracademy.com/api/articles?limit=10'
"""
import logging

from .core.api import (
    RequestBuilder,
    RequestDescriptorBuilder,
    RequestDescriptor,
    RequestHandler,
    EventEmitter,
    APIConfig,
    TimeoutConfig,
    DEFAULT_ORIGIN
)
from .core.exceptions import (
    ConduitException,
    InvalidUrlError,
    TransportNotBoundError
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for conduitpy modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'conduitpy',
        'conduitpy.request',
        'conduitpy.dispatch',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'RequestBuilder',
    'RequestDescriptorBuilder',
    'RequestDescriptor',
    'RequestHandler',
    'EventEmitter',
    'APIConfig',
    'TimeoutConfig',
    'DEFAULT_ORIGIN',
    'ConduitException',
    'InvalidUrlError',
    'TransportNotBoundError',
    'setup_logging',
]
