"""Conduit API request layer."""
from .config import APIConfig, TimeoutConfig, DEFAULT_ORIGIN
from .events import EventEmitter
from .request import (
    RequestBuilder,
    RequestDescriptorBuilder,
    RequestDescriptor,
    RequestHandler
)

__all__ = [
    # Builder
    'RequestBuilder',
    'RequestDescriptorBuilder',
    'RequestDescriptor',

    # Dispatch
    'RequestHandler',
    'EventEmitter',

    # Configuration
    'APIConfig',
    'TimeoutConfig',
    'DEFAULT_ORIGIN',
]
