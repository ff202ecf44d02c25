"""Pytest support for conduitpy."""
from .fixtures import api_config, api, api_session, api_client

__all__ = [
    'api_config',
    'api',
    'api_session',
    'api_client',
]
