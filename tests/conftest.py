"""Pytest fixtures for conduitpy tests."""
from conduitpy.testing.fixtures import (  # noqa: F401
    api_config,
    api,
    api_session,
    api_client
)
