"""
Pytest fixtures for API tests.

Every test that asks for ``api`` gets its own RequestBuilder, so no
configuration leaks from one test into the next:

    def test_tags(api_client):
        api_client.builder.set_path('/api/tags')
        assert api_client.get().status_code == 200

Import the fixtures into a conftest.py to make them available. This
module needs pytest, installed with the ``testing`` extra:

    pip install conduitpy[testing]
"""
import pytest
import requests

from conduitpy.core.api import APIConfig, RequestBuilder, RequestHandler


@pytest.fixture
def api_config():
    """Default API configuration."""
    return APIConfig.default()


@pytest.fixture
def api(api_config):
    """Fresh RequestBuilder for each test."""
    builder = RequestBuilder(api_config)
    yield builder
    builder.reset()


@pytest.fixture
def api_session(api_config):
    """requests.Session closed after the test."""
    with requests.Session() as session:
        session.headers.update(api_config.get_session_headers())
        yield session


@pytest.fixture
def api_client(api, api_session, api_config):
    """RequestHandler over the test's builder, bound to a live session."""
    api.bind_transport(api_session)
    return RequestHandler(api, api_config)
