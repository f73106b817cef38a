"""
Shared fixtures for the GenderAPI client tests

Every request goes through httpx.MockTransport; nothing touches the network.
"""
import os
import sys

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import httpx
import pytest

from genderapi.client import GenderAPIClient
from genderapi.config import Settings, get_settings
from helpers import RecordingTransport


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep GENDERAPI_* variables from the host out of the tests"""
    for key in list(os.environ):
        if key.startswith("GENDERAPI_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings with true defaults, ignoring any .env file"""
    return Settings(_env_file=None, environment="test")


@pytest.fixture
def json_transport():
    """Factory for a transport that always answers with the given status and JSON body"""

    def factory(body=None, status_code=200):
        if body is None:
            body = {"status": True, "gender": "female", "probability": 98}
        return RecordingTransport(lambda request: httpx.Response(status_code, json=body))

    return factory


@pytest.fixture
def make_client(settings):
    """Factory for a GenderAPIClient wired to a mock transport"""
    def factory(transport, api_key="test-key", base_url=None, **kwargs):
        http_client = httpx.AsyncClient(transport=transport)
        client = GenderAPIClient(
            api_key=api_key,
            base_url=base_url,
            http_client=http_client,
            settings=settings,
            **kwargs,
        )
        return client

    return factory
