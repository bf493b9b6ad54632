"""
Shared fixtures: isolated config and fake streamed HTTP responses.
No test touches the network.
"""

import io
import json
import os

import pytest
import requests
from requests.structures import CaseInsensitiveDict


EMAIL = "jane@example.com"
TOKEN = "api-token-123"
DOMAIN = "example-test.com"


class BrokenRaw(io.BytesIO):
    """Raw stream that fails after the first chunk"""

    def __init__(self, first: bytes, error: Exception):
        super().__init__(first)
        self._error = error
        self._served = False

    def read(self, *args, **kwargs):
        if self._served:
            raise self._error
        self._served = True
        return super().read(*args, **kwargs)


def make_response(status: int = 200, body=b"", headers=None, raw=None) -> requests.Response:
    """Build a real requests.Response backed by an in-memory stream."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")

    response = requests.Response()
    response.status_code = status
    response.headers = CaseInsensitiveDict(headers or {})
    response.raw = raw if raw is not None else io.BytesIO(body)
    response.url = "https://api.dnsimple.com/v1/"
    return response


def reply(mock_request, status: int = 200, body=b"", headers=None, raw=None):
    """Answer every call with a fresh response (a stream can only be read once)."""
    mock_request.side_effect = lambda **kwargs: make_response(status, body, headers, raw)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DNSIMPLE_* variables from the outer shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("DNSIMPLE_"):
            monkeypatch.delenv(key, raising=False)

    from dnsimple_client.utils.config import reset_settings
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_client():
    """Factory for clients built from explicit options."""
    from dnsimple_client import create_client

    def _make(**options):
        return create_client(**options)

    return _make


@pytest.fixture
def token_client(make_client):
    return make_client(email=EMAIL, token=TOKEN)


@pytest.fixture
def mock_request():
    """Patch the transport; answer with reply() or set .side_effect per test."""
    from unittest.mock import patch

    with patch("dnsimple_client.api.dnsimple_client.requests.request") as mocked:
        reply(mocked, 200, {})
        yield mocked
