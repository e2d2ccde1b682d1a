"""Shared fixtures for TMDB client tests."""

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from tmdbapi.core.transport import HttpMethod, HttpTransport


class MockClientTransport(HttpTransport):
    """Full-featured transport over a mocked httpx client."""

    supports_body = True
    supported_methods = frozenset(HttpMethod)

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def aclose(self) -> None:
        return None


@pytest.fixture
def mock_response():
    """Create a mock HTTP response."""

    def _create_response(data: Any, status_code: int = 200):
        response = MagicMock(spec=httpx.Response)
        response.status_code = status_code
        response.text = data if isinstance(data, str) else json.dumps(data)
        response.headers = {}
        return response

    return _create_response


@pytest.fixture
def mock_http_client():
    """Mocked httpx.AsyncClient whose request() is an AsyncMock."""
    client = MagicMock(spec=httpx.AsyncClient)
    client.request = AsyncMock()
    return client


@pytest.fixture
def transport(mock_http_client):
    """Transport supporting every method, backed by the mocked client."""
    return MockClientTransport(mock_http_client)
