"""HTTP transport strategies.

Two strategies are available and one is selected when a TMDBClient is
built:

- HttpxTransport: built-in, owns its httpx.AsyncClient, supports GET, POST
  and DELETE with optional JSON bodies.
- InjectedClientTransport: wraps a caller-supplied httpx.AsyncClient and
  supports plain GET only. Anything else fails fast with
  UNSUPPORTED_OPERATION instead of silently dropping the body.

Transport-level failures are normalized into MovieDbException.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

import httpx
import structlog

from tmdbapi.config import settings
from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType

logger = structlog.get_logger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}
JSON_HEADERS = {"Content-Type": "application/json"}


class HttpMethod(str, Enum):
    """HTTP methods used by the API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


def _endpoint_of(url: str) -> str:
    """URL without the query string, safe to log."""
    return url.split("?", 1)[0]


class HttpTransport(ABC):
    """Performs one HTTP round trip and returns the raw response body."""

    supports_body: bool = False
    supported_methods: frozenset[HttpMethod] = frozenset({HttpMethod.GET})

    @property
    @abstractmethod
    def client(self) -> httpx.AsyncClient:
        """Underlying httpx client."""

    def check_supported(self, method: HttpMethod, body: str | None) -> None:
        """Reject method/body combinations this strategy cannot send.

        Raises:
            MovieDbException: UNSUPPORTED_OPERATION
        """
        if method not in self.supported_methods:
            raise MovieDbException(
                MovieDbExceptionType.UNSUPPORTED_OPERATION,
                f"{type(self).__name__} cannot send {method.value} requests",
            )
        if body and not self.supports_body:
            raise MovieDbException(
                MovieDbExceptionType.UNSUPPORTED_OPERATION,
                f"{type(self).__name__} cannot send a JSON request body",
                response=body,
            )

    async def fetch(
        self,
        url: str,
        body: str | None = None,
        method: HttpMethod = HttpMethod.GET,
    ) -> str:
        """Send a request and return the response text.

        Args:
            url: Fully built request URL
            body: Optional JSON request body
            method: HTTP method

        Returns:
            Raw response body

        Raises:
            MovieDbException: CONNECTION_ERROR, HTTP_503_ERROR,
                AUTHORISATION_FAILURE, INVALID_URL, UNSUPPORTED_OPERATION
                or UNKNOWN_CAUSE
        """
        self.check_supported(method, body)

        endpoint = _endpoint_of(url)
        logger.debug("tmdb_request", method=method.value, endpoint=endpoint)

        request_kwargs: dict[str, Any] = {"headers": dict(DEFAULT_HEADERS)}
        if body:
            request_kwargs["content"] = body
            request_kwargs["headers"].update(JSON_HEADERS)

        try:
            response = await self.client.request(method.value, url, **request_kwargs)
        except httpx.InvalidURL as e:
            logger.warning("tmdb_invalid_url", endpoint=endpoint, error=str(e))
            raise MovieDbException(MovieDbExceptionType.INVALID_URL, str(e), response=url) from e
        except httpx.TimeoutException as e:
            logger.warning("tmdb_timeout", endpoint=endpoint)
            raise MovieDbException(
                MovieDbExceptionType.CONNECTION_ERROR, f"Request timeout: {e}"
            ) from e
        except httpx.TransportError as e:
            logger.warning("tmdb_connection_error", endpoint=endpoint, error=str(e))
            raise MovieDbException(
                MovieDbExceptionType.CONNECTION_ERROR, f"Connection failed: {e}"
            ) from e
        except httpx.HTTPError as e:
            # Undecodable bodies, redirect loops
            logger.warning("tmdb_request_failed", endpoint=endpoint, error=str(e))
            raise MovieDbException(
                MovieDbExceptionType.CONNECTION_ERROR, f"HTTP error: {e}"
            ) from e

        return self._handle_response(response, endpoint)

    def _handle_response(self, response: httpx.Response, endpoint: str) -> str:
        """Map the HTTP status to a body or a typed failure."""
        status = response.status_code
        if status < 400:
            return response.text

        text = response.text
        logger.warning("tmdb_http_error", endpoint=endpoint, status=status)

        if status == 503:
            raise MovieDbException(
                MovieDbExceptionType.HTTP_503_ERROR,
                "Service Unavailable",
                response=text,
                status_code=status,
            )
        if status == 401:
            raise MovieDbException(
                MovieDbExceptionType.AUTHORISATION_FAILURE,
                "Request was not authorised",
                response=text,
                status_code=status,
            )
        raise MovieDbException(
            MovieDbExceptionType.UNKNOWN_CAUSE,
            f"TMDB API error {status}",
            response=text,
            status_code=status,
        )

    @abstractmethod
    async def aclose(self) -> None:
        """Release transport resources."""


class HttpxTransport(HttpTransport):
    """Built-in transport owning its own httpx.AsyncClient."""

    supports_body = True
    supported_methods = frozenset(HttpMethod)

    def __init__(
        self,
        timeout: float | None = None,
        proxy: str | None = None,
    ):
        """Initialize transport.

        Args:
            timeout: Request timeout in seconds. Uses settings.request_timeout if None.
            proxy: Optional proxy URL. Uses settings.proxy_url if None.
        """
        self._client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.request_timeout,
            proxy=proxy if proxy is not None else settings.proxy_url,
            headers=DEFAULT_HEADERS,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def aclose(self) -> None:
        await self._client.aclose()


class InjectedClientTransport(HttpTransport):
    """Read-only transport over a caller-owned httpx.AsyncClient.

    Timeouts, proxies and connection pooling are whatever the caller
    configured on the client. The client is never closed here.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def aclose(self) -> None:
        return None
