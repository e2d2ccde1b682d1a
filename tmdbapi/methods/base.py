"""Shared plumbing for endpoint groups.

Each endpoint method builds one URL, performs one round trip through the
client's transport and decodes the body. Failures propagate as
MovieDbException.
"""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel

from tmdbapi.core.decoder import convert_to_json, decode, decode_list, decode_map
from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType
from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList, ResultsMap
from tmdbapi.core.transport import HttpMethod, HttpTransport
from tmdbapi.core.url import PARAM_SESSION, ApiUrl

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class AbstractMethod:
    """Base class for an endpoint group (movies, tv, search, ...)."""

    def __init__(
        self,
        api_key: str,
        transport: HttpTransport,
        base_url: str | None = None,
        default_language: str | None = None,
    ):
        self._api_key = api_key
        self._transport = transport
        self._base_url = base_url
        self._default_language = default_language

    # =========================================================================
    # URL helpers
    # =========================================================================

    def _url(
        self,
        base_path: str,
        *path_segments: str | int,
        options: RequestOptions | None = None,
        **arguments: Any,
    ) -> ApiUrl:
        """URL for a localized endpoint.

        Applies per-call options; without an explicit language the client
        default is sent.
        """
        api_url = ApiUrl(self._api_key, base_path, *path_segments, base_url=self._base_url)
        (options or RequestOptions()).apply(api_url, self._default_language)
        api_url.add_arguments(arguments)
        return api_url

    def _plain_url(self, base_path: str, *path_segments: str | int, **arguments: Any) -> ApiUrl:
        """URL for an endpoint that takes no language or page."""
        api_url = ApiUrl(self._api_key, base_path, *path_segments, base_url=self._base_url)
        api_url.add_arguments(arguments)
        return api_url

    def _session_url(self, session_id: str, base_path: str, *path_segments: str | int) -> ApiUrl:
        """URL for a call that needs a user session."""
        if not session_id or not session_id.strip():
            raise MovieDbException(MovieDbExceptionType.INVALID_URL, "Session id is required")
        return self._plain_url(base_path, *path_segments).add_argument(PARAM_SESSION, session_id)

    # =========================================================================
    # Request helpers
    # =========================================================================

    async def _fetch(
        self,
        api_url: ApiUrl,
        body: Mapping[str, Any] | None = None,
        method: HttpMethod = HttpMethod.GET,
    ) -> str:
        json_body = convert_to_json(body) if body is not None else None
        return await self._transport.fetch(api_url.build(), json_body, method)

    async def _get_model(
        self,
        api_url: ApiUrl,
        model: type[ModelT],
        body: Mapping[str, Any] | None = None,
        method: HttpMethod = HttpMethod.GET,
    ) -> ModelT:
        raw_body = await self._fetch(api_url, body, method)
        return decode(raw_body, model)

    async def _get_list(
        self,
        api_url: ApiUrl,
        item_model: type[ModelT],
        keys: Sequence[str] = ("results",),
        source_field: str | None = None,
    ) -> ResultsList[ModelT]:
        raw_body = await self._fetch(api_url)
        return decode_list(raw_body, item_model, keys, source_field=source_field)

    async def _get_map(self, api_url: ApiUrl, item_model: type[ModelT]) -> ResultsMap:
        raw_body = await self._fetch(api_url)
        return decode_map(raw_body, item_model)
