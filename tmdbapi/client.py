"""TMDB (The Movie Database) API client.

Entry point of the package. The client owns the transport, fetches the
image configuration once on entry and exposes the endpoint groups as
memoized attributes scoped to the instance.

API Documentation: https://developer.themoviedb.org/docs
"""

from functools import cached_property
from typing import Any

import httpx
import structlog

from tmdbapi.compare import compare_movies
from tmdbapi.config import settings
from tmdbapi.core.decoder import decode
from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType
from tmdbapi.core.transport import HttpTransport, HttpxTransport, InjectedClientTransport
from tmdbapi.core.url import ApiUrl
from tmdbapi.methods import (
    TmdbAccount,
    TmdbAuthentication,
    TmdbChanges,
    TmdbCollections,
    TmdbCompanies,
    TmdbDiscover,
    TmdbGenres,
    TmdbJobs,
    TmdbKeywords,
    TmdbLists,
    TmdbMovies,
    TmdbPeople,
    TmdbSearch,
    TmdbTV,
)
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.configuration import Configuration, ImageConfiguration

logger = structlog.get_logger(__name__)


class TMDBClient:
    """Async client for The Movie Database API.

    Example:
        async with TMDBClient(api_key="...") as tmdb:
            results = await tmdb.search.search_movie("Fight Club", year=1999)
            movie = await tmdb.movies.get_movie_info(
                results[0].id,
                RequestOptions(append_to_response={"credits", "images"}),
            )
            poster = tmdb.create_image_url(movie.poster_path, "w500")
    """

    def __init__(
        self,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        language: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
    ):
        """Initialize TMDB client.

        Args:
            api_key: TMDB API key. Uses settings.tmdb_api_key if None.
            http_client: Caller-owned httpx client. When given, the client is
                read-only (GET requests only); otherwise a built-in transport
                supporting writes is created.
            language: Default language for requests. Uses settings.default_language if None.
            base_url: API base URL. Uses settings.tmdb_base_url if None.
            timeout: Built-in transport timeout. Uses settings.request_timeout if None.
            proxy: Built-in transport proxy URL. Uses settings.proxy_url if None.

        Raises:
            MovieDbException: AUTHORISATION_FAILURE if no API key is available
        """
        if api_key is None and settings.tmdb_api_key is not None:
            api_key = settings.tmdb_api_key.get_secret_value()
        if not api_key:
            raise MovieDbException(
                MovieDbExceptionType.AUTHORISATION_FAILURE, "TMDB API key is not set"
            )

        self._api_key = api_key
        self._language = language if language is not None else settings.default_language
        self._base_url = base_url if base_url is not None else settings.tmdb_base_url

        self._transport: HttpTransport
        if http_client is not None:
            self._transport = InjectedClientTransport(http_client)
        else:
            self._transport = HttpxTransport(timeout=timeout, proxy=proxy)

        self._configuration: Configuration | None = None
        self._closed = False

    async def __aenter__(self) -> "TMDBClient":
        """Enter async context manager and load the API configuration."""
        if self._closed:
            raise RuntimeError("TMDBClient cannot be reused after it has been closed")
        try:
            await self.load_configuration()
        except MovieDbException:
            await self.aclose()
            raise
        return self

    async def __aexit__(
        self,
        _exc_type: Any,
        _exc_val: Any,
        _exc_tb: Any,
    ) -> None:
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client owns it."""
        if not self._closed:
            await self._transport.aclose()
            self._closed = True

    @property
    def transport(self) -> HttpTransport:
        """Transport strategy selected at construction."""
        return self._transport

    # =========================================================================
    # Configuration
    # =========================================================================

    async def load_configuration(self) -> Configuration:
        """Fetch the configuration endpoint (image base URL and sizes).

        Raises:
            MovieDbException: MAPPING_FAILED if the configuration cannot be read
        """
        api_url = ApiUrl(self._api_key, "configuration", base_url=self._base_url)
        raw_body = await self._transport.fetch(api_url.build())
        try:
            self._configuration = decode(raw_body, Configuration)
        except MovieDbException as e:
            logger.warning("tmdb_configuration_failed", error=e.message)
            raise MovieDbException(
                MovieDbExceptionType.MAPPING_FAILED,
                "Failed to read configuration",
                response=raw_body,
            ) from e

        logger.debug(
            "tmdb_configuration_loaded",
            base_url=self._configuration.images.base_url,
            sizes=len(self._configuration.images.all_sizes),
        )
        return self._configuration

    @property
    def configuration(self) -> Configuration:
        """Configuration fetched on context entry.

        Raises:
            RuntimeError: If the configuration was not loaded (not in context manager)
        """
        if self._configuration is None:
            raise RuntimeError("TMDBClient must be used as async context manager")
        return self._configuration

    @property
    def image_configuration(self) -> ImageConfiguration:
        """Image part of the configuration."""
        return self.configuration.images

    def create_image_url(self, image_path: str | None, required_size: str) -> str:
        """Generate the full image URL from the size and image path.

        Args:
            image_path: Image path as returned by the API ("/abc.jpg")
            required_size: Size token ("w500", "original", ...)

        Returns:
            Full image URL

        Raises:
            MovieDbException: INVALID_IMAGE for an unknown size, INVALID_URL
                for a missing path or if the result is not a valid URL
        """
        if not image_path or not image_path.strip():
            raise MovieDbException(
                MovieDbExceptionType.INVALID_URL, "Image path is required", response=image_path
            )

        images = self.image_configuration
        if not images.is_valid_size(required_size):
            raise MovieDbException(
                MovieDbExceptionType.INVALID_IMAGE,
                f"Invalid image size: {required_size}",
                response=required_size,
            )

        url = f"{images.base_url}{required_size}{image_path}"
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            logger.warning("tmdb_invalid_image_url", error=str(e))
            raise MovieDbException(MovieDbExceptionType.INVALID_URL, str(e), response=url) from e
        if not parsed.is_absolute_url:
            raise MovieDbException(
                MovieDbExceptionType.INVALID_URL, "Image URL is not absolute", response=url
            )
        return url

    # =========================================================================
    # Endpoint groups
    # =========================================================================

    def _group(self, cls: type[AbstractMethod]) -> Any:
        return cls(
            self._api_key,
            self._transport,
            base_url=self._base_url,
            default_language=self._language,
        )

    @cached_property
    def authentication(self) -> TmdbAuthentication:
        return self._group(TmdbAuthentication)

    @cached_property
    def account(self) -> TmdbAccount:
        return self._group(TmdbAccount)

    @cached_property
    def movies(self) -> TmdbMovies:
        return self._group(TmdbMovies)

    @cached_property
    def collections(self) -> TmdbCollections:
        return self._group(TmdbCollections)

    @cached_property
    def people(self) -> TmdbPeople:
        return self._group(TmdbPeople)

    @cached_property
    def companies(self) -> TmdbCompanies:
        return self._group(TmdbCompanies)

    @cached_property
    def genres(self) -> TmdbGenres:
        return self._group(TmdbGenres)

    @cached_property
    def keywords(self) -> TmdbKeywords:
        return self._group(TmdbKeywords)

    @cached_property
    def search(self) -> TmdbSearch:
        return self._group(TmdbSearch)

    @cached_property
    def lists(self) -> TmdbLists:
        return self._group(TmdbLists)

    @cached_property
    def changes(self) -> TmdbChanges:
        return self._group(TmdbChanges)

    @cached_property
    def jobs(self) -> TmdbJobs:
        return self._group(TmdbJobs)

    @cached_property
    def discover(self) -> TmdbDiscover:
        return self._group(TmdbDiscover)

    @cached_property
    def tv(self) -> TmdbTV:
        return self._group(TmdbTV)

    # =========================================================================
    # Helpers
    # =========================================================================

    compare_movies = staticmethod(compare_movies)
