"""Request URL builder for the TMDB v3 API.

Composes a base endpoint path, path segments, query arguments and an
``append_to_response`` directive into a request URL. Building is pure and
deterministic: the API key always comes first, the remaining arguments are
sorted by name, and append_to_response is placed last.
"""

from collections.abc import Iterable, Mapping
from datetime import date
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx

from tmdbapi.config import settings
from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType

# =============================================================================
# Query parameter vocabulary
# =============================================================================

PARAM_API_KEY = "api_key"
PARAM_SESSION = "session_id"
PARAM_TOKEN = "request_token"
PARAM_LANGUAGE = "language"
PARAM_COUNTRY = "country"
PARAM_PAGE = "page"
PARAM_QUERY = "query"
PARAM_YEAR = "year"
PARAM_PRIMARY_RELEASE_YEAR = "primary_release_year"
PARAM_FIRST_AIR_DATE_YEAR = "first_air_date_year"
PARAM_APPEND = "append_to_response"
PARAM_SORT_BY = "sort_by"
PARAM_INCLUDE_ADULT = "include_adult"
PARAM_INCLUDE_ALL_MOVIES = "include_all_movies"
PARAM_WITH_GENRES = "with_genres"
PARAM_WITH_COMPANIES = "with_companies"
PARAM_RELEASE_DATE_GTE = "release_date.gte"
PARAM_RELEASE_DATE_LTE = "release_date.lte"
PARAM_CERTIFICATION_COUNTRY = "certification_country"
PARAM_CERTIFICATION_LTE = "certification.lte"
PARAM_VOTE_COUNT_GTE = "vote_count.gte"
PARAM_VOTE_AVERAGE_GTE = "vote_average.gte"
PARAM_START_DATE = "start_date"
PARAM_END_DATE = "end_date"
PARAM_SEARCH_TYPE = "search_type"
PARAM_MOVIE_ID = "movie_id"


def format_value(value: Any) -> str | None:
    """Render a query or path value in its canonical string form.

    Returns None for values that must be omitted (None, blank strings).
    Bools become ``true``/``false``; ints have no grouping separators.
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    text = str(value)
    if not text.strip():
        return None
    return text


class ApiUrl:
    """Builder for a single request URL.

    Example:
        url = (
            ApiUrl(api_key, "movie", 550)
            .add_argument(PARAM_LANGUAGE, "en")
            .append_to_response(["credits", "images"])
            .build()
        )
    """

    def __init__(
        self,
        api_key: str,
        base_path: str,
        *path_segments: str | int,
        base_url: str | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url if base_url is not None else settings.tmdb_base_url
        self._base_path = base_path.strip("/")
        self._segments: list[str] = []
        self._arguments: dict[str, str] = {}
        self._append: set[str] = set()
        self.add_path(*path_segments)

    def add_path(self, *segments: str | int) -> "ApiUrl":
        """Append path segments in call order."""
        for segment in segments:
            if isinstance(segment, int) and not isinstance(segment, bool) and segment < 0:
                raise MovieDbException(
                    MovieDbExceptionType.INVALID_URL,
                    f"Negative path identifier: {segment}",
                    response=str(segment),
                )
            text = format_value(segment)
            if text is None:
                raise MovieDbException(
                    MovieDbExceptionType.INVALID_URL,
                    "Blank path segment",
                    response=repr(segment),
                )
            if not text.strip("."):
                raise MovieDbException(
                    MovieDbExceptionType.INVALID_URL,
                    f"Dot path segment: {text}",
                    response=text,
                )
            self._segments.append(text)
        return self

    def add_argument(self, name: str, value: Any) -> "ApiUrl":
        """Add a query argument; blank or absent values are silently dropped."""
        text = format_value(value)
        if text is None:
            self._arguments.pop(name, None)
        else:
            self._arguments[name] = text
        return self

    def add_arguments(self, arguments: Mapping[str, Any]) -> "ApiUrl":
        """Add several query arguments at once."""
        for name, value in arguments.items():
            self.add_argument(name, value)
        return self

    def append_to_response(self, names: Iterable[str] | None) -> "ApiUrl":
        """Request sub-resources to be inlined in the response."""
        for name in names or ():
            if name and name.strip():
                self._append.add(name.strip())
        return self

    @property
    def path(self) -> str:
        """Relative request path with each segment percent-encoded."""
        parts = [self._base_path] if self._base_path else []
        parts.extend(quote(segment, safe="") for segment in self._segments)
        return "/".join(parts)

    def query_pairs(self) -> list[tuple[str, str]]:
        """Query arguments in the order they are serialized."""
        pairs = [(PARAM_API_KEY, self._api_key)]
        pairs.extend(
            (name, self._arguments[name])
            for name in sorted(self._arguments)
            if name not in (PARAM_API_KEY, PARAM_APPEND)
        )
        if self._append:
            pairs.append((PARAM_APPEND, ",".join(sorted(self._append))))
        return pairs

    def build(self) -> str:
        """Compose and validate the full request URL.

        Raises:
            MovieDbException: INVALID_URL if the result is not an absolute http(s) URL
        """
        query = str(httpx.QueryParams(self.query_pairs()))
        raw = f"{self._base_url}{self.path}?{query}"

        try:
            parsed = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise MovieDbException(MovieDbExceptionType.INVALID_URL, str(e), response=raw) from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise MovieDbException(
                MovieDbExceptionType.INVALID_URL,
                "Not an absolute http(s) URL",
                response=raw,
            )
        return raw

    def __str__(self) -> str:
        return self.build()


def build_url(
    api_key: str,
    base_path: str,
    path_segments: Iterable[str | int] = (),
    query_args: Mapping[str, Any] | None = None,
    append_to_response: Iterable[str] | None = None,
    base_url: str | None = None,
) -> str:
    """Functional form of ApiUrl: compose a request URL in one call."""
    api_url = ApiUrl(api_key, base_path, *path_segments, base_url=base_url)
    if query_args:
        api_url.add_arguments(query_args)
    api_url.append_to_response(append_to_response)
    return api_url.build()
