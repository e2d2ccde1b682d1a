"""Keyword endpoints."""

from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.common import Keyword
from tmdbapi.models.movie import Movie

BASE_KEYWORD = "keyword"


class TmdbKeywords(AbstractMethod):
    """Plot keywords."""

    async def get_keyword(self, keyword_id: int) -> Keyword:
        """Get a keyword by id."""
        return await self._get_model(self._plain_url(BASE_KEYWORD, keyword_id), Keyword)

    async def get_keyword_movies(
        self, keyword_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Movie]:
        """Get movies tagged with a keyword."""
        api_url = self._url(BASE_KEYWORD, keyword_id, "movies", options=options)
        return await self._get_list(api_url, Movie)
