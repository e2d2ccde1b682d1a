"""Search endpoints."""

from enum import Enum

import structlog

from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList
from tmdbapi.core.url import (
    PARAM_FIRST_AIR_DATE_YEAR,
    PARAM_INCLUDE_ADULT,
    PARAM_QUERY,
    PARAM_SEARCH_TYPE,
    PARAM_YEAR,
)
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.common import Company, Keyword
from tmdbapi.models.movie import Collection, Movie, MovieList
from tmdbapi.models.person import Person
from tmdbapi.models.tv import TVSeriesBasic

logger = structlog.get_logger(__name__)

BASE_SEARCH = "search"


class SearchType(str, Enum):
    """Matching strategy for title searches."""

    PHRASE = "phrase"
    NGRAM = "ngram"


class TmdbSearch(AbstractMethod):
    """Search movies, TV, people, collections, lists, companies and keywords."""

    async def search_movie(
        self,
        query: str,
        year: int | None = None,
        include_adult: bool | None = None,
        options: RequestOptions | None = None,
    ) -> ResultsList[Movie]:
        """Search for movies by title.

        Args:
            query: Movie title to search for
            year: Optional release year filter
            include_adult: Include adult titles
            options: Language and page

        Returns:
            Page of matching movies
        """
        api_url = self._url(
            BASE_SEARCH,
            "movie",
            options=options,
            **{
                PARAM_QUERY: query,
                PARAM_YEAR: year if year and year > 0 else None,
                PARAM_INCLUDE_ADULT: include_adult,
            },
        )
        results = await self._get_list(api_url, Movie)
        logger.info(
            "tmdb_search_movie",
            query=query,
            year=year,
            results_count=len(results),
            total_results=results.total_results,
        )
        return results

    async def search_tv(
        self,
        query: str,
        year: int | None = None,
        search_type: SearchType | None = None,
        options: RequestOptions | None = None,
    ) -> ResultsList[TVSeriesBasic]:
        """Search for TV series by name.

        Args:
            query: Series name
            year: Optional first air year filter
            search_type: Phrase or ngram matching
            options: Language and page
        """
        api_url = self._url(
            BASE_SEARCH,
            "tv",
            options=options,
            **{
                PARAM_QUERY: query,
                PARAM_FIRST_AIR_DATE_YEAR: year if year and year > 0 else None,
                PARAM_SEARCH_TYPE: search_type,
            },
        )
        results = await self._get_list(api_url, TVSeriesBasic)
        logger.info("tmdb_search_tv", query=query, year=year, results_count=len(results))
        return results

    async def search_collection(
        self, query: str, options: RequestOptions | None = None
    ) -> ResultsList[Collection]:
        """Search for collections by name."""
        api_url = self._url(BASE_SEARCH, "collection", options=options, **{PARAM_QUERY: query})
        return await self._get_list(api_url, Collection)

    async def search_people(
        self,
        query: str,
        include_adult: bool | None = None,
        options: RequestOptions | None = None,
    ) -> ResultsList[Person]:
        """Search for people by name."""
        api_url = self._url(
            BASE_SEARCH,
            "person",
            options=options,
            **{PARAM_QUERY: query, PARAM_INCLUDE_ADULT: include_adult},
        )
        results = await self._get_list(api_url, Person)
        logger.info("tmdb_search_person", query=query, results_count=len(results))
        return results

    async def search_list(
        self, query: str, options: RequestOptions | None = None
    ) -> ResultsList[MovieList]:
        """Search for user lists by name."""
        api_url = self._url(BASE_SEARCH, "list", options=options, **{PARAM_QUERY: query})
        return await self._get_list(api_url, MovieList)

    async def search_companies(
        self, query: str, options: RequestOptions | None = None
    ) -> ResultsList[Company]:
        """Search for production companies by name."""
        api_url = self._url(BASE_SEARCH, "company", options=options, **{PARAM_QUERY: query})
        return await self._get_list(api_url, Company)

    async def search_keyword(
        self, query: str, options: RequestOptions | None = None
    ) -> ResultsList[Keyword]:
        """Search for keywords."""
        api_url = self._url(BASE_SEARCH, "keyword", options=options, **{PARAM_QUERY: query})
        return await self._get_list(api_url, Keyword)
