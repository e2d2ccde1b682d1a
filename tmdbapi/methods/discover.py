"""Discover endpoint."""

import structlog

from tmdbapi.core.options import Discover
from tmdbapi.core.results import ResultsList
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.movie import Movie

logger = structlog.get_logger(__name__)


class TmdbDiscover(AbstractMethod):
    """Movie discovery by filters (genres, dates, votes, certifications...)."""

    async def get_discover(self, discover: Discover) -> ResultsList[Movie]:
        """Discover movies matching the given filters."""
        params = discover.get_params()
        api_url = self._plain_url("discover", "movie", **params)
        results = await self._get_list(api_url, Movie)
        logger.info(
            "tmdb_discover",
            filters=sorted(params),
            results_count=len(results),
            total_results=results.total_results,
        )
        return results
