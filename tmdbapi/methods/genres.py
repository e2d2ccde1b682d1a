"""Genre endpoints."""

from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList
from tmdbapi.core.url import PARAM_INCLUDE_ALL_MOVIES
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.common import Genre
from tmdbapi.models.movie import Movie

BASE_GENRE = "genre"


class TmdbGenres(AbstractMethod):
    """Movie genres."""

    async def get_genre_list(self, options: RequestOptions | None = None) -> ResultsList[Genre]:
        """Get the list of official movie genres."""
        api_url = self._url(BASE_GENRE, "list", options=options)
        return await self._get_list(api_url, Genre, keys=("genres",))

    async def get_genre_movies(
        self,
        genre_id: int,
        options: RequestOptions | None = None,
        include_all_movies: bool | None = None,
    ) -> ResultsList[Movie]:
        """Get movies of a genre.

        Args:
            genre_id: TMDB genre ID
            options: Language and page
            include_all_movies: Include movies with fewer than 10 votes
        """
        api_url = self._url(
            BASE_GENRE,
            genre_id,
            "movies",
            options=options,
            **{PARAM_INCLUDE_ALL_MOVIES: include_all_movies},
        )
        return await self._get_list(api_url, Movie)
