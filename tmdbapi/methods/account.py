"""Account endpoints (require a session id)."""

import structlog

from tmdbapi.core.results import ResultsList
from tmdbapi.core.transport import HttpMethod
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.account import Account
from tmdbapi.models.common import StatusCode
from tmdbapi.models.movie import Movie, MovieList

logger = structlog.get_logger(__name__)

BASE_ACCOUNT = "account"


class TmdbAccount(AbstractMethod):
    """Account details, favourites, watch list and rated movies."""

    async def get_account(self, session_id: str) -> Account:
        """Get the basic information for an account."""
        return await self._get_model(self._session_url(session_id, BASE_ACCOUNT), Account)

    async def get_favorite_movies(self, session_id: str, account_id: int) -> ResultsList[Movie]:
        """Get the movies marked as favourite by the account."""
        api_url = self._session_url(session_id, BASE_ACCOUNT, account_id, "favorite_movies")
        return await self._get_list(api_url, Movie)

    async def change_favorite_status(
        self,
        session_id: str,
        account_id: int,
        movie_id: int,
        is_favorite: bool,
    ) -> StatusCode:
        """Add or remove a movie from the account's favourites."""
        api_url = self._session_url(session_id, BASE_ACCOUNT, account_id, "favorite")
        body = {"movie_id": movie_id, "favorite": is_favorite}
        status = await self._get_model(api_url, StatusCode, body=body, method=HttpMethod.POST)
        logger.info(
            "tmdb_change_favorite_status",
            account_id=account_id,
            movie_id=movie_id,
            favorite=is_favorite,
            status_code=status.status_code,
        )
        return status

    async def add_to_watch_list(
        self, session_id: str, account_id: int, movie_id: int
    ) -> StatusCode:
        """Add a movie to the account's watch list."""
        return await self._modify_watch_list(session_id, account_id, movie_id, add=True)

    async def remove_from_watch_list(
        self, session_id: str, account_id: int, movie_id: int
    ) -> StatusCode:
        """Remove a movie from the account's watch list."""
        return await self._modify_watch_list(session_id, account_id, movie_id, add=False)

    async def _modify_watch_list(
        self, session_id: str, account_id: int, movie_id: int, add: bool
    ) -> StatusCode:
        api_url = self._session_url(session_id, BASE_ACCOUNT, account_id, "movie_watchlist")
        body = {"movie_id": movie_id, "movie_watchlist": add}
        return await self._get_model(api_url, StatusCode, body=body, method=HttpMethod.POST)

    async def get_watch_list(self, session_id: str, account_id: int) -> ResultsList[Movie]:
        """Get the movies on the account's watch list."""
        api_url = self._session_url(session_id, BASE_ACCOUNT, account_id, "movie_watchlist")
        return await self._get_list(api_url, Movie)

    async def get_rated_movies(self, session_id: str, account_id: int) -> ResultsList[Movie]:
        """Get the movies rated by the account."""
        api_url = self._session_url(session_id, BASE_ACCOUNT, account_id, "rated_movies")
        return await self._get_list(api_url, Movie)

    async def get_user_lists(self, session_id: str, account_id: int) -> ResultsList[MovieList]:
        """Get the lists created by the account."""
        api_url = self._session_url(session_id, BASE_ACCOUNT, account_id, "lists")
        return await self._get_list(api_url, MovieList)
