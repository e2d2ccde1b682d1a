"""User list endpoints."""

import structlog

from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType
from tmdbapi.core.transport import HttpMethod
from tmdbapi.core.url import PARAM_MOVIE_ID
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.account import ListCreated, ListItemStatus
from tmdbapi.models.common import StatusCode
from tmdbapi.models.movie import MovieList

logger = structlog.get_logger(__name__)

BASE_LIST = "list"


def _require_list_id(list_id: str | int) -> str | int:
    if isinstance(list_id, str) and not list_id.strip():
        raise MovieDbException(MovieDbExceptionType.INVALID_URL, "List id is required")
    return list_id


class TmdbLists(AbstractMethod):
    """Read, create and edit user lists."""

    async def get_list(self, list_id: str | int) -> MovieList:
        """Get a list with its items."""
        api_url = self._plain_url(BASE_LIST, _require_list_id(list_id))
        return await self._get_model(api_url, MovieList)

    async def create_list(
        self,
        session_id: str,
        name: str,
        description: str = "",
    ) -> int | str | None:
        """Create a new list for the session's user.

        Returns:
            The id of the new list
        """
        api_url = self._session_url(session_id, BASE_LIST)
        body = {"name": name, "description": description}
        created = await self._get_model(api_url, ListCreated, body=body, method=HttpMethod.POST)
        logger.info("tmdb_list_created", list_id=created.list_id, name=name)
        return created.list_id

    async def is_movie_on_list(self, list_id: str | int, movie_id: int) -> bool:
        """Check whether a movie is on a list."""
        api_url = self._plain_url(
            BASE_LIST, _require_list_id(list_id), "item_status", **{PARAM_MOVIE_ID: movie_id}
        )
        status = await self._get_model(api_url, ListItemStatus)
        return status.item_present

    async def add_movie_to_list(
        self, session_id: str, list_id: str | int, movie_id: int
    ) -> StatusCode:
        """Add a movie to a list."""
        return await self._modify_movie_list(session_id, list_id, movie_id, "add_item")

    async def remove_movie_from_list(
        self, session_id: str, list_id: str | int, movie_id: int
    ) -> StatusCode:
        """Remove a movie from a list."""
        return await self._modify_movie_list(session_id, list_id, movie_id, "remove_item")

    async def _modify_movie_list(
        self, session_id: str, list_id: str | int, movie_id: int, operation: str
    ) -> StatusCode:
        api_url = self._session_url(session_id, BASE_LIST, _require_list_id(list_id), operation)
        return await self._get_model(
            api_url, StatusCode, body={"media_id": movie_id}, method=HttpMethod.POST
        )

    async def delete_movie_list(self, session_id: str, list_id: str | int) -> StatusCode:
        """Delete a list owned by the session's user."""
        api_url = self._session_url(session_id, BASE_LIST, _require_list_id(list_id))
        status = await self._get_model(api_url, StatusCode, method=HttpMethod.DELETE)
        logger.info("tmdb_list_deleted", list_id=list_id, status_code=status.status_code)
        return status
