"""People endpoints."""

import structlog

from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList, ResultsMap
from tmdbapi.core.url import PARAM_END_DATE, PARAM_START_DATE
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.methods.changes import flag_polymorphic_values
from tmdbapi.models.changes import ChangedItem
from tmdbapi.models.common import Artwork
from tmdbapi.models.person import Person, PersonCredits

logger = structlog.get_logger(__name__)

BASE_PERSON = "person"


class TmdbPeople(AbstractMethod):
    """Person details, credits and images."""

    async def get_person_info(
        self, person_id: int, options: RequestOptions | None = None
    ) -> Person:
        """Get detailed person information.

        Args:
            person_id: TMDB person ID
            options: Language and append_to_response sub-resources

        Returns:
            Person with biography, birthday, etc.
        """
        person = await self._get_model(
            self._url(BASE_PERSON, person_id, options=options), Person
        )
        logger.info("tmdb_get_person", person_id=person_id, name=person.name)
        return person

    async def get_person_credits(
        self, person_id: int, options: RequestOptions | None = None
    ) -> PersonCredits:
        """Get the movie credits of a person (both cast and crew)."""
        api_url = self._url(BASE_PERSON, person_id, "movie_credits", options=options)
        credits = await self._get_model(api_url, PersonCredits)
        logger.info(
            "tmdb_get_person_credits",
            person_id=person_id,
            cast_count=len(credits.cast),
            crew_count=len(credits.crew),
        )
        return credits

    async def get_person_images(self, person_id: int) -> ResultsList[Artwork]:
        """Get profile images of a person."""
        return await self._get_list(
            self._plain_url(BASE_PERSON, person_id, "images"),
            Artwork,
            keys=("profiles",),
            source_field="artwork_type",
        )

    async def get_person_changes(
        self,
        person_id: int,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> ResultsMap:
        """Get changes made to a person, grouped by changed field."""
        api_url = self._plain_url(
            BASE_PERSON,
            person_id,
            "changes",
            **{PARAM_START_DATE: start_date, PARAM_END_DATE: end_date},
        )
        changes = await self._get_map(api_url, ChangedItem)
        flag_polymorphic_values(changes, person_id=person_id)
        return changes

    async def get_person_popular(
        self, options: RequestOptions | None = None
    ) -> ResultsList[Person]:
        """Get popular people."""
        return await self._get_list(self._url(BASE_PERSON, "popular", options=options), Person)

    async def get_person_latest(self) -> Person:
        """Get the newest person added to TMDB."""
        return await self._get_model(self._plain_url(BASE_PERSON, "latest"), Person)
