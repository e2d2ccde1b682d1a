"""Change-log endpoints.

Change values are polymorphic upstream: the same key can carry strings,
numbers, objects or lists. Values are passed through untouched and mixed
types are reported in the log instead of being coerced into one shape.
"""

import structlog

from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList, ResultsMap
from tmdbapi.core.url import PARAM_END_DATE, PARAM_START_DATE
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.changes import ChangedItem, ChangedMedia

logger = structlog.get_logger(__name__)


def _json_kind(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def flag_polymorphic_values(changes: ResultsMap, **context: object) -> list[str]:
    """Log keys whose change values mix JSON types.

    Returns:
        Sorted names of the keys with mixed value types
    """
    mixed = []
    for key, items in changes.results.items():
        kinds = {
            _json_kind(item.value)
            for item in items
            if isinstance(item, ChangedItem) and item.value is not None
        }
        if len(kinds) > 1:
            mixed.append(key)
            logger.warning(
                "tmdb_change_value_schema_varies",
                key=key,
                kinds=sorted(kinds),
                **context,
            )
    return sorted(mixed)


class TmdbChanges(AbstractMethod):
    """Global lists of changed movies and people."""

    async def get_movie_changes_list(
        self,
        options: RequestOptions | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> ResultsList[ChangedMedia]:
        """Get ids of movies changed in the date range (default: last 24 hours)."""
        return await self._get_changes_list("movie", options, start_date, end_date)

    async def get_person_changes_list(
        self,
        options: RequestOptions | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> ResultsList[ChangedMedia]:
        """Get ids of people changed in the date range (default: last 24 hours)."""
        return await self._get_changes_list("person", options, start_date, end_date)

    async def _get_changes_list(
        self,
        media: str,
        options: RequestOptions | None,
        start_date: str | None,
        end_date: str | None,
    ) -> ResultsList[ChangedMedia]:
        api_url = self._url(
            media,
            "changes",
            options=options,
            **{PARAM_START_DATE: start_date, PARAM_END_DATE: end_date},
        )
        results = await self._get_list(api_url, ChangedMedia)
        logger.info(
            "tmdb_get_changes_list",
            media=media,
            page=results.page,
            total_results=results.total_results,
        )
        return results
