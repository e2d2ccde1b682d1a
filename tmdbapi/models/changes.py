"""Change-log models.

The ``value`` of a change item is polymorphic upstream (string, number,
object or list depending on the changed key), so it is kept as raw JSON.
"""

from typing import Any

from tmdbapi.models.common import TMDBModel


class ChangedItem(TMDBModel):
    """One change to a field of a movie or person."""

    id: str
    action: str
    time: str | None = None
    iso_639_1: str | None = None
    value: Any = None
    original_value: Any = None


class ChangedMedia(TMDBModel):
    """Entry of the global changes list."""

    id: int
    adult: bool | None = None
