"""TMDB data transfer objects."""

from tmdbapi.models.account import (
    Account,
    ListCreated,
    ListItemStatus,
    TokenAuthorisation,
    TokenSession,
)
from tmdbapi.models.changes import ChangedItem, ChangedMedia
from tmdbapi.models.common import (
    AlternativeTitle,
    Artwork,
    Company,
    Country,
    ExternalIds,
    Genre,
    JobDepartment,
    Keyword,
    Language,
    ReleaseInfo,
    Review,
    StatusCode,
    TMDBModel,
    Trailer,
    Translation,
)
from tmdbapi.models.configuration import Configuration, ImageConfiguration
from tmdbapi.models.movie import Collection, CollectionInfo, Movie, MovieList
from tmdbapi.models.person import Person, PersonCredit, PersonCredits
from tmdbapi.models.tv import TVEpisode, TVSeason, TVSeries, TVSeriesBasic

__all__ = [
    "Account",
    "AlternativeTitle",
    "Artwork",
    "ChangedItem",
    "ChangedMedia",
    "Collection",
    "CollectionInfo",
    "Company",
    "Configuration",
    "Country",
    "ExternalIds",
    "Genre",
    "ImageConfiguration",
    "JobDepartment",
    "Keyword",
    "Language",
    "ListCreated",
    "ListItemStatus",
    "Movie",
    "MovieList",
    "Person",
    "PersonCredit",
    "PersonCredits",
    "ReleaseInfo",
    "Review",
    "StatusCode",
    "TMDBModel",
    "TokenAuthorisation",
    "TokenSession",
    "Trailer",
    "Translation",
    "TVEpisode",
    "TVSeason",
    "TVSeries",
    "TVSeriesBasic",
]
