"""Async client for The Movie Database (TMDB) v3 API."""

import logging

from tmdbapi.client import TMDBClient
from tmdbapi.compare import compare_movies, levenshtein_distance
from tmdbapi.core import (
    ApiUrl,
    Discover,
    MovieDbException,
    MovieDbExceptionType,
    RequestOptions,
    ResultsList,
    ResultsMap,
    convert_to_json,
)
from tmdbapi.logger import configure_logging, get_logger
from tmdbapi.methods import SearchType
from tmdbapi.models import (
    Artwork,
    Collection,
    CollectionInfo,
    Configuration,
    ExternalIds,
    Genre,
    Movie,
    MovieList,
    Person,
    PersonCredits,
    StatusCode,
    TokenAuthorisation,
    TokenSession,
    TVEpisode,
    TVSeason,
    TVSeries,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiUrl",
    "Artwork",
    "Collection",
    "CollectionInfo",
    "Configuration",
    "Discover",
    "ExternalIds",
    "Genre",
    "Movie",
    "MovieDbException",
    "MovieDbExceptionType",
    "MovieList",
    "Person",
    "PersonCredits",
    "RequestOptions",
    "ResultsList",
    "ResultsMap",
    "SearchType",
    "StatusCode",
    "TMDBClient",
    "TVEpisode",
    "TVSeason",
    "TVSeries",
    "TokenAuthorisation",
    "TokenSession",
    "compare_movies",
    "configure_logging",
    "convert_to_json",
    "get_logger",
    "levenshtein_distance",
]
