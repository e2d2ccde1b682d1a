"""Endpoint groups of the TMDB API."""

from tmdbapi.methods.account import TmdbAccount
from tmdbapi.methods.authentication import TmdbAuthentication, validate_authorisation
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.methods.changes import TmdbChanges
from tmdbapi.methods.collections import TmdbCollections
from tmdbapi.methods.companies import TmdbCompanies
from tmdbapi.methods.discover import TmdbDiscover
from tmdbapi.methods.genres import TmdbGenres
from tmdbapi.methods.jobs import TmdbJobs
from tmdbapi.methods.keywords import TmdbKeywords
from tmdbapi.methods.lists import TmdbLists
from tmdbapi.methods.movies import TmdbMovies
from tmdbapi.methods.people import TmdbPeople
from tmdbapi.methods.search import SearchType, TmdbSearch
from tmdbapi.methods.tv import TmdbTV

__all__ = [
    "AbstractMethod",
    "SearchType",
    "TmdbAccount",
    "TmdbAuthentication",
    "TmdbChanges",
    "TmdbCollections",
    "TmdbCompanies",
    "TmdbDiscover",
    "TmdbGenres",
    "TmdbJobs",
    "TmdbKeywords",
    "TmdbLists",
    "TmdbMovies",
    "TmdbPeople",
    "TmdbSearch",
    "TmdbTV",
    "validate_authorisation",
]
