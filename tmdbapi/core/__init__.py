"""Request construction, transport, decoding and error handling."""

from tmdbapi.core.decoder import convert_to_json, decode, decode_list, decode_map
from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType
from tmdbapi.core.options import Discover, RequestOptions
from tmdbapi.core.results import ResultsEnvelope, ResultsList, ResultsMap
from tmdbapi.core.transport import (
    HttpMethod,
    HttpTransport,
    HttpxTransport,
    InjectedClientTransport,
)
from tmdbapi.core.url import ApiUrl, build_url

__all__ = [
    "ApiUrl",
    "Discover",
    "HttpMethod",
    "HttpTransport",
    "HttpxTransport",
    "InjectedClientTransport",
    "MovieDbException",
    "MovieDbExceptionType",
    "RequestOptions",
    "ResultsEnvelope",
    "ResultsList",
    "ResultsMap",
    "build_url",
    "convert_to_json",
    "decode",
    "decode_list",
    "decode_map",
]
