"""Error taxonomy for the TMDB client.

Every failure the request pipeline can produce is raised as a single
MovieDbException discriminated by MovieDbExceptionType. The raw response
body (or the offending string) travels with it for diagnostics, and the
low-level cause is chained via ``raise ... from``.
"""

from enum import Enum


class MovieDbExceptionType(str, Enum):
    """Kind of failure raised by the client."""

    CONNECTION_ERROR = "connection_error"
    HTTP_503_ERROR = "http_503_error"
    MAPPING_FAILED = "mapping_failed"
    AUTHORISATION_FAILURE = "authorisation_failure"
    INVALID_IMAGE = "invalid_image"
    INVALID_URL = "invalid_url"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    UNKNOWN_CAUSE = "unknown_cause"


class MovieDbException(Exception):
    """Raised for every failure in the request/response pipeline.

    Attributes:
        exception_type: Failure kind
        message: Human-readable description
        response: Raw response body or offending string, if available
        status_code: HTTP status code, if the failure came from a response
    """

    def __init__(
        self,
        exception_type: MovieDbExceptionType,
        message: str,
        response: str | None = None,
        status_code: int | None = None,
    ):
        self.exception_type = exception_type
        self.message = message
        self.response = response
        self.status_code = status_code
        super().__init__(f"{exception_type.name}: {message}")

    @property
    def cause(self) -> BaseException | None:
        """Underlying low-level error, if one was chained."""
        return self.__cause__

    def __repr__(self) -> str:
        return (
            f"MovieDbException(exception_type={self.exception_type.name}, "
            f"message={self.message!r}, status_code={self.status_code!r})"
        )
