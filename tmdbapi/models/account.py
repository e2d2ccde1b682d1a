"""Authentication, account and list-management models."""

from tmdbapi.models.common import StatusCode, TMDBModel


class TokenAuthorisation(TMDBModel):
    """Request token used to start user authentication."""

    success: bool = False
    request_token: str | None = None
    expires_at: str | None = None


class TokenSession(TMDBModel):
    """User or guest session."""

    success: bool = False
    session_id: str | None = None
    guest_session_id: str | None = None
    expires_at: str | None = None


class Account(TMDBModel):
    """Basic account information."""

    id: int
    username: str = ""
    name: str | None = None
    include_adult: bool = False
    iso_639_1: str | None = None
    iso_3166_1: str | None = None


class ListCreated(StatusCode):
    """Response to a list creation request."""

    list_id: int | str | None = None
    success: bool = False


class ListItemStatus(TMDBModel):
    """Whether an item is present on a list."""

    id: int | str | None = None
    item_present: bool = False
