"""Authentication endpoints: request tokens, user and guest sessions."""

import structlog

from tmdbapi.core.decoder import decode
from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType
from tmdbapi.core.url import PARAM_TOKEN
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.account import TokenAuthorisation, TokenSession

logger = structlog.get_logger(__name__)

BASE_AUTH = "authentication"


def validate_authorisation(token: TokenAuthorisation | None) -> MovieDbException | None:
    """Check a request token before exchanging it for a session.

    Returns:
        The failure to raise, or None if the token can be exchanged
    """
    if token is None or not token.success:
        return MovieDbException(
            MovieDbExceptionType.AUTHORISATION_FAILURE,
            "Authorisation token was not successful!",
        )
    if not token.request_token:
        return MovieDbException(
            MovieDbExceptionType.AUTHORISATION_FAILURE,
            "Authorisation token has no request token",
        )
    return None


class TmdbAuthentication(AbstractMethod):
    """Token and session management."""

    async def get_authorisation_token(self) -> TokenAuthorisation:
        """Generate a request token for user based authentication.

        Tokens expire after 60 minutes and are consumed when a session is
        created.

        Raises:
            MovieDbException: AUTHORISATION_FAILURE if the response cannot be mapped
        """
        raw_body = await self._fetch(self._plain_url(BASE_AUTH, "token", "new"))
        try:
            return decode(raw_body, TokenAuthorisation)
        except MovieDbException as e:
            logger.warning("tmdb_authorisation_token_failed", error=e.message)
            raise MovieDbException(
                MovieDbExceptionType.AUTHORISATION_FAILURE,
                "Failed to get authorisation token",
                response=raw_body,
            ) from e

    async def get_session_token(self, token: TokenAuthorisation) -> TokenSession:
        """Exchange an approved request token for a session id.

        The token is validated locally first; an unsuccessful token fails
        without contacting the server.

        Raises:
            MovieDbException: AUTHORISATION_FAILURE or MAPPING_FAILED
        """
        failure = validate_authorisation(token)
        if failure is not None:
            logger.warning("tmdb_authorisation_token_unsuccessful")
            raise failure

        api_url = self._plain_url(BASE_AUTH, "session", "new").add_argument(
            PARAM_TOKEN, token.request_token
        )
        session = await self._get_model(api_url, TokenSession)
        logger.info("tmdb_session_created", success=session.success)
        return session

    async def get_guest_session_token(self) -> TokenSession:
        """Generate a guest session id.

        Guest sessions can rate movies without a TMDB account and are
        discarded if unused for 24 hours.
        """
        api_url = self._plain_url(BASE_AUTH, "guest_session", "new")
        return await self._get_model(api_url, TokenSession)
