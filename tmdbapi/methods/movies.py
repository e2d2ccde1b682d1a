"""Movie endpoints."""

import structlog

from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList, ResultsMap
from tmdbapi.core.transport import HttpMethod
from tmdbapi.core.url import PARAM_COUNTRY, PARAM_END_DATE, PARAM_START_DATE
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.methods.changes import flag_polymorphic_values
from tmdbapi.models.changes import ChangedItem
from tmdbapi.models.common import (
    AlternativeTitle,
    Artwork,
    Keyword,
    ReleaseInfo,
    Review,
    StatusCode,
    Trailer,
    Translation,
)
from tmdbapi.models.movie import Movie, MovieList
from tmdbapi.models.person import Person

logger = structlog.get_logger(__name__)

BASE_MOVIE = "movie"


class TmdbMovies(AbstractMethod):
    """Movie details, sub-resources and curated movie lists."""

    # =========================================================================
    # Detail Methods
    # =========================================================================

    async def get_movie_info(self, movie_id: int, options: RequestOptions | None = None) -> Movie:
        """Get detailed movie information.

        Args:
            movie_id: TMDB movie ID
            options: Language and append_to_response sub-resources

        Returns:
            Movie with full details
        """
        api_url = self._url(BASE_MOVIE, movie_id, options=options)
        movie = await self._get_model(api_url, Movie)
        logger.info("tmdb_get_movie", movie_id=movie_id, title=movie.title)
        return movie

    async def get_movie_info_imdb(
        self, imdb_id: str, options: RequestOptions | None = None
    ) -> Movie:
        """Get movie information using an IMDB id (e.g. "tt0137523")."""
        api_url = self._url(BASE_MOVIE, imdb_id, options=options)
        return await self._get_model(api_url, Movie)

    async def get_movie_alternative_titles(
        self,
        movie_id: int,
        country: str | None = None,
        options: RequestOptions | None = None,
    ) -> ResultsList[AlternativeTitle]:
        """Get the alternative titles of a movie, optionally for one country."""
        api_url = self._url(
            BASE_MOVIE, movie_id, "alternative_titles", options=options, **{PARAM_COUNTRY: country}
        )
        return await self._get_list(api_url, AlternativeTitle, keys=("titles",))

    async def get_movie_casts(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Person]:
        """Get cast and crew of a movie as one list (tagged by person_type)."""
        api_url = self._url(BASE_MOVIE, movie_id, "credits", options=options)
        return await self._get_list(
            api_url, Person, keys=("cast", "crew"), source_field="person_type"
        )

    async def get_movie_images(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Artwork]:
        """Get backdrops and posters of a movie."""
        api_url = self._url(BASE_MOVIE, movie_id, "images", options=options)
        return await self._get_list(
            api_url, Artwork, keys=("backdrops", "posters"), source_field="artwork_type"
        )

    async def get_movie_keywords(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Keyword]:
        """Get the plot keywords of a movie."""
        api_url = self._url(BASE_MOVIE, movie_id, "keywords", options=options)
        return await self._get_list(api_url, Keyword, keys=("keywords",))

    async def get_movie_release_info(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[ReleaseInfo]:
        """Get release dates and certifications by country."""
        api_url = self._url(BASE_MOVIE, movie_id, "releases", options=options)
        return await self._get_list(api_url, ReleaseInfo, keys=("countries",))

    async def get_movie_trailers(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Trailer]:
        """Get QuickTime and YouTube trailers (tagged by website)."""
        api_url = self._url(BASE_MOVIE, movie_id, "trailers", options=options)
        return await self._get_list(
            api_url, Trailer, keys=("quicktime", "youtube"), source_field="website"
        )

    async def get_movie_translations(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Translation]:
        """Get the languages the movie has been translated into."""
        api_url = self._url(BASE_MOVIE, movie_id, "translations", options=options)
        return await self._get_list(api_url, Translation, keys=("translations",))

    async def get_similar_movies(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Movie]:
        """Get movies similar to the given one."""
        api_url = self._url(BASE_MOVIE, movie_id, "similar", options=options)
        results = await self._get_list(api_url, Movie)
        logger.info("tmdb_get_similar_movies", movie_id=movie_id, results_count=len(results))
        return results

    async def get_reviews(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Review]:
        """Get user reviews of a movie."""
        api_url = self._url(BASE_MOVIE, movie_id, "reviews", options=options)
        return await self._get_list(api_url, Review)

    async def get_movie_lists(
        self, movie_id: int, options: RequestOptions | None = None
    ) -> ResultsList[MovieList]:
        """Get the user lists the movie belongs to."""
        api_url = self._url(BASE_MOVIE, movie_id, "lists", options=options)
        return await self._get_list(api_url, MovieList)

    async def get_movie_changes(
        self,
        movie_id: int,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> ResultsMap:
        """Get changes made to a movie, grouped by changed field.

        Args:
            movie_id: TMDB movie ID
            start_date: Optional YYYY-MM-DD lower bound
            end_date: Optional YYYY-MM-DD upper bound

        Returns:
            ResultsMap of field name to list of ChangedItem
        """
        api_url = self._plain_url(
            BASE_MOVIE,
            movie_id,
            "changes",
            **{PARAM_START_DATE: start_date, PARAM_END_DATE: end_date},
        )
        changes = await self._get_map(api_url, ChangedItem)
        flag_polymorphic_values(changes, media_id=movie_id)
        return changes

    # =========================================================================
    # Curated Lists
    # =========================================================================

    async def get_latest_movie(self) -> Movie:
        """Get the newest movie added to TMDB."""
        return await self._get_model(self._plain_url(BASE_MOVIE, "latest"), Movie)

    async def get_upcoming(self, options: RequestOptions | None = None) -> ResultsList[Movie]:
        """Get upcoming movies."""
        return await self._get_list(self._url(BASE_MOVIE, "upcoming", options=options), Movie)

    async def get_now_playing_movies(
        self, options: RequestOptions | None = None
    ) -> ResultsList[Movie]:
        """Get movies currently in theatres."""
        return await self._get_list(self._url(BASE_MOVIE, "now_playing", options=options), Movie)

    async def get_popular_movie_list(
        self, options: RequestOptions | None = None
    ) -> ResultsList[Movie]:
        """Get popular movies."""
        return await self._get_list(self._url(BASE_MOVIE, "popular", options=options), Movie)

    async def get_top_rated_movies(
        self, options: RequestOptions | None = None
    ) -> ResultsList[Movie]:
        """Get top rated movies."""
        return await self._get_list(self._url(BASE_MOVIE, "top_rated", options=options), Movie)

    # =========================================================================
    # Rating
    # =========================================================================

    async def post_movie_rating(self, session_id: str, movie_id: int, rating: float) -> StatusCode:
        """Rate a movie (0.5 to 10.0) as the session's user.

        Raises:
            ValueError: Rating out of range
        """
        if not 0.5 <= rating <= 10.0:
            raise ValueError(f"Rating must be between 0.5 and 10.0, got {rating}")

        api_url = self._session_url(session_id, BASE_MOVIE, movie_id, "rating")
        status = await self._get_model(
            api_url, StatusCode, body={"value": rating}, method=HttpMethod.POST
        )
        logger.info("tmdb_post_movie_rating", movie_id=movie_id, status_code=status.status_code)
        return status
