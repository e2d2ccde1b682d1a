"""TV series, season and episode endpoints."""

import structlog

from tmdbapi.core.decoder import decode
from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList
from tmdbapi.core.url import ApiUrl
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.common import Artwork, ExternalIds
from tmdbapi.models.person import Person
from tmdbapi.models.tv import TVEpisode, TVSeason, TVSeries

logger = structlog.get_logger(__name__)

BASE_TV = "tv"


class TmdbTV(AbstractMethod):
    """TV series with their seasons and episodes."""

    def _season_path(self, tv_id: int, season_number: int) -> tuple[int | str, ...]:
        return (tv_id, "season", season_number)

    def _episode_path(
        self, tv_id: int, season_number: int, episode_number: int
    ) -> tuple[int | str, ...]:
        return (*self._season_path(tv_id, season_number), "episode", episode_number)

    async def _get_external_ids(self, api_url: ApiUrl) -> ExternalIds:
        """External ids; an empty body maps to an empty ExternalIds."""
        raw_body = await self._fetch(api_url)
        if not raw_body or not raw_body.strip():
            return ExternalIds()
        return decode(raw_body, ExternalIds)

    async def _get_credits(self, api_url: ApiUrl) -> ResultsList[Person]:
        return await self._get_list(
            api_url, Person, keys=("cast", "crew", "guest_stars"), source_field="person_type"
        )

    # =========================================================================
    # Series
    # =========================================================================

    async def get_tv(self, tv_id: int, options: RequestOptions | None = None) -> TVSeries:
        """Get detailed TV series information.

        Args:
            tv_id: TMDB TV series ID
            options: Language and append_to_response sub-resources

        Returns:
            TVSeries with full details
        """
        series = await self._get_model(self._url(BASE_TV, tv_id, options=options), TVSeries)
        logger.info("tmdb_get_tv", tv_id=tv_id, name=series.name)
        return series

    async def get_tv_credits(
        self, tv_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Person]:
        """Get cast and crew of a series."""
        return await self._get_credits(self._url(BASE_TV, tv_id, "credits", options=options))

    async def get_tv_external_ids(
        self, tv_id: int, options: RequestOptions | None = None
    ) -> ExternalIds:
        """Get IMDB/TVDB/... ids of a series."""
        return await self._get_external_ids(
            self._url(BASE_TV, tv_id, "external_ids", options=options)
        )

    async def get_tv_images(
        self, tv_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Artwork]:
        """Get backdrops and posters of a series."""
        return await self._get_list(
            self._url(BASE_TV, tv_id, "images", options=options),
            Artwork,
            keys=("backdrops", "posters"),
            source_field="artwork_type",
        )

    # =========================================================================
    # Seasons
    # =========================================================================

    async def get_tv_season(
        self, tv_id: int, season_number: int, options: RequestOptions | None = None
    ) -> TVSeason:
        """Get a season with its episodes."""
        api_url = self._url(BASE_TV, *self._season_path(tv_id, season_number), options=options)
        return await self._get_model(api_url, TVSeason)

    async def get_tv_season_external_ids(
        self, tv_id: int, season_number: int, options: RequestOptions | None = None
    ) -> ExternalIds:
        """Get external ids of a season."""
        api_url = self._url(
            BASE_TV, *self._season_path(tv_id, season_number), "external_ids", options=options
        )
        return await self._get_external_ids(api_url)

    async def get_tv_season_images(
        self, tv_id: int, season_number: int, options: RequestOptions | None = None
    ) -> ResultsList[Artwork]:
        """Get posters of a season."""
        api_url = self._url(
            BASE_TV, *self._season_path(tv_id, season_number), "images", options=options
        )
        return await self._get_list(
            api_url, Artwork, keys=("posters",), source_field="artwork_type"
        )

    # =========================================================================
    # Episodes
    # =========================================================================

    async def get_tv_episode(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: RequestOptions | None = None,
    ) -> TVEpisode:
        """Get a single episode."""
        api_url = self._url(
            BASE_TV, *self._episode_path(tv_id, season_number, episode_number), options=options
        )
        episode = await self._get_model(api_url, TVEpisode)
        logger.info(
            "tmdb_get_tv_episode",
            tv_id=tv_id,
            season=season_number,
            episode=episode_number,
            air_date=episode.air_date,
        )
        return episode

    async def get_tv_episode_credits(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: RequestOptions | None = None,
    ) -> ResultsList[Person]:
        """Get cast, crew and guest stars of an episode."""
        api_url = self._url(
            BASE_TV,
            *self._episode_path(tv_id, season_number, episode_number),
            "credits",
            options=options,
        )
        return await self._get_credits(api_url)

    async def get_tv_episode_external_ids(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: RequestOptions | None = None,
    ) -> ExternalIds:
        """Get external ids of an episode."""
        api_url = self._url(
            BASE_TV,
            *self._episode_path(tv_id, season_number, episode_number),
            "external_ids",
            options=options,
        )
        return await self._get_external_ids(api_url)

    async def get_tv_episode_images(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: RequestOptions | None = None,
    ) -> ResultsList[Artwork]:
        """Get stills of an episode."""
        api_url = self._url(
            BASE_TV,
            *self._episode_path(tv_id, season_number, episode_number),
            "images",
            options=options,
        )
        return await self._get_list(
            api_url, Artwork, keys=("stills",), source_field="artwork_type"
        )
