"""TV series, season and episode models."""

from pydantic import Field

from tmdbapi.models.common import Company, Genre, TMDBModel
from tmdbapi.models.person import Person


class TVSeriesBasic(TMDBModel):
    """TV series entry as returned by search."""

    id: int
    name: str = ""
    original_name: str = ""
    first_air_date: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    origin_country: list[str] = Field(default_factory=list)


class TVEpisode(TMDBModel):
    """Single episode."""

    id: int
    name: str = ""
    overview: str | None = None
    air_date: str | None = None
    episode_number: int = 0
    season_number: int = 0
    still_path: str | None = None
    production_code: str | None = None
    vote_average: float = 0.0
    vote_count: int = 0
    crew: list[Person] = Field(default_factory=list)
    guest_stars: list[Person] = Field(default_factory=list)


class TVSeason(TMDBModel):
    """Season with its episodes."""

    id: int
    name: str = ""
    overview: str | None = None
    air_date: str | None = None
    season_number: int = 0
    poster_path: str | None = None
    episode_count: int | None = None
    episodes: list[TVEpisode] = Field(default_factory=list)


class TVSeries(TVSeriesBasic):
    """Full TV series details."""

    overview: str | None = None
    last_air_date: str | None = None
    homepage: str | None = None
    in_production: bool = False
    status: str = ""
    type: str | None = None
    number_of_seasons: int = 0
    number_of_episodes: int = 0
    episode_run_time: list[int] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    created_by: list[Person] = Field(default_factory=list)
    networks: list[Company] = Field(default_factory=list)
    production_companies: list[Company] = Field(default_factory=list)
    seasons: list[TVSeason] = Field(default_factory=list)

    def get_year(self) -> int | None:
        """Extract year from first air date."""
        if self.first_air_date and len(self.first_air_date) >= 4:
            try:
                return int(self.first_air_date[:4])
            except ValueError:
                return None
        return None
