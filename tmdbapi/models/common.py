"""Shared TMDB data models."""

from pydantic import BaseModel, ConfigDict, Field


class TMDBModel(BaseModel):
    """Base for all DTOs: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Genre(TMDBModel):
    """Movie or TV show genre."""

    id: int
    name: str


class Company(TMDBModel):
    """Production company information."""

    id: int
    name: str
    description: str | None = None
    headquarters: str | None = None
    homepage: str | None = None
    logo_path: str | None = None
    origin_country: str = ""
    parent_company: "Company | None" = None


class Keyword(TMDBModel):
    """Keyword attached to a movie or show."""

    id: int
    name: str


class Country(TMDBModel):
    """Production country."""

    iso_3166_1: str
    name: str = ""


class Language(TMDBModel):
    """Spoken language."""

    iso_639_1: str
    name: str = ""


class Artwork(TMDBModel):
    """Image (backdrop, poster, profile or still)."""

    file_path: str
    artwork_type: str | None = None  # source list: backdrops, posters, profiles, stills
    aspect_ratio: float = 0.0
    height: int = 0
    width: int = 0
    iso_639_1: str | None = None
    vote_average: float = 0.0
    vote_count: int = 0


class AlternativeTitle(TMDBModel):
    """Title used in a given country."""

    iso_3166_1: str
    title: str


class ReleaseInfo(TMDBModel):
    """Release certification for one country."""

    iso_3166_1: str
    certification: str = ""
    release_date: str = ""


class Trailer(TMDBModel):
    """Trailer hosted on YouTube or QuickTime."""

    name: str
    source: str | None = None
    size: str | None = None
    type: str | None = None
    website: str | None = None  # source list: youtube, quicktime


class Translation(TMDBModel):
    """Available translation."""

    iso_639_1: str
    name: str = ""
    english_name: str = ""


class Review(TMDBModel):
    """User review."""

    id: str
    author: str
    content: str = ""
    url: str | None = None


class StatusCode(TMDBModel):
    """Status response for write operations."""

    status_code: int
    status_message: str = ""

    @property
    def is_success(self) -> bool:
        """True for TMDB's created/updated/deleted codes."""
        return self.status_code in (1, 12, 13)


class JobDepartment(TMDBModel):
    """Department with its list of jobs."""

    department: str
    job_list: list[str] = Field(default_factory=list)


class ExternalIds(TMDBModel):
    """Identifiers on other services."""

    id: int | None = None
    imdb_id: str | None = None
    freebase_id: str | None = None
    freebase_mid: str | None = None
    tvdb_id: int | None = None
    tvrage_id: int | None = None
