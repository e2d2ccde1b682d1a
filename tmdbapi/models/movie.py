"""Movie, collection and list models."""

from pydantic import Field

from tmdbapi.models.common import Company, Country, Genre, Language, TMDBModel


class Movie(TMDBModel):
    """Movie information from TMDB.

    Used both for full details and for list entries (search, popular,
    similar, ...), so everything except ``id`` is optional.
    """

    id: int
    title: str = ""
    original_title: str = ""
    overview: str | None = None
    release_date: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    adult: bool = False
    vote_average: float = 0.0
    vote_count: int = 0
    popularity: float = 0.0
    genres: list[Genre] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)
    runtime: int | None = None
    status: str = ""
    tagline: str | None = None
    budget: int = 0
    revenue: int = 0
    homepage: str | None = None
    imdb_id: str | None = None
    original_language: str | None = None
    production_companies: list[Company] = Field(default_factory=list)
    production_countries: list[Country] = Field(default_factory=list)
    spoken_languages: list[Language] = Field(default_factory=list)
    belongs_to_collection: "Collection | None" = None
    rating: float | None = None  # present on account rated lists

    # append_to_response sub-resources are kept as raw JSON
    credits: dict | None = None
    images: dict | None = None
    keywords: dict | None = None
    videos: dict | None = None
    releases: dict | None = None
    trailers: dict | None = None
    translations: dict | None = None
    alternative_titles: dict | None = None

    def get_year(self) -> int | None:
        """Extract year from release date.

        Returns:
            Year as integer or None if no release date
        """
        if self.release_date and len(self.release_date) >= 4:
            try:
                return int(self.release_date[:4])
            except ValueError:
                return None
        return None

    def get_genre_names(self) -> list[str]:
        """Get list of genre names."""
        return [g.name for g in self.genres]


class Collection(TMDBModel):
    """Collection summary (search results, belongs_to_collection)."""

    id: int
    name: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None


class CollectionInfo(TMDBModel):
    """Full collection with its parts."""

    id: int
    name: str
    overview: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    parts: list[Movie] = Field(default_factory=list)


class MovieList(TMDBModel):
    """User-curated list of movies."""

    id: int | str
    name: str = ""
    description: str | None = None
    created_by: str | None = None
    favorite_count: int = 0
    item_count: int = 0
    iso_639_1: str | None = None
    list_type: str | None = None
    poster_path: str | None = None
    items: list[Movie] = Field(default_factory=list)


Movie.model_rebuild()
