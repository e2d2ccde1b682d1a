"""API configuration model (image base URL and sizes)."""

from pydantic import Field

from tmdbapi.models.common import TMDBModel


class ImageConfiguration(TMDBModel):
    """Image configuration returned by the configuration endpoint."""

    base_url: str
    secure_base_url: str | None = None
    backdrop_sizes: list[str] = Field(default_factory=list)
    logo_sizes: list[str] = Field(default_factory=list)
    poster_sizes: list[str] = Field(default_factory=list)
    profile_sizes: list[str] = Field(default_factory=list)
    still_sizes: list[str] = Field(default_factory=list)

    @property
    def all_sizes(self) -> set[str]:
        """Every size token accepted by the image server."""
        return {
            *self.backdrop_sizes,
            *self.logo_sizes,
            *self.poster_sizes,
            *self.profile_sizes,
            *self.still_sizes,
        }

    def is_valid_size(self, size: str | None) -> bool:
        """Check a size token against the fetched size lists."""
        return bool(size) and size in self.all_sizes


class Configuration(TMDBModel):
    """Top-level configuration response."""

    images: ImageConfiguration
    change_keys: list[str] = Field(default_factory=list)
