"""Person and credit models."""

from pydantic import Field

from tmdbapi.models.common import TMDBModel


class Person(TMDBModel):
    """Person (actor, director, etc.) information."""

    id: int
    name: str = ""
    profile_path: str | None = None
    adult: bool = False
    popularity: float = 0.0
    known_for_department: str | None = None
    biography: str | None = None
    birthday: str | None = None
    deathday: str | None = None
    place_of_birth: str | None = None
    homepage: str | None = None
    imdb_id: str | None = None
    also_known_as: list[str] = Field(default_factory=list)

    # Credit fields, present when the person appears in a cast or crew list
    person_type: str | None = None  # source list: cast, crew
    character: str | None = None
    job: str | None = None
    department: str | None = None
    order: int | None = None
    credit_id: str | None = None


class PersonCredit(TMDBModel):
    """One movie credit of a person."""

    id: int
    title: str = ""
    original_title: str = ""
    release_date: str | None = None
    poster_path: str | None = None
    character: str | None = None
    job: str | None = None
    department: str | None = None
    credit_id: str | None = None
    adult: bool = False


class PersonCredits(TMDBModel):
    """Movie credits of a person, split into cast and crew."""

    id: int
    cast: list[PersonCredit] = Field(default_factory=list)
    crew: list[PersonCredit] = Field(default_factory=list)

    def get_directed(self) -> list[PersonCredit]:
        """Credits where the person directed."""
        return [c for c in self.crew if c.job == "Director"]
