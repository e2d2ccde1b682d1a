"""Title/year matching used to disambiguate search results."""

from typing import Protocol

UNKNOWN_YEAR = "UNKNOWN"


class TitledMedia(Protocol):
    """Anything with the fields compare_movies looks at (e.g. Movie)."""

    title: str
    original_title: str
    release_date: str | None


def levenshtein_distance(first: str, second: str) -> int:
    """Edit distance between two strings (insertions, deletions, substitutions)."""
    if first == second:
        return 0
    if len(first) < len(second):
        first, second = second, first
    if not second:
        return len(first)

    previous = list(range(len(second) + 1))
    for i, ch1 in enumerate(first, start=1):
        current = [i]
        for j, ch2 in enumerate(second, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ch1 != ch2),
                )
            )
        previous = current
    return previous[-1]


def _compare_distance(first: str | None, second: str, max_distance: int) -> bool:
    return levenshtein_distance(first or "", second) <= max_distance


def _is_valid_year(value: str | None) -> bool:
    """Check the value starts with a 4-digit year and is not the UNKNOWN marker."""
    if not value or not value.strip() or value.strip() == UNKNOWN_YEAR:
        return False
    return len(value) >= 4 and value[:4].isdigit()


def compare_movies(
    movie: TitledMedia | None,
    title: str | None,
    year: str | None = None,
    max_distance: int = 0,
) -> bool:
    """Compare a movie with a title and year.

    Args:
        movie: Candidate movie (e.g. a search result)
        title: Title to compare against
        year: Year to compare against ("1994")
        max_distance: Maximum Levenshtein distance between titles, 0 = exact match

    Returns:
        True if there is a match, False otherwise
    """
    if movie is None or not title or not title.strip():
        return False

    if _is_valid_year(year) and _is_valid_year(movie.release_date):
        movie_year = movie.release_date[:4]  # type: ignore[index]
        if movie_year == year:
            if _compare_distance(movie.original_title, title, max_distance):
                return True
            if _compare_distance(movie.title, title, max_distance):
                return True

    # Compare without year
    if _compare_distance(movie.original_title, title, max_distance):
        return True
    return _compare_distance(movie.title, title, max_distance)
