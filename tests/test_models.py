"""Tests for TMDB data models."""

import pytest
from pydantic import ValidationError

from tmdbapi.core.results import ResultsEnvelope, ResultsList
from tmdbapi.models import (
    Collection,
    Genre,
    ImageConfiguration,
    Movie,
    StatusCode,
    TVSeries,
)


class TestMovie:
    """Tests for Movie model."""

    def test_movie_creation(self):
        movie = Movie(
            id=27205,
            title="Inception",
            release_date="2010-07-16",
            genres=[Genre(id=28, name="Action")],
            belongs_to_collection=Collection(id=1, name="Inception Collection"),
        )
        assert movie.get_genre_names() == ["Action"]
        assert movie.belongs_to_collection.name == "Inception Collection"

    def test_get_year_empty_date(self):
        assert Movie(id=1, release_date="").get_year() is None
        assert Movie(id=1).get_year() is None

    def test_get_year_invalid_date(self):
        assert Movie(id=1, release_date="abcd-01-01").get_year() is None

    def test_is_frozen(self):
        movie = Movie(id=1, title="Test")
        with pytest.raises(ValidationError):
            movie.title = "Other"


class TestTVSeries:
    """Tests for TVSeries model."""

    def test_get_year(self):
        assert TVSeries(id=1396, first_air_date="2008-01-20").get_year() == 2008


class TestImageConfiguration:
    """Tests for ImageConfiguration."""

    def test_is_valid_size(self):
        images = ImageConfiguration(
            base_url="http://image.tmdb.org/t/p/",
            poster_sizes=["w92", "original"],
            profile_sizes=["h632"],
        )
        assert images.is_valid_size("w92")
        assert images.is_valid_size("h632")
        assert not images.is_valid_size("w500")
        assert not images.is_valid_size("")
        assert not images.is_valid_size(None)


class TestStatusCode:
    """Tests for StatusCode."""

    @pytest.mark.parametrize(("code", "expected"), [(1, True), (12, True), (13, True), (34, False)])
    def test_is_success(self, code, expected):
        assert StatusCode(status_code=code).is_success is expected


class TestResultsList:
    """Tests for ResultsList."""

    def test_from_envelope(self):
        envelope = ResultsEnvelope(page=3, total_pages=5, total_results=99)
        results = ResultsList[Genre].from_envelope([Genre(id=28, name="Action")], envelope)

        assert len(results) == 1
        assert results.page == 3
        assert results.total_pages == 5
        assert results.total_results == 99
        assert list(results) == [Genre(id=28, name="Action")]

    def test_empty(self):
        results = ResultsList[Genre]()
        assert len(results) == 0
        assert results.total_results == 0
