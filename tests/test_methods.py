"""Tests for endpoint groups over a mocked transport."""

import json

import httpx
import pytest

from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType
from tmdbapi.core.options import Discover, RequestOptions
from tmdbapi.core.results import ResultsMap
from tmdbapi.methods import (
    SearchType,
    TmdbAccount,
    TmdbAuthentication,
    TmdbChanges,
    TmdbDiscover,
    TmdbGenres,
    TmdbJobs,
    TmdbLists,
    TmdbMovies,
    TmdbPeople,
    TmdbSearch,
    TmdbTV,
)
from tmdbapi.methods.changes import flag_polymorphic_values
from tmdbapi.models.account import TokenAuthorisation
from tmdbapi.models.changes import ChangedItem
from tmdbapi.models.common import ExternalIds

API_KEY = "test_key"
BASE_URL = "https://api.themoviedb.org/3/"

# =============================================================================
# Sample API Responses
# =============================================================================

SAMPLE_MOVIE_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 27205,
            "title": "Inception",
            "original_title": "Inception",
            "release_date": "2010-07-16",
            "poster_path": "/9gk7adHYeDvHkCSEqAvQNLV5Ber.jpg",
            "vote_average": 8.4,
            "popularity": 100.5,
        },
    ],
    "total_pages": 1,
    "total_results": 1,
}

SAMPLE_TV_SEARCH_RESPONSE = {
    "page": 1,
    "results": [{"id": 1396, "name": "Breaking Bad", "first_air_date": "2008-01-20"}],
    "total_pages": 1,
    "total_results": 1,
}

SAMPLE_CREDITS = {
    "id": 550,
    "cast": [{"id": 819, "name": "Edward Norton", "character": "The Narrator"}],
    "crew": [{"id": 7467, "name": "David Fincher", "job": "Director"}],
}

SAMPLE_STATUS = {"status_code": 1, "status_message": "Success."}

SAMPLE_EPISODE = {
    "id": 62085,
    "name": "Pilot",
    "air_date": "2008-01-20",
    "episode_number": 1,
    "season_number": 1,
    "guest_stars": [{"id": 92495, "name": "John Koyama", "character": "Emilio Koyama"}],
}

SAMPLE_PERSON_CREDITS = {
    "id": 7467,
    "cast": [],
    "crew": [
        {"id": 550, "title": "Fight Club", "job": "Director"},
        {"id": 807, "title": "Se7en", "job": "Director"},
        {"id": 1000, "title": "Other", "job": "Producer"},
    ],
}


def _url(mock_http_client) -> httpx.URL:
    return httpx.URL(mock_http_client.request.call_args.args[1])


def _method(mock_http_client) -> str:
    return mock_http_client.request.call_args.args[0]


def _body(mock_http_client) -> dict:
    return json.loads(mock_http_client.request.call_args.kwargs["content"])


def _group(cls, transport, language=None):
    return cls(API_KEY, transport, base_url=BASE_URL, default_language=language)


class TestSearch:
    """Tests for TmdbSearch."""

    @pytest.mark.asyncio
    async def test_search_movie(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_MOVIE_SEARCH_RESPONSE)

        results = await _group(TmdbSearch, transport).search_movie("Inception", year=2010)

        assert len(results) == 1
        assert results[0].title == "Inception"
        assert results.total_results == 1
        url = _url(mock_http_client)
        assert url.path == "/3/search/movie"
        assert url.params["query"] == "Inception"
        assert url.params["year"] == "2010"
        assert url.params["api_key"] == API_KEY

    @pytest.mark.asyncio
    async def test_search_movie_ignores_zero_year(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_MOVIE_SEARCH_RESPONSE)

        await _group(TmdbSearch, transport).search_movie("Inception", year=0)

        assert "year" not in _url(mock_http_client).params

    @pytest.mark.asyncio
    async def test_search_movie_options(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_MOVIE_SEARCH_RESPONSE)

        await _group(TmdbSearch, transport, language="en").search_movie(
            "Inception", include_adult=False, options=RequestOptions(page=3)
        )

        params = _url(mock_http_client).params
        assert params["page"] == "3"
        assert params["language"] == "en"
        assert params["include_adult"] == "false"

    @pytest.mark.asyncio
    async def test_search_tv(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_TV_SEARCH_RESPONSE)

        results = await _group(TmdbSearch, transport).search_tv(
            "Breaking Bad", year=2008, search_type=SearchType.NGRAM
        )

        assert results[0].name == "Breaking Bad"
        params = _url(mock_http_client).params
        assert params["first_air_date_year"] == "2008"
        assert params["search_type"] == "ngram"


class TestMovies:
    """Tests for TmdbMovies."""

    @pytest.mark.asyncio
    async def test_get_movie_casts(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_CREDITS)

        people = await _group(TmdbMovies, transport).get_movie_casts(550)

        assert [p.person_type for p in people] == ["cast", "crew"]
        assert people[1].job == "Director"
        assert _url(mock_http_client).path == "/3/movie/550/credits"

    @pytest.mark.asyncio
    async def test_get_movie_release_info(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"id": 550, "countries": [{"iso_3166_1": "US", "certification": "R"}]}
        )

        releases = await _group(TmdbMovies, transport).get_movie_release_info(550)

        assert releases[0].certification == "R"

    @pytest.mark.asyncio
    async def test_get_movie_trailers(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {
                "id": 550,
                "quicktime": [],
                "youtube": [{"name": "Trailer 1", "source": "SUXWAEX2jlg", "size": "HD"}],
            }
        )

        trailers = await _group(TmdbMovies, transport).get_movie_trailers(550)

        assert len(trailers) == 1
        assert trailers[0].website == "youtube"

    @pytest.mark.asyncio
    async def test_get_movie_changes(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {
                "changes": [
                    {"key": "budget", "items": [{"id": "a1", "action": "updated", "value": 1}]}
                ]
            }
        )

        changes = await _group(TmdbMovies, transport).get_movie_changes(
            550, start_date="2024-01-01", end_date="2024-01-10"
        )

        assert isinstance(changes, ResultsMap)
        assert changes["budget"][0].value == 1
        params = _url(mock_http_client).params
        assert params["start_date"] == "2024-01-01"
        assert params["end_date"] == "2024-01-10"

    @pytest.mark.asyncio
    async def test_post_movie_rating(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_STATUS, status_code=201)

        status = await _group(TmdbMovies, transport).post_movie_rating("session_1", 550, 8.5)

        assert status.is_success
        assert _method(mock_http_client) == "POST"
        assert _body(mock_http_client) == {"value": 8.5}
        url = _url(mock_http_client)
        assert url.path == "/3/movie/550/rating"
        assert url.params["session_id"] == "session_1"

    @pytest.mark.asyncio
    async def test_post_movie_rating_out_of_range(self, transport, mock_http_client):
        with pytest.raises(ValueError, match="between 0.5 and 10.0"):
            await _group(TmdbMovies, transport).post_movie_rating("session_1", 550, 11)
        mock_http_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_session(self, transport, mock_http_client):
        with pytest.raises(MovieDbException) as exc_info:
            await _group(TmdbMovies, transport).post_movie_rating(" ", 550, 8.5)

        assert exc_info.value.exception_type == MovieDbExceptionType.INVALID_URL
        mock_http_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_http_error_propagates(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"status_code": 34, "status_message": "Not found"}, status_code=404
        )

        with pytest.raises(MovieDbException) as exc_info:
            await _group(TmdbMovies, transport).get_movie_info(999999999)

        assert exc_info.value.exception_type == MovieDbExceptionType.UNKNOWN_CAUSE
        assert exc_info.value.status_code == 404


class TestAuthentication:
    """Tests for TmdbAuthentication."""

    @pytest.mark.asyncio
    async def test_get_authorisation_token(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"success": True, "request_token": "abc123", "expires_at": "2024-01-05 10:00:00 UTC"}
        )

        token = await _group(TmdbAuthentication, transport).get_authorisation_token()

        assert token.success
        assert token.request_token == "abc123"
        assert _url(mock_http_client).path == "/3/authentication/token/new"

    @pytest.mark.asyncio
    async def test_get_authorisation_token_unreadable(
        self, transport, mock_http_client, mock_response
    ):
        mock_http_client.request.return_value = mock_response("not json")

        with pytest.raises(MovieDbException) as exc_info:
            await _group(TmdbAuthentication, transport).get_authorisation_token()

        assert exc_info.value.exception_type == MovieDbExceptionType.AUTHORISATION_FAILURE
        assert exc_info.value.response == "not json"

    @pytest.mark.asyncio
    async def test_get_session_token(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"success": True, "session_id": "session_1"}
        )
        token = TokenAuthorisation(success=True, request_token="abc123")

        session = await _group(TmdbAuthentication, transport).get_session_token(token)

        assert session.session_id == "session_1"
        url = _url(mock_http_client)
        assert url.path == "/3/authentication/session/new"
        assert url.params["request_token"] == "abc123"

    @pytest.mark.asyncio
    async def test_get_session_token_without_request_token(self, transport, mock_http_client):
        token = TokenAuthorisation(success=True)

        with pytest.raises(MovieDbException) as exc_info:
            await _group(TmdbAuthentication, transport).get_session_token(token)

        assert exc_info.value.exception_type == MovieDbExceptionType.AUTHORISATION_FAILURE
        mock_http_client.request.assert_not_called()


class TestAccount:
    """Tests for TmdbAccount."""

    @pytest.mark.asyncio
    async def test_change_favorite_status(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_STATUS)

        await _group(TmdbAccount, transport).change_favorite_status("session_1", 42, 550, True)

        assert _method(mock_http_client) == "POST"
        assert _url(mock_http_client).path == "/3/account/42/favorite"
        assert _body(mock_http_client) == {"movie_id": 550, "favorite": True}

    @pytest.mark.asyncio
    async def test_remove_from_watch_list(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_STATUS)

        await _group(TmdbAccount, transport).remove_from_watch_list("session_1", 42, 550)

        assert _url(mock_http_client).path == "/3/account/42/movie_watchlist"
        assert _body(mock_http_client) == {"movie_id": 550, "movie_watchlist": False}

    @pytest.mark.asyncio
    async def test_get_rated_movies(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"page": 1, "results": [{"id": 550, "title": "Fight Club", "rating": 9.0}]}
        )

        movies = await _group(TmdbAccount, transport).get_rated_movies("session_1", 42)

        assert movies[0].rating == 9.0
        assert _method(mock_http_client) == "GET"


class TestLists:
    """Tests for TmdbLists."""

    @pytest.mark.asyncio
    async def test_create_list(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"status_code": 1, "status_message": "Success.", "success": True, "list_id": 5861}
        )

        list_id = await _group(TmdbLists, transport).create_list("session_1", "Watch later")

        assert list_id == 5861
        assert _body(mock_http_client) == {"name": "Watch later", "description": ""}

    @pytest.mark.asyncio
    async def test_is_movie_on_list(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"id": "509ec17b", "item_present": True}
        )

        assert await _group(TmdbLists, transport).is_movie_on_list("509ec17b", 550)
        url = _url(mock_http_client)
        assert url.path == "/3/list/509ec17b/item_status"
        assert url.params["movie_id"] == "550"

    @pytest.mark.asyncio
    async def test_add_movie_to_list(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"status_code": 12, "status_message": "Updated."}
        )

        status = await _group(TmdbLists, transport).add_movie_to_list("session_1", "509ec17b", 550)

        assert status.is_success
        assert _url(mock_http_client).path == "/3/list/509ec17b/add_item"
        assert _body(mock_http_client) == {"media_id": 550}

    @pytest.mark.asyncio
    async def test_delete_movie_list(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"status_code": 13, "status_message": "Deleted."}
        )

        await _group(TmdbLists, transport).delete_movie_list("session_1", "509ec17b")

        assert _method(mock_http_client) == "DELETE"
        assert "content" not in mock_http_client.request.call_args.kwargs

    @pytest.mark.asyncio
    async def test_blank_list_id(self, transport, mock_http_client):
        with pytest.raises(MovieDbException) as exc_info:
            await _group(TmdbLists, transport).get_list("")

        assert exc_info.value.exception_type == MovieDbExceptionType.INVALID_URL
        mock_http_client.request.assert_not_called()


class TestTV:
    """Tests for TmdbTV."""

    @pytest.mark.asyncio
    async def test_get_tv_episode(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_EPISODE)

        episode = await _group(TmdbTV, transport).get_tv_episode(1396, 1, 1)

        assert episode.name == "Pilot"
        assert episode.guest_stars[0].character == "Emilio Koyama"
        assert _url(mock_http_client).path == "/3/tv/1396/season/1/episode/1"

    @pytest.mark.asyncio
    async def test_get_tv_episode_credits(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {**SAMPLE_CREDITS, "guest_stars": SAMPLE_EPISODE["guest_stars"]}
        )

        people = await _group(TmdbTV, transport).get_tv_episode_credits(1396, 1, 1)

        assert [p.person_type for p in people] == ["cast", "crew", "guest_stars"]

    @pytest.mark.asyncio
    async def test_external_ids(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"id": 1396, "imdb_id": "tt0903747", "tvdb_id": 81189}
        )

        ids = await _group(TmdbTV, transport).get_tv_external_ids(1396)

        assert ids.imdb_id == "tt0903747"
        assert ids.tvdb_id == 81189

    @pytest.mark.asyncio
    async def test_empty_external_ids(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response("")

        ids = await _group(TmdbTV, transport).get_tv_season_external_ids(1396, 1)

        assert ids == ExternalIds()
        assert _url(mock_http_client).path == "/3/tv/1396/season/1/external_ids"

    @pytest.mark.asyncio
    async def test_season_images(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"id": 3572, "posters": [{"file_path": "/s1.jpg"}]}
        )

        images = await _group(TmdbTV, transport).get_tv_season_images(1396, 1)

        assert images[0].artwork_type == "posters"


class TestOtherGroups:
    """Tests for the smaller endpoint groups."""

    @pytest.mark.asyncio
    async def test_discover(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_MOVIE_SEARCH_RESPONSE)
        discover = Discover(
            year=2010, vote_count_gte=100, with_genres="28", sort_by="popularity.desc"
        )

        results = await _group(TmdbDiscover, transport).get_discover(discover)

        assert len(results) == 1
        params = _url(mock_http_client).params
        assert params["vote_count.gte"] == "100"
        assert params["with_genres"] == "28"
        assert params["sort_by"] == "popularity.desc"
        assert "certification.lte" not in params

    @pytest.mark.asyncio
    async def test_genre_list(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"genres": [{"id": 28, "name": "Action"}, {"id": 12, "name": "Adventure"}]}
        )

        genres = await _group(TmdbGenres, transport).get_genre_list()

        assert [g.name for g in genres] == ["Action", "Adventure"]

    @pytest.mark.asyncio
    async def test_jobs(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"jobs": [{"department": "Directing", "job_list": ["Director"]}]}
        )

        jobs = await _group(TmdbJobs, transport).get_jobs()

        assert jobs[0].job_list == ["Director"]
        assert _url(mock_http_client).path == "/3/job/list"

    @pytest.mark.asyncio
    async def test_person_credits(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_PERSON_CREDITS)

        credits = await _group(TmdbPeople, transport).get_person_credits(7467)

        assert [c.title for c in credits.get_directed()] == ["Fight Club", "Se7en"]
        assert _url(mock_http_client).path == "/3/person/7467/movie_credits"

    @pytest.mark.asyncio
    async def test_changes_list(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"page": 1, "results": [{"id": 550, "adult": False}], "total_pages": 10}
        )

        changed = await _group(TmdbChanges, transport).get_movie_changes_list(
            RequestOptions(page=1)
        )

        assert changed[0].id == 550
        assert changed.total_pages == 10
        assert _url(mock_http_client).path == "/3/movie/changes"


class TestDefaultLanguage:
    """Tests for where the client default language is sent."""

    @pytest.mark.asyncio
    async def test_not_sent_to_authentication(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(
            {"success": True, "request_token": "abc123"}
        )

        await _group(TmdbAuthentication, transport, language="de").get_authorisation_token()

        assert "language" not in _url(mock_http_client).params

    @pytest.mark.asyncio
    async def test_not_sent_to_latest_movie(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response({"id": 999, "title": "Newest"})

        await _group(TmdbMovies, transport, language="de").get_latest_movie()

        url = _url(mock_http_client)
        assert url.path == "/3/movie/latest"
        assert "language" not in url.params

    @pytest.mark.asyncio
    async def test_not_sent_with_session(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_STATUS, status_code=201)

        await _group(TmdbMovies, transport, language="de").post_movie_rating("session_1", 550, 8.5)

        params = _url(mock_http_client).params
        assert params["session_id"] == "session_1"
        assert "language" not in params

    @pytest.mark.asyncio
    async def test_sent_to_localized_endpoint(self, transport, mock_http_client, mock_response):
        mock_http_client.request.return_value = mock_response(SAMPLE_MOVIE_SEARCH_RESPONSE)

        await _group(TmdbSearch, transport, language="de").search_movie("Inception")

        assert _url(mock_http_client).params["language"] == "de"


class TestFlagPolymorphicValues:
    """Tests for flag_polymorphic_values."""

    def test_mixed_kinds_are_flagged(self):
        changes = ResultsMap(
            results={
                "title": [ChangedItem(id="1", action="updated", value="Fight Club")],
                "images": [
                    ChangedItem(id="2", action="added", value={"file_path": "/a.jpg"}),
                    ChangedItem(id="3", action="added", value="/b.jpg"),
                ],
            }
        )

        assert flag_polymorphic_values(changes, media_id=550) == ["images"]

    def test_nulls_do_not_count(self):
        changes = ResultsMap(
            results={
                "budget": [
                    ChangedItem(id="1", action="updated", value=100),
                    ChangedItem(id="2", action="deleted"),
                ]
            }
        )

        assert flag_polymorphic_values(changes) == []
