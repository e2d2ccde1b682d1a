"""Per-call request options and the discover filter builder."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tmdbapi.core.url import (
    PARAM_CERTIFICATION_COUNTRY,
    PARAM_CERTIFICATION_LTE,
    PARAM_INCLUDE_ADULT,
    PARAM_LANGUAGE,
    PARAM_PAGE,
    PARAM_PRIMARY_RELEASE_YEAR,
    PARAM_RELEASE_DATE_GTE,
    PARAM_RELEASE_DATE_LTE,
    PARAM_SORT_BY,
    PARAM_VOTE_AVERAGE_GTE,
    PARAM_VOTE_COUNT_GTE,
    PARAM_WITH_COMPANIES,
    PARAM_WITH_GENRES,
    PARAM_YEAR,
    ApiUrl,
)


class RequestOptions(BaseModel):
    """Optional settings shared by most endpoint calls.

    Attributes:
        language: ISO 639-1 language code (falls back to the client default)
        page: 1-based page number for list endpoints
        append_to_response: Sub-resources to inline in the response
    """

    model_config = ConfigDict(frozen=True)

    language: str | None = None
    page: int | None = Field(default=None, ge=1)
    append_to_response: frozenset[str] = Field(default_factory=frozenset)

    def apply(self, api_url: ApiUrl, default_language: str | None = None) -> ApiUrl:
        """Write these options onto a URL builder."""
        api_url.add_argument(PARAM_LANGUAGE, self.language or default_language)
        api_url.add_argument(PARAM_PAGE, self.page)
        api_url.append_to_response(self.append_to_response)
        return api_url


class Discover(BaseModel):
    """Filters for the discover/movie endpoint.

    Unset filters are not sent.
    """

    page: int | None = Field(default=None, ge=1)
    language: str | None = None
    sort_by: str | None = None
    include_adult: bool | None = None
    year: int | None = None
    primary_release_year: int | None = None
    vote_count_gte: int | None = None
    vote_average_gte: float | None = None
    with_genres: str | None = None
    release_date_gte: str | None = None
    release_date_lte: str | None = None
    certification_country: str | None = None
    certification_lte: str | None = None
    with_companies: str | None = None

    def get_params(self) -> dict[str, Any]:
        """Query arguments for the set filters, keyed by their wire names."""
        params = {
            PARAM_PAGE: self.page,
            PARAM_LANGUAGE: self.language,
            PARAM_SORT_BY: self.sort_by,
            PARAM_INCLUDE_ADULT: self.include_adult,
            PARAM_YEAR: self.year,
            PARAM_PRIMARY_RELEASE_YEAR: self.primary_release_year,
            PARAM_VOTE_COUNT_GTE: self.vote_count_gte,
            PARAM_VOTE_AVERAGE_GTE: self.vote_average_gte,
            PARAM_WITH_GENRES: self.with_genres,
            PARAM_RELEASE_DATE_GTE: self.release_date_gte,
            PARAM_RELEASE_DATE_LTE: self.release_date_lte,
            PARAM_CERTIFICATION_COUNTRY: self.certification_country,
            PARAM_CERTIFICATION_LTE: self.certification_lte,
            PARAM_WITH_COMPANIES: self.with_companies,
        }
        return {name: value for name, value in params.items() if value is not None}
