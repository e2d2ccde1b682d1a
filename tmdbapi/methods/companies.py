"""Company endpoints."""

from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.common import Company
from tmdbapi.models.movie import Movie

BASE_COMPANY = "company"


class TmdbCompanies(AbstractMethod):
    """Production companies."""

    async def get_company_info(self, company_id: int) -> Company:
        """Get company details."""
        return await self._get_model(self._plain_url(BASE_COMPANY, company_id), Company)

    async def get_company_movies(
        self, company_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Movie]:
        """Get movies produced by a company."""
        api_url = self._url(BASE_COMPANY, company_id, "movies", options=options)
        return await self._get_list(api_url, Movie)
