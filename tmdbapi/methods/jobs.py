"""Job list endpoint."""

from tmdbapi.core.results import ResultsList
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.common import JobDepartment


class TmdbJobs(AbstractMethod):
    """Crew departments and jobs."""

    async def get_jobs(self) -> ResultsList[JobDepartment]:
        """Get every department with its valid jobs."""
        api_url = self._plain_url("job", "list")
        return await self._get_list(api_url, JobDepartment, keys=("jobs",))
