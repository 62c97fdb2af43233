"""List Jobs Use Case

Retrieves a tenant's job cards with pagination, most recent first.
"""
from libs.result import Result, Return
from src.app.repositories.job_repository import JobRepository
from .dtos import JobDTO, JobListResponseDTO


class ListJobs:
    def __init__(self, job_repo: JobRepository):
        self.job_repo = job_repo

    async def execute(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Result[JobListResponseDTO]:
        jobs, total = await self.job_repo.get_by_tenant_id(tenant_id=tenant_id, limit=limit, offset=offset)
        return Return.ok(
            JobListResponseDTO(
                jobs=[JobDTO.model_validate(job) for job in jobs],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
