"""
List Activities Use Case

Retrieves a tenant's activity feed (jobs, expenses, top-ups, approvals)
with pagination. Entries are ordered by created_at DESC.
"""
from libs.result import Result, Return
from src.app.repositories.activity_log_repository import ActivityLogRepository
from .dtos import ActivityDTO, ActivityListResponseDTO


class ListActivities:
    """
    Use case: View the tenant activity feed

    Every committed ledger action appends exactly one entry, so this feed
    is also an audit trail of balance movements.
    """

    def __init__(self, activity_repo: ActivityLogRepository):
        self.activity_repo = activity_repo

    async def execute(
        self, tenant_id: str, limit: int = 20, offset: int = 0
    ) -> Result[ActivityListResponseDTO]:
        """
        List activities for a tenant with pagination.

        Args:
            tenant_id: Tenant identifier
            limit: Maximum number of entries to return (default 20)
            offset: Number of entries to skip (default 0)

        Returns:
            Result[ActivityListResponseDTO]: Paginated activity list
        """
        activities, total = await self.activity_repo.get_by_tenant_id(
            tenant_id=tenant_id,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ActivityListResponseDTO(
                activities=[ActivityDTO.model_validate(activity) for activity in activities],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
