"""List Top-Ups Use Case

Retrieves a tenant's applied credit purchases with pagination.
"""
from libs.result import Result, Return
from src.app.repositories.topup_transaction_repository import TopUpTransactionRepository
from .dtos import TopUpDTO, TopUpListResponseDTO


class ListTopUps:
    def __init__(self, topup_repo: TopUpTransactionRepository):
        self.topup_repo = topup_repo

    async def execute(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Result[TopUpListResponseDTO]:
        topups, total = await self.topup_repo.get_by_tenant_id(tenant_id=tenant_id, limit=limit, offset=offset)
        return Return.ok(
            TopUpListResponseDTO(
                topups=[TopUpDTO.model_validate(topup) for topup in topups],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
