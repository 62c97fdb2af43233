"""List Pending Tenants Use Case

Super-admin view of accounts awaiting approval, oldest first.
"""
from libs.result import Result, Return
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from .dtos import PendingTenantListResponseDTO, TenantDTO


class ListPendingTenants:
    def __init__(self, tenant_repo: TenantAccountRepository):
        self.tenant_repo = tenant_repo

    async def execute(self, limit: int = 20, offset: int = 0) -> Result[PendingTenantListResponseDTO]:
        tenants, total = await self.tenant_repo.list_pending(limit=limit, offset=offset)
        return Return.ok(
            PendingTenantListResponseDTO(
                tenants=[TenantDTO.model_validate(tenant) for tenant in tenants],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
