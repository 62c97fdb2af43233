"""Get Balance Use Case

Retrieves a tenant's current credit balance.
"""

from libs.result import Result, Return
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.app.use_cases.billing.dtos import BalanceResponseDTO
from src.domain.errors import TenantNotFound


class GetBalance:
    """
    Get Balance Use Case

    Read-only operation that retrieves the current credit balance
    and approval state of a tenant account.
    """

    def __init__(self, tenant_repo: TenantAccountRepository):
        self.tenant_repo = tenant_repo

    async def execute(self, tenant_id: str) -> Result[BalanceResponseDTO]:
        """
        Execute get balance operation

        Args:
            tenant_id: The tenant identifier

        Returns:
            Result[BalanceResponseDTO]: Success with balance data or error

        Errors:
            TENANT_NOT_FOUND: No account with this identifier
        """
        account = await self.tenant_repo.get_by_id(tenant_id)
        if not account:
            return Return.err(TenantNotFound(tenant_id).to_error())

        return Return.ok(
            BalanceResponseDTO(
                tenant_id=account.id,
                credits=account.credits,
                approved=account.approved,
                last_updated=account.updated_at,
            )
        )
