"""AuthorizeTenant Use Case

Gate in front of every tenant-facing operation.
"""

from libs.result import Result, Return
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.domain.errors import TenantNotFound, TenantAccessDenied, TenantNotApproved
from src.domain.tenant_account import TenantAccount


class AuthorizeTenant:
    """
    Use Case: Check that a principal may operate a tenant account

    Business Rules (in order):
    1. Tenant must exist (TENANT_NOT_FOUND)
    2. Principal must own the tenant (TENANT_ACCESS_DENIED)
    3. Tenant must be approved (TENANT_NOT_APPROVED)
    """

    def __init__(self, tenant_repo: TenantAccountRepository):
        self.tenant_repo = tenant_repo

    async def execute(
        self, tenant_id: str, principal_uid: str, require_approved: bool = True
    ) -> Result[TenantAccount]:
        """
        Args:
            tenant_id: Tenant addressed by the request
            principal_uid: Authenticated caller
            require_approved: False for read-only views a pending owner may see

        Returns:
            Result[TenantAccount]: The account when access is allowed
        """
        account = await self.tenant_repo.get_by_id(tenant_id)
        if not account:
            return Return.err(TenantNotFound(tenant_id).to_error())

        if account.owner_uid != principal_uid:
            return Return.err(TenantAccessDenied(tenant_id).to_error())

        if require_approved and not account.approved:
            return Return.err(TenantNotApproved(tenant_id).to_error())

        return Return.ok(account)
