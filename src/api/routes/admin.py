"""Super-Admin API Routes

Tenant approval and global pricing. Every route requires X-Admin-API-Key.
"""

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.dependencies import require_admin_api_key
from src.api.error import ClientError
from src.app.services.notification_service import NotificationService
from src.app.use_cases.pricing.dtos import PricingConfigDTO, UpdatePricingCommandDTO
from src.app.use_cases.pricing.get_pricing_config import GetPricingConfig
from src.app.use_cases.pricing.update_pricing_config import UpdatePricingConfig
from src.app.use_cases.tenants.dtos import ApprovalResponseDTO, PendingTenantListResponseDTO
from src.app.use_cases.tenants.approve_tenant import ApproveTenant
from src.app.use_cases.tenants.list_pending_tenants import ListPendingTenants
from src.adapter.repositories import (
    SqlAlchemyActivityLogRepository,
    SqlAlchemyPricingConfigRepository,
    SqlAlchemyTenantAccountRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_config, get_notification_service, get_session

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin_api_key)])


@router.get("/tenants/pending", response_model=PendingTenantListResponseDTO)
async def list_pending_tenants(
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    result = await ListPendingTenants(SqlAlchemyTenantAccountRepository(session)).execute(
        limit=limit, offset=offset
    )
    return result.value


@router.post("/tenants/{tenant_id}/approve", response_model=ApprovalResponseDTO)
async def approve_tenant(
    tenant_id: str,
    session: AsyncSession = Depends(get_session),
    notification_service: NotificationService = Depends(get_notification_service),
    config=Depends(get_config),
):
    """
    Approve a pending carwash account.

    The approval email is sent after the change commits; a failed email is
    reported in notification_sent and does not undo the approval.

    **Returns:**
    - 200: Approved
    - 404: Tenant not found
    - 409: Already approved
    """
    use_case = ApproveTenant(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyTenantAccountRepository(session),
        SqlAlchemyActivityLogRepository(session),
        notification_service,
        login_url=f"{config.APP_BASE_URL.rstrip('/')}/login",
    )
    result = await use_case.execute(tenant_id)

    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/pricing", response_model=PricingConfigDTO)
async def get_pricing(session: AsyncSession = Depends(get_session)):
    result = await GetPricingConfig(SqlAlchemyPricingConfigRepository(session)).execute()
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.put("/pricing", response_model=PricingConfigDTO)
async def update_pricing(
    request: UpdatePricingCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    """Replace the global per-action costs; applies to the next action"""
    use_case = UpdatePricingConfig(SqlAlchemyUnitOfWork(session), SqlAlchemyPricingConfigRepository(session))
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
