"""Carwash API Routes

Tenant-facing routes. Every route below except registration runs the tenant
gate dependency before the use case.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.dependencies import get_principal_uid, require_approved_tenant, require_tenant_owner
from src.api.error import ClientError
from src.api.schemas.carwash_request import (
    CreateJobRequestSchema,
    InitializeTopUpRequestSchema,
    RecordExpenseRequestSchema,
    RegisterTenantRequestSchema,
)
from src.app.use_cases.billing.dtos import (
    ActivityListResponseDTO,
    BalanceResponseDTO,
    CreateJobCardCommandDTO,
    ExpenseListResponseDTO,
    ExpenseResponseDTO,
    InitializeTopUpCommandDTO,
    InitializeTopUpResponseDTO,
    JobCardResponseDTO,
    JobListResponseDTO,
    RecordExpenseCommandDTO,
    TopUpListResponseDTO,
)
from src.app.use_cases.billing.create_job_card import CreateJobCard
from src.app.use_cases.billing.record_expense import RecordExpense
from src.app.use_cases.billing.initialize_topup import InitializeTopUp
from src.app.use_cases.billing.get_balance import GetBalance
from src.app.use_cases.billing.list_jobs import ListJobs
from src.app.use_cases.billing.list_expenses import ListExpenses
from src.app.use_cases.billing.list_topups import ListTopUps
from src.app.use_cases.billing.list_activities import ListActivities
from src.app.use_cases.billing.ledger_transaction import RetryPolicy
from src.app.use_cases.tenants.dtos import RegisterTenantCommandDTO, TenantDTO
from src.app.use_cases.tenants.register_tenant import RegisterTenant
from src.app.services.notification_service import NotificationService
from src.app.services.payment_gateway import PaymentGateway
from src.adapter.repositories import (
    SqlAlchemyActivityLogRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyExpenseRepository,
    SqlAlchemyJobRepository,
    SqlAlchemyPricingConfigRepository,
    SqlAlchemyTenantAccountRepository,
    SqlAlchemyTopUpTransactionRepository,
    SqlAlchemyVehicleRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import (
    get_config,
    get_notification_service,
    get_payment_gateway,
    get_retry_policy,
    get_session,
)
from src.domain.tenant_account import TenantAccount

router = APIRouter(prefix="/carwash/tenants", tags=["Carwash"])

INSUFFICIENT_CREDITS_RESPONSE = {
    402: {
        "description": "Insufficient credits",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INSUFFICIENT_CREDITS",
                        "message": "Insufficient credits. You need 1.5 credits to create a job card.",
                        "reason": "balance=1.000000, required=1.500000",
                        "details": {"required": "1.500000", "available": "1.000000"}
                    }
                }
            }
        }
    }
}


@router.post("", response_model=TenantDTO, status_code=status.HTTP_201_CREATED)
async def register_tenant(
    request: RegisterTenantRequestSchema,
    principal_uid: str = Depends(get_principal_uid),
    session: AsyncSession = Depends(get_session),
    notification_service: NotificationService = Depends(get_notification_service),
    config=Depends(get_config),
):
    """
    Register a carwash for the authenticated principal.

    The account starts pending approval with the signup bonus credited.

    **Returns:**
    - 201: Account created
    - 409: The principal already owns an account
    """
    use_case = RegisterTenant(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyTenantAccountRepository(session),
        SqlAlchemyActivityLogRepository(session),
        notification_service,
        signup_bonus=config.SIGNUP_BONUS_CREDITS,
    )
    result = await use_case.execute(
        RegisterTenantCommandDTO(
            owner_uid=principal_uid,
            name=request.name,
            email=request.email,
            phone_number=request.phone_number,
        )
    )

    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/{tenant_id}/balance", response_model=BalanceResponseDTO)
async def get_balance(
    tenant: TenantAccount = Depends(require_tenant_owner),
    session: AsyncSession = Depends(get_session),
):
    """
    Get current credit balance and approval state.

    Visible to the owner while the account is still pending.
    """
    result = await GetBalance(SqlAlchemyTenantAccountRepository(session)).execute(tenant.id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.post(
    "/{tenant_id}/jobs",
    response_model=JobCardResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=INSUFFICIENT_CREDITS_RESPONSE,
)
async def create_job(
    request: CreateJobRequestSchema,
    tenant: TenantAccount = Depends(require_approved_tenant),
    session: AsyncSession = Depends(get_session),
    retry_policy: RetryPolicy = Depends(get_retry_policy),
):
    """
    Create a job card, paid with job_card_cost credits.

    The client and vehicle are created or updated in the same transaction.

    **Returns:**
    - 201: Job created and credits debited
    - 402: Insufficient credits
    - 503: Pricing not configured
    """
    use_case = CreateJobCard(
        uow=SqlAlchemyUnitOfWork(session),
        tenant_repo=SqlAlchemyTenantAccountRepository(session),
        pricing_repo=SqlAlchemyPricingConfigRepository(session),
        activity_repo=SqlAlchemyActivityLogRepository(session),
        client_repo=SqlAlchemyClientRepository(session),
        vehicle_repo=SqlAlchemyVehicleRepository(session),
        job_repo=SqlAlchemyJobRepository(session),
        retry_policy=retry_policy,
    )
    result = await use_case.execute(
        CreateJobCardCommandDTO(tenant_id=tenant.id, **request.model_dump())
    )

    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/{tenant_id}/jobs", response_model=JobListResponseDTO)
async def list_jobs(
    tenant: TenantAccount = Depends(require_approved_tenant),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    result = await ListJobs(SqlAlchemyJobRepository(session)).execute(tenant.id, limit=limit, offset=offset)
    return result.value


@router.post(
    "/{tenant_id}/expenses",
    response_model=ExpenseResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=INSUFFICIENT_CREDITS_RESPONSE,
)
async def record_expense(
    request: RecordExpenseRequestSchema,
    tenant: TenantAccount = Depends(require_approved_tenant),
    session: AsyncSession = Depends(get_session),
    retry_policy: RetryPolicy = Depends(get_retry_policy),
):
    """
    Record an expense, paid with expense_credit_cost credits.

    **Returns:**
    - 201: Expense recorded and credits debited
    - 402: Insufficient credits
    - 503: Pricing not configured
    """
    use_case = RecordExpense(
        uow=SqlAlchemyUnitOfWork(session),
        tenant_repo=SqlAlchemyTenantAccountRepository(session),
        pricing_repo=SqlAlchemyPricingConfigRepository(session),
        activity_repo=SqlAlchemyActivityLogRepository(session),
        expense_repo=SqlAlchemyExpenseRepository(session),
        retry_policy=retry_policy,
    )
    payload = request.model_dump(exclude_none=True)
    result = await use_case.execute(RecordExpenseCommandDTO(tenant_id=tenant.id, **payload))

    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/{tenant_id}/expenses", response_model=ExpenseListResponseDTO)
async def list_expenses(
    tenant: TenantAccount = Depends(require_approved_tenant),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    result = await ListExpenses(SqlAlchemyExpenseRepository(session)).execute(
        tenant.id, limit=limit, offset=offset
    )
    return result.value


@router.get("/{tenant_id}/activities", response_model=ActivityListResponseDTO)
async def list_activities(
    tenant: TenantAccount = Depends(require_approved_tenant),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    result = await ListActivities(SqlAlchemyActivityLogRepository(session)).execute(
        tenant.id, limit=limit, offset=offset
    )
    return result.value


@router.get("/{tenant_id}/topups", response_model=TopUpListResponseDTO)
async def list_topups(
    tenant: TenantAccount = Depends(require_approved_tenant),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    result = await ListTopUps(SqlAlchemyTopUpTransactionRepository(session)).execute(
        tenant.id, limit=limit, offset=offset
    )
    return result.value


@router.post("/{tenant_id}/topups/initialize", response_model=InitializeTopUpResponseDTO)
async def initialize_topup(
    request: InitializeTopUpRequestSchema,
    tenant: TenantAccount = Depends(require_approved_tenant),
    session: AsyncSession = Depends(get_session),
    payment_gateway: PaymentGateway = Depends(get_payment_gateway),
    config=Depends(get_config),
):
    """
    Start a credit purchase and return the gateway checkout URL.

    Credits are added only when the payment is confirmed through
    POST /carwash/topups/verify.
    """
    use_case = InitializeTopUp(
        SqlAlchemyTenantAccountRepository(session),
        SqlAlchemyPricingConfigRepository(session),
        payment_gateway,
        operating_currency=config.OPERATING_CURRENCY,
    )
    result = await use_case.execute(InitializeTopUpCommandDTO(tenant_id=tenant.id, amount=request.amount))

    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
