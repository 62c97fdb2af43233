"""Top-Up API Routes

Payment confirmation callback. Safe to call any number of times for the
same reference.
"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.carwash_request import VerifyTopUpRequestSchema
from src.app.services.payment_gateway import PaymentGateway
from src.app.use_cases.billing.confirm_topup import ConfirmTopUp
from src.app.use_cases.billing.dtos import ConfirmTopUpCommandDTO, TopUpResponseDTO
from src.app.use_cases.billing.ledger_transaction import RetryPolicy
from src.adapter.repositories import (
    SqlAlchemyActivityLogRepository,
    SqlAlchemyTenantAccountRepository,
    SqlAlchemyTopUpTransactionRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_config, get_payment_gateway, get_retry_policy, get_session

router = APIRouter(prefix="/carwash/topups", tags=["Top-Ups"])


@router.post("/verify", response_model=TopUpResponseDTO)
async def verify_topup(
    request: VerifyTopUpRequestSchema,
    session: AsyncSession = Depends(get_session),
    payment_gateway: PaymentGateway = Depends(get_payment_gateway),
    retry_policy: RetryPolicy = Depends(get_retry_policy),
    config=Depends(get_config),
):
    """
    Verify a payment with the gateway and credit the tenant once.

    **Example response:**
    ```json
    {
      "reference": "CW-3f1c2a9e-9a0b1c2d3e4f",
      "tenant_id": "3f1c2a9e7b8d4c5e9a0b1c2d3e4f5a6b",
      "credited": true,
      "credits": "5",
      "currency": "KES",
      "balance_after": "205.000000"
    }
    ```

    **Returns:**
    - 200: Payment applied (credited=true) or already applied (credited=false)
    - 400: Payment not verified or wrong currency
    - 404: Tenant not found
    """
    use_case = ConfirmTopUp(
        uow=SqlAlchemyUnitOfWork(session),
        tenant_repo=SqlAlchemyTenantAccountRepository(session),
        topup_repo=SqlAlchemyTopUpTransactionRepository(session),
        activity_repo=SqlAlchemyActivityLogRepository(session),
        payment_gateway=payment_gateway,
        operating_currency=config.OPERATING_CURRENCY,
        retry_policy=retry_policy,
    )
    result = await use_case.execute(
        ConfirmTopUpCommandDTO(reference=request.reference, tenant_id=request.tenant_id)
    )

    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
