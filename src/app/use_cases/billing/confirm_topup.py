"""ConfirmTopUp Use Case

Applies a verified credit purchase exactly once per payment reference.
Safe to call any number of times for the same reference (retried webhooks,
double-clicked callbacks).
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.payment_gateway import (
    PaymentGateway,
    PaymentGatewayError,
    VerifiedPayment,
    is_valid_reference,
)
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.app.repositories.topup_transaction_repository import TopUpTransactionRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.domain.activity_log import ActivityLog, ActivityType
from src.domain.errors import LedgerError, PaymentNotVerified, InvalidCurrency, TenantNotFound
from src.domain.topup_transaction import TopUpTransaction, TopUpStatus
from .dtos import ConfirmTopUpCommandDTO, TopUpResponseDTO
from .ledger_transaction import RetryPolicy, run_ledger_transaction

logger = logging.getLogger(__name__)

MINOR_UNITS_PER_CREDIT = Decimal("100")


@dataclass
class _TopUpOutcome:
    transaction: TopUpTransaction
    credited: bool
    balance_after: Optional[Decimal]


class ConfirmTopUp:
    """
    Use Case: Confirm a credit purchase

    Business Rules:
    1. Amount and currency come only from the gateway's verify call
    2. Unsuccessful payment -> PAYMENT_NOT_VERIFIED, nothing written
    3. The gateway must echo back exactly the requested reference, and a
       tenant named in the checkout metadata must be the one credited
       -> PAYMENT_NOT_VERIFIED otherwise
    4. Currency other than the operating currency -> INVALID_CURRENCY
    5. Existing record for the verified reference -> success, balance untouched
    6. Otherwise insert the record and increment the balance atomically

    Flow:
    1. Verify with the gateway (outside the transaction)
    2. Check the echoed reference and tenant, derive credits = amount_minor / 100
    3. In one transaction: check reference, lock tenant, insert record,
       increment balance, append activity
    4. A duplicate-key error on insert means a concurrent call won; report
       it as the no-op replay
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tenant_repo: TenantAccountRepository,
        topup_repo: TopUpTransactionRepository,
        activity_repo: ActivityLogRepository,
        payment_gateway: PaymentGateway,
        operating_currency: str = "KES",
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self.uow = uow
        self.tenant_repo = tenant_repo
        self.topup_repo = topup_repo
        self.activity_repo = activity_repo
        self.payment_gateway = payment_gateway
        self.operating_currency = operating_currency
        self.retry_policy = retry_policy or RetryPolicy()

    async def execute(self, command: ConfirmTopUpCommandDTO) -> Result[TopUpResponseDTO]:
        """
        Execute top-up confirmation

        Args:
            command: ConfirmTopUpCommandDTO with reference and tenant_id

        Returns:
            Result[TopUpResponseDTO]: credited=True when this call applied the
            payment, credited=False when it had already been applied
        """
        # Step 1: Verify with the gateway
        if not is_valid_reference(command.reference):
            return Return.err(PaymentNotVerified(command.reference, reason="malformed reference").to_error())

        try:
            payment = await self.payment_gateway.verify(command.reference)
        except PaymentGatewayError as e:
            return Return.err(PaymentNotVerified(command.reference, reason=str(e)).to_error())

        try:
            credits = self._credits_for(command.reference, payment, command.tenant_id)
        except LedgerError as e:
            logger.warning(f"Top-up {command.reference} rejected: {e.code} ({e.reason})")
            return Return.err(e.to_error())

        # Step 2: Apply once
        try:
            outcome = await run_ledger_transaction(
                self.uow, lambda: self._apply(command, payment, credits), self.retry_policy
            )
        except IntegrityError:
            logger.info(f"Top-up {command.reference} was applied by a concurrent call")
            return await self._replayed(command, payment, credits)
        except LedgerError as e:
            return Return.err(e.to_error())
        except Exception as e:
            logger.exception(f"Top-up {command.reference} failed")
            return Return.err(
                Error(
                    code="TOPUP_FAILED",
                    message="Failed to apply top-up. Please contact support.",
                    reason=str(e),
                    details={"reference": command.reference},
                )
            )

        if outcome.credited:
            logger.info(
                f"Top-up {command.reference}: tenant {command.tenant_id} credited {credits}, "
                f"balance now {outcome.balance_after}"
            )
        return Return.ok(self._to_response_dto(outcome))

    def _credits_for(self, reference: str, payment: VerifiedPayment, tenant_id: str) -> Decimal:
        if not payment.successful:
            raise PaymentNotVerified(reference, reason=f"gateway_status={payment.gateway_status}")
        if payment.reference != reference:
            raise PaymentNotVerified(reference, reason=f"gateway returned reference {payment.reference!r}")
        if payment.tenant_id is not None and payment.tenant_id != tenant_id:
            raise PaymentNotVerified(reference, reason=f"payment belongs to tenant {payment.tenant_id}")
        if payment.currency != self.operating_currency:
            raise InvalidCurrency(reference, payment.currency, self.operating_currency)
        if payment.amount_minor <= 0:
            raise PaymentNotVerified(reference, reason=f"amount={payment.amount_minor}")
        return Decimal(payment.amount_minor) / MINOR_UNITS_PER_CREDIT

    async def _apply(
        self, command: ConfirmTopUpCommandDTO, payment: VerifiedPayment, credits: Decimal
    ) -> _TopUpOutcome:
        # Replay guard: the record's existence means the payment was applied
        existing = await self.topup_repo.get_by_reference(payment.reference)
        if existing:
            if existing.tenant_id != command.tenant_id:
                logger.warning(
                    f"Top-up {command.reference} replayed for tenant {command.tenant_id}, "
                    f"originally applied to {existing.tenant_id}"
                )
            tenant = await self.tenant_repo.get_by_id(existing.tenant_id)
            return _TopUpOutcome(
                transaction=existing,
                credited=False,
                balance_after=tenant.credits if tenant else None,
            )

        tenant = await self.tenant_repo.get_by_id(command.tenant_id, for_update=True)
        if not tenant:
            raise TenantNotFound(command.tenant_id)

        transaction = await self.topup_repo.create(
            TopUpTransaction(
                reference=payment.reference,
                tenant_id=command.tenant_id,
                credits=credits,
                amount_minor=payment.amount_minor,
                currency=payment.currency,
                status=TopUpStatus.COMPLETED,
            )
        )

        balance_after = await self.tenant_repo.credit(command.tenant_id, credits)
        if balance_after is None:
            raise TenantNotFound(command.tenant_id)

        await self.activity_repo.create(
            ActivityLog(
                tenant_id=command.tenant_id,
                activity_type=ActivityType.TOP_UP,
                description=f"Purchased {credits} credits (ref {command.reference})",
                status=TopUpStatus.COMPLETED.value,
            )
        )

        return _TopUpOutcome(transaction=transaction, credited=True, balance_after=balance_after)

    async def _replayed(
        self, command: ConfirmTopUpCommandDTO, payment: VerifiedPayment, credits: Decimal
    ) -> Result[TopUpResponseDTO]:
        tenant = await self.tenant_repo.get_by_id(command.tenant_id)
        return Return.ok(
            TopUpResponseDTO(
                reference=command.reference,
                tenant_id=command.tenant_id,
                credited=False,
                credits=credits,
                currency=payment.currency,
                balance_after=tenant.credits if tenant else None,
            )
        )

    def _to_response_dto(self, outcome: _TopUpOutcome) -> TopUpResponseDTO:
        transaction = outcome.transaction
        return TopUpResponseDTO(
            reference=transaction.reference,
            tenant_id=transaction.tenant_id,
            credited=outcome.credited,
            credits=transaction.credits,
            currency=transaction.currency,
            balance_after=outcome.balance_after,
        )
