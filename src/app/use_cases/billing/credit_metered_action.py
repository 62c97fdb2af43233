"""Credit-Metered Action

Shared procedure behind every action that costs credits: read the pricing
record and the tenant, check the balance, debit it and write the domain
record plus an activity entry, all in one transaction.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, Optional, Tuple, TypeVar
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.app.repositories.pricing_config_repository import PricingConfigRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.domain.activity_log import ActivityLog
from src.domain.errors import LedgerError, ConfigurationMissing, TenantNotFound, TenantNotApproved, InsufficientCredits
from src.domain.pricing_config import PricingConfig
from src.domain.tenant_account import TenantAccount
from .ledger_transaction import RetryPolicy, run_ledger_transaction

logger = logging.getLogger(__name__)

CommandT = TypeVar("CommandT")
RecordT = TypeVar("RecordT")
ResponseT = TypeVar("ResponseT")


@dataclass
class Charge(Generic[RecordT]):
    """What one committed credit-metered action produced"""

    record: RecordT
    cost: Decimal
    balance_before: Decimal
    balance_after: Decimal


class CreditMeteredAction(ABC, Generic[CommandT, RecordT, ResponseT]):
    """
    Template for actions that consume credits

    Business Rules (checked in this order, inside the transaction):
    1. Pricing configuration must exist (CONFIGURATION_MISSING)
    2. Tenant account must exist (TENANT_NOT_FOUND)
    3. Tenant must be approved (TENANT_NOT_APPROVED)
    4. Balance must cover the current configured cost (INSUFFICIENT_CREDITS)

    Flow:
    1. Read pricing (fresh, never cached) and tenant (SELECT FOR UPDATE)
    2. Validate balance
    3. Guarded debit: UPDATE ... WHERE credits >= cost
    4. Write the domain record and activity entry
    5. Commit; on a database abort re-run from step 1

    Not idempotent: every successful call is a new, separately paid action.
    """

    #: Phrase completing "You need X credits to ..."
    action_label: str = "perform this action"
    #: Error code for unexpected failures
    failure_code: str = "CREDIT_ACTION_FAILED"

    def __init__(
        self,
        uow: UnitOfWork,
        tenant_repo: TenantAccountRepository,
        pricing_repo: PricingConfigRepository,
        activity_repo: ActivityLogRepository,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self.uow = uow
        self.tenant_repo = tenant_repo
        self.pricing_repo = pricing_repo
        self.activity_repo = activity_repo
        self.retry_policy = retry_policy or RetryPolicy()

    @abstractmethod
    def cost_of(self, pricing: PricingConfig) -> Decimal:
        """Select this action's cost from the pricing record"""

    @abstractmethod
    async def write_record(
        self, command: CommandT, tenant: TenantAccount, cost: Decimal
    ) -> Tuple[RecordT, ActivityLog]:
        """Write the domain record; return it with the activity entry to append"""

    @abstractmethod
    def to_response(self, charge: Charge[RecordT]) -> ResponseT:
        """Build the response DTO from a committed charge"""

    @abstractmethod
    def tenant_of(self, command: CommandT) -> str:
        """Tenant identifier targeted by the command"""

    async def execute(self, command: CommandT) -> Result[ResponseT]:
        """
        Run the action as one all-or-nothing unit

        Args:
            command: Action payload

        Returns:
            Result[ResponseT]: Success with record and balance movement, or error
        """
        try:
            charge = await run_ledger_transaction(
                self.uow, lambda: self._charge(command), self.retry_policy
            )
        except LedgerError as e:
            logger.info(f"{type(self).__name__} rejected for tenant {self.tenant_of(command)}: {e.code}")
            return Return.err(e.to_error())
        except Exception as e:
            logger.exception(f"{type(self).__name__} failed for tenant {self.tenant_of(command)}")
            return Return.err(
                Error(
                    code=self.failure_code,
                    message="Something went wrong. Please try again.",
                    reason=str(e),
                )
            )

        logger.info(
            f"{type(self).__name__}: tenant {self.tenant_of(command)} charged {charge.cost} credits, "
            f"balance {charge.balance_before} -> {charge.balance_after}"
        )
        return Return.ok(self.to_response(charge))

    async def _charge(self, command: CommandT) -> Charge[RecordT]:
        tenant_id = self.tenant_of(command)

        # Step 1: Pricing must exist; read fresh on every attempt
        pricing = await self.pricing_repo.get()
        if not pricing:
            raise ConfigurationMissing()

        # Step 2: Tenant must exist; lock the row for the rest of the transaction
        tenant = await self.tenant_repo.get_by_id(tenant_id, for_update=True)
        if not tenant:
            raise TenantNotFound(tenant_id)
        if not tenant.approved:
            raise TenantNotApproved(tenant_id)

        # Step 3: Balance must cover the current cost
        cost = Decimal(self.cost_of(pricing))
        balance_before = Decimal(tenant.credits)
        if balance_before < cost:
            raise InsufficientCredits(required=cost, available=balance_before, action=self.action_label)

        # Step 4: Guarded debit; a concurrent debit may have drained the balance
        balance_after = await self.tenant_repo.debit(tenant_id, cost)
        if balance_after is None:
            raise InsufficientCredits(required=cost, available=balance_before, action=self.action_label)

        # Step 5: Domain record and activity entry
        record, activity = await self.write_record(command, tenant, cost)
        await self.activity_repo.create(activity)

        return Charge(
            record=record,
            cost=cost,
            balance_before=balance_before,
            balance_after=Decimal(balance_after),
        )
