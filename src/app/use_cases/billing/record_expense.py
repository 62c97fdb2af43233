"""RecordExpense Use Case

Records a business expense and pays for it with the tenant's credits.
"""

from decimal import Decimal
from typing import Optional, Tuple
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.app.repositories.pricing_config_repository import PricingConfigRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.app.repositories.expense_repository import ExpenseRepository
from src.domain.activity_log import ActivityLog, ActivityType
from src.domain.base import generate_uuid
from src.domain.expense import Expense
from src.domain.pricing_config import PricingConfig
from src.domain.tenant_account import TenantAccount
from .credit_metered_action import Charge, CreditMeteredAction
from .dtos import RecordExpenseCommandDTO, ExpenseResponseDTO, ExpenseDTO
from .ledger_transaction import RetryPolicy


class RecordExpense(CreditMeteredAction[RecordExpenseCommandDTO, Expense, ExpenseResponseDTO]):
    """
    Use Case: Record an expense (costs expense_credit_cost credits)

    Salary expenses are described as "Salary for <team member>".
    """

    action_label = "record an expense"
    failure_code = "RECORD_EXPENSE_FAILED"

    def __init__(
        self,
        uow: UnitOfWork,
        tenant_repo: TenantAccountRepository,
        pricing_repo: PricingConfigRepository,
        activity_repo: ActivityLogRepository,
        expense_repo: ExpenseRepository,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        super().__init__(uow, tenant_repo, pricing_repo, activity_repo, retry_policy)
        self.expense_repo = expense_repo

    def tenant_of(self, command: RecordExpenseCommandDTO) -> str:
        return command.tenant_id

    def cost_of(self, pricing: PricingConfig) -> Decimal:
        return pricing.expense_credit_cost

    async def write_record(
        self, command: RecordExpenseCommandDTO, tenant: TenantAccount, cost: Decimal
    ) -> Tuple[Expense, ActivityLog]:
        description = command.resolved_description()

        expense = await self.expense_repo.create(
            Expense(
                id=generate_uuid(),
                tenant_id=tenant.id,
                category=command.category,
                description=description,
                amount=command.amount,
                expense_date=command.expense_date,
                team_member_name=command.team_member_name,
                credits_charged=cost,
            )
        )

        activity = ActivityLog(
            tenant_id=tenant.id,
            activity_type=ActivityType.EXPENSE,
            description=f"Recorded an expense of Ksh {command.amount} for {description}",
            status=command.category.value,
        )
        return expense, activity

    def to_response(self, charge: Charge[Expense]) -> ExpenseResponseDTO:
        return ExpenseResponseDTO(
            expense=ExpenseDTO.model_validate(charge.record),
            credits_charged=charge.cost,
            balance_before=charge.balance_before,
            balance_after=charge.balance_after,
        )
