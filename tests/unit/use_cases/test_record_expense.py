"""Unit tests for RecordExpense use case"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from pydantic import ValidationError

from src.app.use_cases.billing.record_expense import RecordExpense
from src.app.use_cases.billing.dtos import RecordExpenseCommandDTO
from src.domain.activity_log import ActivityType
from src.domain.expense import ExpenseCategory


@pytest.fixture
def repos():
    repos = MagicMock()
    repos.activity.create = AsyncMock(side_effect=lambda entity: entity)
    repos.expense.create = AsyncMock(side_effect=lambda entity: entity)
    return repos


@pytest.fixture
def use_case(mock_uow, repos, no_wait_policy):
    return RecordExpense(
        uow=mock_uow,
        tenant_repo=repos.tenant,
        pricing_repo=repos.pricing,
        activity_repo=repos.activity,
        expense_repo=repos.expense,
        retry_policy=no_wait_policy,
    )


class TestRecordExpenseCommand:

    def test_description_required_for_non_salary(self):
        with pytest.raises(ValidationError):
            RecordExpenseCommandDTO(tenant_id="tenant_123", category=ExpenseCategory.RENT, amount=Decimal("100"))

    def test_salary_requires_team_member(self):
        with pytest.raises(ValidationError):
            RecordExpenseCommandDTO(tenant_id="tenant_123", category=ExpenseCategory.SALARY, amount=Decimal("100"))

    def test_salary_description_is_derived(self):
        command = RecordExpenseCommandDTO(
            tenant_id="tenant_123",
            category=ExpenseCategory.SALARY,
            amount=Decimal("1500"),
            team_member_name="Otieno",
        )
        assert command.resolved_description() == "Salary for Otieno"

    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            RecordExpenseCommandDTO(
                tenant_id="tenant_123", category=ExpenseCategory.OTHER, description="x", amount=Decimal("0")
            )


@pytest.mark.asyncio
class TestRecordExpense:

    async def test_records_expense_and_debits_cost(
        self, use_case, repos, mock_uow, sample_pricing, sample_tenant
    ):
        """
        Given: expense_credit_cost=0.5 and balance 10
        When: A Supplies expense is recorded
        Then: Expense stored with credits_charged=0.5 and balance 9.5
        """
        # Arrange
        repos.pricing.get = AsyncMock(return_value=sample_pricing)
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)
        repos.tenant.debit = AsyncMock(return_value=Decimal("9.5"))
        command = RecordExpenseCommandDTO(
            tenant_id="tenant_123",
            category=ExpenseCategory.SUPPLIES,
            description="Shampoo",
            amount=Decimal("1200"),
            expense_date=date(2024, 3, 1),
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.credits_charged == Decimal("0.5")
        assert response.balance_after == Decimal("9.5")
        assert response.expense.description == "Shampoo"
        assert response.expense.category == ExpenseCategory.SUPPLIES
        assert response.expense.expense_date == date(2024, 3, 1)
        repos.tenant.debit.assert_called_once_with("tenant_123", Decimal("0.5"))
        mock_uow.commit.assert_called_once()

        activity = repos.activity.create.call_args[0][0]
        assert activity.activity_type == ActivityType.EXPENSE
        assert activity.description == "Recorded an expense of Ksh 1200 for Shampoo"
        assert activity.status == "Supplies"

    async def test_salary_expense_uses_team_member(self, use_case, repos, sample_pricing, sample_tenant):
        # Arrange
        repos.pricing.get = AsyncMock(return_value=sample_pricing)
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)
        repos.tenant.debit = AsyncMock(return_value=Decimal("9.5"))
        command = RecordExpenseCommandDTO(
            tenant_id="tenant_123",
            category=ExpenseCategory.SALARY,
            amount=Decimal("3000"),
            team_member_name="Otieno",
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.value.expense.description == "Salary for Otieno"
        assert result.value.expense.team_member_name == "Otieno"

    async def test_insufficient_credits_message(self, use_case, repos, mock_uow, sample_pricing, sample_tenant):
        # Arrange
        sample_tenant.credits = Decimal("0.25")
        repos.pricing.get = AsyncMock(return_value=sample_pricing)
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)
        repos.tenant.debit = AsyncMock()
        command = RecordExpenseCommandDTO(
            tenant_id="tenant_123", category=ExpenseCategory.RENT, description="March rent", amount=Decimal("100")
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.error.code == "INSUFFICIENT_CREDITS"
        assert result.error.message == "Insufficient credits. You need 0.5 credits to record an expense."
        repos.expense.create.assert_not_called()
        mock_uow.commit.assert_not_called()
