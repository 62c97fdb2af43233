"""Expense Domain Entity

A business expense recorded by a tenant. Recording one costs credits.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, Numeric, String
from src.domain.base import BaseModel, generate_uuid, utcnow


class ExpenseCategory(str, Enum):
    SALARY = "Salary"
    RENT = "Rent"
    UTILITIES = "Utilities"
    SUPPLIES = "Supplies"
    MAINTENANCE = "Maintenance"
    REFUND = "Refund"
    OTHER = "Other"


class Expense(BaseModel, table=True):
    """
    Expense - money spent by the carwash

    Domain Rules:
    - Salary expenses are described as "Salary for <team member>"
    - credits_charged records the cost applied at commit time
    """

    __tablename__ = "expenses"
    __table_args__ = (
        Index('ix_expenses_tenant_created_at', 'tenant_id', 'created_at'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Expense identifier"
    )

    tenant_id: str = Field(
        foreign_key="tenant_accounts.id",
        description="Owning tenant"
    )

    category: ExpenseCategory = Field(description="Expense category")

    description: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="What the money was spent on"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Amount spent (operating currency)"
    )

    expense_date: date = Field(description="Date the expense was incurred")

    team_member_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Team member paid (salary expenses)"
    )

    credits_charged: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Credits debited for recording this expense"
    )

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
