"""Pricing Configuration Domain Entity

The single global record holding per-action credit costs.
"""

from datetime import datetime
from decimal import Decimal
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, DateTime, Numeric
from src.domain.base import BaseModel, utcnow

GLOBAL_PRICING_ID = "global"

DEFAULT_JOB_CARD_COST = Decimal("1.5")
DEFAULT_EXPENSE_CREDIT_COST = Decimal("0.5")
DEFAULT_MIN_CREDIT_PURCHASE = Decimal("50")


class PricingConfig(BaseModel, table=True):
    """
    Pricing Config - global cost-per-action values

    Domain Rules:
    - Exactly one row, id = "global"
    - Written only by the super-admin
    - Must exist before any credit-consuming action runs
    """

    __tablename__ = "pricing_configs"
    __table_args__ = (
        CheckConstraint('job_card_cost >= 0', name='job_card_cost_non_negative'),
        CheckConstraint('expense_credit_cost >= 0', name='expense_credit_cost_non_negative'),
        CheckConstraint('min_credit_purchase >= 0', name='min_credit_purchase_non_negative'),
    )

    id: str = Field(
        default=GLOBAL_PRICING_ID,
        primary_key=True,
        description="Well-known identifier of the pricing record"
    )

    job_card_cost: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Credits charged per job card"
    )

    expense_credit_cost: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Credits charged per recorded expense"
    )

    min_credit_purchase: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Smallest top-up a tenant may initiate (in operating currency)"
    )

    updated_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True),
        description="Last change timestamp"
    )
