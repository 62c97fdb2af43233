"""Top-Up Transaction Domain Entity

Record of a verified credit purchase. The primary key is the payment
gateway reference, so a record's existence marks the top-up as applied.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, Numeric, String
from src.domain.base import BaseModel, utcnow


class TopUpStatus(str, Enum):
    COMPLETED = "Completed"


class TopUpTransaction(BaseModel, table=True):
    """
    Top-Up Transaction - immutable marker of an applied payment

    Domain Rules:
    - reference is the primary key (idempotency key); one row per payment
    - credits is derived from the gateway-verified amount, never client input
    """

    __tablename__ = "topup_transactions"
    __table_args__ = (
        Index('ix_topup_transactions_tenant_created_at', 'tenant_id', 'created_at'),
    )

    reference: str = Field(
        sa_column=Column(String(255), primary_key=True),
        description="Payment gateway reference (idempotency key)"
    )

    tenant_id: str = Field(
        foreign_key="tenant_accounts.id",
        description="Tenant credited by this payment"
    )

    credits: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Credits added to the balance"
    )

    amount_minor: int = Field(description="Verified amount in the smallest currency unit")

    currency: str = Field(
        sa_column=Column(String(3), nullable=False),
        description="Verified ISO currency code"
    )

    status: TopUpStatus = Field(default=TopUpStatus.COMPLETED)

    created_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True),
        description="When the top-up was applied"
    )
