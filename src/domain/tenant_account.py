"""Tenant Account Domain Entity

One carwash business. Holds the prepaid credit balance and the approval flag.
Balance is always >= 0 and only changes through the ledger use cases.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, DateTime, Numeric, String
from src.domain.base import BaseModel, generate_uuid, utcnow


class TenantAccount(BaseModel, table=True):
    """
    Tenant Account - a carwash and its credit balance

    Domain Rules:
    - Owned by exactly one authentication principal (owner_uid is unique)
    - Credits must be non-negative (fractional credits allowed)
    - Credits change only via job/expense debits and verified top-ups
    - Approval is one-directional: pending -> approved
    """

    __tablename__ = "tenant_accounts"
    __table_args__ = (
        CheckConstraint('credits >= 0', name='credits_non_negative'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Tenant identifier"
    )

    owner_uid: str = Field(
        index=True,
        unique=True,
        description="Authentication principal owning this tenant"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Carwash business name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Contact email for account notifications"
    )

    phone_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Contact phone number"
    )

    credits: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Current credit balance (must be >= 0, precision: 18,6)"
    )

    approved: bool = Field(
        default=False,
        index=True,
        description="Set by the super-admin; pending tenants cannot operate"
    )

    created_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True),
        description="Account creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True),
        description="Last balance or status update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "3f1c2a9e7b8d4c5e9a0b1c2d3e4f5a6b",
                "owner_uid": "uid_sparkle_wash",
                "name": "Sparkle Wash",
                "email": "owner@sparklewash.co.ke",
                "phone_number": "+254700000000",
                "credits": "200.000000",
                "approved": False,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
