"""Activity Log Domain Entity

Append-only, human-readable history of what happened on a tenant account.
Nothing reads it to make a decision.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, String
from src.domain.base import BaseModel, generate_uuid, utcnow


class ActivityType(str, Enum):
    JOB = "Job"
    EXPENSE = "Expense"
    TOP_UP = "TopUp"
    ADMIN = "Admin"
    ACCOUNT = "Account"


class ActivityLog(BaseModel, table=True):
    __tablename__ = "activity_logs"
    __table_args__ = (
        Index('ix_activity_logs_tenant_created_at', 'tenant_id', 'created_at'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    tenant_id: str = Field(foreign_key="tenant_accounts.id")

    activity_type: ActivityType = Field(description="Kind of event")

    description: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Human-readable summary"
    )

    status: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
    )

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
