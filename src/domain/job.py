"""Job Domain Entity

A job card: one service performed on one vehicle. Created together with the
credit debit that pays for it.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, Numeric, String
from src.domain.base import BaseModel, generate_uuid, utcnow


class JobStatus(str, Enum):
    """Job card lifecycle states"""
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Job(BaseModel, table=True):
    """
    Job - a job card created by a tenant

    Domain Rules:
    - Identifier is generated before the insert
    - credits_charged records the cost applied at commit time
    - Never rolled back except by the transaction that created it
    """

    __tablename__ = "jobs"
    __table_args__ = (
        Index('ix_jobs_tenant_created_at', 'tenant_id', 'created_at'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Job identifier"
    )

    tenant_id: str = Field(
        foreign_key="tenant_accounts.id",
        description="Owning tenant"
    )

    client_id: str = Field(description="Client identifier (phone number)")

    vehicle_id: str = Field(description="Vehicle identifier")

    client_phone_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Client phone number"
    )

    registration_plate: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Vehicle registration plate (upper-case)"
    )

    service: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Service name"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Service price charged to the client"
    )

    duration: int = Field(description="Expected duration in minutes")

    team_member_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Team member assigned to the job"
    )

    status: JobStatus = Field(
        default=JobStatus.PENDING,
        description="Job status"
    )

    credits_charged: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Credits debited for this job card"
    )

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))

    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
