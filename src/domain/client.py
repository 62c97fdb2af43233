"""Client and Vehicle Domain Entities

Customers of a carwash and their vehicles. Both are upserted as part of the
job-card transaction.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String, UniqueConstraint
from src.domain.base import BaseModel, generate_uuid, utcnow


class Client(BaseModel, table=True):
    """
    Client - identified by phone number within a tenant
    """

    __tablename__ = "clients"

    tenant_id: str = Field(
        primary_key=True,
        foreign_key="tenant_accounts.id",
        description="Owning tenant"
    )

    id: str = Field(
        primary_key=True,
        description="Client identifier (phone number)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client name"
    )

    phone_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Client phone number"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))


class Vehicle(BaseModel, table=True):
    """
    Vehicle - belongs to one client; plate is unique per client
    """

    __tablename__ = "vehicles"
    __table_args__ = (
        UniqueConstraint('tenant_id', 'client_id', 'registration_plate', name='uq_vehicle_plate'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Vehicle identifier"
    )

    tenant_id: str = Field(
        foreign_key="tenant_accounts.id",
        index=True,
    )

    client_id: str = Field(description="Owning client (phone number)")

    registration_plate: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Registration plate, stored upper-case"
    )

    make: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))

    model: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))

    color: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))

    vehicle_type: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Saloon, Hatchback, SUV, Truck, Van, Motorbike, Other"
    )
