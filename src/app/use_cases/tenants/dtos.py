"""Data Transfer Objects for Tenant Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RegisterTenantCommandDTO(BaseModel):
    """
    Command DTO for registering a carwash

    owner_uid comes from the authenticated principal, never from the body.
    """

    owner_uid: str = Field(..., min_length=1, description="Authentication principal")

    name: str = Field(..., min_length=1, max_length=255, description="Carwash business name")

    email: str = Field(..., min_length=3, max_length=255, description="Contact email")

    phone_number: Optional[str] = Field(default=None, max_length=50)

    class Config:
        json_schema_extra = {
            "example": {
                "owner_uid": "uid_sparkle_wash",
                "name": "Sparkle Wash",
                "email": "owner@sparklewash.co.ke",
                "phone_number": "+254700000000"
            }
        }


class TenantDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_uid: str
    name: str
    email: str
    phone_number: Optional[str] = None
    credits: Decimal
    approved: bool
    created_at: datetime


class PendingTenantListResponseDTO(BaseModel):
    tenants: List[TenantDTO]
    total: int
    limit: int
    offset: int


class ApprovalResponseDTO(BaseModel):
    """Response DTO for ApproveTenant"""

    tenant_id: str
    approved: bool = True
    notification_sent: bool = Field(..., description="Whether the approval email was accepted")
