"""Request schemas for Carwash API

Pydantic models for validating incoming HTTP requests. The tenant comes from
the URL path and the owner from the X-Principal-Id header, never the body.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from src.app.services.payment_gateway import REFERENCE_PATTERN
from src.domain.expense import ExpenseCategory


class RegisterTenantRequestSchema(BaseModel):
    """
    Request schema for registering a carwash

    Used for POST /carwash/tenants endpoint.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Carwash business name")

    email: str = Field(..., min_length=3, max_length=255, description="Contact email")

    phone_number: Optional[str] = Field(default=None, max_length=50)


class CreateJobRequestSchema(BaseModel):
    """
    Request schema for creating a job card

    Used for POST /carwash/tenants/{tenant_id}/jobs endpoint.
    """

    client_phone_number: str = Field(..., min_length=1)
    client_name: str = Field(..., min_length=1)
    client_email: Optional[str] = None
    registration_plate: str = Field(..., min_length=1)
    car_make: Optional[str] = None
    car_model: Optional[str] = None
    car_color: Optional[str] = None
    vehicle_type: str = Field(..., min_length=1)
    service: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0)
    duration: int = Field(..., gt=0, description="Minutes")
    team_member_name: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "client_phone_number": "+254712345678",
                "client_name": "Jane Wanjiku",
                "registration_plate": "KDA 123B",
                "car_make": "Toyota",
                "car_model": "Axio",
                "vehicle_type": "Saloon",
                "service": "Full Wash",
                "price": "500",
                "duration": 30,
                "team_member_name": "Otieno"
            }
        }


class RecordExpenseRequestSchema(BaseModel):
    """
    Request schema for recording an expense

    Used for POST /carwash/tenants/{tenant_id}/expenses endpoint.
    """

    category: ExpenseCategory
    description: Optional[str] = None
    amount: Decimal = Field(..., gt=0)
    expense_date: Optional[date] = None
    team_member_name: Optional[str] = None

    @model_validator(mode="after")
    def check_description(self):
        if self.category == ExpenseCategory.SALARY:
            if not self.team_member_name:
                raise ValueError("team_member_name is required for Salary expenses")
        elif not self.description:
            raise ValueError("Description is required for categories other than Salary.")
        return self


class InitializeTopUpRequestSchema(BaseModel):
    amount: Decimal = Field(..., gt=0, description="Purchase amount in the operating currency")


class VerifyTopUpRequestSchema(BaseModel):
    """
    Request schema for confirming a payment

    Used for POST /carwash/topups/verify. Amount and currency are never
    accepted from the caller.
    """

    reference: str = Field(
        ..., min_length=1, max_length=100, pattern=REFERENCE_PATTERN, description="Payment gateway reference"
    )

    tenant_id: str = Field(..., min_length=1, description="Tenant to credit")
