"""Data Transfer Objects for Billing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain.expense import ExpenseCategory
from src.domain.job import JobStatus
from src.domain.activity_log import ActivityType


class CreateJobCardCommandDTO(BaseModel):
    """
    Command DTO for creating a job card

    Used as input to CreateJobCard use case. The client and vehicle are
    created or updated in the same transaction as the job.
    """

    tenant_id: str = Field(..., min_length=1, description="Tenant identifier")

    client_phone_number: str = Field(..., min_length=1, description="Client phone number (client identifier)")

    client_name: str = Field(..., min_length=1, description="Client name")

    client_email: Optional[str] = Field(default=None, description="Client email")

    registration_plate: str = Field(..., min_length=1, description="Vehicle registration plate")

    car_make: Optional[str] = Field(default=None)

    car_model: Optional[str] = Field(default=None)

    car_color: Optional[str] = Field(default=None)

    vehicle_type: str = Field(..., min_length=1, description="Vehicle type (Saloon, SUV, ...)")

    service: str = Field(..., min_length=1, description="Service name")

    price: Decimal = Field(..., gt=0, description="Service price for this vehicle type")

    duration: int = Field(..., gt=0, description="Service duration in minutes")

    team_member_name: Optional[str] = Field(default=None, description="Assigned team member")

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "3f1c2a9e7b8d4c5e9a0b1c2d3e4f5a6b",
                "client_phone_number": "+254712345678",
                "client_name": "Jane Wanjiku",
                "registration_plate": "kdA 123b",
                "car_make": "Toyota",
                "vehicle_type": "Saloon",
                "service": "Full Wash",
                "price": "500.00",
                "duration": 30
            }
        }


class RecordExpenseCommandDTO(BaseModel):
    """
    Command DTO for recording an expense

    Description is required unless the category is Salary.
    """

    tenant_id: str = Field(..., min_length=1, description="Tenant identifier")

    category: ExpenseCategory = Field(..., description="Expense category")

    description: Optional[str] = Field(default=None, description="What the money was spent on")

    amount: Decimal = Field(..., gt=0, description="Amount spent (must be > 0)")

    expense_date: date = Field(default_factory=date.today, description="Date of the expense")

    team_member_name: Optional[str] = Field(default=None, description="Team member paid (salary)")

    @model_validator(mode="after")
    def check_description(self):
        """Non-salary expenses need a description; salary needs a team member"""
        if self.category == ExpenseCategory.SALARY:
            if not self.team_member_name:
                raise ValueError("team_member_name is required for Salary expenses")
        elif not self.description:
            raise ValueError("Description is required for categories other than Salary.")
        return self

    def resolved_description(self) -> str:
        if self.category == ExpenseCategory.SALARY:
            return f"Salary for {self.team_member_name}"
        return self.description


class JobDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    client_id: str
    vehicle_id: str
    client_phone_number: str
    registration_plate: str
    service: str
    price: Decimal
    duration: int
    team_member_name: Optional[str] = None
    status: JobStatus
    credits_charged: Decimal
    created_at: datetime


class ExpenseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    category: ExpenseCategory
    description: str
    amount: Decimal
    expense_date: date
    team_member_name: Optional[str] = None
    credits_charged: Decimal
    created_at: datetime


class CreditChargeDTO(BaseModel):
    """Balance movement of one credit-metered action"""

    credits_charged: Decimal = Field(..., description="Credits debited (current configured cost)")
    balance_before: Decimal = Field(..., description="Balance read inside the transaction")
    balance_after: Decimal = Field(..., description="Balance after the debit")


class JobCardResponseDTO(CreditChargeDTO):
    """Response DTO for CreateJobCard"""

    job: JobDTO


class ExpenseResponseDTO(CreditChargeDTO):
    """Response DTO for RecordExpense"""

    expense: ExpenseDTO


class ConfirmTopUpCommandDTO(BaseModel):
    """
    Command DTO for confirming a credit purchase

    Only the reference and tenant are taken from the caller; amount and
    currency come from the gateway.
    """

    reference: str = Field(..., min_length=1, description="Payment gateway reference")

    tenant_id: str = Field(..., min_length=1, description="Tenant to credit")


class TopUpResponseDTO(BaseModel):
    """
    Response DTO for ConfirmTopUp

    credited is False when the reference had already been applied.
    """

    reference: str
    tenant_id: str
    credited: bool = Field(..., description="True if this call incremented the balance")
    credits: Decimal = Field(..., description="Credits purchased with this payment")
    currency: str
    balance_after: Optional[Decimal] = Field(default=None, description="Balance after the call")


class InitializeTopUpCommandDTO(BaseModel):
    tenant_id: str = Field(..., min_length=1)

    amount: Decimal = Field(..., gt=0, description="Purchase amount in the operating currency")


class InitializeTopUpResponseDTO(BaseModel):
    reference: str
    authorization_url: str
    access_code: Optional[str] = None
    amount: Decimal
    currency: str


class BalanceResponseDTO(BaseModel):
    """
    Response DTO for get balance operation

    Returned by GetBalance use case.
    """

    tenant_id: str = Field(..., description="Tenant identifier")

    credits: Decimal = Field(..., description="Current credit balance")

    approved: bool = Field(..., description="Whether the tenant is approved")

    last_updated: datetime = Field(..., description="Timestamp of last balance update")


class TopUpDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reference: str
    tenant_id: str
    credits: Decimal
    amount_minor: int
    currency: str
    created_at: datetime


class ActivityDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    activity_type: ActivityType
    description: str
    status: Optional[str] = None
    created_at: datetime


class PageDTO(BaseModel):
    total: int
    limit: int
    offset: int


class JobListResponseDTO(PageDTO):
    jobs: List[JobDTO]


class ExpenseListResponseDTO(PageDTO):
    expenses: List[ExpenseDTO]


class TopUpListResponseDTO(PageDTO):
    topups: List[TopUpDTO]


class ActivityListResponseDTO(PageDTO):
    activities: List[ActivityDTO]
