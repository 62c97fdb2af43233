"""Data Transfer Objects for Pricing Use Cases"""

from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field


class UpdatePricingCommandDTO(BaseModel):
    """
    Command DTO for replacing the global pricing

    All three values are required; a cost of 0 makes the action free.
    """

    job_card_cost: Decimal = Field(..., ge=0, description="Credits per job card")

    expense_credit_cost: Decimal = Field(..., ge=0, description="Credits per recorded expense")

    min_credit_purchase: Decimal = Field(..., ge=0, description="Smallest allowed top-up")

    class Config:
        json_schema_extra = {
            "example": {
                "job_card_cost": "1.5",
                "expense_credit_cost": "0.5",
                "min_credit_purchase": "50"
            }
        }


class PricingConfigDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    job_card_cost: Decimal
    expense_credit_cost: Decimal
    min_credit_purchase: Decimal
    updated_at: datetime
