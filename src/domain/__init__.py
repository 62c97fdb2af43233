from .base import BaseModel, generate_uuid, utcnow
from .tenant_account import TenantAccount
from .pricing_config import PricingConfig, GLOBAL_PRICING_ID
from .job import Job, JobStatus
from .expense import Expense, ExpenseCategory
from .client import Client, Vehicle
from .topup_transaction import TopUpTransaction, TopUpStatus
from .activity_log import ActivityLog, ActivityType

__all__ = [
    "BaseModel",
    "generate_uuid",
    "utcnow",
    "TenantAccount",
    "PricingConfig",
    "GLOBAL_PRICING_ID",
    "Job",
    "JobStatus",
    "Expense",
    "ExpenseCategory",
    "Client",
    "Vehicle",
    "TopUpTransaction",
    "TopUpStatus",
    "ActivityLog",
    "ActivityType",
]
