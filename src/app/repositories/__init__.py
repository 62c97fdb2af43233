from .tenant_account_repository import TenantAccountRepository
from .pricing_config_repository import PricingConfigRepository
from .job_repository import JobRepository
from .expense_repository import ExpenseRepository
from .client_repository import ClientRepository
from .vehicle_repository import VehicleRepository
from .topup_transaction_repository import TopUpTransactionRepository
from .activity_log_repository import ActivityLogRepository

__all__ = [
    "TenantAccountRepository",
    "PricingConfigRepository",
    "JobRepository",
    "ExpenseRepository",
    "ClientRepository",
    "VehicleRepository",
    "TopUpTransactionRepository",
    "ActivityLogRepository",
]
