from .tenant_account_repository import SqlAlchemyTenantAccountRepository
from .pricing_config_repository import SqlAlchemyPricingConfigRepository
from .job_repository import SqlAlchemyJobRepository
from .expense_repository import SqlAlchemyExpenseRepository
from .client_repository import SqlAlchemyClientRepository
from .vehicle_repository import SqlAlchemyVehicleRepository
from .topup_transaction_repository import SqlAlchemyTopUpTransactionRepository
from .activity_log_repository import SqlAlchemyActivityLogRepository

__all__ = [
    "SqlAlchemyTenantAccountRepository",
    "SqlAlchemyPricingConfigRepository",
    "SqlAlchemyJobRepository",
    "SqlAlchemyExpenseRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyVehicleRepository",
    "SqlAlchemyTopUpTransactionRepository",
    "SqlAlchemyActivityLogRepository",
]
