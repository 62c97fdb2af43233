from .unit_of_work import SqlAlchemyUnitOfWork
from .notification_service import (
    LoggingNotificationService,
    EmailRelayNotificationService,
    CompositeNotificationService,
    create_notification_service,
)
from .paystack_gateway import PaystackPaymentGateway

__all__ = [
    "SqlAlchemyUnitOfWork",
    "LoggingNotificationService",
    "EmailRelayNotificationService",
    "CompositeNotificationService",
    "create_notification_service",
    "PaystackPaymentGateway",
]
