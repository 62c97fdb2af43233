from .unit_of_work import UnitOfWork
from .notification_service import NotificationService
from .payment_gateway import PaymentGateway, PaymentGatewayError, VerifiedPayment, PaymentInitialization

__all__ = [
    "UnitOfWork",
    "NotificationService",
    "PaymentGateway",
    "PaymentGatewayError",
    "VerifiedPayment",
    "PaymentInitialization",
]
