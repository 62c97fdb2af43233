from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.notification_service import create_notification_service
from src.adapter.services.paystack_gateway import PaystackPaymentGateway
from src.app.services.notification_service import NotificationService
from src.app.services.payment_gateway import PaymentGateway
from src.app.use_cases.billing.ledger_transaction import RetryPolicy

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_config(request: Request):
    return getattr(request.app.state, "config", ApplicationConfig)


def get_payment_gateway(request: Request) -> PaymentGateway:
    config = get_config(request)
    return PaystackPaymentGateway(
        secret_key=config.PAYSTACK_SECRET_KEY,
        base_url=config.PAYSTACK_BASE_URL,
        timeout=config.PAYSTACK_TIMEOUT_SECONDS,
    )


def get_notification_service(request: Request) -> NotificationService:
    return create_notification_service(get_config(request).EMAIL_RELAY_URL)


def get_retry_policy(request: Request) -> RetryPolicy:
    config = get_config(request)
    return RetryPolicy(
        max_attempts=config.LEDGER_MAX_ATTEMPTS,
        base_delay=config.LEDGER_RETRY_BASE_DELAY,
        max_delay=config.LEDGER_RETRY_MAX_DELAY,
    )
