import pytest
import pytest_asyncio
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers table metadata
from config import ApplicationConfig
from src.app.services.payment_gateway import (
    PaymentGateway,
    PaymentGatewayError,
    PaymentInitialization,
    VerifiedPayment,
)
from src.app.services.notification_service import NotificationService
from src.depends import get_notification_service, get_payment_gateway, get_session
from src.domain.base import generate_uuid
from src.domain.pricing_config import PricingConfig
from src.domain.tenant_account import TenantAccount

ADMIN_API_KEY = "admin-secret"


class StubPaymentGateway(PaymentGateway):
    """In-memory gateway: payments are registered by tests, then verified"""

    def __init__(self):
        self.payments = {}
        self.initialized = []

    def add_payment(self, reference, amount_minor, currency="KES", successful=True):
        self.payments[reference] = VerifiedPayment(
            reference=reference,
            successful=successful,
            amount_minor=amount_minor,
            currency=currency,
            gateway_status="success" if successful else "failed",
        )

    async def verify(self, reference):
        if reference not in self.payments:
            raise PaymentGatewayError(f"unknown reference {reference}")
        return self.payments[reference]

    async def initialize(self, email, amount_minor, reference, metadata=None):
        self.initialized.append({"email": email, "amount_minor": amount_minor, "reference": reference})
        return PaymentInitialization(
            reference=reference,
            authorization_url=f"https://checkout.test/{reference}",
            access_code="access",
        )


class RecordingNotificationService(NotificationService):
    def __init__(self):
        self.sent = []

    async def send_email(self, to, subject, html):
        self.sent.append({"to": to, "subject": subject})
        return True


class IntegrationTestConfig(ApplicationConfig):
    SUPER_ADMIN_API_KEY = ADMIN_API_KEY
    ENABLE_LOGGING_MIDDLEWARE = False
    API_PREFIX = "/api"


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """File-backed SQLite database per test, so separate sessions really are separate connections"""
    db_url = f"sqlite+aiosqlite:///{tmp_path / 'ledger_test.db'}"
    engine = create_async_engine(db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def pricing(db_session):
    config = PricingConfig(
        job_card_cost=Decimal("1.5"),
        expense_credit_cost=Decimal("0.5"),
        min_credit_purchase=Decimal("50"),
    )
    db_session.add(config)
    await db_session.commit()
    return config


@pytest_asyncio.fixture
async def make_tenant(db_session):
    """Factory for tenant accounts committed to the test database"""

    async def _make(credits="10", approved=True, owner_uid=None, tenant_id=None):
        account = TenantAccount(
            owner_uid=owner_uid or f"uid_{generate_uuid()}",
            name="Sparkle Wash",
            email="owner@sparklewash.co.ke",
            credits=Decimal(credits),
            approved=approved,
        )
        if tenant_id:
            account.id = tenant_id
        db_session.add(account)
        await db_session.commit()
        return account

    return _make


@pytest.fixture
def payment_gateway():
    return StubPaymentGateway()


@pytest.fixture
def notifications():
    return RecordingNotificationService()


@pytest_asyncio.fixture
async def client(session_factory, payment_gateway, notifications):
    """Create test client with one fresh session per request"""
    from src.api.app import create_app

    app = create_app(IntegrationTestConfig)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway
    app.dependency_overrides[get_notification_service] = lambda: notifications

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def read_balance(session_factory):
    """Read a balance through a fresh session"""

    async def _read(tenant_id) -> Decimal:
        async with session_factory() as session:
            account = await session.get(TenantAccount, tenant_id)
            return Decimal(account.credits)

    return _read
