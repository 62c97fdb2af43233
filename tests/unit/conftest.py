import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.ledger_transaction import RetryPolicy
from src.domain.pricing_config import PricingConfig
from src.domain.tenant_account import TenantAccount


@pytest.fixture
def mock_uow():
    """Mock unit of work; __aexit__ returns False so exceptions propagate"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def no_wait_policy():
    """Retry policy without backoff sleeps"""
    return RetryPolicy(max_attempts=3, base_delay=0, max_delay=0)


@pytest.fixture
def sample_pricing():
    return PricingConfig(
        job_card_cost=Decimal("1.5"),
        expense_credit_cost=Decimal("0.5"),
        min_credit_purchase=Decimal("50"),
    )


@pytest.fixture
def sample_tenant():
    return TenantAccount(
        id="tenant_123",
        owner_uid="uid_owner",
        name="Sparkle Wash",
        email="owner@sparklewash.co.ke",
        credits=Decimal("10"),
        approved=True,
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 1),
    )
