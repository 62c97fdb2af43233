"""Unit tests for InitializeTopUp use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.services.payment_gateway import PaymentGatewayError, PaymentInitialization
from src.app.use_cases.billing.dtos import InitializeTopUpCommandDTO
from src.app.use_cases.billing.initialize_topup import InitializeTopUp, to_minor_units


@pytest.fixture
def gateway():
    gateway = MagicMock()
    gateway.initialize = AsyncMock(
        side_effect=lambda email, amount_minor, reference, metadata=None: PaymentInitialization(
            reference=reference,
            authorization_url="https://checkout.paystack.com/abc",
            access_code="abc",
        )
    )
    return gateway


@pytest.fixture
def repos(sample_pricing, sample_tenant):
    repos = MagicMock()
    repos.pricing.get = AsyncMock(return_value=sample_pricing)
    repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)
    return repos


@pytest.fixture
def use_case(repos, gateway):
    return InitializeTopUp(repos.tenant, repos.pricing, gateway, operating_currency="KES")


class TestToMinorUnits:

    def test_whole_amount(self):
        assert to_minor_units(Decimal("100")) == 10000

    def test_rounds_half_up_to_cents(self):
        assert to_minor_units(Decimal("50.005")) == 5001


@pytest.mark.asyncio
class TestInitializeTopUp:

    async def test_returns_checkout_url(self, use_case, gateway):
        # Act
        result = await use_case.execute(InitializeTopUpCommandDTO(tenant_id="tenant_123", amount=Decimal("100")))

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.authorization_url == "https://checkout.paystack.com/abc"
        assert response.reference.startswith("CW-")
        assert response.currency == "KES"

        kwargs = gateway.initialize.call_args.kwargs
        assert kwargs["amount_minor"] == 10000
        assert kwargs["email"] == "owner@sparklewash.co.ke"
        assert kwargs["metadata"] == {"tenant_id": "tenant_123"}

    async def test_below_minimum(self, use_case, gateway):
        # Act
        result = await use_case.execute(InitializeTopUpCommandDTO(tenant_id="tenant_123", amount=Decimal("49")))

        # Assert
        assert result.error.code == "BELOW_MINIMUM_PURCHASE"
        assert result.error.message == "Minimum purchase is 50"
        gateway.initialize.assert_not_called()

    async def test_pricing_missing(self, use_case, repos):
        # Arrange
        repos.pricing.get = AsyncMock(return_value=None)

        # Act
        result = await use_case.execute(InitializeTopUpCommandDTO(tenant_id="tenant_123", amount=Decimal("100")))

        # Assert
        assert result.error.code == "CONFIGURATION_MISSING"

    async def test_gateway_rejection(self, use_case, gateway):
        # Arrange
        gateway.initialize = AsyncMock(side_effect=PaymentGatewayError("invalid key"))

        # Act
        result = await use_case.execute(InitializeTopUpCommandDTO(tenant_id="tenant_123", amount=Decimal("100")))

        # Assert
        assert result.error.code == "PAYMENT_INITIALIZATION_FAILED"
