"""Integration tests for top-up confirmation against a real database

Covers replay safety (sequential and concurrent) and the currency guard.
"""

import asyncio
import httpx
import pytest
from decimal import Decimal
from sqlmodel import select, func

from src.adapter.repositories import (
    SqlAlchemyActivityLogRepository,
    SqlAlchemyTenantAccountRepository,
    SqlAlchemyTopUpTransactionRepository,
)
from src.adapter.services.paystack_gateway import PaystackPaymentGateway
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.billing.confirm_topup import ConfirmTopUp
from src.app.use_cases.billing.dtos import ConfirmTopUpCommandDTO
from src.app.use_cases.billing.ledger_transaction import RetryPolicy
from src.domain.topup_transaction import TopUpTransaction


def confirm_topup(session, payment_gateway):
    return ConfirmTopUp(
        uow=SqlAlchemyUnitOfWork(session),
        tenant_repo=SqlAlchemyTenantAccountRepository(session),
        topup_repo=SqlAlchemyTopUpTransactionRepository(session),
        activity_repo=SqlAlchemyActivityLogRepository(session),
        payment_gateway=payment_gateway,
        operating_currency="KES",
        retry_policy=RetryPolicy(max_attempts=10, base_delay=0.01, max_delay=0.2),
    )


async def topup_count(session_factory, reference):
    async with session_factory() as session:
        result = await session.execute(
            select(func.count()).select_from(TopUpTransaction).where(TopUpTransaction.reference == reference)
        )
        return result.scalar()


@pytest.mark.asyncio
class TestConfirmTopUpIntegration:

    async def test_retried_webhook_credits_once(self, session_factory, make_tenant, payment_gateway, read_balance):
        """
        Given: Gateway confirms ref-001 for 500 KES minor units (5 credits)
        When: The confirmation is delivered twice
        Then: Balance rises by 5 once; the second call is a successful no-op
        """
        # Arrange
        tenant = await make_tenant(credits="10")
        payment_gateway.add_payment("ref-001", 500)
        command = ConfirmTopUpCommandDTO(reference="ref-001", tenant_id=tenant.id)

        # Act
        async with session_factory() as session:
            first = await confirm_topup(session, payment_gateway).execute(command)
        async with session_factory() as session:
            second = await confirm_topup(session, payment_gateway).execute(command)

        # Assert
        assert first.is_ok() and first.value.credited is True
        assert first.value.balance_after == Decimal("15")
        assert second.is_ok() and second.value.credited is False
        assert second.value.balance_after == Decimal("15")
        assert await read_balance(tenant.id) == Decimal("15")
        assert await topup_count(session_factory, "ref-001") == 1

    async def test_concurrent_confirmations_credit_once(
        self, session_factory, make_tenant, payment_gateway, read_balance
    ):
        # Arrange
        tenant = await make_tenant(credits="0")
        payment_gateway.add_payment("ref-002", 5000)
        command = ConfirmTopUpCommandDTO(reference="ref-002", tenant_id=tenant.id)

        async def attempt():
            async with session_factory() as session:
                return await confirm_topup(session, payment_gateway).execute(command)

        # Act
        results = await asyncio.gather(*(attempt() for _ in range(5)))

        # Assert
        assert all(r.is_ok() for r in results)
        assert sum(1 for r in results if r.value.credited) == 1
        assert await read_balance(tenant.id) == Decimal("50")
        assert await topup_count(session_factory, "ref-002") == 1

    async def test_foreign_currency_never_credits(self, session_factory, make_tenant, payment_gateway, read_balance):
        # Arrange
        tenant = await make_tenant(credits="10")
        payment_gateway.add_payment("ref-usd", 500, currency="USD")

        # Act
        async with session_factory() as session:
            result = await confirm_topup(session, payment_gateway).execute(
                ConfirmTopUpCommandDTO(reference="ref-usd", tenant_id=tenant.id)
            )

        # Assert
        assert result.error.code == "INVALID_CURRENCY"
        assert await read_balance(tenant.id) == Decimal("10")
        assert await topup_count(session_factory, "ref-usd") == 0

    async def test_failed_payment_never_credits(self, session_factory, make_tenant, payment_gateway, read_balance):
        # Arrange
        tenant = await make_tenant(credits="10")
        payment_gateway.add_payment("ref-failed", 500, successful=False)

        # Act
        async with session_factory() as session:
            result = await confirm_topup(session, payment_gateway).execute(
                ConfirmTopUpCommandDTO(reference="ref-failed", tenant_id=tenant.id)
            )

        # Assert
        assert result.error.code == "PAYMENT_NOT_VERIFIED"
        assert await read_balance(tenant.id) == Decimal("10")

    async def test_unknown_tenant_writes_nothing(self, session_factory, payment_gateway):
        # Arrange
        payment_gateway.add_payment("ref-orphan", 500)

        # Act
        async with session_factory() as session:
            result = await confirm_topup(session, payment_gateway).execute(
                ConfirmTopUpCommandDTO(reference="ref-orphan", tenant_id="tenant_missing")
            )

        # Assert
        assert result.error.code == "TENANT_NOT_FOUND"
        assert await topup_count(session_factory, "ref-orphan") == 0


def paystack_with_single_payment(reference, amount_minor, tenant_id):
    """
    Paystack double that, like the real API, routes on the URL path only and
    matches references case-insensitively
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.lower() != f"/transaction/verify/{reference}".lower():
            return httpx.Response(404, json={"status": False, "message": "Transaction reference not found"})
        return httpx.Response(
            200,
            json={
                "status": True,
                "data": {
                    "status": "success",
                    "reference": reference,
                    "amount": amount_minor,
                    "currency": "KES",
                    "metadata": {"tenant_id": tenant_id},
                },
            },
        )

    return PaystackPaymentGateway(
        secret_key="sk_test", base_url="https://api.paystack.test", transport=httpx.MockTransport(handler)
    )


@pytest.mark.asyncio
class TestReferenceSpellings:

    async def test_one_payment_credits_once_whatever_the_spelling(
        self, session_factory, make_tenant, read_balance
    ):
        """
        Given: One 500 KES payment with reference ref-001
        When: It is confirmed under several spellings that reach the same payment
        Then: Only the exact reference credits; the balance rises by 5 once
        """
        # Arrange
        tenant = await make_tenant(credits="10")
        gateway = paystack_with_single_payment("ref-001", 500, tenant.id)
        spellings = ["ref-001", "ref-001?a=1", "ref-001?a=2", "x/../ref-001", "REF-001", "ref-001"]

        # Act
        results = []
        for spelling in spellings:
            async with session_factory() as session:
                results.append(
                    await confirm_topup(session, gateway).execute(
                        ConfirmTopUpCommandDTO(reference=spelling, tenant_id=tenant.id)
                    )
                )

        # Assert
        assert results[0].value.credited is True
        assert [r.error.code for r in results[1:5]] == ["PAYMENT_NOT_VERIFIED"] * 4
        assert results[5].value.credited is False
        assert await read_balance(tenant.id) == Decimal("15")
        assert await topup_count(session_factory, "ref-001") == 1

    async def test_payment_started_by_another_tenant(self, session_factory, make_tenant, read_balance):
        # Arrange
        owner = await make_tenant(credits="10")
        other = await make_tenant(credits="10")
        gateway = paystack_with_single_payment("ref-002", 500, owner.id)

        # Act
        async with session_factory() as session:
            result = await confirm_topup(session, gateway).execute(
                ConfirmTopUpCommandDTO(reference="ref-002", tenant_id=other.id)
            )

        # Assert
        assert result.error.code == "PAYMENT_NOT_VERIFIED"
        assert await read_balance(other.id) == Decimal("10")
