"""Unit tests for notification service implementations"""

import pytest
from unittest.mock import AsyncMock

from src.adapter.services.notification_service import (
    CompositeNotificationService,
    EmailRelayNotificationService,
    LoggingNotificationService,
    create_notification_service,
)
from src.domain.tenant_account import TenantAccount


@pytest.fixture
def account():
    return TenantAccount(owner_uid="uid_1", name="Sparkle Wash", email="owner@example.com")


class TestFactory:

    def test_logging_only_without_relay(self):
        assert isinstance(create_notification_service(None), LoggingNotificationService)

    def test_composite_with_relay(self):
        service = create_notification_service("http://relay.test/send")

        assert isinstance(service, CompositeNotificationService)
        assert isinstance(service.services[1], EmailRelayNotificationService)


@pytest.mark.asyncio
class TestAccountEmails:

    async def test_approval_email_subject_and_link(self, account):
        # Arrange
        service = LoggingNotificationService()
        service.send_email = AsyncMock(return_value=True)

        # Act
        sent = await service.send_account_approved(account, "http://localhost:3000/login")

        # Assert
        assert sent is True
        to, subject, html = service.send_email.call_args[0]
        assert to == "owner@example.com"
        assert subject == "Your Cawash Account is Approved!"
        assert "http://localhost:3000/login" in html

    async def test_composite_survives_failing_channel(self, account):
        # Arrange
        failing = LoggingNotificationService()
        failing.send_email = AsyncMock(side_effect=RuntimeError("smtp down"))
        service = CompositeNotificationService([failing, LoggingNotificationService()])

        # Act
        sent = await service.send_account_created(account, "200")

        # Assert
        assert sent is True

    async def test_unreachable_relay_returns_false(self):
        service = EmailRelayNotificationService("http://127.0.0.1:9/send", timeout=0.5)

        assert await service.send_email("owner@example.com", "Hi", "<p>Hi</p>") is False
