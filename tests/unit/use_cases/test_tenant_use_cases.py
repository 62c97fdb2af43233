"""Unit tests for tenant account use cases

Tests cover:
- RegisterTenant: signup bonus, pending state, duplicate principal
- ApproveTenant: one-directional approval, fire-and-forget email
- AuthorizeTenant: gate order (not found, access denied, not approved)
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.tenants.approve_tenant import ApproveTenant
from src.app.use_cases.tenants.authorize_tenant import AuthorizeTenant
from src.app.use_cases.tenants.dtos import RegisterTenantCommandDTO
from src.app.use_cases.tenants.list_pending_tenants import ListPendingTenants
from src.app.use_cases.tenants.register_tenant import RegisterTenant
from src.domain.activity_log import ActivityType


@pytest.fixture
def repos():
    repos = MagicMock()
    repos.tenant.create = AsyncMock(side_effect=lambda entity: entity)
    repos.activity.create = AsyncMock(side_effect=lambda entity: entity)
    return repos


@pytest.fixture
def notifier():
    notifier = MagicMock()
    notifier.send_account_created = AsyncMock(return_value=True)
    notifier.send_account_approved = AsyncMock(return_value=True)
    return notifier


@pytest.mark.asyncio
class TestRegisterTenant:

    @pytest.fixture
    def use_case(self, mock_uow, repos, notifier):
        return RegisterTenant(mock_uow, repos.tenant, repos.activity, notifier, signup_bonus=Decimal("200"))

    @pytest.fixture
    def command(self):
        return RegisterTenantCommandDTO(owner_uid="uid_new", name="Bubbles", email="bubbles@example.com")

    async def test_new_account_is_pending_with_bonus(self, use_case, repos, mock_uow, notifier, command):
        # Arrange
        repos.tenant.get_by_owner_uid = AsyncMock(return_value=None)

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()
        tenant = result.value
        assert tenant.approved is False
        assert tenant.credits == Decimal("200")
        assert tenant.owner_uid == "uid_new"
        mock_uow.commit.assert_called_once()
        notifier.send_account_created.assert_called_once()
        assert notifier.send_account_created.call_args[0][1] == "200"

        activity = repos.activity.create.call_args[0][0]
        assert activity.activity_type == ActivityType.ACCOUNT

    async def test_duplicate_principal(self, use_case, repos, mock_uow, notifier, command, sample_tenant):
        # Arrange
        repos.tenant.get_by_owner_uid = AsyncMock(return_value=sample_tenant)

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.error.code == "TENANT_ALREADY_EXISTS"
        repos.tenant.create.assert_not_called()
        notifier.send_account_created.assert_not_called()

    async def test_failed_welcome_email_keeps_account(self, use_case, repos, notifier, command):
        # Arrange
        repos.tenant.get_by_owner_uid = AsyncMock(return_value=None)
        notifier.send_account_created = AsyncMock(return_value=False)

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()


@pytest.mark.asyncio
class TestApproveTenant:

    @pytest.fixture
    def use_case(self, mock_uow, repos, notifier):
        return ApproveTenant(mock_uow, repos.tenant, repos.activity, notifier, login_url="http://localhost:3000/login")

    async def test_approves_pending_tenant(self, use_case, repos, mock_uow, notifier, sample_tenant):
        """
        Given: A pending tenant
        When: The super-admin approves it
        Then: Flag flipped, Admin activity written, email sent after commit
        """
        # Arrange
        sample_tenant.approved = False
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)
        repos.tenant.mark_approved = AsyncMock(return_value=True)

        # Act
        result = await use_case.execute("tenant_123")

        # Assert
        assert result.is_ok()
        assert result.value.approved is True
        assert result.value.notification_sent is True
        repos.tenant.mark_approved.assert_called_once_with("tenant_123")
        mock_uow.commit.assert_called_once()
        notifier.send_account_approved.assert_called_once_with(sample_tenant, "http://localhost:3000/login")

        activity = repos.activity.create.call_args[0][0]
        assert activity.activity_type == ActivityType.ADMIN
        assert activity.description == "Account approved by Super Admin"

    async def test_already_approved(self, use_case, repos, mock_uow, notifier, sample_tenant):
        # Arrange
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)
        repos.tenant.mark_approved = AsyncMock()

        # Act
        result = await use_case.execute("tenant_123")

        # Assert
        assert result.error.code == "TENANT_ALREADY_APPROVED"
        repos.tenant.mark_approved.assert_not_called()
        mock_uow.commit.assert_not_called()
        notifier.send_account_approved.assert_not_called()

    async def test_concurrent_approval_loses(self, use_case, repos, mock_uow, sample_tenant):
        # Arrange
        sample_tenant.approved = False
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)
        repos.tenant.mark_approved = AsyncMock(return_value=False)

        # Act
        result = await use_case.execute("tenant_123")

        # Assert
        assert result.error.code == "TENANT_ALREADY_APPROVED"
        mock_uow.commit.assert_not_called()

    async def test_unknown_tenant(self, use_case, repos):
        # Arrange
        repos.tenant.get_by_id = AsyncMock(return_value=None)

        # Act
        result = await use_case.execute("tenant_missing")

        # Assert
        assert result.error.code == "TENANT_NOT_FOUND"

    async def test_email_failure_does_not_undo_approval(self, use_case, repos, mock_uow, notifier, sample_tenant):
        # Arrange
        sample_tenant.approved = False
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)
        repos.tenant.mark_approved = AsyncMock(return_value=True)
        notifier.send_account_approved = AsyncMock(return_value=False)

        # Act
        result = await use_case.execute("tenant_123")

        # Assert
        assert result.is_ok()
        assert result.value.notification_sent is False
        mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
class TestAuthorizeTenant:

    async def test_owner_of_approved_tenant(self, repos, sample_tenant):
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)

        result = await AuthorizeTenant(repos.tenant).execute("tenant_123", "uid_owner")

        assert result.is_ok()
        assert result.value is sample_tenant

    async def test_unknown_tenant(self, repos):
        repos.tenant.get_by_id = AsyncMock(return_value=None)

        result = await AuthorizeTenant(repos.tenant).execute("tenant_missing", "uid_owner")

        assert result.error.code == "TENANT_NOT_FOUND"

    async def test_other_principal_is_denied(self, repos, sample_tenant):
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)

        result = await AuthorizeTenant(repos.tenant).execute("tenant_123", "uid_intruder")

        assert result.error.code == "TENANT_ACCESS_DENIED"

    async def test_pending_tenant_is_blocked(self, repos, sample_tenant):
        sample_tenant.approved = False
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)

        result = await AuthorizeTenant(repos.tenant).execute("tenant_123", "uid_owner")

        assert result.error.code == "TENANT_NOT_APPROVED"

    async def test_pending_tenant_allowed_for_read_only_views(self, repos, sample_tenant):
        sample_tenant.approved = False
        repos.tenant.get_by_id = AsyncMock(return_value=sample_tenant)

        result = await AuthorizeTenant(repos.tenant).execute("tenant_123", "uid_owner", require_approved=False)

        assert result.is_ok()


@pytest.mark.asyncio
async def test_list_pending_tenants(repos, sample_tenant):
    # Arrange
    sample_tenant.approved = False
    repos.tenant.list_pending = AsyncMock(return_value=([sample_tenant], 1))

    # Act
    result = await ListPendingTenants(repos.tenant).execute(limit=10, offset=0)

    # Assert
    assert result.value.total == 1
    assert result.value.tenants[0].id == "tenant_123"
    repos.tenant.list_pending.assert_called_once_with(limit=10, offset=0)
