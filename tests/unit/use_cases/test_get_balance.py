"""Unit tests for GetBalance use case"""

import pytest
from unittest.mock import AsyncMock
from datetime import datetime
from decimal import Decimal

from src.app.use_cases.billing.get_balance import GetBalance


class TestGetBalance:
    """Test suite for GetBalance use case"""

    @pytest.fixture
    def mock_tenant_repo(self):
        return AsyncMock()

    @pytest.fixture
    def use_case(self, mock_tenant_repo):
        return GetBalance(tenant_repo=mock_tenant_repo)

    @pytest.mark.asyncio
    async def test_successful_balance_retrieval(self, use_case, mock_tenant_repo, sample_tenant):
        # Arrange
        sample_tenant.credits = Decimal("198.5")
        sample_tenant.updated_at = datetime(2024, 1, 1, 12, 0, 0)
        mock_tenant_repo.get_by_id.return_value = sample_tenant

        # Act
        result = await use_case.execute("tenant_123")

        # Assert
        assert result.is_ok()
        assert result.value.tenant_id == "tenant_123"
        assert result.value.credits == Decimal("198.5")
        assert result.value.approved is True
        assert result.value.last_updated == datetime(2024, 1, 1, 12, 0, 0)
        mock_tenant_repo.get_by_id.assert_called_once_with("tenant_123")

    @pytest.mark.asyncio
    async def test_tenant_not_found(self, use_case, mock_tenant_repo):
        # Arrange
        mock_tenant_repo.get_by_id.return_value = None

        # Act
        result = await use_case.execute("tenant_missing")

        # Assert
        assert result.is_err()
        assert result.error.code == "TENANT_NOT_FOUND"
