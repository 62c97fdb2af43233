"""Unit tests for TenantAccount and related entity defaults"""

from datetime import timezone
from decimal import Decimal

from src.domain.job import Job, JobStatus
from src.domain.pricing_config import PricingConfig, GLOBAL_PRICING_ID
from src.domain.tenant_account import TenantAccount
from src.domain.topup_transaction import TopUpStatus, TopUpTransaction


class TestTenantAccount:

    def test_new_account_defaults(self):
        account = TenantAccount(owner_uid="uid_1", name="Sparkle Wash", email="owner@example.com")

        assert account.approved is False
        assert account.credits == Decimal("0")
        assert len(account.id) == 32

    def test_timestamps_are_timezone_aware_utc(self):
        account = TenantAccount(owner_uid="uid_1", name="Sparkle Wash", email="owner@example.com")

        assert account.created_at.tzinfo is not None
        assert account.created_at.utcoffset() == timezone.utc.utcoffset(None)
        assert account.updated_at.tzinfo is not None

    def test_ids_are_unique(self):
        first = TenantAccount(owner_uid="uid_1", name="A", email="a@example.com")
        second = TenantAccount(owner_uid="uid_2", name="B", email="b@example.com")

        assert first.id != second.id


class TestEntityDefaults:

    def test_pricing_uses_global_id(self):
        pricing = PricingConfig(
            job_card_cost=Decimal("1.5"), expense_credit_cost=Decimal("0.5"), min_credit_purchase=Decimal("50")
        )
        assert pricing.id == GLOBAL_PRICING_ID

    def test_topup_is_completed_on_creation(self):
        topup = TopUpTransaction(
            reference="ref_1", tenant_id="tenant_1", credits=Decimal("5"), amount_minor=500, currency="KES"
        )
        assert topup.status == TopUpStatus.COMPLETED

    def test_job_status_values(self):
        assert JobStatus.PENDING.value == "Pending"
        assert Job.__tablename__ == "jobs"

    def test_timestamp_columns_store_timezone(self):
        for table in (TenantAccount.__table__, TopUpTransaction.__table__, Job.__table__):
            assert table.c.created_at.type.timezone is True
