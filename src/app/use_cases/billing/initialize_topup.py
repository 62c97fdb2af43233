"""InitializeTopUp Use Case

Starts a credit purchase with the payment gateway. Writes nothing; credits
are only added by ConfirmTopUp once the gateway verifies the payment.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from libs.result import Result, Return, Error
from src.app.services.payment_gateway import PaymentGateway, PaymentGatewayError
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.app.repositories.pricing_config_repository import PricingConfigRepository
from src.domain.base import generate_uuid
from src.domain.errors import BelowMinimumPurchase, ConfigurationMissing, TenantNotApproved, TenantNotFound
from .dtos import InitializeTopUpCommandDTO, InitializeTopUpResponseDTO

logger = logging.getLogger(__name__)


def to_minor_units(amount: Decimal) -> int:
    """Convert an operating-currency amount to the gateway's smallest unit"""
    return int(amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP) * 100)


class InitializeTopUp:
    """
    Use Case: Start a credit purchase

    Business Rules:
    1. Pricing configuration must exist (CONFIGURATION_MISSING)
    2. Tenant must exist and be approved (TENANT_NOT_FOUND, TENANT_NOT_APPROVED)
    3. Amount must be at least min_credit_purchase (BELOW_MINIMUM_PURCHASE)
    """

    def __init__(
        self,
        tenant_repo: TenantAccountRepository,
        pricing_repo: PricingConfigRepository,
        payment_gateway: PaymentGateway,
        operating_currency: str = "KES",
    ):
        self.tenant_repo = tenant_repo
        self.pricing_repo = pricing_repo
        self.payment_gateway = payment_gateway
        self.operating_currency = operating_currency

    async def execute(self, command: InitializeTopUpCommandDTO) -> Result[InitializeTopUpResponseDTO]:
        pricing = await self.pricing_repo.get()
        if not pricing:
            return Return.err(ConfigurationMissing().to_error())

        tenant = await self.tenant_repo.get_by_id(command.tenant_id)
        if not tenant:
            return Return.err(TenantNotFound(command.tenant_id).to_error())
        if not tenant.approved:
            return Return.err(TenantNotApproved(command.tenant_id).to_error())

        if command.amount < pricing.min_credit_purchase:
            return Return.err(BelowMinimumPurchase(command.amount, pricing.min_credit_purchase).to_error())

        reference = f"CW-{tenant.id[:8]}-{generate_uuid()[:12]}"
        try:
            checkout = await self.payment_gateway.initialize(
                email=tenant.email,
                amount_minor=to_minor_units(command.amount),
                reference=reference,
                metadata={"tenant_id": tenant.id},
            )
        except PaymentGatewayError as e:
            logger.error(f"Top-up initialization failed for tenant {tenant.id}: {e}")
            return Return.err(
                Error(
                    code="PAYMENT_INITIALIZATION_FAILED",
                    message="Could not start the payment. Please try again.",
                    reason=str(e),
                )
            )

        logger.info(f"Top-up {checkout.reference} initialized for tenant {tenant.id}: {command.amount}")
        return Return.ok(
            InitializeTopUpResponseDTO(
                reference=checkout.reference,
                authorization_url=checkout.authorization_url,
                access_code=checkout.access_code,
                amount=command.amount,
                currency=self.operating_currency,
            )
        )
