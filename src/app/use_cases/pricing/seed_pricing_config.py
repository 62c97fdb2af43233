"""SeedPricingConfig Use Case

Creates the global pricing record with default values when it is absent.
Never overwrites an existing record, so it is safe to run on every startup.
"""

import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.pricing_config_repository import PricingConfigRepository
from src.domain.pricing_config import (
    PricingConfig,
    DEFAULT_JOB_CARD_COST,
    DEFAULT_EXPENSE_CREDIT_COST,
    DEFAULT_MIN_CREDIT_PURCHASE,
)
from .dtos import PricingConfigDTO

logger = logging.getLogger(__name__)


class SeedPricingConfig:
    def __init__(self, uow: UnitOfWork, pricing_repo: PricingConfigRepository):
        self.uow = uow
        self.pricing_repo = pricing_repo

    async def execute(self) -> Result[PricingConfigDTO]:
        existing = await self.pricing_repo.get()
        if existing:
            return Return.ok(PricingConfigDTO.model_validate(existing))

        async with self.uow:
            pricing = await self.pricing_repo.save(
                PricingConfig(
                    job_card_cost=DEFAULT_JOB_CARD_COST,
                    expense_credit_cost=DEFAULT_EXPENSE_CREDIT_COST,
                    min_credit_purchase=DEFAULT_MIN_CREDIT_PURCHASE,
                )
            )
            await self.uow.commit()

        logger.info("Seeded default pricing configuration")
        return Return.ok(PricingConfigDTO.model_validate(pricing))
