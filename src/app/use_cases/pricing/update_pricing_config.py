"""UpdatePricingConfig Use Case

Replaces the global per-action costs. Takes effect for the next
credit-consuming transaction; actions already committed keep the cost they
recorded in credits_charged.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.pricing_config_repository import PricingConfigRepository
from src.domain.base import utcnow
from src.domain.pricing_config import PricingConfig, GLOBAL_PRICING_ID
from .dtos import PricingConfigDTO, UpdatePricingCommandDTO

logger = logging.getLogger(__name__)


class UpdatePricingConfig:
    """
    Use Case: Change global pricing (super-admin)

    Business Rules:
    1. All values >= 0 (validated by the command DTO)
    2. Creates the record if it does not exist yet
    """

    def __init__(self, uow: UnitOfWork, pricing_repo: PricingConfigRepository):
        self.uow = uow
        self.pricing_repo = pricing_repo

    async def execute(self, command: UpdatePricingCommandDTO) -> Result[PricingConfigDTO]:
        try:
            async with self.uow:
                pricing = await self.pricing_repo.save(
                    PricingConfig(
                        id=GLOBAL_PRICING_ID,
                        job_card_cost=command.job_card_cost,
                        expense_credit_cost=command.expense_credit_cost,
                        min_credit_purchase=command.min_credit_purchase,
                        updated_at=utcnow(),
                    )
                )
                await self.uow.commit()
        except Exception as e:
            logger.exception("Pricing update failed")
            return Return.err(
                Error(
                    code="UPDATE_PRICING_FAILED",
                    message="Failed to update pricing.",
                    reason=str(e),
                )
            )

        logger.info(
            f"Pricing updated: job_card_cost={command.job_card_cost}, "
            f"expense_credit_cost={command.expense_credit_cost}, "
            f"min_credit_purchase={command.min_credit_purchase}"
        )
        return Return.ok(PricingConfigDTO.model_validate(pricing))
