"""Get Pricing Config Use Case"""

from libs.result import Result, Return
from src.app.repositories.pricing_config_repository import PricingConfigRepository
from src.domain.errors import ConfigurationMissing
from .dtos import PricingConfigDTO


class GetPricingConfig:
    def __init__(self, pricing_repo: PricingConfigRepository):
        self.pricing_repo = pricing_repo

    async def execute(self) -> Result[PricingConfigDTO]:
        pricing = await self.pricing_repo.get()
        if not pricing:
            return Return.err(ConfigurationMissing().to_error())
        return Return.ok(PricingConfigDTO.model_validate(pricing))
