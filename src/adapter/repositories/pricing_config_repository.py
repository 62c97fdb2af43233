"""SQLAlchemy implementation of PricingConfigRepository"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.pricing_config_repository import PricingConfigRepository
from src.domain.pricing_config import PricingConfig, GLOBAL_PRICING_ID


class SqlAlchemyPricingConfigRepository(PricingConfigRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self) -> Optional[PricingConfig]:
        """Read the pricing row, bypassing any instance already in the session"""
        stmt = (
            select(PricingConfig)
            .where(PricingConfig.id == GLOBAL_PRICING_ID)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, config: PricingConfig) -> PricingConfig:
        merged = await self.session.merge(config)
        await self.session.flush()
        return merged
