"""Pricing Config Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.pricing_config import PricingConfig


class PricingConfigRepository(ABC):
    """Access to the single global pricing record"""

    @abstractmethod
    async def get(self) -> Optional[PricingConfig]:
        """
        Read the current pricing record

        Always reads from the database; results are never cached.

        Returns:
            PricingConfig if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, config: PricingConfig) -> PricingConfig:
        """Insert or update the pricing record"""
        pass
