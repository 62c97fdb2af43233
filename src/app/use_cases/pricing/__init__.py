"""Pricing configuration use cases"""
from .get_pricing_config import GetPricingConfig
from .update_pricing_config import UpdatePricingConfig
from .seed_pricing_config import SeedPricingConfig
from .dtos import PricingConfigDTO, UpdatePricingCommandDTO

__all__ = [
    "GetPricingConfig",
    "UpdatePricingConfig",
    "SeedPricingConfig",
    "PricingConfigDTO",
    "UpdatePricingCommandDTO",
]
