"""Pricing context: discount strategies and price calculation."""
from gilded_rose.pricing.domain import IDiscountStrategy, IPriceCalculator, PricedLine
from gilded_rose.pricing.infrastructure import (
    BULK_FACTOR,
    BULK_THRESHOLD,
    SEASONAL_FACTOR,
    BulkDiscount,
    PriceCalculator,
    SeasonalDiscount,
    default_discount_chain,
)

__all__ = [
    "BULK_FACTOR",
    "BULK_THRESHOLD",
    "SEASONAL_FACTOR",
    "BulkDiscount",
    "IDiscountStrategy",
    "IPriceCalculator",
    "PriceCalculator",
    "PricedLine",
    "SeasonalDiscount",
    "default_discount_chain",
]
