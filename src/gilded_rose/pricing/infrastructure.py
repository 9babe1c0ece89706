"""Pricing: implementations of discount strategies and the price calculator."""
from __future__ import annotations

import logging
from typing import Sequence

from gilded_rose.currency import ICurrencyConverter, IdentityCurrencyConverter

from .domain import IDiscountStrategy, PricedLine

logger = logging.getLogger(__name__)

BULK_THRESHOLD = 10
BULK_FACTOR = 0.9
SEASONAL_FACTOR = 0.95


class BulkDiscount:
    """10% off the unit price of lines with at least BULK_THRESHOLD units."""

    def apply_discount(self, lines: Sequence[PricedLine]) -> None:
        for line in lines:
            if line.amount >= BULK_THRESHOLD:
                line.discounted_unit_price *= BULK_FACTOR


class SeasonalDiscount:
    """5% off every line."""

    def apply_discount(self, lines: Sequence[PricedLine]) -> None:
        for line in lines:
            line.discounted_unit_price *= SEASONAL_FACTOR


def default_discount_chain() -> tuple[IDiscountStrategy, ...]:
    return (BulkDiscount(), SeasonalDiscount())


class PriceCalculator:
    """
    Runs the discount chain over the lines, sums the discounted line totals
    and converts the sum into the requested currency.

    Each call starts from the undiscounted unit prices, so computing the
    price of the same lines twice gives the same result. Strategies are
    applied in the order given and compose multiplicatively.
    """

    def __init__(
        self,
        currency_converter: ICurrencyConverter,
        strategies: Sequence[IDiscountStrategy] | None = None,
    ) -> None:
        self._converter = currency_converter
        self._strategies = tuple(strategies) if strategies is not None else default_discount_chain()

    @classmethod
    def default(cls) -> PriceCalculator:
        return cls(IdentityCurrencyConverter())

    @property
    def strategies(self) -> tuple[IDiscountStrategy, ...]:
        return self._strategies

    def calculate_price(self, lines: Sequence[PricedLine], currency: str) -> float:
        for line in lines:
            line.discounted_unit_price = line.unit_price
        for strategy in self._strategies:
            strategy.apply_discount(lines)
        total = sum((line.discounted_unit_price * line.amount for line in lines), 0.0)
        logger.debug("Priced %d line(s): %s before conversion", len(lines), total)
        return self._converter.convert(total, currency)
