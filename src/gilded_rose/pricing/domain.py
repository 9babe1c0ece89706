"""Pricing context: line shape, discount strategy and price calculator interfaces."""
from __future__ import annotations

from typing import Protocol, Sequence


class PricedLine(Protocol):
    """What pricing needs from a cart line. Strategies write discounted_unit_price in place."""

    amount: int
    unit_price: float
    discounted_unit_price: float


class IDiscountStrategy(Protocol):
    def apply_discount(self, lines: Sequence[PricedLine]) -> None:
        ...


class IPriceCalculator(Protocol):
    def calculate_price(self, lines: Sequence[PricedLine], currency: str) -> float:
        ...
