"""Cart domain: lines referencing catalog items by id, priced on every change."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gilded_rose.core.config import DEFAULT_CURRENCY
from gilded_rose.domain import InvalidArgument
from gilded_rose.pricing import IPriceCalculator
from gilded_rose.quality import Item

logger = logging.getLogger(__name__)


@dataclass
class CartLine:
    item_id: str
    amount: int
    unit_price: float
    discounted_unit_price: float = field(init=False)

    def __post_init__(self) -> None:
        self.discounted_unit_price = self.unit_price

    @property
    def total(self) -> float:
        return self.discounted_unit_price * self.amount


def _check_amount(amount: object) -> int:
    # bool is an int subclass but never a quantity
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidArgument(f"amount must be an int, got {type(amount).__name__}")
    if amount <= 0:
        raise InvalidArgument(f"amount must be > 0, got {amount}")
    return amount


class Cart:
    """
    Ordered cart lines plus the price calculator and currency fixed at construction.
    total_price is recomputed after every add and remove.
    """

    def __init__(self, price_calculator: IPriceCalculator, currency: str = DEFAULT_CURRENCY) -> None:
        self._price_calculator = price_calculator
        self._currency = currency
        self._lines: list[CartLine] = []
        self._total_price = 0.0

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def total_price(self) -> float:
        return self._total_price

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def line_for(self, item_id: str) -> CartLine | None:
        for line in self._lines:
            if line.item_id == item_id:
                return line
        return None

    def add_item(self, item: Item, amount: int) -> None:
        """Add amount units of item; a second add of the same item grows its line."""
        amount = _check_amount(amount)
        line = self.line_for(item.id)
        if line is not None:
            line.amount += amount
            logger.debug("Cart: %s amount -> %d", item.id, line.amount)
        else:
            self._lines.append(CartLine(item_id=item.id, amount=amount, unit_price=item.base_price))
            logger.info("Cart: new line for %s x%d", item.name, amount)
        self._recalculate()

    def remove_item(self, item_or_id: Item | str) -> None:
        """Drop every line for the item. Unknown items are ignored."""
        item_id = item_or_id.id if isinstance(item_or_id, Item) else item_or_id
        kept = [line for line in self._lines if line.item_id != item_id]
        if len(kept) != len(self._lines):
            logger.info("Cart: removed line for %s", item_id)
        self._lines = kept
        self._recalculate()

    def _recalculate(self) -> None:
        self._total_price = self._price_calculator.calculate_price(self._lines, self._currency)

    def __len__(self) -> int:
        return len(self._lines)
