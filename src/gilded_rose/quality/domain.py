"""
Quality domain: item variants and their daily update rules.

Every variant's rule lives in one table keyed by Variant, so the full rule set
can be reviewed in one place. Rules are pure: they take an ItemState and
return the state after one elapsed day.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable

from gilded_rose.domain import Entity, InvalidArgument, ValueObject

logger = logging.getLogger(__name__)

MAX_QUALITY = 50
MIN_QUALITY = 0


class Variant(enum.Enum):
    """Closed set of item kinds. Fixed when the item is created."""

    STANDARD = "standard"
    AGED_BRIE = "aged_brie"
    BACKSTAGE_PASS = "backstage_pass"
    SULFURAS = "sulfuras"
    CONJURED = "conjured"


@dataclass(frozen=True)
class ItemState(ValueObject):
    """The part of an item that changes over time."""

    sell_in: int
    quality: int


def _standard(state: ItemState) -> ItemState:
    # Placeholder: no default decay is applied to plain items.
    return state


def _aged_brie(state: ItemState) -> ItemState:
    sell_in = state.sell_in - 1
    quality = state.quality
    if quality < MAX_QUALITY:
        quality += 1
    if sell_in < 0 and quality < MAX_QUALITY:
        quality += 1
    return ItemState(sell_in, quality)


def _backstage_pass(state: ItemState) -> ItemState:
    quality = state.quality
    if state.sell_in > 0:
        if quality < MAX_QUALITY:
            quality += 1
            if state.sell_in < 11 and quality < MAX_QUALITY:
                quality += 1
            if state.sell_in < 6 and quality < MAX_QUALITY:
                quality += 1
    else:
        # concert is over
        quality = 0
    return ItemState(state.sell_in - 1, quality)


def _sulfuras(state: ItemState) -> ItemState:
    return state


def _conjured(state: ItemState) -> ItemState:
    sell_in = state.sell_in - 1
    quality = state.quality
    if quality > MIN_QUALITY:
        quality = max(MIN_QUALITY, quality - 2)
    if sell_in < 0 and quality > MIN_QUALITY:
        quality = max(MIN_QUALITY, quality - 2)
    return ItemState(sell_in, quality)


RULES: dict[Variant, Callable[[ItemState], ItemState]] = {
    Variant.STANDARD: _standard,
    Variant.AGED_BRIE: _aged_brie,
    Variant.BACKSTAGE_PASS: _backstage_pass,
    Variant.SULFURAS: _sulfuras,
    Variant.CONJURED: _conjured,
}


def check_days(days: object) -> int:
    # bool is an int subclass but never a day count
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidArgument(f"days must be an int, got {type(days).__name__}")
    if days < 0:
        raise InvalidArgument(f"days must be >= 0, got {days}")
    return days


def apply_daily_update(variant: Variant, state: ItemState) -> ItemState:
    """Return the state of an item of the given variant one day later."""
    return RULES[variant](state)


class Item(Entity):
    """
    A stocked item. Mutated in place once per simulated day by update_quality().

    Quality is expected to stay within [MIN_QUALITY, MAX_QUALITY] for every
    variant except SULFURAS; the rules keep it there, nothing re-clamps it
    afterwards.
    """

    def __init__(
        self,
        name: str,
        sell_in: int,
        quality: int,
        base_price: float,
        variant: Variant = Variant.STANDARD,
        id: str | None = None,
    ) -> None:
        super().__init__(id)
        self.name = name
        self.sell_in = sell_in
        self.quality = quality
        self.base_price = base_price
        self.variant = variant

    @property
    def state(self) -> ItemState:
        return ItemState(self.sell_in, self.quality)

    def update_quality(self) -> None:
        """Advance this item by one day."""
        new_state = apply_daily_update(self.variant, self.state)
        logger.debug(
            "%s (%s): sell_in %d -> %d, quality %d -> %d",
            self.name,
            self.variant.value,
            self.sell_in,
            new_state.sell_in,
            self.quality,
            new_state.quality,
        )
        self.sell_in = new_state.sell_in
        self.quality = new_state.quality

    def advance(self, days: int) -> None:
        """Apply update_quality() once per day."""
        for _ in range(check_days(days)):
            self.update_quality()

    def __repr__(self) -> str:
        return (
            f"Item(name={self.name!r}, sell_in={self.sell_in}, quality={self.quality}, "
            f"base_price={self.base_price}, variant={self.variant.name})"
        )
