"""Application layer: cart commands, queries, handlers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gilded_rose.catalog import Catalog, ItemRemoved
from gilded_rose.catalog.application import require_item
from gilded_rose.ddd import Command, Query

from .domain import Cart


@dataclass
class AddToCart(Command):
    item_id: str
    amount: int


@dataclass
class RemoveFromCart(Command):
    item_id: str


@dataclass
class GetCart(Query):
    pass


class AddToCartHandler:
    def __init__(self, cart: Cart, catalog: Catalog):
        self._cart = cart
        self._catalog = catalog

    def __call__(self, cmd: AddToCart) -> float:
        item = require_item(self._catalog, cmd.item_id)
        self._cart.add_item(item, cmd.amount)
        return self._cart.total_price


class RemoveFromCartHandler:
    def __init__(self, cart: Cart):
        self._cart = cart

    def __call__(self, cmd: RemoveFromCart) -> float:
        self._cart.remove_item(cmd.item_id)
        return self._cart.total_price


class GetCartHandler:
    def __init__(self, cart: Cart):
        self._cart = cart

    def __call__(self, query: GetCart) -> dict[str, Any]:
        return {
            "currency": self._cart.currency,
            "total_price": self._cart.total_price,
            "lines": [
                {
                    "item_id": line.item_id,
                    "amount": line.amount,
                    "unit_price": line.unit_price,
                    "discounted_unit_price": line.discounted_unit_price,
                }
                for line in self._cart.lines
            ],
        }


class DropRemovedItemFromCart:
    """Event handler: a line must not outlive the catalog item it points at."""

    def __init__(self, cart: Cart):
        self._cart = cart

    def __call__(self, event: ItemRemoved) -> None:
        self._cart.remove_item(event.item_id)
