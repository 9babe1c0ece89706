"""Cart bounded context: the cart is built from config (currency) and the pricing context."""
from gilded_rose.catalog import ItemRemoved
from gilded_rose.core.config import Config
from gilded_rose.core.container import Container
from gilded_rose.ddd import DomainModule
from gilded_rose.pricing import IPriceCalculator

from .application import (
    AddToCart,
    AddToCartHandler,
    DropRemovedItemFromCart,
    GetCart,
    GetCartHandler,
    RemoveFromCart,
    RemoveFromCartHandler,
)
from .domain import Cart


def build_cart(container: Container) -> Cart:
    return Cart(
        price_calculator=container.resolve(IPriceCalculator),
        currency=container.resolve(Config).currency,
    )


cart_module = (
    DomainModule("cart")
    .provide(Cart, build_cart)
    .command(AddToCart, AddToCartHandler)
    .command(RemoveFromCart, RemoveFromCartHandler)
    .query(GetCart, GetCartHandler)
    .on_event(ItemRemoved, DropRemovedItemFromCart)
)
