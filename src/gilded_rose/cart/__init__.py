"""Cart context: what a customer is about to buy."""
from gilded_rose.cart.domain import Cart, CartLine

__all__ = ["Cart", "CartLine"]
