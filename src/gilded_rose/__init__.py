"""
Gilded Rose — inventory quality rules and cart pricing as bounded contexts.
The application is composed from module objects via app.register(module); see create_app().
"""
from gilded_rose.bootstrap import create_app
from gilded_rose.cart import Cart, CartLine
from gilded_rose.catalog import Catalog
from gilded_rose.core import Application, Config, Container, Module, load_config_from_env
from gilded_rose.quality import Item, ItemState, Variant, apply_daily_update

__all__ = [
    "Application",
    "Cart",
    "CartLine",
    "Catalog",
    "Config",
    "Container",
    "Item",
    "ItemState",
    "Module",
    "Variant",
    "apply_daily_update",
    "create_app",
    "load_config_from_env",
]
