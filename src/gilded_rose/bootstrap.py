"""
App composition — every bounded context is a module object attached via app.register().
"""
from __future__ import annotations

from gilded_rose.cart.module import cart_module
from gilded_rose.catalog.module import catalog_module
from gilded_rose.core import Application, Config, load_config_from_env
from gilded_rose.currency.module import currency_module
from gilded_rose.pricing.module import pricing_module


def create_app(config: Config | None = None) -> Application:
    """Build the application; config defaults to GILDED_ROSE_* environment variables."""
    app = Application(config=config if config is not None else load_config_from_env())
    app.register(currency_module)
    app.register(pricing_module)
    app.register(catalog_module)
    app.register(cart_module)
    return app
