"""Catalog context: owns the stocked items."""
from gilded_rose.catalog.domain import Catalog, ItemAdded, ItemRemoved
from gilded_rose.catalog.seed import default_inventory, seeded_catalog

__all__ = ["Catalog", "ItemAdded", "ItemRemoved", "default_inventory", "seeded_catalog"]
