"""The classic Gilded Rose inventory, with shop prices."""
from __future__ import annotations

from gilded_rose.catalog.domain import Catalog
from gilded_rose.quality import Item, Variant


def default_inventory() -> list[Item]:
    return [
        Item("+5 Dexterity Vest", 10, 20, 35.0),
        Item("Aged Brie", 2, 0, 8.5, Variant.AGED_BRIE),
        Item("Elixir of the Mongoose", 5, 7, 12.0),
        Item("Sulfuras, Hand of Ragnaros", 0, 80, 250.0, Variant.SULFURAS),
        Item("Sulfuras, Hand of Ragnaros", -1, 80, 250.0, Variant.SULFURAS),
        Item("Backstage passes to a TAFKAL80ETC concert", 15, 20, 45.0, Variant.BACKSTAGE_PASS),
        Item("Backstage passes to a TAFKAL80ETC concert", 10, 49, 45.0, Variant.BACKSTAGE_PASS),
        Item("Backstage passes to a TAFKAL80ETC concert", 5, 49, 45.0, Variant.BACKSTAGE_PASS),
        Item("Conjured Mana Cake", 3, 6, 5.0, Variant.CONJURED),
    ]


def seeded_catalog() -> Catalog:
    catalog = Catalog()
    for item in default_inventory():
        catalog.add_item(item)
    catalog.collect_pending_events()
    return catalog
