"""Unit tests for the catalog aggregate."""

from __future__ import annotations

from gilded_rose.catalog import Catalog, ItemAdded, ItemRemoved, default_inventory, seeded_catalog
from gilded_rose.quality import Item, Variant


def make_item(name: str = "Vest") -> Item:
    return Item(name, 10, 20, 35.0)


class TestCatalogMembership:
    def test_add_appends_without_dedup(self):
        catalog = Catalog()
        item = make_item()
        catalog.add_item(item)
        catalog.add_item(item)
        assert catalog.get_items() == (item, item)
        assert len(catalog) == 2

    def test_remove_drops_every_entry_of_the_item(self):
        catalog = Catalog()
        item = make_item()
        catalog.add_item(item)
        catalog.add_item(item)
        catalog.remove_item(item)
        assert catalog.get_items() == ()

    def test_remove_is_by_identity_not_by_fields(self):
        catalog = Catalog()
        a = make_item()
        twin = make_item()
        catalog.add_item(a)
        catalog.add_item(twin)
        catalog.remove_item(a)
        assert catalog.get_items() == (twin,)

    def test_remove_keeps_survivor_order(self):
        catalog = Catalog()
        a, b, c = make_item("a"), make_item("b"), make_item("c")
        for item in (a, b, c):
            catalog.add_item(item)
        catalog.remove_item(b)
        assert [i.name for i in catalog.get_items()] == ["a", "c"]

    def test_remove_by_id(self):
        catalog = Catalog()
        item = make_item()
        catalog.add_item(item)
        catalog.remove_item(item.id)
        assert item not in catalog

    def test_get_and_contains(self):
        catalog = Catalog()
        item = make_item()
        catalog.add_item(item)
        assert catalog.get(item.id) is item
        assert catalog.get("missing") is None
        assert item in catalog
        assert item.id in catalog
        assert 42 not in catalog


class TestCatalogSnapshot:
    def test_get_items_is_a_snapshot(self):
        catalog = Catalog()
        catalog.add_item(make_item("a"))
        snapshot = catalog.get_items()
        catalog.add_item(make_item("b"))
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_snapshot_items_are_live(self):
        catalog = Catalog()
        brie = Item("Aged Brie", 2, 0, 8.5, Variant.AGED_BRIE)
        catalog.add_item(brie)
        snapshot = catalog.get_items()
        catalog.update_quality()
        assert snapshot[0].quality == 1


class TestCatalogEvents:
    def test_add_raises_item_added(self):
        catalog = Catalog()
        item = make_item()
        catalog.add_item(item)
        assert catalog.collect_pending_events() == [ItemAdded(item_id=item.id, name="Vest")]
        assert catalog.collect_pending_events() == []

    def test_remove_raises_one_event_per_item(self):
        catalog = Catalog()
        item = make_item()
        catalog.add_item(item)
        catalog.add_item(item)
        catalog.collect_pending_events()
        catalog.remove_item(item)
        assert catalog.collect_pending_events() == [ItemRemoved(item_id=item.id)]

    def test_removing_absent_item_is_silent(self):
        catalog = Catalog()
        catalog.add_item(make_item())
        catalog.collect_pending_events()
        catalog.remove_item(make_item())
        assert catalog.collect_pending_events() == []
        assert len(catalog) == 1


class TestCatalogTick:
    def test_update_quality_ticks_every_item(self):
        catalog = seeded_catalog()
        catalog.update_quality()
        by_name = [(i.name, i.sell_in, i.quality) for i in catalog.get_items()]
        assert by_name[0] == ("+5 Dexterity Vest", 10, 20)
        assert by_name[1] == ("Aged Brie", 1, 1)
        assert by_name[3] == ("Sulfuras, Hand of Ragnaros", 0, 80)
        assert by_name[5] == ("Backstage passes to a TAFKAL80ETC concert", 14, 21)
        assert by_name[6] == ("Backstage passes to a TAFKAL80ETC concert", 9, 50)
        assert by_name[8] == ("Conjured Mana Cake", 2, 4)


class TestSeed:
    def test_default_inventory_is_fresh_each_call(self):
        first = default_inventory()
        second = default_inventory()
        assert len(first) == 9
        assert {i.id for i in first}.isdisjoint({i.id for i in second})

    def test_seeded_catalog_has_no_pending_events(self):
        catalog = seeded_catalog()
        assert len(catalog) == 9
        assert catalog.collect_pending_events() == []
