"""Application layer: catalog commands, queries, handlers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gilded_rose.ddd import Command, Query
from gilded_rose.domain import EventBus, InvalidArgument, ItemNotFound
from gilded_rose.quality import Item, Variant
from gilded_rose.quality.domain import check_days

from .domain import Catalog


@dataclass
class AddCatalogItem(Command):
    name: str
    sell_in: int
    quality: int
    base_price: float
    variant: str = Variant.STANDARD.value


@dataclass
class RemoveCatalogItem(Command):
    item_id: str


@dataclass
class AdvanceDay(Command):
    """Run the nightly quality update `days` times."""
    days: int = 1


@dataclass
class ListCatalogItems(Query):
    pass


@dataclass
class GetCatalogItem(Query):
    item_id: str


def item_to_dict(item: Item) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "sell_in": item.sell_in,
        "quality": item.quality,
        "base_price": item.base_price,
        "variant": item.variant.value,
    }


def parse_variant(value: str | Variant) -> Variant:
    if isinstance(value, Variant):
        return value
    try:
        return Variant(value)
    except ValueError:
        raise InvalidArgument(f"Unknown variant: {value!r}") from None


class AddCatalogItemHandler:
    def __init__(self, catalog: Catalog, event_bus: EventBus):
        self._catalog = catalog
        self._event_bus = event_bus

    def __call__(self, cmd: AddCatalogItem) -> str:
        item = Item(
            name=cmd.name,
            sell_in=cmd.sell_in,
            quality=cmd.quality,
            base_price=cmd.base_price,
            variant=parse_variant(cmd.variant),
        )
        self._catalog.add_item(item)
        for event in self._catalog.collect_pending_events():
            self._event_bus.publish(event)
        return item.id


class RemoveCatalogItemHandler:
    def __init__(self, catalog: Catalog, event_bus: EventBus):
        self._catalog = catalog
        self._event_bus = event_bus

    def __call__(self, cmd: RemoveCatalogItem) -> None:
        self._catalog.remove_item(cmd.item_id)
        for event in self._catalog.collect_pending_events():
            self._event_bus.publish(event)


class AdvanceDayHandler:
    def __init__(self, catalog: Catalog):
        self._catalog = catalog

    def __call__(self, cmd: AdvanceDay) -> None:
        for _ in range(check_days(cmd.days)):
            self._catalog.update_quality()


class ListCatalogItemsHandler:
    def __init__(self, catalog: Catalog):
        self._catalog = catalog

    def __call__(self, query: ListCatalogItems) -> list[dict[str, Any]]:
        return [item_to_dict(item) for item in self._catalog.get_items()]


class GetCatalogItemHandler:
    def __init__(self, catalog: Catalog):
        self._catalog = catalog

    def __call__(self, query: GetCatalogItem) -> dict[str, Any] | None:
        item = self._catalog.get(query.item_id)
        if item is None:
            return None
        return item_to_dict(item)


def require_item(catalog: Catalog, item_id: str) -> Item:
    item = catalog.get(item_id)
    if item is None:
        raise ItemNotFound(item_id)
    return item
