"""Catalog domain: the aggregate owning every stocked item, and its events."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from gilded_rose.domain import AggregateRoot, DomainEvent
from gilded_rose.quality import Item

logger = logging.getLogger(__name__)


@dataclass
class ItemAdded(DomainEvent):
    item_id: str
    name: str


@dataclass
class ItemRemoved(DomainEvent):
    item_id: str


def _item_id(item_or_id: Item | str) -> str:
    return item_or_id.id if isinstance(item_or_id, Item) else item_or_id


class Catalog(AggregateRoot):
    """
    Insertion-ordered collection of items. Sole owner of Item objects;
    other contexts refer to items by id.
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id)
        self._items: list[Item] = []

    def add_item(self, item: Item) -> None:
        """Append item. The same item may be added more than once."""
        self._items.append(item)
        logger.info("Catalog: added %s (%s)", item.name, item.id)
        self.raise_event(ItemAdded(item_id=item.id, name=item.name))

    def remove_item(self, item_or_id: Item | str) -> None:
        """Remove every entry with the item's id; survivors keep their order."""
        item_id = _item_id(item_or_id)
        kept = [i for i in self._items if i.id != item_id]
        if len(kept) == len(self._items):
            return
        removed = len(self._items) - len(kept)
        self._items = kept
        logger.info("Catalog: removed %s (%d entries)", item_id, removed)
        self.raise_event(ItemRemoved(item_id=item_id))

    def get_items(self) -> tuple[Item, ...]:
        """
        Snapshot of the catalog. Later adds/removes do not show up in it;
        the items themselves are the live objects.
        """
        return tuple(self._items)

    def get(self, item_id: str) -> Item | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def update_quality(self) -> None:
        """One simulated day for every item in the catalog."""
        for item in self._items:
            item.update_quality()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.get_items())

    def __contains__(self, item_or_id: object) -> bool:
        if not isinstance(item_or_id, (Item, str)):
            return False
        return self.get(_item_id(item_or_id)) is not None
