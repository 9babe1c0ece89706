"""AggregateRoot — aggregate root; collects domain events until they are published."""
from __future__ import annotations

from typing import List

from gilded_rose.domain.entity import Entity
from gilded_rose.domain.events import DomainEvent


class AggregateRoot(Entity):
    """
    Aggregate root. Events raised while mutating the aggregate are collected
    and handed to the event bus by the command handler.
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id)
        self._pending_events: List[DomainEvent] = []

    def raise_event(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def collect_pending_events(self) -> List[DomainEvent]:
        """Collect and clear pending events (called by the application layer)."""
        events = list(self._pending_events)
        self._pending_events.clear()
        return events
