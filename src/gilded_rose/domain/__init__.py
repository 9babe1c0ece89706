"""Domain layer base classes: Entity, ValueObject, AggregateRoot, DomainEvent, errors."""
from gilded_rose.domain.entity import Entity, new_id
from gilded_rose.domain.value_object import ValueObject
from gilded_rose.domain.aggregate import AggregateRoot
from gilded_rose.domain.events import DomainEvent, EventBus, InProcessEventDispatcher
from gilded_rose.domain.errors import DomainError, InvalidArgument, ItemNotFound

__all__ = [
    "Entity",
    "new_id",
    "ValueObject",
    "AggregateRoot",
    "DomainEvent",
    "EventBus",
    "InProcessEventDispatcher",
    "DomainError",
    "InvalidArgument",
    "ItemNotFound",
]
