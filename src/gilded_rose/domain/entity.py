"""Entity — identity-bearing object; ids are generated when not supplied."""
from __future__ import annotations

import uuid


def new_id() -> str:
    return uuid.uuid4().hex


class Entity:
    """Entity: equality and hashing by id, never by field values."""

    def __init__(self, id: str | None = None) -> None:
        self.id = id if id is not None else new_id()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))
