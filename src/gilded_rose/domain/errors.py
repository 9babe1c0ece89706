"""Domain error types.

The quality rules and pricing arithmetic never raise; these errors guard the
edges where callers hand in ids and amounts.
"""


class DomainError(Exception):
    """Base class for errors raised by the domain layer."""


class InvalidArgument(DomainError, ValueError):
    """A caller passed a value the operation cannot accept (e.g. a non-positive amount)."""


class ItemNotFound(DomainError, LookupError):
    """An id does not refer to an item held by the catalog."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item not found: {item_id}")
        self.item_id = item_id
