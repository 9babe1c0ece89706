"""Message markers for the in-process bus, plus the handler shape."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

M = TypeVar("M", contravariant=True)


@dataclass
class Command:
    """Changes state (catalog contents, cart lines, the simulated date)."""


@dataclass
class Query:
    """Reads state; handlers return plain dicts/lists."""


class MessageHandler(Protocol[M]):
    def __call__(self, message: M) -> Any:
        ...
