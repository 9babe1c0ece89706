"""Module protocol: a bounded context attaches its bindings and handlers to an Application."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gilded_rose.core.app import Application


@runtime_checkable
class Module(Protocol):
    """Anything passed to app.register(); it is called once per application."""

    name: str

    def register_into(self, app: Application) -> None:
        ...
