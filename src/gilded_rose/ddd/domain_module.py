"""
DomainModule — one object per bounded context.
Describes bindings, commands, queries and event subscriptions.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Type

from gilded_rose.core.app import Application
from gilded_rose.core.container import Container
from gilded_rose.core.module import Module
from gilded_rose.ddd.commands import Command, MessageHandler, Query
from gilded_rose.domain.events import DomainEvent, EventBus

logger = logging.getLogger(__name__)

Handler = Type[Any] | MessageHandler[Any]


class DomainModule(Module):
    """
    One object = full bounded context.
    .bind() .provide() .command() .query() .on_event()
    Register via app.register(module).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._bindings: list[tuple[Any, Type[Any]]] = []
        self._providers: list[tuple[Any, Callable[[Container], Any]]] = []
        self._commands: list[tuple[Type[Command], Handler]] = []
        self._queries: list[tuple[Type[Query], Handler]] = []
        self._event_handlers: list[tuple[Type[DomainEvent], Handler]] = []

    def bind(self, interface: Any, impl: Type[Any]) -> DomainModule:
        """Register any interface → implementation for DI (e.g. domain services, strategies)."""
        self._bindings.append((interface, impl))
        return self

    def provide(self, key: Any, factory: Callable[[Container], Any]) -> DomainModule:
        """Register a singleton built by factory(container), for objects needing config values."""
        self._providers.append((key, factory))
        return self

    def command(self, cmd_type: Type[Command], handler: Handler) -> DomainModule:
        self._commands.append((cmd_type, handler))
        return self

    def query(self, query_type: Type[Query], handler: Handler) -> DomainModule:
        self._queries.append((query_type, handler))
        return self

    def on_event(self, event_type: Type[DomainEvent], handler: Handler) -> DomainModule:
        self._event_handlers.append((event_type, handler))
        return self

    def register_into(self, app: Application) -> None:
        container = app.container

        # Arbitrary bindings (domain services, strategies, adapters)
        for iface, impl in self._bindings:
            container.register_class(impl)
            if iface is not impl:
                container.register(iface, lambda c=container, i=impl: c.resolve(i))

        for key, factory in self._providers:
            container.register(key, lambda c=container, f=factory: f(c))

        event_bus = container.resolve(EventBus)
        for event_type, handler in self._event_handlers:
            event_bus.subscribe(event_type, self._bind_handler(handler, container))

        for message_type, handler in [*self._commands, *self._queries]:
            app.add_handler(message_type, self._bind_handler(handler, container))
            logger.debug("%s: handler for %s", self.name, message_type.__name__)

    @staticmethod
    def _bind_handler(handler: Handler, container: Container) -> Callable[[Any], Any]:
        """Class handlers are built from the container on first use; functions are used as-is."""
        if not isinstance(handler, type):
            return handler
        container.register_class(handler)

        def call(message: Any) -> Any:
            return container.resolve(handler)(message)

        return call
