"""Application — composed from modules via app.register(module); dispatches commands and queries in-process."""
from __future__ import annotations

import logging
from typing import Any, Callable

from gilded_rose.core.config import Config
from gilded_rose.core.container import Container
from gilded_rose.core.module import Module
from gilded_rose.domain.events import EventBus, InProcessEventDispatcher

logger = logging.getLogger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Each command/query type has exactly one handler; dispatch() runs it synchronously.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._container = Container()
        self._handlers: dict[type, Callable[[Any], Any]] = {}
        self._config = config if config is not None else Config()
        self._container.register_instance(Config, self._config)
        event_bus = InProcessEventDispatcher()
        self._container.register_instance(EventBus, event_bus)
        self._container.register_instance(InProcessEventDispatcher, event_bus)

    def register(self, module: Module) -> Application:
        """Register a module (DomainModule, etc.). Returns self for chaining."""
        module.register_into(self)
        logger.debug("Registered module %s", getattr(module, "name", type(module).__name__))
        return self

    def add_handler(self, message_type: type, handler: Callable[[Any], Any]) -> None:
        """Attach the handler for a command or query type."""
        if message_type in self._handlers:
            raise ValueError(f"Handler already registered for {message_type.__name__}")
        self._handlers[message_type] = handler

    def dispatch(self, message: Any) -> Any:
        """Run the handler registered for type(message) and return its result."""
        handler = self._handlers.get(type(message))
        if handler is None:
            raise KeyError(f"No handler for {type(message).__name__}")
        logger.debug("Dispatching %r", message)
        return handler(message)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container

    @property
    def event_bus(self) -> EventBus:
        return self._container.resolve(EventBus)
