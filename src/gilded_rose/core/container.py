"""Minimal DI container: register by type/protocol, resolve constructor dependencies."""
from __future__ import annotations

import builtins
import inspect
import sys
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_MISSING = object()


def _resolve_annotation(ann: str, cls: type[Any]) -> Any:
    """Resolve a string annotation (from __future__ annotations) to the actual class, falling back to builtins."""
    mod = sys.modules.get(cls.__module__)
    if mod is not None and hasattr(mod, ann):
        return getattr(mod, ann)
    return getattr(builtins, ann, ann)


def _instantiate_with_container(container: Container, cls: type[T]) -> T:
    """
    Create an instance of cls, resolving annotated __init__ parameters from the container.
    Parameters with a default are only injected when the container knows their type.
    """
    sig = inspect.signature(cls)
    kwargs: dict[str, Any] = {}
    for name, param in sig.parameters.items():
        if name == "self" or param.annotation is inspect.Parameter.empty:
            continue
        ann = param.annotation
        if isinstance(ann, str):
            ann = _resolve_annotation(ann, cls)
        if param.default is not inspect.Parameter.empty and not container.has(ann):
            continue
        kwargs[name] = container.resolve(ann)
    return cls(**kwargs)


class Container:
    """
    Register by type (or key) and resolve via factory.
    Allows registering an implementation for a protocol/abstraction.
    """

    def __init__(self) -> None:
        self._registry: dict[Any, Callable[[], Any]] = {}
        self._singletons: dict[Any, Any] = {}
        self._singleton_keys: set[Any] = set()

    def has(self, key: Any) -> bool:
        try:
            return key in self._registry
        except TypeError:
            # unhashable annotations (e.g. some typing generics) are never registered
            return False

    def register(self, key: type[T] | type[Any] | str, factory: Callable[[], T], singleton: bool = True) -> None:
        """Register a factory for a type or string key."""
        self._registry[key] = factory
        self._singletons.pop(key, None)
        if singleton:
            self._singleton_keys.add(key)
        else:
            self._singleton_keys.discard(key)

    def register_instance(self, key: type[T] | type[Any] | str, instance: T) -> None:
        """Register a ready-made instance."""
        self._registry[key] = lambda: instance
        self._singletons[key] = instance
        self._singleton_keys.add(key)

    def register_class(self, cls: type[T], singleton: bool = True) -> None:
        """Register a class: on resolve an instance is created with dependencies from the container."""
        self.register(key=cls, factory=lambda: _instantiate_with_container(self, cls), singleton=singleton)

    def resolve(self, key: type[T] | type[Any] | str) -> T:
        """Resolve an instance by type or key."""
        if not self.has(key):
            raise KeyError(f"No registration for {key}")
        cached = self._singletons.get(key, _MISSING)
        if cached is not _MISSING:
            return cached
        instance = self._registry[key]()
        if key in self._singleton_keys:
            self._singletons[key] = instance
        return instance
