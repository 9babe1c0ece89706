"""Unit tests for the DI container."""

from __future__ import annotations

import pytest

from gilded_rose.core import Container


class Engine:
    pass


class Car:
    def __init__(self, engine: Engine, wheels: int = 4):
        self.engine = engine
        self.wheels = wheels


class TestContainer:
    def test_register_instance(self):
        c = Container()
        engine = Engine()
        c.register_instance(Engine, engine)
        assert c.resolve(Engine) is engine

    def test_string_key(self):
        c = Container()
        c.register_instance("config", {"a": 1})
        assert c.resolve("config") == {"a": 1}

    def test_register_class_resolves_dependencies(self):
        c = Container()
        c.register_class(Engine)
        c.register_class(Car)
        car = c.resolve(Car)
        assert car.engine is c.resolve(Engine)
        assert car.wheels == 4

    def test_registered_default_parameter_is_injected(self):
        c = Container()
        c.register_class(Engine)
        c.register_instance(int, 6)
        c.register_class(Car)
        assert c.resolve(Car).wheels == 6

    def test_singleton_and_transient(self):
        c = Container()
        c.register(Engine, Engine)
        c.register("fresh", Engine, singleton=False)
        assert c.resolve(Engine) is c.resolve(Engine)
        assert c.resolve("fresh") is not c.resolve("fresh")

    def test_reregister_replaces_cached_singleton(self):
        c = Container()
        c.register_instance(Engine, Engine())
        replacement = Engine()
        c.register(Engine, lambda: replacement)
        assert c.resolve(Engine) is replacement

    def test_missing_registration(self):
        c = Container()
        with pytest.raises(KeyError):
            c.resolve(Engine)
        assert not c.has(Engine)
