"""Tests for component registries and the context-scoped current registry."""

from __future__ import annotations

import pytest

from mathspan.registry import (
    ComponentRegistry,
    EmptyComponentRegistry,
    StaticComponentRegistry,
    component_registry_context,
    get_component_registry,
    reset_component_registry,
    set_component_registry,
)


class TestRegistries:
    def test_empty_registry_knows_nothing(self) -> None:
        registry = EmptyComponentRegistry()
        assert registry.has_component("math-up") is False
        assert isinstance(registry, ComponentRegistry)

    def test_static_registry(self) -> None:
        registry = StaticComponentRegistry(["math-up", "my-el"])
        assert registry.has_component("math-up") is True
        assert registry.has_component("la-tex") is False
        assert registry.names == frozenset({"math-up", "my-el"})
        assert isinstance(registry, ComponentRegistry)

    def test_static_registry_copies_input(self) -> None:
        names = {"math-up"}
        registry = StaticComponentRegistry(names)
        names.add("la-tex")
        assert registry.has_component("la-tex") is False

    def test_repr(self) -> None:
        assert repr(StaticComponentRegistry(["b", "a"])) == "StaticComponentRegistry(['a', 'b'])"


class TestContextFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_component_registry()

    def test_default_is_empty(self) -> None:
        assert isinstance(get_component_registry(), EmptyComponentRegistry)

    def test_set_and_get(self) -> None:
        registry = StaticComponentRegistry({"la-tex"})
        set_component_registry(registry)
        assert get_component_registry() is registry

    def test_reset(self) -> None:
        set_component_registry(StaticComponentRegistry({"la-tex"}))
        reset_component_registry()
        assert get_component_registry().has_component("la-tex") is False

    def test_context_manager_restores_previous(self) -> None:
        outer = StaticComponentRegistry({"math-up"})
        set_component_registry(outer)
        with component_registry_context(StaticComponentRegistry({"la-tex"})):
            assert get_component_registry().has_component("la-tex")
        assert get_component_registry() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with component_registry_context(StaticComponentRegistry({"la-tex"})):
                raise RuntimeError("boom")
        assert isinstance(get_component_registry(), EmptyComponentRegistry)
