"""Tests for ComponentRegistry."""

from __future__ import annotations

import pytest

from blocktree.components.component import Component
from blocktree.components.registry import ComponentRegistry
from blocktree.errors import BlockTreeRegistryError, ErrorCode


class Hero(Component):
    name = "hero"


class TestComponentRegistry:
    def test_empty(self):
        registry = ComponentRegistry()
        assert len(registry) == 0
        assert registry.get("acme/hero") is None

    def test_register_and_create(self):
        registry = ComponentRegistry()
        registry.register("acme/hero", Hero)
        node = registry.create("acme/hero")
        assert isinstance(node, Hero)
        assert node.name == "hero"

    def test_create_returns_fresh_instances(self):
        registry = ComponentRegistry({"acme/hero": Hero})
        assert registry.create("acme/hero") is not registry.create("acme/hero")

    def test_unmapped_falls_back_to_generic(self):
        node = ComponentRegistry().create("core/unknown")
        assert type(node) is Component
        assert node.name == "core/unknown"

    def test_unmapped_none_name(self):
        assert ComponentRegistry().create(None).name == ""

    def test_from_mapping(self):
        registry = ComponentRegistry({"acme/hero": Hero})
        assert "acme/hero" in registry
        assert registry.names() == ["acme/hero"]
        assert list(registry) == ["acme/hero"]

    def test_decorator(self):
        registry = ComponentRegistry()

        @registry.component("acme/card")
        class Card(Component):
            name = "card"

        assert registry.get("acme/card") is Card

    def test_lambda_factory(self):
        registry = ComponentRegistry()
        registry.register("acme/card", lambda: Component().set_name("card"))
        assert registry.create("acme/card").name == "card"

    def test_register_replaces(self):
        registry = ComponentRegistry({"acme/hero": Hero})
        registry.register("acme/hero", Component)
        assert type(registry.create("acme/hero")) is Component

    def test_empty_name_rejected(self):
        with pytest.raises(BlockTreeRegistryError) as exc_info:
            ComponentRegistry().register("", Hero)
        assert exc_info.value.code == ErrorCode.REGISTRY_ERROR

    def test_non_callable_rejected(self):
        with pytest.raises(BlockTreeRegistryError) as exc_info:
            ComponentRegistry({"acme/hero": "Hero"})
        assert exc_info.value.context["name"] == "acme/hero"
