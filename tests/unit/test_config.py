"""Tests for ConverterConfig defaults and validation."""

from __future__ import annotations

import pytest

from blocktree.components.registry import ComponentRegistry
from blocktree.config import DEFAULT_RENDER_EXCEPTIONS, ConverterConfig


class TestDefaults:
    def test_default_collaborators(self):
        config = ConverterConfig()
        assert config.block_source is None
        assert config.content_filter("x") == "x"
        assert config.shortcode_expander("x") == "x"
        assert config.block_renderer({"innerHTML": "<p>a</p>"}) == "<p>a</p>"
        assert config.reference_resolver(1) is None
        assert isinstance(config.registry, ComponentRegistry)

    def test_default_render_exceptions(self):
        assert DEFAULT_RENDER_EXCEPTIONS == {"core/columns", "core/column"}
        assert ConverterConfig().render_exceptions_for({}) == DEFAULT_RENDER_EXCEPTIONS

    def test_default_embed_prefixes(self):
        assert ConverterConfig().embed_prefixes == ("core-embed", "core/embed")

    def test_registries_not_shared(self):
        a, b = ConverterConfig(), ConverterConfig()
        a.registry.register("x", ComponentRegistry)
        assert "x" not in b.registry


class TestNormalisation:
    def test_mapping_registry_wrapped(self):
        config = ConverterConfig(registry={"acme/x": lambda: None})
        assert isinstance(config.registry, ComponentRegistry)
        assert "acme/x" in config.registry

    def test_single_prefix_string(self):
        assert ConverterConfig(embed_prefixes="acme/embed").embed_prefixes == ("acme/embed",)

    def test_prefix_list_to_tuple(self):
        assert ConverterConfig(embed_prefixes=["a", "b"]).embed_prefixes == ("a", "b")

    def test_callable_render_exceptions(self):
        config = ConverterConfig(render_exceptions=lambda block: {block["blockName"]})
        assert config.render_exceptions_for({"blockName": "x"}) == {"x"}


class TestValidation:
    def test_empty_prefix_rejected(self):
        with pytest.raises(ValueError, match="embed_prefixes"):
            ConverterConfig(embed_prefixes=("core/embed", ""))

    @pytest.mark.parametrize("name", ["content_filter", "block_renderer", "shortcode_expander", "reference_resolver"])
    def test_required_collaborators_must_be_callable(self, name):
        with pytest.raises(ValueError, match=name):
            ConverterConfig(**{name: "nope"})

    @pytest.mark.parametrize("name", ["block_source", "node_injector", "dynamic_block_hook", "post_convert_hook"])
    def test_optional_hooks_must_be_callable(self, name):
        with pytest.raises(ValueError, match=name):
            ConverterConfig(**{name: 42})

    def test_string_render_exceptions_rejected(self):
        with pytest.raises(ValueError, match="render_exceptions"):
            ConverterConfig(render_exceptions="core/columns")
