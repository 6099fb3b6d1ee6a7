"""Tests for the HTML, Embed and BlockContent components and JSON output."""

from __future__ import annotations

import json

from blocktree.components import BlockContent, Component, Embed, HTML, to_json, to_serializable
from blocktree.config import ConverterConfig
from blocktree.converter.block_converter import BlockConverter


class TestHTML:
    def test_defaults(self):
        node = HTML()
        assert node.name == "html"
        assert node.content == ""

    def test_append_content_in_place(self):
        node = HTML().set_config("content", "<p>A</p>")
        assert node.append_content("<p>B</p>") is node
        assert node.get_config("content") == "<p>A</p><p>B</p>"

    def test_serializes(self):
        node = HTML().set_config("content", "<p>A</p>")
        assert node.to_serializable() == {
            "name": "html",
            "config": {"content": "<p>A</p>"},
            "children": [],
        }


class TestEmbed:
    def _block(self, name="core-embed/youtube", **attrs):
        return {
            "blockName": name,
            "attrs": {"url": "https://youtu.be/abc", "type": "video", **attrs},
            "innerHTML": (
                '\n<figure class="wp-block-embed"><div>https://youtu.be/abc</div>'
                "<figcaption>A <em>great</em> video</figcaption></figure>\n"
            ),
            "innerBlocks": [],
        }

    def test_fields_from_block(self):
        embed = Embed().set_from_block(self._block())
        assert embed.name == "embed"
        assert embed.get_config("url") == "https://youtu.be/abc"
        assert embed.get_config("type") == "video"
        assert embed.get_config("provider") == "youtube"
        assert embed.get_config("caption") == "A great video"
        assert embed.get_config("content").startswith("<figure")

    def test_provider_slug_attribute_wins(self):
        embed = Embed().set_from_block(self._block(name="core/embed", providerNameSlug="vimeo"))
        assert embed.get_config("provider") == "vimeo"

    def test_provider_from_core_embed_name_without_suffix(self):
        embed = Embed().set_from_block(self._block(name="core/embed"))
        assert embed.get_config("provider") == ""

    def test_remaining_attrs_merged(self):
        embed = Embed().set_from_block(self._block(responsive=True, class_name="wide"))
        assert embed.get_config("responsive") is True
        assert embed.to_serializable()["config"]["className"] == "wide"

    def test_missing_caption(self):
        block = self._block()
        block["innerHTML"] = "<figure></figure>"
        assert Embed().set_from_block(block).get_config("caption") == ""

    def test_block_not_mutated(self):
        block = self._block()
        snapshot = json.dumps(block, sort_keys=True)
        Embed().set_from_block(block)
        assert json.dumps(block, sort_keys=True) == snapshot


class TestBlockContent:
    def test_without_block_source_wraps_content(self):
        root = BlockContent(BlockConverter(ConverterConfig(content_filter=str.upper)))
        root.set_content("<p>hi</p>")
        assert root.name == "block-content"
        assert len(root.children) == 1
        assert root.children[0].content == "<P>HI</P>"

    def test_with_block_source(self):
        def source(content):
            return [
                {"blockName": None, "innerHTML": content},
                {"blockName": "acme/widget", "attrs": {"size": 2}, "innerHTML": ""},
            ]

        root = BlockContent(BlockConverter(ConverterConfig(block_source=source)))
        root.set_content("<p>x</p>")
        assert [child.name for child in root.children] == ["html", "acme/widget"]

    def test_default_converter_created_lazily(self):
        root = BlockContent()
        assert isinstance(root.converter, BlockConverter)
        root.set_content("<p>x</p>")
        assert root.to_serializable()["children"][0]["config"] == {"content": "<p>x</p>"}


class TestJsonOutput:
    def test_single_node(self):
        node = Component().set_name("x").set_config("post_id", 1)
        assert json.loads(to_json(node)) == {
            "name": "x",
            "config": {"postId": 1},
            "children": [],
        }

    def test_node_list_skips_empty(self):
        nodes = [HTML().set_config("content", "é"), None]
        assert to_serializable(nodes) == [
            {"name": "html", "config": {"content": "é"}, "children": []},
        ]

    def test_kwargs_forwarded(self):
        out = to_json([Component()], indent=2)
        assert "\n" in out

    def test_non_ascii_kept(self):
        assert "é" in to_json(HTML().set_config("content", "é"))
