"""Tests for ComponentAccumulator's append-or-merge behaviour."""

from __future__ import annotations

from blocktree.components.component import Component
from blocktree.components.html import HTML
from blocktree.converter.accumulator import ComponentAccumulator


def _html(content):
    return HTML().set_config("content", content)


class TestAppendHtml:
    def test_creates_node_when_empty(self):
        acc = ComponentAccumulator()
        node = acc.append_html("<p>A</p>")
        assert acc.nodes == [node]
        assert node.content == "<p>A</p>"
        assert acc.merges == 0

    def test_merges_into_trailing_html(self):
        acc = ComponentAccumulator()
        first = acc.append_html("<p>A</p>")
        second = acc.append_html("<p>B</p>")
        assert first is second
        assert len(acc) == 1
        assert first.content == "<p>A</p><p>B</p>"
        assert acc.merges == 1

    def test_new_node_after_component(self):
        acc = ComponentAccumulator()
        acc.append_html("<p>A</p>")
        acc.append(Component().set_name("widget"))
        acc.append_html("<p>B</p>")
        assert [node.name for node in acc] == ["html", "widget", "html"]

    def test_seeded_nodes(self):
        acc = ComponentAccumulator([_html("x")])
        acc.append_html("y")
        assert acc.last.content == "xy"

    def test_last_empty(self):
        assert ComponentAccumulator().last is None


class TestExtend:
    def test_merges_leading_html(self):
        acc = ComponentAccumulator([_html("a")])
        spliced = _html("b")
        acc.extend([spliced, Component().set_name("w"), _html("c")])
        assert [node.name for node in acc] == ["html", "w", "html"]
        assert acc.nodes[0].content == "ab"
        assert spliced.content == "b"

    def test_plain_splice(self):
        acc = ComponentAccumulator([Component().set_name("first")])
        nodes = [Component().set_name(n) for n in ("x", "y", "z")]
        acc.extend(nodes)
        assert acc.nodes[1:] == nodes

    def test_extend_empty(self):
        acc = ComponentAccumulator()
        acc.extend([])
        assert len(acc) == 0
