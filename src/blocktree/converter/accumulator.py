"""Node accumulator threaded through the block fold."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from blocktree.components.component import Component
from blocktree.components.html import HTML


class ComponentAccumulator:
    """Growing list of converted nodes for one level of the fold.

    Each recursive conversion owns its own accumulator.  Raw markup is
    added through :meth:`append_html`, which keeps the list free of two
    consecutive :class:`HTML` nodes.
    """

    __slots__ = ("merges", "nodes")

    def __init__(self, nodes: Iterable[Component] | None = None) -> None:
        self.nodes: list[Component] = list(nodes or [])
        self.merges = 0

    def __iter__(self) -> Iterator[Component]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def last(self) -> Component | None:
        return self.nodes[-1] if self.nodes else None

    def append(self, node: Component) -> None:
        self.nodes.append(node)

    def append_html(self, markup: str) -> HTML:
        """Merge *markup* into a trailing HTML node, or start a new one.

        Returns the node now holding *markup*.
        """
        last = self.last
        if isinstance(last, HTML):
            last.append_content(markup)
            self.merges += 1
            return last
        node = HTML().set_config("content", markup)
        self.nodes.append(node)
        return node

    def extend(self, nodes: Iterable[Component]) -> None:
        """Splice *nodes* in order.

        A leading HTML node is merged into a trailing one so the list
        never holds two consecutive HTML nodes.
        """
        for index, node in enumerate(nodes):
            if index == 0 and isinstance(node, HTML) and isinstance(self.last, HTML):
                self.append_html(node.content)
            else:
                self.nodes.append(node)
