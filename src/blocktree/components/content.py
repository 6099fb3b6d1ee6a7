"""Root component wrapping a converted content string."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blocktree.components.component import Component

if TYPE_CHECKING:
    from blocktree.converter.block_converter import BlockConverter


class BlockContent(Component):
    """A container whose children are the components of a content string.

    Usage::

        root = BlockContent(converter).set_content(post_content)
        payload = root.to_serializable()
    """

    name = "block-content"

    def __init__(self, converter: BlockConverter | None = None) -> None:
        super().__init__()
        self._converter = converter

    @property
    def converter(self) -> BlockConverter:
        if self._converter is None:
            from blocktree.converter.block_converter import BlockConverter

            self._converter = BlockConverter()
        return self._converter

    def set_content(self, content: str) -> BlockContent:
        """Convert *content* and append the resulting components."""
        self.append_children(self.converter.convert_content(content))
        return self
