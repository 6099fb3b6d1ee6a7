"""Block to component conversion.

Public API:

- :class:`BlockConverter` -- fold raw block records into components.
- :class:`ComponentAccumulator` -- per-level node list with HTML merging.
- :func:`convert_blocks` / :func:`convert_content` -- one-off helpers.
- :func:`filter_empty_blocks` -- the whitespace-noise pre-filter.
"""

from blocktree.converter.accumulator import ComponentAccumulator
from blocktree.converter.block_converter import (
    BlockConverter,
    convert_blocks,
    convert_content,
    filter_empty_blocks,
)

__all__ = [
    "BlockConverter",
    "ComponentAccumulator",
    "convert_blocks",
    "convert_content",
    "filter_empty_blocks",
]
