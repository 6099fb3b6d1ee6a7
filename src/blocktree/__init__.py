"""blocktree -- convert parsed content blocks into a serializable component tree.

Public re-exports
-----------------

* **Converter:** :class:`BlockConverter`, :func:`convert_blocks`,
  :func:`convert_content`
* **Components:** :class:`Component`, :class:`HTML`, :class:`Embed`,
  :class:`BlockContent`, :class:`ComponentRegistry`
* **Configuration:** :class:`ConverterConfig`
* **Errors:** Every :class:`BlockTreeError` subclass and :class:`ErrorCode`

Usage::

    from blocktree import BlockConverter, ConverterConfig, to_json

    converter = BlockConverter(ConverterConfig(block_source=parse_blocks))
    nodes = converter.convert_content(post_content)
    payload = to_json(nodes)
"""

from __future__ import annotations

# ── Components ──────────────────────────────────────────────────────────
from blocktree.components import (
    DEFAULT_EMBED_PREFIXES,
    HTML,
    BlockContent,
    Component,
    ComponentRegistry,
    Embed,
    to_json,
    to_serializable,
)

# ── Configuration ───────────────────────────────────────────────────────
from blocktree.config import DEFAULT_RENDER_EXCEPTIONS, ConverterConfig

# ── Converter ───────────────────────────────────────────────────────────
from blocktree.converter import (
    BlockConverter,
    ComponentAccumulator,
    convert_blocks,
    convert_content,
    filter_empty_blocks,
)

# ── Errors ──────────────────────────────────────────────────────────────
from blocktree.errors import (
    BlockTreeConversionError,
    BlockTreeError,
    BlockTreeMalformedBlockError,
    BlockTreeNetworkError,
    BlockTreeReferenceCycleError,
    BlockTreeRegistryError,
    BlockTreeRemoteError,
    BlockTreeRetryExhaustedError,
    ErrorCode,
)

# ── Models ──────────────────────────────────────────────────────────────
from blocktree.models import BlockRecord

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Converter
    "BlockConverter",
    "ComponentAccumulator",
    "convert_blocks",
    "convert_content",
    "filter_empty_blocks",
    # Components
    "Component",
    "HTML",
    "Embed",
    "BlockContent",
    "ComponentRegistry",
    "to_json",
    "to_serializable",
    # Configuration
    "ConverterConfig",
    "DEFAULT_RENDER_EXCEPTIONS",
    "DEFAULT_EMBED_PREFIXES",
    # Models
    "BlockRecord",
    # Errors
    "BlockTreeError",
    "ErrorCode",
    "BlockTreeConversionError",
    "BlockTreeMalformedBlockError",
    "BlockTreeReferenceCycleError",
    "BlockTreeRegistryError",
    "BlockTreeRemoteError",
    "BlockTreeNetworkError",
    "BlockTreeRetryExhaustedError",
]
