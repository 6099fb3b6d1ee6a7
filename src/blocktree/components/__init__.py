"""Component tree model.

- :class:`Component` -- generic named node with config and children.
- :class:`HTML` -- raw markup node; adjacent fragments merge into one.
- :class:`Embed` -- third-party embed built from an embed block.
- :class:`BlockContent` -- root node holding a converted content string.
- :class:`ComponentRegistry` -- block name to component factory mapping.
- :func:`to_json` / :func:`to_serializable` -- tree output helpers.
"""

from blocktree.components.component import Component
from blocktree.components.content import BlockContent
from blocktree.components.embed import DEFAULT_EMBED_PREFIXES, Embed
from blocktree.components.html import HTML
from blocktree.components.registry import ComponentFactory, ComponentRegistry
from blocktree.components.serialize import to_json, to_serializable

__all__ = [
    "DEFAULT_EMBED_PREFIXES",
    "HTML",
    "BlockContent",
    "Component",
    "ComponentFactory",
    "ComponentRegistry",
    "Embed",
    "to_json",
    "to_serializable",
]
