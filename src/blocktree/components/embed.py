"""Embed component built directly from an embed block."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from blocktree.components.component import Component

_FIGCAPTION_RE = re.compile(r"<figcaption[^>]*>(.*?)</figcaption>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")

DEFAULT_EMBED_PREFIXES: tuple[str, ...] = ("core-embed", "core/embed")
"""Block name prefixes identifying embed blocks."""


def _provider_from_name(block_name: str, prefixes: Sequence[str]) -> str:
    """Derive a provider slug from names like ``core-embed/youtube``."""
    for prefix in prefixes:
        if block_name.startswith(prefix):
            return block_name[len(prefix):].lstrip("/")
    return ""


class Embed(Component):
    """A third-party embed (video, social post, ...).

    Config keys: ``url``, ``provider``, ``type``, ``caption``,
    ``content`` (the saved markup), followed by any remaining block
    attributes.
    """

    name = "embed"

    def default_config(self) -> dict[str, Any]:
        return {
            "url": "",
            "provider": "",
            "type": "",
            "caption": "",
            "content": "",
        }

    def set_from_block(
        self,
        block: Mapping[str, Any],
        prefixes: Sequence[str] = DEFAULT_EMBED_PREFIXES,
    ) -> Embed:
        """Fill the config from a raw embed block record."""
        attrs = block.get("attrs") or {}
        inner_html = block.get("innerHTML") or ""
        block_name = block.get("blockName") or ""

        caption = ""
        match = _FIGCAPTION_RE.search(inner_html)
        if match:
            caption = _TAG_RE.sub("", match.group(1)).strip()

        self.set_config("url", attrs.get("url", ""))
        self.set_config(
            "provider",
            attrs.get("providerNameSlug") or _provider_from_name(block_name, prefixes),
        )
        self.set_config("type", attrs.get("type", ""))
        self.set_config("caption", caption)
        self.set_config("content", inner_html.strip())
        return self.merge_config(attrs)
