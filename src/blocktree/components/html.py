"""Raw markup component."""

from __future__ import annotations

from typing import Any

from blocktree.components.component import Component


class HTML(Component):
    """A node carrying a fragment of already-rendered markup.

    The markup lives under the ``content`` config key.  Adjacent fragments
    produced during conversion are merged into a single ``HTML`` node with
    :meth:`append_content`.
    """

    name = "html"

    def default_config(self) -> dict[str, Any]:
        return {"content": ""}

    @property
    def content(self) -> str:
        return self.get_config("content") or ""

    def append_content(self, markup: str) -> HTML:
        """Concatenate *markup* onto the existing content in place."""
        return self.set_config("content", self.content + markup)
