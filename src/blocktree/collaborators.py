"""Collaborator protocols and their default implementations.

The converter does not parse, render, filter or look anything up by
itself.  Each of those steps is a plain callable supplied on
:class:`~blocktree.config.ConverterConfig`; the protocols below document
the expected signatures.  Defaults are deliberately inert so a bare
config converts saved markup as-is.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from blocktree.components.component import Component


@runtime_checkable
class BlockSource(Protocol):
    """Parse a content string into an ordered list of raw block records."""

    def __call__(self, content: str) -> Sequence[Mapping[str, Any]]: ...


@runtime_checkable
class ContentFilter(Protocol):
    """Text transform applied to raw markup fragments."""

    def __call__(self, markup: str) -> str: ...


@runtime_checkable
class BlockRenderer(Protocol):
    """Render one raw block record to markup."""

    def __call__(self, block: Mapping[str, Any]) -> str: ...


@runtime_checkable
class ShortcodeExpander(Protocol):
    """Second-pass text transform applied after rendering."""

    def __call__(self, markup: str) -> str: ...


@runtime_checkable
class ReferenceResolver(Protocol):
    """Return the content a reference id points at, or ``None``."""

    def __call__(self, ref: Any) -> str | None: ...


@runtime_checkable
class NodeInjector(Protocol):
    """Inspect or rewrite the in-progress node list before each block."""

    def __call__(self, nodes: list[Component]) -> list[Component]: ...


@runtime_checkable
class DynamicBlockHook(Protocol):
    """Replace or decorate the node built for a structural block."""

    def __call__(
        self,
        node: Component,
        block: Mapping[str, Any],
        nodes: list[Component],
    ) -> Component: ...


@runtime_checkable
class PostConvertHook(Protocol):
    """Rewrite the node list produced for a whole content string."""

    def __call__(self, nodes: list[Component]) -> list[Component] | None: ...


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

def identity(markup: str) -> str:
    return markup


def render_saved_markup(block: Mapping[str, Any]) -> str:
    """Render a block as the markup it was saved with."""
    return block.get("innerHTML") or ""


def resolve_nothing(ref: Any) -> None:
    return None
