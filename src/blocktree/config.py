"""Converter configuration for blocktree.

:class:`ConverterConfig` is a dataclass capturing every collaborator and
tuneable knob the block converter uses.  Collaborators are plain
callables (see :mod:`blocktree.collaborators`) so callers compose
behaviour by passing functions rather than registering global hooks.

Two module-level constants hold the defaults for block classification:

* :data:`DEFAULT_RENDER_EXCEPTIONS` -- blocks whose markup is rebuilt from
  their children instead of being rendered directly.
* :data:`DEFAULT_EMBED_PREFIXES` -- block name prefixes treated as embeds.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from blocktree.collaborators import (
    BlockRenderer,
    BlockSource,
    ContentFilter,
    DynamicBlockHook,
    NodeInjector,
    PostConvertHook,
    ReferenceResolver,
    ShortcodeExpander,
    identity,
    render_saved_markup,
    resolve_nothing,
)
from blocktree.components.embed import DEFAULT_EMBED_PREFIXES
from blocktree.components.registry import ComponentFactory, ComponentRegistry

# ---------------------------------------------------------------------------
# Classification defaults
# ---------------------------------------------------------------------------

DEFAULT_RENDER_EXCEPTIONS: frozenset[str] = frozenset({
    "core/columns",
    "core/column",
})
"""Blocks that carry ``innerHTML`` but are still converted structurally."""

RenderExceptions = Union[
    Collection[str],
    Callable[[Mapping[str, Any]], Collection[str]],
]


# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass
class ConverterConfig:
    """Complete configuration for a :class:`BlockConverter`.

    Every parameter has a default, so ``ConverterConfig()`` converts saved
    block markup without any external services.

    Parameters
    ----------
    block_source:
        Parses a content string into raw block records.  When ``None``,
        :meth:`BlockConverter.convert_content` returns the whole content as
        one ``HTML`` node.
    content_filter:
        Text transform applied to anonymous raw-markup blocks, and to the
        whole content when there is no block source.
    block_renderer:
        Renders a static block to markup.  Defaults to the block's saved
        ``innerHTML``.
    shortcode_expander:
        Second-pass transform applied to rendered markup.
    reference_resolver:
        Looks up the content behind a reusable block's ``attrs.ref``.
        ``None`` or empty content means the reference is skipped.
    registry:
        Block name to component factory mapping.  A plain mapping is
        wrapped in a :class:`ComponentRegistry`.
    node_injector:
        Called with the in-progress node list before each block is
        classified; its return value replaces the list.
    dynamic_block_hook:
        Called with ``(node, raw_block, nodes)`` for every structural
        block; its return value is appended instead of ``node``.
    post_convert_hook:
        Called with the node list of each converted content string; its
        return value (``None`` meaning empty) is the result.
    render_exceptions:
        Block names that are never rendered statically.  Either a
        collection, or a callable receiving the raw block and returning
        one.
    embed_prefixes:
        Block name prefixes that identify embed blocks.
    detect_reference_cycles:
        Raise :class:`BlockTreeReferenceCycleError` when a reusable block
        refers back to content already being expanded.  Off by default:
        a reference cycle then recurses until the interpreter gives up.
    metrics:
        Optional :class:`~blocktree.observability.MetricsHook` backend.
    debug_dump_blocks:
        Write the filtered block list of every conversion to *stderr*.
    debug_dump_tree:
        Write the serialized component tree of every
        :meth:`convert_content` call to *stderr*.
    """

    # ── Collaborators ──────────────────────────────────────────────────
    block_source: BlockSource | None = None

    content_filter: ContentFilter = identity

    block_renderer: BlockRenderer = render_saved_markup

    shortcode_expander: ShortcodeExpander = identity

    reference_resolver: ReferenceResolver = resolve_nothing

    registry: ComponentRegistry | Mapping[str, ComponentFactory] = field(
        default_factory=ComponentRegistry,
    )

    # ── Hooks ──────────────────────────────────────────────────────────
    node_injector: NodeInjector | None = None

    dynamic_block_hook: DynamicBlockHook | None = None

    post_convert_hook: PostConvertHook | None = None

    # ── Classification ─────────────────────────────────────────────────
    render_exceptions: RenderExceptions = DEFAULT_RENDER_EXCEPTIONS

    embed_prefixes: tuple[str, ...] = DEFAULT_EMBED_PREFIXES

    # ── Safety ─────────────────────────────────────────────────────────
    detect_reference_cycles: bool = False

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ──────────────────────────────────────────────────────────
    debug_dump_blocks: bool = False

    debug_dump_tree: bool = False

    def __post_init__(self) -> None:
        """Normalise and validate configuration after initialization."""
        if not isinstance(self.registry, ComponentRegistry):
            self.registry = ComponentRegistry(self.registry)

        if isinstance(self.embed_prefixes, str):
            self.embed_prefixes = (self.embed_prefixes,)
        else:
            self.embed_prefixes = tuple(self.embed_prefixes)
        if any(not prefix for prefix in self.embed_prefixes):
            raise ValueError("embed_prefixes must not contain empty strings")

        for name in (
            "block_source",
            "node_injector",
            "dynamic_block_hook",
            "post_convert_hook",
        ):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ValueError(f"{name} must be callable or None, got {type(value).__name__}")

        for name in (
            "content_filter",
            "block_renderer",
            "shortcode_expander",
            "reference_resolver",
        ):
            if not callable(getattr(self, name)):
                raise ValueError(f"{name} must be callable, got {type(getattr(self, name)).__name__}")

        if isinstance(self.render_exceptions, str):
            raise ValueError("render_exceptions must be a collection of block names, not a string")

    def render_exceptions_for(self, block: Mapping[str, Any]) -> Collection[str]:
        """Resolve the render exception names for one raw block."""
        if callable(self.render_exceptions):
            return self.render_exceptions(block)
        return self.render_exceptions
