"""Convert raw block records into component nodes.

The conversion is a left-to-right fold over the block list.  Each block is
classified by the first matching rule:

1. anonymous block with markup   -> content filter, merged into HTML
2. embed block                   -> :class:`Embed`
3. static block with markup      -> rendered, shortcodes expanded,
                                    control whitespace collapsed, merged
                                    into HTML
4. reusable block (``attrs.ref``) -> referenced content converted and
                                    spliced in place, or nothing when
                                    the reference has no content
5. anything else                 -> registry component (or a generic one)
                                    with the block's attrs as config and
                                    its converted inner blocks as children

Adjacent markup is consolidated, so no converted list ever contains two
consecutive :class:`HTML` nodes.
"""

from __future__ import annotations

import json
import sys
import time
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from blocktree.components.component import Component
from blocktree.components.embed import Embed
from blocktree.components.html import HTML
from blocktree.config import ConverterConfig
from blocktree.converter.accumulator import ComponentAccumulator
from blocktree.errors import BlockTreeReferenceCycleError
from blocktree.models import BlockRecord
from blocktree.observability import fields, get_logger, resolve_metrics
from blocktree.utils.text import collapse_control_whitespace, is_blank

log = get_logger("blocktree.converter")


def filter_empty_blocks(blocks: Iterable[Any]) -> list[Any]:
    """Drop parser noise: blocks without inner blocks whose markup is
    whitespace only, or that have neither a name nor any markup.

    Records are validated on the way; running the filter on its own output
    returns an equal list.
    """
    kept: list[Any] = []
    for raw in blocks:
        record = BlockRecord.from_raw(raw)
        if record.has_inner_blocks:
            kept.append(raw)
        elif not is_blank(record.inner_html) and (record.name or record.inner_html):
            kept.append(raw)
    return kept


class BlockConverter:
    """Fold raw block records into a flat list of root components.

    Parameters
    ----------
    config:
        Collaborators, hooks and classification settings.  Defaults to
        ``ConverterConfig()``.

    Examples
    --------
    >>> converter = BlockConverter()
    >>> nodes = converter.convert_blocks([
    ...     {"blockName": "", "innerHTML": "<p>A</p>"},
    ...     {"blockName": "", "innerHTML": "<p>B</p>"},
    ... ])
    >>> [node.to_serializable() for node in nodes]
    [{'name': 'html', 'config': {'content': '<p>A</p><p>B</p>'}, 'children': []}]
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._config = config if config is not None else ConverterConfig()
        self._metrics = resolve_metrics(self._config.metrics)

    @property
    def config(self) -> ConverterConfig:
        return self._config

    # -- public API --------------------------------------------------------

    def convert_blocks(self, blocks: Iterable[Mapping[str, Any]]) -> list[Component]:
        """Pre-filter *blocks* and convert them to components.

        Raises
        ------
        BlockTreeMalformedBlockError
            If a record lacks the fields needed to classify it.
        BlockTreeReferenceCycleError
            If cycle detection is enabled and a reusable block refers to
            itself, directly or indirectly.

        Exceptions raised by collaborators propagate unchanged.
        """
        t0 = time.monotonic()
        nodes = self._convert_top_level(blocks, ())
        self._metrics.timing(
            "blocktree.conversion_duration_ms",
            (time.monotonic() - t0) * 1000,
        )
        return nodes

    def convert_content(self, content: str) -> list[Component]:
        """Parse *content* with the block source and convert the result.

        Without a block source the content is returned as a single
        :class:`HTML` node holding ``content_filter(content)``.
        """
        t0 = time.monotonic()
        nodes = self._convert_content(content, ())
        self._metrics.timing(
            "blocktree.conversion_duration_ms",
            (time.monotonic() - t0) * 1000,
        )

        if self._config.debug_dump_tree:
            print(
                "[blocktree] Component tree:",
                json.dumps(
                    [node.to_serializable() for node in nodes],
                    indent=2,
                    ensure_ascii=False,
                    default=str,
                ),
                file=sys.stderr,
            )
        return nodes

    # -- pipeline ----------------------------------------------------------

    def _convert_content(self, content: str, refs: tuple[str, ...]) -> list[Component]:
        config = self._config
        if config.block_source is None:
            return [HTML().set_config("content", config.content_filter(content))]

        blocks = config.block_source(content)
        nodes = self._convert_top_level(blocks, refs)

        if config.post_convert_hook is not None:
            nodes = config.post_convert_hook(nodes) or []
        return nodes

    def _convert_top_level(
        self,
        blocks: Iterable[Mapping[str, Any]],
        refs: tuple[str, ...],
    ) -> list[Component]:
        filtered = filter_empty_blocks(blocks)

        if self._config.debug_dump_blocks:
            print(
                "[blocktree] Filtered blocks:",
                json.dumps(filtered, indent=2, ensure_ascii=False, default=str),
                file=sys.stderr,
            )

        nodes = self._fold(filtered, refs)
        log.debug(
            "blocks converted",
            extra=fields(
                op="convert_blocks",
                blocks=len(filtered),
                nodes=len(nodes),
                depth=len(refs),
            ),
        )
        return nodes

    def _fold(self, blocks: Sequence[Any], refs: tuple[str, ...]) -> list[Component]:
        acc = ComponentAccumulator()
        for raw in blocks:
            self._convert_block(acc, raw, refs)
        if acc.merges:
            self._metrics.increment("blocktree.html_merges_total", acc.merges)
        return acc.nodes

    # -- classification ----------------------------------------------------

    def _convert_block(
        self,
        acc: ComponentAccumulator,
        raw: Mapping[str, Any],
        refs: tuple[str, ...],
    ) -> None:
        config = self._config
        block = BlockRecord.from_raw(raw)

        if config.node_injector is not None:
            acc.nodes = list(config.node_injector(acc.nodes))

        # Anonymous markup between blocks.
        if not block.name and block.inner_html:
            acc.append_html(config.content_filter(block.inner_html))
            self._count("html")
            return

        if self._is_embed(block.name):
            acc.append(Embed().set_from_block(raw, config.embed_prefixes))
            self._count("embed")
            return

        # Saved markup means a static block, unless it rebuilds its markup
        # from its children.
        if block.inner_html.strip() and block.name not in config.render_exceptions_for(raw):
            content = config.block_renderer(raw)
            content = config.shortcode_expander(content)
            acc.append_html(collapse_control_whitespace(content))
            self._count("static")
            return

        if block.ref is not None:
            self._expand_reference(acc, block, refs)
            return

        component = self._build_component(block, acc, refs)
        if component is not None:
            acc.append(component)
            self._count("component")

    def _is_embed(self, name: str) -> bool:
        return bool(name) and name.startswith(self._config.embed_prefixes)

    def _expand_reference(
        self,
        acc: ComponentAccumulator,
        block: BlockRecord,
        refs: tuple[str, ...],
    ) -> None:
        """Splice the converted content behind ``attrs.ref`` into *acc*.

        A reference without content is skipped: nothing is appended.
        """
        key = str(block.ref)
        if self._config.detect_reference_cycles and key in refs:
            raise BlockTreeReferenceCycleError(
                message=f"Reusable block {key} refers back to itself.",
                context={"ref": block.ref, "path": [*refs, key]},
            )

        content = self._config.reference_resolver(block.ref)
        if not content:
            log.debug(
                "reference skipped",
                extra=fields(op="convert_blocks", ref=key, reason="not_found"),
            )
            self._metrics.increment("blocktree.references_missing_total")
            return

        nodes = self._convert_content(content, (*refs, key))
        acc.extend(nodes)
        log.debug(
            "reference expanded",
            extra=fields(op="convert_blocks", ref=key, nodes=len(nodes)),
        )
        self._metrics.increment("blocktree.references_expanded_total")

    def _build_component(
        self,
        block: BlockRecord,
        acc: ComponentAccumulator,
        refs: tuple[str, ...],
    ) -> Component | None:
        children = self._fold(block.inner_blocks, refs)

        component = (
            self._config.registry.create(block.name)
            .merge_config(block.attrs)
            .append_children(children)
        )

        if self._config.dynamic_block_hook is not None:
            component = self._config.dynamic_block_hook(component, block.raw, acc.nodes)
        return component

    def _count(self, kind: str) -> None:
        self._metrics.increment(
            "blocktree.blocks_converted_total",
            tags={"kind": kind},
        )


def convert_blocks(
    blocks: Iterable[Mapping[str, Any]],
    config: ConverterConfig | None = None,
) -> list[Component]:
    """Convert *blocks* with a one-off :class:`BlockConverter`."""
    return BlockConverter(config).convert_blocks(blocks)


def convert_content(content: str, config: ConverterConfig | None = None) -> list[Component]:
    """Convert a content string with a one-off :class:`BlockConverter`."""
    return BlockConverter(config).convert_content(content)
