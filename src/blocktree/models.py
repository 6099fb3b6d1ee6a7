"""Validated view of a raw block record.

Block records arrive from an external parser as plain mappings::

    {
        "blockName": "core/group",      # str, or None for raw markup
        "attrs": {"align": "wide"},     # optional mapping
        "innerBlocks": [...],           # optional sequence of records
        "innerHTML": "<div>...</div>",  # str, always present
    }

:meth:`BlockRecord.from_raw` checks the fields the converter needs in
order to classify a block and raises
:class:`~blocktree.errors.BlockTreeMalformedBlockError` when they are
unusable.  The raw mapping is kept untouched on :attr:`BlockRecord.raw` so
collaborators receive exactly what the parser produced.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from blocktree.errors import BlockTreeMalformedBlockError


def _type_name(value: Any) -> str:
    return type(value).__name__


def _malformed(field_name: str, expected: str, value: Any, block_name: Any = None) -> BlockTreeMalformedBlockError:
    return BlockTreeMalformedBlockError(
        message=f"Block field '{field_name}' must be {expected}, got {_type_name(value)}.",
        context={
            "field": field_name,
            "expected": expected,
            "actual": _type_name(value),
            "block_name": block_name,
        },
    )


@dataclass(frozen=True)
class BlockRecord:
    """Read-only, validated view of one raw block record.

    Attributes
    ----------
    name:
        The block name, ``""`` for anonymous raw-markup blocks.
    inner_html:
        The block's saved markup.
    attrs:
        Block attributes (empty when absent).
    inner_blocks:
        Nested raw block records, unvalidated until they are converted.
    raw:
        The original mapping, passed as-is to renderers and embeds.
    """

    name: str
    inner_html: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    inner_blocks: tuple[Any, ...] = ()
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_raw(cls, raw: Any) -> BlockRecord:
        """Validate *raw* and wrap it.

        Raises
        ------
        BlockTreeMalformedBlockError
            If *raw* is not a mapping, ``innerHTML`` is missing or not a
            string, ``blockName`` is neither a string nor ``None``,
            ``attrs`` is not a mapping, or ``innerBlocks`` is not a
            sequence.
        """
        if not isinstance(raw, Mapping):
            raise _malformed("block", "a mapping", raw)

        name = raw.get("blockName")
        if name is not None and not isinstance(name, str):
            raise _malformed("blockName", "a string or None", name)

        if "innerHTML" not in raw:
            raise BlockTreeMalformedBlockError(
                message="Block record has no 'innerHTML' field.",
                context={"field": "innerHTML", "block_name": name},
            )
        inner_html = raw["innerHTML"]
        if not isinstance(inner_html, str):
            raise _malformed("innerHTML", "a string", inner_html, name)

        attrs = raw.get("attrs")
        if attrs is None:
            attrs = {}
        elif not isinstance(attrs, Mapping):
            raise _malformed("attrs", "a mapping", attrs, name)

        inner_blocks = raw.get("innerBlocks")
        if inner_blocks is None:
            inner_blocks = ()
        elif isinstance(inner_blocks, (str, bytes)) or not isinstance(inner_blocks, Sequence):
            raise _malformed("innerBlocks", "a sequence", inner_blocks, name)

        return cls(
            name=name or "",
            inner_html=inner_html,
            attrs=attrs,
            inner_blocks=tuple(inner_blocks),
            raw=raw,
        )

    @property
    def ref(self) -> Any:
        """The reusable-content reference id, or ``None``."""
        return self.attrs.get("ref") or None

    @property
    def has_inner_blocks(self) -> bool:
        return bool(self.inner_blocks)
