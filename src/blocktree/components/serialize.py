"""JSON output for component trees."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from blocktree.components.component import Component


def to_serializable(nodes: Component | Iterable[Component]) -> Any:
    """Serialize one node, or a sequence of nodes, to plain Python data."""
    if isinstance(nodes, Component):
        return nodes.to_serializable()
    return [node.to_serializable() for node in nodes if node]


def to_json(nodes: Component | Iterable[Component], **kwargs: Any) -> str:
    """Dump one node, or a sequence of nodes, as a JSON string.

    Extra keyword arguments are passed to :func:`json.dumps`.
    """
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(to_serializable(nodes), **kwargs)
