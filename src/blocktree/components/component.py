"""Generic component node and its serialization contract.

A :class:`Component` is a named unit with a ``config`` mapping and an
ordered list of child components.  Nodes are built and mutated while
blocks are converted, then projected with :meth:`Component.to_serializable`
into a JSON-ready ``{"name", "config", "children"}`` tree whose config keys
are camelCased.

All mutators return ``self`` so calls can be chained::

    node = (
        Component()
        .set_name("core/group")
        .merge_config({"align": "wide"})
        .append_children(children)
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from blocktree.utils.casing import camel_case


def _compact(children: Iterable[Any]) -> list[Any]:
    """Drop ``None`` and other empty placeholders from *children*."""
    return [child for child in children if child]


class Component:
    """A named node with configuration and ordered children.

    Attributes
    ----------
    name:
        Component identifier.  An empty string denotes an anonymous or
        dynamic node.
    config:
        Mapping of snake_case keys to arbitrary values.  Never ``None``.
    children:
        Ordered child components.  Never contains empty entries.
    whitelist:
        When non-empty, only config keys listed here survive
        serialization.  A key matches in its original or camelCased form.
    preserve_inner_keys:
        Config keys whose *nested* mapping keys are left untouched by
        serialization.  The key itself is still camelCased.
    """

    name = ""
    whitelist: frozenset[str] = frozenset()
    preserve_inner_keys: frozenset[str] = frozenset()

    def __init__(self) -> None:
        self.name = type(self).name
        self.whitelist = frozenset(type(self).whitelist)
        self.preserve_inner_keys = frozenset(type(self).preserve_inner_keys)
        self.config: dict[str, Any] = dict(self.default_config())
        self.children: list[Component] = _compact(self.default_children())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, config={self.config!r}, "
            f"children={len(self.children)})"
        )

    # -- name / config -----------------------------------------------------

    def set_name(self, name: str) -> Component:
        self.name = name
        return self

    def default_config(self) -> dict[str, Any]:
        """Config a freshly constructed node starts with."""
        return {}

    def set_config(self, key: str | Mapping[str, Any], value: Any = None) -> Component:
        """Set one config value, or replace the whole config.

        Called with a single mapping argument the mapping becomes the new
        config; otherwise ``config[key] = value``.
        """
        if isinstance(key, Mapping) and value is None:
            self.config = dict(key)
        else:
            self.config[key] = value
        return self

    def get_config(self, key: str, default: Any = None) -> Any:
        """Return ``config[key]``, or *default* when the key is absent."""
        return self.config.get(key, default)

    def merge_config(self, new_config: Mapping[str, Any]) -> Component:
        """Merge *new_config* into the config without overriding.

        Keys already present keep their value; only keys the node does not
        have yet are added.
        """
        for key, value in new_config.items():
            if key not in self.config:
                self.config[key] = value
        return self

    # -- children ----------------------------------------------------------

    def default_children(self) -> list[Component]:
        """Children a freshly constructed node starts with."""
        return []

    def set_children(self, children: Iterable[Component | None], append: bool = False) -> Component:
        if append:
            self.children = self.children + _compact(children)
        else:
            self.children = _compact(children)
        return self

    def append_children(self, children: Iterable[Component | None]) -> Component:
        self.children.extend(_compact(children))
        return self

    def prepend_children(self, children: Iterable[Component | None]) -> Component:
        self.children = _compact(children) + self.children
        return self

    def append_child(self, child: Component | list[Component] | None) -> Component:
        """Append one child.  A one-element list is unwrapped first."""
        child = self._unwrap(child)
        if child:
            self.children.append(child)
        return self

    def prepend_child(self, child: Component | list[Component] | None) -> Component:
        """Prepend one child.  A one-element list is unwrapped first."""
        child = self._unwrap(child)
        if child:
            self.children.insert(0, child)
        return self

    def map_children(self, fn: Callable[[Component], Component]) -> Component:
        """Replace each child with ``fn(child)``, keeping order and count."""
        self.children = [fn(child) for child in self.children]
        return self

    @staticmethod
    def _unwrap(child: Any) -> Any:
        if isinstance(child, (list, tuple)):
            return child[0] if child else None
        return child

    # -- serialization -----------------------------------------------------

    def to_serializable(self) -> dict[str, Any]:
        """Project this node into a JSON-ready dict.

        Returns ``{"name": str, "config": dict, "children": list}`` where
        config keys are camelCased (values are not copied or altered) and
        each non-empty child is serialized by the same contract.  The node
        itself is not modified.
        """
        return {
            "name": self.name,
            "config": self.camel_case_keys(self.config),
            "children": [
                child.to_serializable() if isinstance(child, Component) else child
                for child in self.children
                if child
            ],
        }

    def camel_case_keys(
        self,
        mapping: Mapping[Any, Any],
        holder: dict[Any, Any] | None = None,
    ) -> dict[Any, Any]:
        """Return a copy of *mapping* with camelCased keys.

        Mapping values are processed recursively unless their key is in
        :attr:`preserve_inner_keys`.  Sequences are never walked.  When two
        source keys collapse onto the same camelCased key and both hold
        mappings, the second is merged into the first.
        """
        result: dict[Any, Any] = holder if holder is not None else {}

        for key, value in mapping.items():
            new_key = camel_case(key) if isinstance(key, str) else key

            if self.whitelist and key not in self.whitelist and new_key not in self.whitelist:
                continue

            if not isinstance(value, Mapping) or key in self.preserve_inner_keys:
                result[new_key] = value
            else:
                existing = result.get(new_key)
                result[new_key] = self.camel_case_keys(
                    value,
                    dict(existing) if isinstance(existing, dict) else None,
                )

        return result
