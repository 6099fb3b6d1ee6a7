"""Registry mapping block names to component factories.

The converter consults a :class:`ComponentRegistry` for every structural
block.  A registered factory builds the specialised component for that
block name; unknown names fall back to a generic :class:`Component` named
after the block.

Usage::

    registry = ComponentRegistry()

    @registry.component("acme/hero")
    class Hero(Component):
        name = "hero"

    registry.register("acme/card", lambda: Component().set_name("card"))
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping

from blocktree.components.component import Component
from blocktree.errors import BlockTreeRegistryError

ComponentFactory = Callable[[], Component]


class ComponentRegistry:
    """Mutable mapping of block name to zero-argument component factory."""

    def __init__(self, factories: Mapping[str, ComponentFactory] | None = None) -> None:
        self._factories: dict[str, ComponentFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def names(self) -> list[str]:
        return list(self._factories)

    def register(self, name: str, factory: ComponentFactory) -> None:
        """Map *name* to *factory*, replacing any previous registration.

        Raises
        ------
        BlockTreeRegistryError
            If *name* is empty or *factory* is not callable.
        """
        if not name:
            raise BlockTreeRegistryError(
                message="Block name must be a non-empty string.",
                context={"name": name},
            )
        if not callable(factory):
            raise BlockTreeRegistryError(
                message=f"Factory for '{name}' is not callable.",
                context={"name": name, "factory": repr(factory)},
            )
        self._factories[name] = factory

    def component(self, name: str) -> Callable[[ComponentFactory], ComponentFactory]:
        """Decorator form of :meth:`register`."""
        def decorator(factory: ComponentFactory) -> ComponentFactory:
            self.register(name, factory)
            return factory
        return decorator

    def get(self, name: str | None) -> ComponentFactory | None:
        if not name:
            return None
        return self._factories.get(name)

    def create(self, name: str | None) -> Component:
        """Build the component for *name*.

        Mapped names use their factory; everything else gets a generic
        :class:`Component` whose name is the block name.
        """
        factory = self.get(name)
        if factory is not None:
            return factory()
        return Component().set_name(name or "")
