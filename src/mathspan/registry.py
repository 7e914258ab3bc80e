"""Custom-element registry query for default renderer selection.

The default renderer wraps math in a custom element when the page that will
display the HTML has one registered (``<math-up>`` or ``<la-tex>``). Python
has no browser registry to probe, so the "environment" is a context-scoped
current registry held in a ContextVar.

Thread Safety:
    ContextVars are thread-local by design. Each thread (and asyncio task)
    sees its own current registry. Registries themselves are immutable.

Usage:
    >>> from mathspan.registry import StaticComponentRegistry, component_registry_context
    >>> with component_registry_context(StaticComponentRegistry({"math-up"})):
    ...     md = create_markdown()  # resolves to <math-up>
    >>> md.render("$x$")
    '<p><math-up>x</math-up></p>\\n'

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol, runtime_checkable


@runtime_checkable
class ComponentRegistry(Protocol):
    """Lookup-by-name capability for registered custom elements."""

    def has_component(self, name: str) -> bool:
        """Return True if a component is registered under ``name``."""
        ...


class EmptyComponentRegistry:
    """Registry with nothing registered.

    Stands in for environments without a custom-element registry
    (server-side rendering, CLIs, tests).
    """

    __slots__ = ()

    def has_component(self, name: str) -> bool:
        return False

    def __repr__(self) -> str:
        return "EmptyComponentRegistry()"


class StaticComponentRegistry:
    """Immutable set of component names known to be registered.

    Useful when the page template is known to load a math web component.

    Example:
        >>> registry = StaticComponentRegistry(["la-tex"])
        >>> registry.has_component("la-tex")
        True

    """

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(names)

    def has_component(self, name: str) -> bool:
        return name in self._names

    @property
    def names(self) -> frozenset[str]:
        """Registered component names."""
        return self._names

    def __repr__(self) -> str:
        return f"StaticComponentRegistry({sorted(self._names)!r})"


# Module-level default registry (reused, never recreated)
_EMPTY_REGISTRY: ComponentRegistry = EmptyComponentRegistry()

_component_registry: ContextVar[ComponentRegistry] = ContextVar(
    "component_registry",
    default=_EMPTY_REGISTRY,
)


def get_component_registry() -> ComponentRegistry:
    """Get the component registry for the current context.

    Returns:
        The active ComponentRegistry; an empty registry when none was set.

    """
    return _component_registry.get()


def set_component_registry(registry: ComponentRegistry) -> None:
    """Set the component registry for the current context.

    Args:
        registry: Registry consulted by default renderer selection.

    """
    _component_registry.set(registry)


def reset_component_registry() -> None:
    """Reset to the empty registry."""
    _component_registry.set(_EMPTY_REGISTRY)


@contextmanager
def component_registry_context(registry: ComponentRegistry) -> Iterator[None]:
    """Context manager for a temporary component registry.

    Restores the previous registry even if an exception is raised.

    Args:
        registry: Registry to expose within the context.

    Yields:
        None

    """
    previous = _component_registry.get()
    _component_registry.set(registry)
    try:
        yield
    finally:
        _component_registry.set(previous)


__all__ = [
    "ComponentRegistry",
    "EmptyComponentRegistry",
    "StaticComponentRegistry",
    "get_component_registry",
    "set_component_registry",
    "reset_component_registry",
    "component_registry_context",
]
