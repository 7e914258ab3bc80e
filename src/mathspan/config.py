"""Plugin configuration for mathspan.

One MathspanConfig is built per plugin application and read once, when the
inline rule and the renderer are set up. Nothing in it changes per document.

Usage:
    >>> from mathspan.config import MathspanConfig
    >>> config = MathspanConfig(min_delims=2, custom_element="la-tex")
    >>> md = MarkdownIt().use(mathspan_plugin, **config.as_options())

    # Options coming from JSON/YAML, camelCase names accepted
    >>> MathspanConfig.from_dict({"minDelims": 2}).min_delims
    2

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Sequence, Union

from mathspan.errors import PluginError

if TYPE_CHECKING:
    from mathspan.registry import ComponentRegistry
    from mathspan.renderers.protocol import MathRenderer

# A tag name, or (tag_name,) / (tag_name, {attr: value})
CustomElementOption = Union[str, Sequence[Any]]

PLUGIN_NAME = "mathspan"

# Option names used by the JavaScript ecosystem
_ALIASES = {
    "minDelims": "min_delims",
    "customElement": "custom_element",
    "componentRegistry": "component_registry",
}


@dataclass(frozen=True, slots=True)
class MathspanConfig:
    """Immutable plugin configuration.

    Attributes:
        min_delims: Minimum opener run length that may start a math span
        renderer: Custom renderer, takes priority over everything else
        custom_element: Render into this element (ignored if renderer is set)
        component_registry: Registry probed by the default renderer; None
            means the registry of the current context

    """

    min_delims: int = 1
    renderer: MathRenderer | None = None
    custom_element: CustomElementOption | None = None
    component_registry: ComponentRegistry | None = None

    def __post_init__(self) -> None:
        if isinstance(self.min_delims, bool) or not isinstance(self.min_delims, int):
            raise PluginError(
                PLUGIN_NAME, f"min_delims must be an integer, got {self.min_delims!r}"
            )
        if self.min_delims < 1:
            raise PluginError(
                PLUGIN_NAME, f"min_delims must be at least 1, got {self.min_delims}"
            )
        if self.renderer is not None and not callable(self.renderer):
            raise PluginError(PLUGIN_NAME, f"renderer must be callable, got {self.renderer!r}")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> MathspanConfig:
        """Create MathspanConfig from a mapping.

        Only includes keys that are valid MathspanConfig fields (or their
        camelCase aliases); unknown keys are silently ignored.

        Args:
            config_dict: Option mapping, e.g. loaded from a site config file.

        Returns:
            New MathspanConfig instance.

        Example:
            >>> MathspanConfig.from_dict({
            ...     "customElement": ["my-el", {"class": "bar"}],
            ...     "unknown_key": "ignored",
            ... }).custom_element
            ['my-el', {'class': 'bar'}]

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)

    def as_options(self) -> dict[str, Any]:
        """Return keyword options accepted by ``mathspan_plugin``."""
        return {f: getattr(self, f) for f in self.__dataclass_fields__}


__all__ = [
    "CustomElementOption",
    "MathspanConfig",
    "PLUGIN_NAME",
]
