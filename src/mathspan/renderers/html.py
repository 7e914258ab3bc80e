"""HTML renderers for math spans and renderer resolution.

Resolution runs once per plugin application, not per span:

1. ``renderer`` option: used verbatim.
2. ``custom_element`` option: ``<tag attrs>escaped content</tag>``.
3. Default: ``<math-up>`` or ``<la-tex>`` when the component registry knows
   them, otherwise ``<span class="math inline">``.

Tags are built once; attribute values are escaped at build time, content is
escaped on every call.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from markdown_it.common.utils import escapeHtml

from mathspan.config import PLUGIN_NAME
from mathspan.errors import PluginError
from mathspan.registry import get_component_registry
from mathspan.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it.token import Token

    from mathspan.config import CustomElementOption, MathspanConfig
    from mathspan.registry import ComponentRegistry
    from mathspan.renderers.protocol import MathRenderer

logger = get_logger(__name__)

# Probed in order by the default renderer
PREFERRED_COMPONENTS = ("math-up", "la-tex")

FALLBACK_TAG = "span"
DEFAULT_CLASS = "math inline"


def normalize_custom_element(option: CustomElementOption) -> tuple[str, dict[str, str]]:
    """Normalize a custom element option to ``(tag, attrs)``.

    Args:
        option: ``"tag"``, ``("tag",)`` or ``("tag", {"attr": "value"})``

    Returns:
        Tag name and attribute mapping (possibly empty)

    Raises:
        PluginError: If the option has any other shape

    """
    if isinstance(option, str):
        tag, attrs = option, None
    elif isinstance(option, (list, tuple)) and 1 <= len(option) <= 2:
        tag = option[0]
        attrs = option[1] if len(option) == 2 else None
    else:
        raise PluginError(PLUGIN_NAME, f"custom_element must be a tag or (tag, attrs), got {option!r}")

    if not isinstance(tag, str) or not tag:
        raise PluginError(PLUGIN_NAME, f"custom_element tag must be a non-empty string, got {tag!r}")
    if attrs is None:
        return tag, {}
    if not isinstance(attrs, Mapping):
        raise PluginError(PLUGIN_NAME, f"custom_element attributes must be a mapping, got {attrs!r}")
    return tag, {str(key): str(value) for key, value in attrs.items()}


def custom_element_renderer(
    option: CustomElementOption,
    escape: Callable[[str], str] = escapeHtml,
) -> MathRenderer:
    """Build a renderer wrapping escaped content in a fixed element.

    Example:
        >>> render = custom_element_renderer(("my-el", {"class": "bar"}))
        >>> render("a < b")
        '<my-el class="bar">a &lt; b</my-el>'

    """
    tag, attrs = normalize_custom_element(option)
    attr_markup = "".join(f' {key}="{escape(value)}"' for key, value in attrs.items())
    opening = f"<{tag}{attr_markup}>"
    closing = f"</{tag}>"

    def render(content: str, token: Token | None = None, context: Any = None) -> str:
        return f"{opening}{escape(content)}{closing}"

    return render


def default_renderer(
    escape: Callable[[str], str] = escapeHtml,
    registry: ComponentRegistry | None = None,
) -> MathRenderer:
    """Pick a renderer based on the custom elements available.

    Args:
        escape: HTML escaping function
        registry: Registry to probe; defaults to the current context's

    """
    if registry is None:
        registry = get_component_registry()

    for name in PREFERRED_COMPONENTS:
        if registry.has_component(name):
            logger.debug("Component %r registered, rendering math spans into it", name)
            return custom_element_renderer(name, escape)

    return custom_element_renderer((FALLBACK_TAG, {"class": DEFAULT_CLASS}), escape)


def resolve_renderer(
    config: MathspanConfig,
    escape: Callable[[str], str] = escapeHtml,
) -> MathRenderer:
    """Select the renderer for a plugin configuration.

    Args:
        config: Plugin configuration
        escape: HTML escaping function of the host

    Returns:
        Callable ``(content, token, context) -> str``

    """
    if config.renderer is not None:
        logger.debug("Using custom math span renderer %r", config.renderer)
        return config.renderer
    if config.custom_element is not None:
        logger.debug("Rendering math spans into custom element %r", config.custom_element)
        return custom_element_renderer(config.custom_element, escape)
    return default_renderer(escape, config.component_registry)
