"""Renderers turning math span content into markup.

Provides:
- MathRenderer: protocol for renderer callables
- resolve_renderer: pick the renderer for a plugin configuration
- custom_element_renderer / default_renderer: built-in renderers
"""

from mathspan.renderers.html import (
    DEFAULT_CLASS,
    FALLBACK_TAG,
    PREFERRED_COMPONENTS,
    custom_element_renderer,
    default_renderer,
    normalize_custom_element,
    resolve_renderer,
)
from mathspan.renderers.protocol import MathRenderer

__all__ = [
    "DEFAULT_CLASS",
    "FALLBACK_TAG",
    "PREFERRED_COMPONENTS",
    "MathRenderer",
    "custom_element_renderer",
    "default_renderer",
    "normalize_custom_element",
    "resolve_renderer",
]
