"""
mathspan — Inline ``$math$`` spans for markdown-it-py

Delimiters follow CommonMark code span rules: an opener of N dollar signs is
closed by the next run of exactly N dollar signs on the same paragraph.
Unclosed openers are plain text. Scanning is linear in the input.

Quick Start:
    >>> from mathspan import render
    >>> render("Euler: $e^{i\\pi} + 1 = 0$")
    '<p>Euler: <span class="math inline">e^{i\\pi} + 1 = 0</span></p>\\n'

    >>> # Or as a plugin on your own parser
    >>> from markdown_it import MarkdownIt
    >>> from mathspan import mathspan_plugin
    >>> md = MarkdownIt("commonmark").use(mathspan_plugin, min_delims=2)

Rendering:
    By default spans render to ``<span class="math inline">``. Pass
    ``custom_element`` to render into a web component, or ``renderer`` to
    render server-side (KaTeX, MathJax-node, ...).

Installation:
    pip install mathspan
"""

from mathspan.config import MathspanConfig
from mathspan.errors import MathspanError, PluginError
from mathspan.plugin import create_markdown, mathspan_plugin, render
from mathspan.registry import (
    ComponentRegistry,
    EmptyComponentRegistry,
    StaticComponentRegistry,
    component_registry_context,
    get_component_registry,
    reset_component_registry,
    set_component_registry,
)
from mathspan.renderers import (
    MathRenderer,
    custom_element_renderer,
    default_renderer,
    resolve_renderer,
)
from mathspan.scanner import DelimiterCache, fold_content, scan_mathspan

__version__ = "0.1.0"

__all__ = [
    "ComponentRegistry",
    "DelimiterCache",
    "EmptyComponentRegistry",
    "MathRenderer",
    "MathspanConfig",
    "MathspanError",
    "PluginError",
    "StaticComponentRegistry",
    "component_registry_context",
    "create_markdown",
    "custom_element_renderer",
    "default_renderer",
    "fold_content",
    "get_component_registry",
    "mathspan_plugin",
    "render",
    "reset_component_registry",
    "resolve_renderer",
    "scan_mathspan",
    "set_component_registry",
]
