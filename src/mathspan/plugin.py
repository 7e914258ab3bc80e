"""markdown-it-py plugin adding ``$inline math$`` spans.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from mathspan import mathspan_plugin
    >>> md = MarkdownIt().use(mathspan_plugin)
    >>> md.render("Inline: $E = mc^2$")
    '<p>Inline: <span class="math inline">E = mc^2</span></p>\\n'

    >>> md = MarkdownIt().use(mathspan_plugin, min_delims=2, custom_element="la-tex")
    >>> md.render("$$x$$")
    '<p><la-tex>x</la-tex></p>\\n'

Rule Ordering:
The inline rule runs right after ``backticks``, so code spans win over math
spans that start later, and math spans win over emphasis and links.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from mathspan.config import MathspanConfig
from mathspan.renderers.html import resolve_renderer
from mathspan.scanner import TOKEN_TYPE, make_inline_rule
from mathspan.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from markdown_it.token import Token
    from markdown_it.utils import EnvType, OptionsDict

    from mathspan.config import CustomElementOption
    from mathspan.registry import ComponentRegistry
    from mathspan.renderers.protocol import MathRenderer

logger = get_logger(__name__)

# Inline rule the math span rule is inserted after
ANCHOR_RULE = "backticks"


def mathspan_plugin(
    md: MarkdownIt,
    min_delims: int = 1,
    renderer: MathRenderer | None = None,
    custom_element: CustomElementOption | None = None,
    component_registry: ComponentRegistry | None = None,
) -> None:
    """Register the math span inline rule and its renderer on ``md``.

    Args:
        md: MarkdownIt instance to extend
        min_delims: Minimum number of ``$`` in an opener
        renderer: Custom renderer ``(content, token, md) -> str``
        custom_element: Tag name or ``(tag, attrs)`` to render into;
            ignored when ``renderer`` is given
        component_registry: Registry probed by the default renderer

    Raises:
        PluginError: If an option is malformed

    """
    config = MathspanConfig(
        min_delims=min_delims,
        renderer=renderer,
        custom_element=custom_element,
        component_registry=component_registry,
    )
    render_content = resolve_renderer(config, escapeHtml)

    md.inline.ruler.after(ANCHOR_RULE, TOKEN_TYPE, make_inline_rule(config.min_delims))

    def render_mathspan(
        self: Any,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: EnvType,
    ) -> str:
        token = tokens[idx]
        return render_content(token.content, token, md)

    md.add_render_rule(TOKEN_TYPE, render_mathspan)
    logger.debug("Registered %s rule after %r (min_delims=%d)", TOKEN_TYPE, ANCHOR_RULE, config.min_delims)


def create_markdown(
    config: str = "commonmark",
    options_update: dict[str, Any] | None = None,
    **options: Any,
) -> MarkdownIt:
    """Create a MarkdownIt parser with math spans enabled.

    Args:
        config: markdown-it preset name
        options_update: Overrides for the preset's options
        **options: Plugin options, see ``mathspan_plugin``

    Example:
        >>> md = create_markdown(custom_element=("my-el", {"class": "bar"}))
        >>> md.render("$foo$")
        '<p><my-el class="bar">foo</my-el></p>\\n'

    """
    md = MarkdownIt(config, options_update)
    return md.use(mathspan_plugin, **options)


def render(source: str, env: EnvType | None = None, **options: Any) -> str:
    """Render Markdown with math spans to HTML in one call.

    Builds a fresh parser per call; reuse ``create_markdown()`` when
    rendering many documents.
    """
    return create_markdown(**options).render(source, env)


__all__ = [
    "ANCHOR_RULE",
    "create_markdown",
    "mathspan_plugin",
    "render",
]
