"""MathRenderer protocol — stable interface for math span renderers.

Any callable taking the span content (plus, optionally, the token and the
MarkdownIt instance) and returning markup conforms to this protocol.

Example:
    def katex_renderer(content, token=None, md=None):
        return katex.render(content, display_mode=False)

    md = MarkdownIt().use(mathspan_plugin, renderer=katex_renderer)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from markdown_it.token import Token


class MathRenderer(Protocol):
    """Protocol for math span renderers.

    Custom renderers receive the raw span content and are responsible for
    their own escaping.

    """

    def __call__(self, content: str, token: Token | None = None, context: Any = None) -> str:
        """Render span content to a markup fragment.

        Args:
            content: Span content after line folding and space trimming.
            token: The ``mathspan`` token being rendered.
            context: The MarkdownIt instance the plugin was applied to.

        Returns:
            Markup fragment inserted into the output verbatim.

        """
        ...
