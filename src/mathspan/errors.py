"""Exception classes for mathspan.

Scanning never raises: unmatched delimiters degrade to plain text.
These exceptions cover configuration-time failures only.
"""

from __future__ import annotations


class MathspanError(Exception):
    """Base exception for all mathspan errors.

    Subclass this for specific error categories.
    """

    pass


class PluginError(MathspanError):
    """Error in plugin configuration.

    Raised when plugin options are malformed, e.g. a non-positive
    ``min_delims`` or a ``custom_element`` of the wrong shape.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        self.message = message
        super().__init__(f"Plugin '{plugin_name}': {message}")
