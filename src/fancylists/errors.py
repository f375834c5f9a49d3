"""Exception classes for fancylists.

Marker rejection is never an exception: a line that is not a valid or
compatible marker simply yields None and the host parser tries its other
block rules. These exceptions cover integration mistakes only.
"""

from __future__ import annotations


class FancyListsError(Exception):
    """Base exception for all fancylists errors.

    Subclass this for specific error categories.
    """

    pass


class PluginError(FancyListsError):
    """Error in plugin registration.

    Raised when the host parser cannot accept the fancy list rule,
    e.g. a MarkdownIt instance without a "list" block rule to replace.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
