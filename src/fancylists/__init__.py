"""
fancylists: Fancy ordered lists for markdown-it-py

Recognizes list markers beyond plain 1. / 1) numbering: letters (a. B)),
Roman numerals (iv. XII)), the # continuation marker and, optionally,
ordinal indicators (1º.) and multi-letter markers (aa.).

Quick Start:
    >>> from fancylists import render
    >>> print(render("c. charlie\\n#. delta\\n"))
    <ol type="a" start="3">
    <li>charlie</li>
    <li>delta</li>
    </ol>

    >>> # Or plug into your own MarkdownIt instance
    >>> from markdown_it import MarkdownIt
    >>> from fancylists import fancy_lists_plugin
    >>> md = MarkdownIt("commonmark").use(fancy_lists_plugin, allow_multi_letter=True)

Marker analysis without a parser:
    >>> from fancylists import analyze_line
    >>> analyze_line("v. five").numbering
    <NumberingSystem.LOWER_ALPHA: 'a'>
"""

from __future__ import annotations

from markdown_it import MarkdownIt
from markdown_it.token import Token

from fancylists.config import DEFAULT_CONFIG, FancyListsConfig
from fancylists.errors import FancyListsError, PluginError
from fancylists.indent import measure_item_indent
from fancylists.lexer import scan_ordered_marker, scan_unordered_marker
from fancylists.marker import analyze_line, analyze_marker, are_markers_compatible
from fancylists.numerals import (
    alpha_to_ordinal,
    analyze_roman,
    format_ordinal,
    ordinal_to_alpha,
)
from fancylists.plugin import fancy_lists_plugin
from fancylists.rule import make_fancy_list_rule
from fancylists.types import ItemGeometry, Marker, MarkerToken, NumberingSystem

__version__ = "0.1.0"


def create_markdown(
    config: FancyListsConfig | None = None,
    *,
    preset: str = "commonmark",
) -> MarkdownIt:
    """Create a MarkdownIt parser with fancy lists enabled.

    Args:
        config: Fancy list configuration (defaults to DEFAULT_CONFIG)
        preset: markdown-it preset name

    Returns:
        Configured MarkdownIt instance

    """
    return MarkdownIt(preset).use(fancy_lists_plugin, config=config or DEFAULT_CONFIG)


def parse(source: str, config: FancyListsConfig | None = None) -> list[Token]:
    """Parse Markdown source into markdown-it block tokens."""
    return create_markdown(config).parse(source)


def render(source: str, config: FancyListsConfig | None = None) -> str:
    """Render Markdown source to HTML."""
    return create_markdown(config).render(source)


__all__ = [
    # Main API
    "create_markdown",
    "fancy_lists_plugin",
    "parse",
    "render",
    # Configuration
    "DEFAULT_CONFIG",
    "FancyListsConfig",
    # Errors
    "FancyListsError",
    "PluginError",
    # Types
    "ItemGeometry",
    "Marker",
    "MarkerToken",
    "NumberingSystem",
    # Marker analysis
    "alpha_to_ordinal",
    "analyze_line",
    "analyze_marker",
    "analyze_roman",
    "are_markers_compatible",
    "format_ordinal",
    "make_fancy_list_rule",
    "measure_item_indent",
    "ordinal_to_alpha",
    "scan_ordered_marker",
    "scan_unordered_marker",
    # Metadata
    "__version__",
]
