"""markdown-it-py plugin entry point.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from fancylists import fancy_lists_plugin
    >>>
    >>> md = MarkdownIt().use(fancy_lists_plugin, allow_ordinal=True)
    >>> md.render("i. foo\nii. bar\n")
    '<ol type="i">\n<li>foo</li>\n<li>bar</li>\n</ol>\n'

"""

from __future__ import annotations

from markdown_it import MarkdownIt

from fancylists.config import FancyListsConfig
from fancylists.errors import PluginError
from fancylists.rule import make_fancy_list_rule

PLUGIN_NAME = "fancy_lists"

# Block chains the list rule takes part in as a terminator
LIST_RULE_ALT = ["paragraph", "reference", "blockquote"]


def fancy_lists_plugin(
    md: MarkdownIt,
    *,
    allow_ordinal: bool = False,
    allow_multi_letter: bool = False,
    config: FancyListsConfig | None = None,
) -> None:
    """Replace the host's list rule with the fancy list rule.

    Args:
        md: MarkdownIt instance to extend
        allow_ordinal: Recognize markers with an ordinal indicator
        allow_multi_letter: Recognize two and three letter markers
        config: Full configuration; takes precedence over the keyword flags

    Raises:
        PluginError: If md has no "list" block rule to replace

    """
    if config is None:
        config = FancyListsConfig(
            allow_ordinal=allow_ordinal,
            allow_multi_letter=allow_multi_letter,
        )
    try:
        md.block.ruler.at("list", make_fancy_list_rule(config), {"alt": LIST_RULE_ALT})
    except KeyError as e:
        raise PluginError(PLUGIN_NAME, "host parser has no 'list' block rule") from e
