"""Indent calculation for list items.

The columns between a marker and its content decide where the item's
content block starts:

    "  -  test"
     ^^^^^ initial column + indent after marker = item indent

More than 4 columns after the marker count as 1 (the rest belongs to an
indented code block), and an empty item also counts as 1.
"""

from __future__ import annotations

from fancylists.types import ItemGeometry

TAB_WIDTH = 4
MAX_INDENT_AFTER_MARKER = 4


def measure_item_indent(
    src: str,
    pos: int,
    maximum: int,
    initial: int,
    bs_count: int = 0,
) -> ItemGeometry:
    """Measure the whitespace after a marker.

    Tabs expand to the next multiple of 4 columns, taking the line's
    leading tab adjustment into account.

    Args:
        src: Source text
        pos: Offset just past the marker
        maximum: Offset of the end of the line
        initial: Column just past the marker
        bs_count: Tab adjustment of the line (host's bsCount)

    Returns:
        ItemGeometry of the item

    """
    offset = initial
    while pos < maximum:
        ch = src[pos]
        if ch == "\t":
            offset += TAB_WIDTH - (offset + bs_count) % TAB_WIDTH
        elif ch == " ":
            offset += 1
        else:
            break
        pos += 1

    if pos >= maximum:
        # trimming space in "-    \n  3" case, indent is 1 here
        indent_after_marker = 1
    else:
        indent_after_marker = offset - initial

    if indent_after_marker > MAX_INDENT_AFTER_MARKER:
        indent_after_marker = 1

    return ItemGeometry(
        content_start=pos,
        offset=offset,
        initial=initial,
        indent_after_marker=indent_after_marker,
    )
