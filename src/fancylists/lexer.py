"""List marker lexers.

Scans the start of a line for an unordered bullet or an ordered marker.
Both scanners are pure functions over the source string: they take the
offset where the marker would begin (leading indentation already skipped by
the caller) and the offset where the line ends.

Ordered markers:
    digits      1.  42)   (up to 9 digits)
    letters     a.  B)    aa.  (up to 3 letters of one case)
    Roman       iv. XII)  (any length)
    wildcard    #.
    ordinal     1º.  IIº)  (indicator between numeral and delimiter)

"""

from __future__ import annotations

from markdown_it.common.utils import isStrSpace

from fancylists.charsets import (
    BULLET_CHARS,
    MAX_ORDERED_MARKER_WIDTH,
    ORDERED_MARKER_RE,
    UPPER_ALPHA,
)
from fancylists.types import MarkerToken


def scan_unordered_marker(src: str, pos: int, maximum: int) -> MarkerToken | None:
    """Match ``[-+*]`` followed by a space, a tab or the end of the line.

    Args:
        src: Source text
        pos: Offset of the first non-indent character of the line
        maximum: Offset of the end of the line

    Returns:
        MarkerToken, or None if the line does not start with a bullet

    """
    if pos >= maximum:
        return None

    marker = src[pos]
    if marker not in BULLET_CHARS:
        return None

    pos += 1
    # " -test " is not a list item
    if pos < maximum and not isStrSpace(src[pos]):
        return None

    return MarkerToken(
        text=marker,
        has_ordinal_indicator=False,
        delimiter=None,
        pos_after_marker=pos,
    )


def scan_ordered_marker(src: str, pos: int, maximum: int) -> MarkerToken | None:
    """Match a numeral, an optional ordinal indicator and a delimiter.

    The marker must be followed by whitespace or the end of the line. A
    single capital letter followed by a period needs two whitespace
    characters, so initials such as "B. Russell" stay prose.

    Args:
        src: Source text
        pos: Offset of the first non-indent character of the line
        maximum: Offset of the end of the line

    Returns:
        MarkerToken, or None if the line does not start with an ordered marker

    """
    # At least a numeral and a delimiter
    if pos + 1 >= maximum:
        return None

    match = ORDERED_MARKER_RE.match(src[pos : min(maximum, pos + MAX_ORDERED_MARKER_WIDTH)])
    if match is None:
        return None

    numeral, indicator, delimiter = match.groups()
    final_pos = pos + match.end()

    if final_pos < maximum and not isStrSpace(src[final_pos]):
        return None

    if len(numeral) == 1 and numeral in UPPER_ALPHA and delimiter == ".":
        final_pos += 1
        if final_pos >= maximum or not isStrSpace(src[final_pos]):
            return None

    return MarkerToken(
        text=numeral,
        has_ordinal_indicator=indicator != "",
        delimiter=delimiter,
        pos_after_marker=final_pos,
    )
