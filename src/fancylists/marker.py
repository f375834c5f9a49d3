"""Marker analysis and list compatibility.

Turns lexer output into a classified Marker. Letters that are also valid
Roman numerals are ambiguous ("i", "v", "xl"); the previously accepted
marker of the same list is the context that settles them:

    i.  with no context          -> lower Roman 1
    v.  with no context          -> lower alpha 22
    v.  after a Roman marker     -> lower Roman 5
    i.  after an alpha marker    -> lower alpha 9
    ii. with no context          -> lower Roman 2

Both functions are pure: the context is an argument, never module state.
"""

from __future__ import annotations

from fancylists.charsets import ASCII_DIGITS, LOWER_ALPHA, UPPER_ALPHA, WILDCARD
from fancylists.config import DEFAULT_CONFIG, FancyListsConfig
from fancylists.lexer import scan_ordered_marker, scan_unordered_marker
from fancylists.numerals import alpha_to_ordinal, analyze_roman
from fancylists.types import Marker, MarkerToken, NumberingSystem


def _classify_letters(
    token: MarkerToken,
    previous: Marker | None,
    config: FancyListsConfig,
    *,
    upper: bool,
) -> Marker | None:
    text = token.text
    is_valid_alpha = len(text) == 1 or config.allow_multi_letter
    prefer_roman = (previous is not None and previous.is_roman) or (
        (previous is None or not previous.is_alpha)
        and (text in ("i", "I") or len(text) > 1)
    )
    roman_value, is_valid_roman = analyze_roman(text)

    if is_valid_roman and (not is_valid_alpha or prefer_roman):
        numbering = NumberingSystem.UPPER_ROMAN if upper else NumberingSystem.LOWER_ROMAN
        ordinal = roman_value
    elif is_valid_alpha:
        numbering = NumberingSystem.UPPER_ALPHA if upper else NumberingSystem.LOWER_ALPHA
        ordinal = alpha_to_ordinal(text)
    else:
        return None

    return _make_marker(token, numbering, ordinal)


def _make_marker(token: MarkerToken, numbering: NumberingSystem, ordinal: int) -> Marker:
    return Marker(
        numbering=numbering,
        ordinal=ordinal,
        has_ordinal_indicator=token.has_ordinal_indicator,
        delimiter=token.delimiter,
        raw=token.text,
        pos_after_marker=token.pos_after_marker,
    )


def analyze_marker(
    src: str,
    pos: int,
    maximum: int,
    previous: Marker | None = None,
    config: FancyListsConfig = DEFAULT_CONFIG,
) -> Marker | None:
    """Recognize and classify the list marker at the start of a line.

    Ordered markers are tried before bullets.

    Args:
        src: Source text
        pos: Offset of the first non-indent character of the line
        maximum: Offset of the end of the line
        previous: Last accepted marker of the list being assembled, if any
        config: Which optional marker forms are recognized

    Returns:
        Classified Marker, or None if the line has no acceptable marker

    """
    token = scan_ordered_marker(src, pos, maximum)
    if token is not None:
        if token.has_ordinal_indicator and not config.allow_ordinal:
            return None

        first = token.text[0]
        if first in ASCII_DIGITS:
            return _make_marker(token, NumberingSystem.ARABIC, int(token.text))
        if first in LOWER_ALPHA:
            return _classify_letters(token, previous, config, upper=False)
        if first in UPPER_ALPHA:
            return _classify_letters(token, previous, config, upper=True)
        if first == WILDCARD:
            return _make_marker(token, NumberingSystem.WILDCARD, 1)
        return None

    token = scan_unordered_marker(src, pos, maximum)
    if token is not None:
        return _make_marker(token, NumberingSystem.for_bullet(token.text), 1)
    return None


def analyze_line(
    line: str,
    previous: Marker | None = None,
    config: FancyListsConfig | None = None,
) -> Marker | None:
    """Analyze a standalone line that starts with its marker.

    Example:
        >>> analyze_line("iv) subfour").ordinal
        4

    """
    return analyze_marker(line, 0, len(line), previous, config or DEFAULT_CONFIG)


def are_markers_compatible(previous: Marker, current: Marker) -> bool:
    """Check whether current continues the list previous belongs to.

    Both must agree on orderedness, delimiter and ordinal indicator, and
    use the same numbering system unless current is the wildcard.
    """
    return (
        previous.is_ordered == current.is_ordered
        and (
            previous.numbering is current.numbering
            or current.numbering is NumberingSystem.WILDCARD
        )
        and previous.delimiter == current.delimiter
        and previous.has_ordinal_indicator == current.has_ordinal_indicator
    )
