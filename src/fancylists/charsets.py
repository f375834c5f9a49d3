"""Character sets and patterns for list marker classification.

All sets are frozensets for O(1) membership testing and are built once at
import time.

Usage:
    from fancylists.charsets import BULLET_CHARS

    if char in BULLET_CHARS:
        ...
"""

import re

# Unordered list bullets
BULLET_CHARS: frozenset[str] = frozenset("*-+")

# Ordered list delimiters
DELIMITERS: frozenset[str] = frozenset(".)")

ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
LOWER_ALPHA: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz")
UPPER_ALPHA: frozenset[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

# Glyphs accepted as an ordinal indicator. Only U+00BA is the real one; the
# others are lookalikes people type by mistake.
ORDINAL_INDICATORS: frozenset[str] = frozenset(
    "º"  # masculine ordinal indicator
    "°"  # degree sign
    "˚"  # ring above
    "ᵒ"  # modifier letter small o
)

WILDCARD = "#"

# Ordered markers never need more than this many characters to be recognized
# (nine digits plus a delimiter).
MAX_ORDERED_MARKER_WIDTH = 10

# Alternation order matters: the three-letter alpha branches are tried before
# the unbounded Roman branches, so "viii." falls through to [ivxlcdm]+.
ORDERED_MARKER_RE: re.Pattern[str] = re.compile(
    r"([0-9]{1,9}|[a-z]{1,3}|[A-Z]{1,3}|[ivxlcdm]+|[IVXLCDM]+|#)"
    "([" + "".join(sorted(ORDINAL_INDICATORS)) + "]?)"
    r"([.)])"
)
