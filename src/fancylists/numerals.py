"""Numeral classification for list markers.

Converts marker letters to ordinal values and back:

- Roman numerals go through the ``roman`` package; an invalid numeral is a
  classification outcome, not an error.
- Alphabetic markers are bijective base-26 numbers: a=1 ... z=26, aa=27.

"""

from __future__ import annotations

import roman

from fancylists.types import NumberingSystem
from fancylists.utils.logger import get_logger

logger = get_logger(__name__)

_ALPHABET_SIZE = 26


def analyze_roman(text: str) -> tuple[int, bool]:
    """Parse letters as a Roman numeral.

    Args:
        text: Marker letters in either case (e.g. "xiv", "XIV")

    Returns:
        Tuple of (value, is_valid). Invalid numerals such as "VV" report
        (1, False).

    """
    try:
        return roman.fromRoman(text.upper()), True
    except roman.InvalidRomanNumeralError:
        return 1, False


def alpha_to_ordinal(text: str) -> int:
    """Value of an alphabetic marker as a bijective base-26 number.

    Example:
        >>> alpha_to_ordinal("c")
        3
        >>> alpha_to_ordinal("AA")
        27

    """
    value = 0
    for char in text.lower():
        value = value * _ALPHABET_SIZE + (ord(char) - ord("a") + 1)
    return value


def ordinal_to_alpha(value: int, upper: bool = False) -> str:
    """Letters for a value in bijective base-26; inverse of alpha_to_ordinal.

    Raises:
        ValueError: If value is less than 1

    """
    if value < 1:
        raise ValueError(f"Alphabetic ordinals start at 1, got {value}")
    letters: list[str] = []
    while value > 0:
        value, remainder = divmod(value - 1, _ALPHABET_SIZE)
        letters.append(chr(ord("a") + remainder))
    text = "".join(reversed(letters))
    return text.upper() if upper else text


def format_ordinal(value: int, numbering: NumberingSystem) -> str:
    """Display label of a value in a numbering system.

    Arabic, wildcard and bullet systems use decimal digits. Values Roman
    numerals cannot express fall back to decimal digits.

    Example:
        >>> format_ordinal(3, NumberingSystem.LOWER_ROMAN)
        'iii'
        >>> format_ordinal(28, NumberingSystem.UPPER_ALPHA)
        'AB'

    """
    if numbering.is_alpha:
        return ordinal_to_alpha(value, upper=numbering is NumberingSystem.UPPER_ALPHA)
    if numbering.is_roman:
        try:
            text = roman.toRoman(value)
        except roman.OutOfRangeError:
            logger.debug("Ordinal %d has no Roman numeral, using digits", value)
            return str(value)
        return text.lower() if numbering is NumberingSystem.LOWER_ROMAN else text
    return str(value)
