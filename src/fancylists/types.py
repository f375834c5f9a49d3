"""Type definitions for fancy list parsing.

Provides the numbering system enum and the immutable records passed between
the lexers, the marker analyzer and the list rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NumberingSystem(Enum):
    """Classification of a marker's symbol alphabet.

    Values are the glyphs HTML uses for the ``type`` attribute of ``<ol>``
    (or the bullet character itself for unordered markers). WILDCARD takes
    on the numbering system of the list it continues.
    """

    ARABIC = "1"
    LOWER_ALPHA = "a"
    UPPER_ALPHA = "A"
    LOWER_ROMAN = "i"
    UPPER_ROMAN = "I"
    WILDCARD = "#"
    BULLET_STAR = "*"
    BULLET_DASH = "-"
    BULLET_PLUS = "+"

    @property
    def is_ordered(self) -> bool:
        return self not in _BULLETS

    @property
    def is_alpha(self) -> bool:
        return self in (NumberingSystem.LOWER_ALPHA, NumberingSystem.UPPER_ALPHA)

    @property
    def is_roman(self) -> bool:
        return self in (NumberingSystem.LOWER_ROMAN, NumberingSystem.UPPER_ROMAN)

    @property
    def html_type(self) -> str | None:
        """Value for the ``type`` attribute, None when the default applies."""
        if self.is_alpha or self.is_roman:
            return self.value
        return None

    @classmethod
    def for_bullet(cls, char: str) -> NumberingSystem:
        """Numbering system of an unordered bullet character."""
        return _BULLET_BY_CHAR[char]


_BULLETS = frozenset(
    {NumberingSystem.BULLET_STAR, NumberingSystem.BULLET_DASH, NumberingSystem.BULLET_PLUS}
)
_BULLET_BY_CHAR = {system.value: system for system in _BULLETS}


@dataclass(frozen=True, slots=True)
class MarkerToken:
    """Raw lexer output for one line.

    Attributes:
        text: Bullet character, or the numeral text of an ordered marker
        has_ordinal_indicator: Whether an ordinal indicator followed the numeral
        delimiter: "." or ")" for ordered markers, None for bullets
        pos_after_marker: Source offset just past the marker

    """

    text: str
    has_ordinal_indicator: bool
    delimiter: str | None
    pos_after_marker: int


@dataclass(frozen=True, slots=True)
class Marker:
    """Fully classified list item marker.

    Attributes:
        numbering: Numbering system the marker belongs to
        ordinal: Position the marker claims in its sequence (>= 1, except
            Arabic markers, where "0." gives 0)
        has_ordinal_indicator: Whether the numeral carried an ordinal indicator
        delimiter: "." or ")" for ordered markers, None for bullets
        raw: Literal marker text (digits, letters, "#" or the bullet)
        pos_after_marker: Source offset where item content scanning resumes

    """

    numbering: NumberingSystem
    ordinal: int
    has_ordinal_indicator: bool
    delimiter: str | None
    raw: str
    pos_after_marker: int

    @property
    def is_ordered(self) -> bool:
        return self.numbering.is_ordered

    @property
    def is_alpha(self) -> bool:
        return self.numbering.is_alpha

    @property
    def is_roman(self) -> bool:
        return self.numbering.is_roman

    @property
    def markup(self) -> str:
        """Character recorded as token markup: the delimiter or the bullet."""
        return self.delimiter if self.delimiter is not None else self.raw


@dataclass(frozen=True, slots=True)
class ItemGeometry:
    """Indentation geometry of one list item.

    Attributes:
        content_start: Source offset of the first content character
        offset: Column of the first content character
        initial: Column just past the marker
        indent_after_marker: Columns between marker and content, as counted
            for nesting (1 for empty or over-indented content)
        indent: Block indent threshold for the item's content

    """

    content_start: int
    offset: int
    initial: int
    indent_after_marker: int

    @property
    def indent(self) -> int:
        return self.initial + self.indent_after_marker
