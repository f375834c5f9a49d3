"""Tests for the list marker lexers."""

from __future__ import annotations

import pytest

from fancylists.lexer import scan_ordered_marker, scan_unordered_marker


def scan_ordered(line: str):
    return scan_ordered_marker(line, 0, len(line))


def scan_unordered(line: str):
    return scan_unordered_marker(line, 0, len(line))


class TestUnorderedMarker:
    """Tests for scan_unordered_marker."""

    @pytest.mark.parametrize("bullet", ["*", "-", "+"])
    def test_bullet_followed_by_space(self, bullet: str) -> None:
        token = scan_unordered(f"{bullet} item")
        assert token is not None
        assert token.text == bullet
        assert token.delimiter is None
        assert token.has_ordinal_indicator is False
        assert token.pos_after_marker == 1

    def test_bullet_followed_by_tab(self) -> None:
        assert scan_unordered("-\titem") is not None

    def test_bullet_at_end_of_line(self) -> None:
        token = scan_unordered("-")
        assert token is not None
        assert token.pos_after_marker == 1

    def test_bullet_glued_to_text(self) -> None:
        """'-test' is not a list item."""
        assert scan_unordered("-test") is None

    def test_other_characters(self) -> None:
        assert scan_unordered("# heading") is None
        assert scan_unordered("1. one") is None
        assert scan_unordered("") is None

    def test_respects_start_offset(self) -> None:
        src = "  * item"
        token = scan_unordered_marker(src, 2, len(src))
        assert token is not None
        assert token.pos_after_marker == 3


class TestOrderedMarker:
    """Tests for scan_ordered_marker."""

    @pytest.mark.parametrize(
        ("line", "numeral", "delimiter"),
        [
            ("1. foo", "1", "."),
            ("42) foo", "42", ")"),
            ("123456789. foo", "123456789", "."),
            ("a. foo", "a", "."),
            ("zz) foo", "zz", ")"),
            ("B) foo", "B", ")"),
            ("iv. foo", "iv", "."),
            ("viii. foo", "viii", "."),
            ("XVIII) foo", "XVIII", ")"),
            ("#. foo", "#", "."),
        ],
    )
    def test_numerals(self, line: str, numeral: str, delimiter: str) -> None:
        token = scan_ordered(line)
        assert token is not None
        assert token.text == numeral
        assert token.delimiter == delimiter
        assert token.has_ordinal_indicator is False
        assert token.pos_after_marker == len(numeral) + 1

    def test_ten_digits_rejected(self) -> None:
        assert scan_ordered("1234567890. foo") is None

    def test_four_letters_rejected(self) -> None:
        assert scan_ordered("abcd. foo") is None
        assert scan_ordered("AAAA) foo") is None

    def test_mixed_case_rejected(self) -> None:
        assert scan_ordered("Aa) foo") is None

    def test_long_roman_accepted(self) -> None:
        """Roman letters are not limited to three characters."""
        token = scan_ordered("xxviii. foo")
        assert token is not None
        assert token.text == "xxviii"

    def test_non_ascii_digits_rejected(self) -> None:
        assert scan_ordered("١. foo") is None

    def test_requires_delimiter(self) -> None:
        assert scan_ordered("1 foo") is None
        assert scan_ordered("a: foo") is None

    def test_requires_space_after_delimiter(self) -> None:
        assert scan_ordered("1.foo") is None
        assert scan_ordered("a)b") is None

    def test_end_of_line_after_delimiter(self) -> None:
        token = scan_ordered("2.")
        assert token is not None
        assert token.pos_after_marker == 2

    def test_too_short(self) -> None:
        assert scan_ordered("1") is None
        assert scan_ordered("") is None

    @pytest.mark.parametrize("indicator", ["º", "°", "˚", "ᵒ"])
    def test_ordinal_indicators(self, indicator: str) -> None:
        token = scan_ordered(f"1{indicator}. foo")
        assert token is not None
        assert token.has_ordinal_indicator is True
        assert token.text == "1"
        assert token.pos_after_marker == 3

    def test_unknown_indicator_rejected(self) -> None:
        assert scan_ordered("1ª. foo") is None

    def test_respects_start_and_end_offsets(self) -> None:
        src = "   iii) third\nnext"
        token = scan_ordered_marker(src, 3, src.index("\n"))
        assert token is not None
        assert token.text == "iii"
        assert token.pos_after_marker == 7


class TestCapitalLetterPeriodRule:
    """A single capital letter with a period needs two spaces."""

    def test_initial_with_one_space_rejected(self) -> None:
        assert scan_ordered("B. Russell was an English philosopher.") is None

    def test_two_spaces_accepted(self) -> None:
        token = scan_ordered("B.  foo")
        assert token is not None
        assert token.text == "B"
        # One of the two spaces belongs to the marker
        assert token.pos_after_marker == 3

    def test_tab_counts_as_space(self) -> None:
        assert scan_ordered("B. \tfoo") is not None

    def test_end_of_line_rejected(self) -> None:
        assert scan_ordered("B.") is None
        assert scan_ordered("B. ") is None

    def test_parenthesis_needs_one_space(self) -> None:
        assert scan_ordered("B) Russell") is not None

    def test_lowercase_needs_one_space(self) -> None:
        assert scan_ordered("b. Russell") is not None

    def test_multi_letter_needs_one_space(self) -> None:
        assert scan_ordered("II. bar") is not None
