"""Unit tests for the scanner and whitespace policy."""

import pytest

from pcparse.parser.tokenizer import Scanner, is_inline_whitespace

LETTERS = frozenset("abc")


@pytest.mark.unit
class TestWhitespacePolicy:
    """Tests for skip_whitespace."""

    def test_skips_spaces_and_tabs(self) -> None:
        scanner = Scanner(" \t  x")
        scanner.skip_whitespace()
        assert scanner.peek() == "x"

    def test_stops_at_newline(self) -> None:
        scanner = Scanner("  \n  x")
        scanner.skip_whitespace()
        assert scanner.pos == 2
        assert scanner.peek() == "\n"

    def test_skips_carriage_return(self) -> None:
        scanner = Scanner("\r\n")
        scanner.skip_whitespace()
        assert scanner.peek() == "\n"

    def test_never_fails_at_end(self) -> None:
        scanner = Scanner("   ")
        scanner.skip_whitespace()
        assert scanner.at_end()
        scanner.skip_whitespace()
        assert scanner.at_end()

    def test_newline_is_not_inline_whitespace(self) -> None:
        assert is_inline_whitespace(" ")
        assert is_inline_whitespace("\t")
        assert not is_inline_whitespace("\n")
        assert not is_inline_whitespace("#")

    def test_unicode_spaces_are_whitespace(self) -> None:
        assert is_inline_whitespace(chr(0xA0))
        assert is_inline_whitespace(chr(0x2003))
        assert is_inline_whitespace(chr(0x3000))

    @pytest.mark.parametrize("char", [chr(c) for c in range(0x1C, 0x20)])
    def test_information_separators_are_not_whitespace(self, char: str) -> None:
        assert not is_inline_whitespace(char)

    def test_rest_of_line_keeps_trailing_separator(self) -> None:
        scanner = Scanner("foo\x1f \n")
        assert scanner.match_rest_of_line() == "foo\x1f"


@pytest.mark.unit
class TestMatching:
    """Tests for the match_* methods."""

    def test_match_literal_skips_leading_whitespace(self) -> None:
        scanner = Scanner("   :rest")
        assert scanner.match_literal(":")
        assert scanner.peek() == "r"

    def test_failed_literal_leaves_cursor(self) -> None:
        scanner = Scanner("   =")
        assert not scanner.match_literal(":")
        assert scanner.pos == 0

    def test_match_chars_takes_longest_run(self) -> None:
        scanner = Scanner("abcabd")
        assert scanner.match_chars(LETTERS) == "abcab"
        assert scanner.peek() == "d"

    def test_match_chars_requires_one_char(self) -> None:
        scanner = Scanner("  d")
        assert scanner.match_chars(LETTERS) is None
        assert scanner.pos == 0

    def test_rest_of_line_trims_and_stops_before_newline(self) -> None:
        scanner = Scanner("   some value  \r\nnext")
        assert scanner.match_rest_of_line() == "some value"
        assert scanner.peek() == "\n"

    def test_rest_of_line_may_be_empty(self) -> None:
        scanner = Scanner("")
        assert scanner.match_rest_of_line() == ""
        assert scanner.at_end()

    def test_mark_and_reset(self) -> None:
        scanner = Scanner("abc def")
        start = scanner.mark()
        scanner.match_chars(LETTERS)
        scanner.reset(start)
        assert scanner.pos == 0


@pytest.mark.unit
class TestLocation:
    """Tests for location()."""

    def test_first_line(self) -> None:
        assert Scanner("abc").location(2) == (1, 3)

    def test_later_line(self) -> None:
        scanner = Scanner("ab\ncd\nef")
        assert scanner.location(7) == (3, 2)

    def test_defaults_to_cursor(self) -> None:
        scanner = Scanner("ab\ncd")
        scanner.reset(3)
        assert scanner.location() == (2, 1)
