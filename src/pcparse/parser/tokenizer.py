"""Cursor-based scanner implementing the .pc whitespace policy.

Whitespace between tokens is insignificant, except for newlines, which
terminate lines. Comments are not skipped here; the grammar matches them as
a line form of their own.
"""

from __future__ import annotations

NEWLINE = "\n"

# Unicode White_Space characters. Unlike str.isspace(), this excludes the
# information separators U+001C..U+001F.
WHITESPACE = frozenset("\t\n\v\f\r \x85\xa0") | frozenset(
    map(chr, (0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000))
)
_WHITESPACE_CHARS = "".join(sorted(WHITESPACE))


def is_inline_whitespace(char: str) -> bool:
    """Whitespace that may appear between tokens on a single line."""
    return char != NEWLINE and char in WHITESPACE


class Scanner:
    """Cursor over the input text.

    Every ``match_*`` method applies the whitespace policy before trying its
    token and leaves the cursor untouched when the token does not match.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        """Whether the cursor has consumed the whole input."""
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Get the character under the cursor, or "" at end of input."""
        if self.at_end():
            return ""
        return self.text[self.pos]

    def mark(self) -> int:
        """Get the current position for a later reset()."""
        return self.pos

    def reset(self, pos: int) -> None:
        """Rewind the cursor to a position returned by mark()."""
        self.pos = pos

    def skip_whitespace(self) -> None:
        """Advance past a run of non-newline whitespace. Never fails."""
        text = self.text
        end = len(text)
        pos = self.pos
        while pos < end and is_inline_whitespace(text[pos]):
            pos += 1
        self.pos = pos

    def match_literal(self, literal: str) -> bool:
        """Consume an exact literal.

        Args:
            literal: Text that must appear at the cursor.

        Returns:
            True if the literal was consumed.
        """
        start = self.pos
        self.skip_whitespace()
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        self.pos = start
        return False

    def match_chars(self, allowed: frozenset[str]) -> str | None:
        """Consume the longest non-empty run of characters from a set.

        Args:
            allowed: Characters the token may contain.

        Returns:
            The matched token or None if not even one character matched.
        """
        start = self.pos
        self.skip_whitespace()
        text = self.text
        end = len(text)
        token_start = pos = self.pos
        while pos < end and text[pos] in allowed:
            pos += 1
        if pos == token_start:
            self.pos = start
            return None
        self.pos = pos
        return text[token_start:pos]

    def match_rest_of_line(self) -> str:
        """Consume everything up to, not including, the next newline.

        Leading whitespace is skipped by the whitespace policy and trailing
        whitespace (including a CR from a CRLF ending) is trimmed. May be empty.
        """
        self.skip_whitespace()
        end = self.text.find(NEWLINE, self.pos)
        if end == -1:
            end = len(self.text)
        value = self.text[self.pos:end]
        self.pos = end
        return value.rstrip(_WHITESPACE_CHARS)

    def match_newline(self) -> bool:
        """Consume a line terminator."""
        return self.match_literal(NEWLINE)

    def location(self, pos: int | None = None) -> tuple[int, int]:
        """Get the 1-based (line, column) of a position.

        Args:
            pos: Offset into the input. Defaults to the cursor.
        """
        if pos is None:
            pos = self.pos
        line = self.text.count(NEWLINE, 0, pos) + 1
        column = pos - (self.text.rfind(NEWLINE, 0, pos) + 1) + 1
        return line, column
