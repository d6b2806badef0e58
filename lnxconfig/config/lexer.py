"""
Line tokenizer for the lnx configuration format.

Each line is split on ASCII whitespace into tokens. There is no quoting
or escaping. A token consisting of a single '#' starts a comment that
runs to the end of the line; a '#' glued to other characters is part of
an ordinary token.
"""

from dataclasses import dataclass
from typing import Iterator


COMMENT_MARKER = "#"

# Same set as Rust's char::is_ascii_whitespace (no vertical tab)
ASCII_WHITESPACE = frozenset(" \t\n\x0c\r")


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""

    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Tokenizer for one line of an lnx file.

    Example:
        >>> [t.value for t in Lexer("route 10.0.0.0/24 via 10.1.0.2 # default")]
        ['route', '10.0.0.0/24', 'via', '10.1.0.2']
    """

    def __init__(self, source: str, line: int = 0):
        self.source = source
        self.line = line
        self.pos = 0

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _skip_whitespace(self) -> None:
        char = self._current()
        while char and char in ASCII_WHITESPACE:
            self.pos += 1
            char = self._current()

    def next_token(self) -> Token | None:
        """Get the next raw token, or None at end of line."""
        self._skip_whitespace()

        if self.pos >= len(self.source):
            return None

        start = self.pos
        char = self._current()
        while char and char not in ASCII_WHITESPACE:
            self.pos += 1
            char = self._current()

        return Token(
            value=self.source[start:self.pos],
            line=self.line,
            column=start + 1,
        )

    def tokenize(self) -> Iterator[Token]:
        """Generate tokens up to the end of line or a comment marker."""
        while True:
            token = self.next_token()
            if token is None or token.value == COMMENT_MARKER:
                break
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()


def tokenize_line(line: str, lineno: int = 0) -> list[Token]:
    """Convenience function to tokenize a single line."""
    return list(Lexer(line, lineno))
