"""Position-tracking cursor over the source text."""

from __future__ import annotations

import string

from rdcalc.errors import syntax_error

# Returned by peek()/advance() once the cursor reaches the end of the source.
# Belongs to none of the character classes below.
END = ""

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
WHITESPACE = frozenset(" \t\r\n")
SIGNS = frozenset("+-")


class Scanner:
    """Cursor over an immutable source string.

    The cursor only moves forward, and only through advance(); every other
    method is built on peek()/advance().
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    def reset(self) -> None:
        """Rewind to the start of the source."""
        self._position = 0

    def at_end(self) -> bool:
        return self._position >= len(self._source)

    def peek(self) -> str:
        """Character at the cursor, or END."""
        if self.at_end():
            return END
        return self._source[self._position]

    def advance(self) -> str:
        """Return the character at the cursor and step past it; END does not move."""
        ch = self.peek()
        if ch != END:
            self._position += 1
        return ch

    def skip_whitespace(self) -> None:
        while self.peek() in WHITESPACE:
            self.advance()

    def expect(self, expected: str) -> None:
        """Step past `expected`, or fail with a syntax error at the cursor."""
        if self.peek() != expected:
            raise syntax_error(f"Expected '{expected}'.", self._position)
        self.advance()
