"""Parse errors raised by the grammar engine.

Every failure carries the zero-based offset into the source where recognition
stopped, so callers can point a caret at the offending character.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Which production rejected the input."""

    SYNTAX = "syntax"
    UNKNOWN_SYMBOL = "unknown-symbol"
    UNKNOWN_FUNCTION = "unknown-function"
    INVALID_FLOAT = "invalid-float"


class ParseError(Exception):
    """Malformed input, with the message and cursor offset where parsing failed."""

    def __init__(
        self,
        message: str,
        position: int,
        kind: ErrorKind = ErrorKind.SYNTAX,
        symbol: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.kind = kind
        self.symbol = symbol

    def __repr__(self) -> str:
        return f"ParseError({self.message!r}, position={self.position}, kind={self.kind.value})"

    def render(self, indent: str = "") -> str:
        """Caret line under the failing offset, then the message line.

        `indent` is prepended to the caret line only, so the caret lines up
        with input echoed after a prompt.
        """
        caret = indent + " " * self.position + "^"
        return f"{caret}\nerror (position = {self.position}): {self.message}"

    def to_dict(self) -> dict:
        d = {
            "kind": self.kind.value,
            "message": self.message,
            "position": self.position,
        }
        if self.symbol is not None:
            d["symbol"] = self.symbol
        return d


def syntax_error(message: str, position: int) -> ParseError:
    return ParseError(message, position, ErrorKind.SYNTAX)


def unknown_symbol(name: str, position: int) -> ParseError:
    return ParseError(f'Unknown symbol "{name}".', position, ErrorKind.UNKNOWN_SYMBOL, symbol=name)


def unknown_function(name: str, position: int) -> ParseError:
    return ParseError(f'Unknown function "{name}".', position, ErrorKind.UNKNOWN_FUNCTION, symbol=name)


def invalid_float(message: str, position: int) -> ParseError:
    return ParseError(message, position, ErrorKind.INVALID_FLOAT)
