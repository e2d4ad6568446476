"""Single-pass recursive-descent evaluator.

Each production computes its value while it recognizes input; no tree is
built. The grammar, with whitespace allowed between any two tokens:

    EXPRESSION: SUM <end of input>
    SUM:        PRODUCT [ ('+' | '-') PRODUCT ]
    PRODUCT:    TERM [ ('*' | '/') SUM ]
    TERM:       '(' SUM ')' | CONSTANT | IDENTIFIER
    IDENTIFIER: SYMBOL | SYMBOL '(' SUM ')'
    SYMBOL:     ALPHA (ALPHA | DIGIT)*
    CONSTANT:   ['+' | '-'] DIGIT* ['.' DIGIT*] [('e' | 'E') ['+' | '-'] DIGIT+]

PRODUCT recurses into SUM for its right operand, and SUM takes at most one
operator. Chained operators therefore group to the right and '*' and '/'
bind looser than a following '+' or '-': "2*3+4" is 2*(3+4) == 14 and
"8/2/2" is 8/(2/2) == 8. This is the established behaviour of the
calculator and is kept as is.
"""

from __future__ import annotations

import math

from rdcalc.errors import (
    ParseError,
    invalid_float,
    syntax_error,
    unknown_function,
    unknown_symbol,
)
from rdcalc.models import EvalResult
from rdcalc.scanner import DIGITS, END, LETTERS, SIGNS, Scanner
from rdcalc.symbols import DEFAULT_SYMBOLS, SymbolTable

_NUMBER_START = DIGITS | SIGNS | {"."}
_EXPONENT_MARKERS = frozenset("eE")


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class Evaluator:
    """Evaluates one source string against a symbol table.

    Not reentrant: the cursor is instance state. evaluate() rewinds it, so
    calling evaluate() again on the same instance gives the same result.
    """

    def __init__(self, source: str, symbols: SymbolTable = DEFAULT_SYMBOLS) -> None:
        self._scanner = Scanner(source)
        self._symbols = symbols

    @property
    def source(self) -> str:
        return self._scanner.source

    @property
    def position(self) -> int:
        return self._scanner.position

    def evaluate(self) -> EvalResult:
        """Evaluate the whole source.

        Returns an EvalResult holding the value, or the first ParseError hit.
        The first error aborts every production in flight; nothing is
        recovered. Nesting too deep for the interpreter stack is reported as
        a syntax error at the point recursion gave out.
        """
        self._scanner.reset()
        try:
            value = self._expression()
        except ParseError as e:
            return EvalResult(source=self.source, error=e)
        except RecursionError:
            # Nesting deeper than the interpreter stack allows
            e = syntax_error("Expression nested too deeply.", self._scanner.position)
            return EvalResult(source=self.source, error=e)
        return EvalResult(source=self.source, value=value)

    # -- productions ---------------------------------------------------------

    def _expression(self) -> float:
        value = self._sum()

        self._scanner.skip_whitespace()
        if self._scanner.peek() != END:
            raise syntax_error("Syntax error.", self._scanner.position)
        return value

    def _sum(self) -> float:
        left = self._product()

        self._scanner.skip_whitespace()
        op = self._scanner.peek()
        if op == "+":
            self._scanner.advance()
            return left + self._product()
        if op == "-":
            self._scanner.advance()
            return left - self._product()
        return left

    def _product(self) -> float:
        left = self._term()

        self._scanner.skip_whitespace()
        op = self._scanner.peek()
        if op == "*":
            self._scanner.advance()
            return left * self._sum()
        if op == "/":
            self._scanner.advance()
            return _divide(left, self._sum())
        return left

    def _term(self) -> float:
        self._scanner.skip_whitespace()

        ch = self._scanner.peek()
        if ch == "(":
            self._scanner.advance()
            value = self._sum()
            self._scanner.skip_whitespace()
            self._scanner.expect(")")
            return value
        if ch in _NUMBER_START:
            return self._constant()
        if ch in LETTERS:
            return self._identifier()
        raise syntax_error(
            "Expected a number, symbol or parenthesized expression.",
            self._scanner.position,
        )

    def _identifier(self) -> float:
        name = self._symbol()

        self._scanner.skip_whitespace()
        if self._scanner.peek() == "(":
            fn = self._symbols.function(name)
            if fn is None:
                raise unknown_function(name, self._scanner.position)
            self._scanner.expect("(")
            argument = self._sum()
            self._scanner.expect(")")
            return fn(argument)

        value = self._symbols.constant(name)
        if value is None:
            raise unknown_symbol(name, self._scanner.position)
        return value

    # -- lexical productions -------------------------------------------------

    def _symbol(self) -> str:
        self._scanner.skip_whitespace()
        if self._scanner.peek() not in LETTERS:
            raise syntax_error(
                "Expected alpha character at beginning of symbol.",
                self._scanner.position,
            )
        chars = []
        while self._scanner.peek() in LETTERS or self._scanner.peek() in DIGITS:
            chars.append(self._scanner.advance())
        return "".join(chars)

    def _constant(self) -> float:
        """Longest prefix that reads as a floating point literal."""
        self._scanner.skip_whitespace()
        start = self._scanner.position
        chars: list[str] = []
        mantissa_digits = 0

        if self._scanner.peek() in SIGNS:
            chars.append(self._scanner.advance())

        while self._scanner.peek() in DIGITS:
            chars.append(self._scanner.advance())
            mantissa_digits += 1

        if self._scanner.peek() == ".":
            chars.append(self._scanner.advance())
            while self._scanner.peek() in DIGITS:
                chars.append(self._scanner.advance())
                mantissa_digits += 1

        if self._scanner.peek() in _EXPONENT_MARKERS:
            chars.append(self._scanner.advance())
            if self._scanner.peek() in SIGNS:
                chars.append(self._scanner.advance())
            if self._scanner.peek() not in DIGITS:
                raise invalid_float(
                    "Expected exponent in floating point constant.",
                    self._scanner.position,
                )
            while self._scanner.peek() in DIGITS:
                chars.append(self._scanner.advance())

        if mantissa_digits == 0:
            raise invalid_float("Invalid float.", start)
        try:
            return float("".join(chars))
        except ValueError:
            raise invalid_float("Invalid float.", start) from None


def evaluate(source: str, symbols: SymbolTable = DEFAULT_SYMBOLS) -> EvalResult:
    """Evaluate `source` with a fresh Evaluator."""
    return Evaluator(source, symbols).evaluate()


def calc(source: str, symbols: SymbolTable = DEFAULT_SYMBOLS) -> float:
    """Evaluate `source` and return the value; raises ParseError on bad input."""
    return evaluate(source, symbols).unwrap()
