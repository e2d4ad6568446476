"""Interactive read-evaluate-print loop over a text stream."""

from __future__ import annotations

from typing import TextIO

from rich.console import Console

from rdcalc.config import Settings
from rdcalc.evaluator import Evaluator
from rdcalc.report import format_value
from rdcalc.symbols import DEFAULT_SYMBOLS, SymbolTable

BANNER = (
    "Type an expression and press return to evaluate.\n"
    "Enter an empty line to exit."
)


def _emit(console: Console, text: str, end: str = "\n") -> None:
    # Raw text: no markup, no highlighting, no wrapping, so carets stay aligned.
    console.print(text, end=end, markup=False, highlight=False, emoji=False, soft_wrap=True)


def run_repl(
    stream: TextIO,
    console: Console,
    settings: Settings = Settings(),
    symbols: SymbolTable = DEFAULT_SYMBOLS,
) -> int:
    """Evaluate one expression per line until an empty line or end of stream.

    Whitespace-only lines are skipped without evaluation. Errors are printed
    with the caret under the offending character of the echoed line.

    Returns the number of expressions evaluated.
    """
    indent = " " * len(settings.prompt)
    evaluated = 0

    while True:
        _emit(console, settings.prompt, end="")
        line = stream.readline()
        if not line:
            # End of stream without a terminating empty line
            _emit(console, "")
            break
        line = line.rstrip("\r\n")
        if not line:
            break
        if not line.strip():
            continue

        result = Evaluator(line, symbols).evaluate()
        evaluated += 1
        if result.ok:
            _emit(console, format_value(result.value, settings.precision))
        else:
            _emit(console, result.error.render(indent))

    return evaluated
