"""rdcalc: single-pass recursive-descent arithmetic evaluator.

Numbers, the constants e and pi, the functions sin, cos and sqrt, the four
basic operators and parentheses. Values are computed while the input is
recognized; no syntax tree is built.

Usage:
    from rdcalc import calc, evaluate
    calc("(3+4)*(2+3)")        # 35.0
    evaluate("foo").error      # ParseError: Unknown symbol "foo".

    python -m rdcalc repl      # Interactive loop
"""

from rdcalc.errors import ErrorKind, ParseError
from rdcalc.evaluator import Evaluator, calc, evaluate
from rdcalc.models import EvalResult
from rdcalc.symbols import DEFAULT_SYMBOLS, SymbolTable

__all__ = [
    "DEFAULT_SYMBOLS",
    "ErrorKind",
    "EvalResult",
    "Evaluator",
    "ParseError",
    "SymbolTable",
    "calc",
    "evaluate",
]
