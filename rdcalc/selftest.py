"""Demonstration harness: a fixed table of expressions and expected values.

Each case is evaluated with a fresh Evaluator and judged by exact float
equality. A parse error marks the case failed; the run itself never raises.
"""

from __future__ import annotations

import math

from rdcalc.evaluator import Evaluator
from rdcalc.models import CaseOutcome, SelfTestCase, SelfTestReport
from rdcalc.symbols import DEFAULT_SYMBOLS, SymbolTable

CASES: tuple[SelfTestCase, ...] = (
    # Constants
    SelfTestCase("1", 1.0),
    SelfTestCase("1.234", 1.234),
    SelfTestCase(".1", 0.1),
    SelfTestCase("-2", -2.0),
    SelfTestCase("-.1", -0.1),
    SelfTestCase("1e9", 1e9),
    SelfTestCase("2e-8", 2e-8),
    SelfTestCase("3e+7", 3e+7),
    SelfTestCase("456.789e+5", 456.789e+5),
    # Symbols
    SelfTestCase("e", math.exp(1)),
    SelfTestCase("pi", math.atan(1) * 4),
    # Addition
    SelfTestCase("1+2", 3.0),
    SelfTestCase("3+e", 3.0 + math.exp(1)),
    # Subtraction
    SelfTestCase("4-5", -1.0),
    # Multiplication
    SelfTestCase("2*3", 6.0),
    # Parenthesized expressions
    SelfTestCase("(3+4)", 7.0),
    SelfTestCase("(3+4)*(2+3)", 35.0),
    # Addition combined with a negative literal
    SelfTestCase("1+-2", -1.0),
    # White space
    SelfTestCase("\t 1  + ( 2 * 10 )    ", 21.0),
    # sqrt
    SelfTestCase("sqrt(4)", 2.0),
    SelfTestCase("sqrt((3+4)*(2+3))", math.sqrt(35)),
    SelfTestCase("sqrt(1 + 2 )", math.sqrt(3)),
    # trig
    SelfTestCase("cos(pi)", -1.0),
    SelfTestCase("sin(0)", 0.0),
)


def run_case(case: SelfTestCase, symbols: SymbolTable = DEFAULT_SYMBOLS) -> CaseOutcome:
    result = Evaluator(case.source, symbols).evaluate()
    return CaseOutcome(case=case, value=result.value, error=result.error)


def run_selftest(
    cases: tuple[SelfTestCase, ...] | list[SelfTestCase] = CASES,
    symbols: SymbolTable = DEFAULT_SYMBOLS,
) -> SelfTestReport:
    """Run every case in order and collect the outcomes."""
    return SelfTestReport(outcomes=[run_case(case, symbols) for case in cases])
