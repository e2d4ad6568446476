"""CLI for the rdcalc expression evaluator.

Usage:
    python -m rdcalc eval "(3+4)*(2+3)"     # Evaluate one expression
    python -m rdcalc eval "sqrt(2)" --json  # Machine-readable result
    python -m rdcalc repl                   # Self-test, then interactive loop
    python -m rdcalc selftest               # Run the demonstration table
    python -m rdcalc symbols                # List constants and functions
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rdcalc.config import Settings
from rdcalc.evaluator import evaluate
from rdcalc.report import format_value, render_selftest, render_symbols
from rdcalc.repl import BANNER, run_repl
from rdcalc.selftest import run_selftest
from rdcalc.symbols import DEFAULT_SYMBOLS

app = typer.Typer(
    name="rdcalc",
    help="Recursive-descent arithmetic expression evaluator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate (use -- before a leading '-')"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Evaluate a single expression."""
    settings = _load_settings()
    result = evaluate(expression)

    if as_json:
        out.print_json(json.dumps(result.to_dict()))
    elif result.ok:
        out.print(format_value(result.value, settings.precision), markup=False, highlight=False)
    else:
        out.print(expression, markup=False, highlight=False, emoji=False, soft_wrap=True)
        out.print(result.error.render(), markup=False, highlight=False, emoji=False, soft_wrap=True)

    if not result.ok:
        raise typer.Exit(1)


@app.command("repl")
def cmd_repl(
    selftest: Optional[bool] = typer.Option(
        None, "--selftest/--no-selftest", help="Run the self-test first (default: RDCALC_SELFTEST)",
    ),
) -> None:
    """Read expressions from stdin, one per line, until an empty line."""
    settings = _load_settings()
    run_first = settings.selftest if selftest is None else selftest
    if run_first:
        console.print("Running test cases ...")
        render_selftest(run_selftest(), console, settings.precision)

    out.print(BANNER, markup=False, highlight=False)
    run_repl(sys.stdin, out, settings)


@app.command("selftest")
def cmd_selftest() -> None:
    """Run the built-in table of expressions and expected values."""
    settings = _load_settings()
    report = run_selftest()
    render_selftest(report, console, settings.precision)
    if not report.all_passed:
        raise typer.Exit(1)


@app.command("symbols")
def cmd_symbols() -> None:
    """List the constants and functions expressions may use."""
    settings = _load_settings()
    render_symbols(DEFAULT_SYMBOLS, console, settings.precision)


if __name__ == "__main__":
    app()
