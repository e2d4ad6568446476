"""Rich rendering for self-test reports, symbol tables and values."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rdcalc.config import DEFAULT_PRECISION
from rdcalc.models import CaseOutcome, SelfTestReport
from rdcalc.symbols import SymbolTable

_VERDICT_COLORS = {"ok": "green", "failed": "red", "error": "red"}


def format_value(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """%g-style formatting with `precision` significant digits."""
    return f"{value:.{precision}g}"


def render_selftest(report: SelfTestReport, console: Console, precision: int = DEFAULT_PRECISION) -> None:
    """Render a Rich table with one row per case, then a summary line."""
    table = Table(title="Self-test", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Input", min_width=16)
    table.add_column("Result", justify="right")
    table.add_column("Expected", justify="right")
    table.add_column("Verdict")

    def result(o: CaseOutcome) -> str:
        if o.error is not None:
            return f"[red]{escape(o.error.message)}[/red]"
        return format_value(o.value, precision)

    for i, o in enumerate(report.outcomes, 1):
        color = _VERDICT_COLORS.get(o.verdict, "white")
        table.add_row(
            str(i),
            escape(repr(o.case.source)),
            result(o),
            format_value(o.case.expected, precision),
            f"[{color}]{o.verdict}[/{color}]",
        )

    console.print()
    console.print(table)
    if report.all_passed:
        console.print(f"[bold green]All tests succeeded.[/bold green] ({report.passed}/{report.total})")
    else:
        console.print(f"[bold red]One or more tests failed.[/bold red] ({report.passed}/{report.total} passed)")
    console.print()


def render_symbols(symbols: SymbolTable, console: Console, precision: int = DEFAULT_PRECISION) -> None:
    """Render the constants and functions an expression may name."""
    table = Table(title="Symbols", show_header=True, header_style="bold")
    table.add_column("Name", style="green")
    table.add_column("Kind")
    table.add_column("Value / Signature", justify="right")

    for name in sorted(symbols.constants):
        table.add_row(escape(name), "constant", format_value(symbols.constants[name], precision))
    for name in sorted(symbols.functions):
        table.add_row(escape(name), "function", f"{escape(name)}(x)")

    console.print()
    console.print(table)
    console.print()
