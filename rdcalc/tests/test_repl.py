"""Tests for the interactive loop."""

import io
import math

from rdcalc.config import Settings
from rdcalc.repl import run_repl
from rdcalc.report import format_value


def _run(text, console, settings=Settings()):
    return run_repl(io.StringIO(text), console, settings)


def test_prints_values(console, buffer):
    count = _run("1+2\n(3+4)*(2+3)\n\n", console)
    assert count == 2
    out = buffer.getvalue()
    assert ">> 3\n" in out
    assert ">> 35\n" in out


def test_empty_line_stops(console, buffer):
    count = _run("1\n\n2\n", console)
    assert count == 1
    assert "2" not in buffer.getvalue()


def test_whitespace_only_line_is_skipped(console, buffer):
    count = _run("   \n\t\n4\n\n", console)
    assert count == 1
    assert ">> >> >> 4\n" in buffer.getvalue()


def test_end_of_stream_stops(console, buffer):
    assert _run("2*3", console) == 1
    assert "6" in buffer.getvalue()


def test_error_caret_aligned_under_input(console, buffer):
    _run("foo\n\n", console)
    # prompt width (3) + offset (3)
    assert '      ^\nerror (position = 3): Unknown symbol "foo".\n' in buffer.getvalue()


def test_loop_continues_after_error(console, buffer):
    count = _run("(1+2\n5\n\n", console)
    assert count == 2
    out = buffer.getvalue()
    assert "Expected ')'." in out
    assert "5\n" in out


def test_loop_continues_after_deep_nesting(console, buffer):
    line = "(" * 400 + "1" + ")" * 400
    count = _run(line + "\n2*3\n\n", console)
    assert count == 2
    out = buffer.getvalue()
    assert "Expression nested too deeply." in out
    assert ">> 6\n" in out


def test_custom_prompt_and_precision(console, buffer):
    settings = Settings(prompt="calc> ", precision=3)
    _run("pi\nbar(1)\n\n", console, settings)
    out = buffer.getvalue()
    assert "calc> 3.14\n" in out
    assert " " * 9 + "^" in out


def test_format_value():
    assert format_value(math.pi) == "3.14159"
    assert format_value(35.0) == "35"
    assert format_value(-1.0) == "-1"
    assert format_value(1e9) == "1e+09"
    assert format_value(math.inf) == "inf"
    assert format_value(math.pi, 10) == "3.141592654"
