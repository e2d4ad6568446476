"""Data models for rdcalc.

EvalResult, SelfTestCase, CaseOutcome, SelfTestReport: the typed records that
flow from the evaluator through the self-test harness to the CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from rdcalc.errors import ParseError


@dataclass
class EvalResult:
    """Outcome of one evaluation: a value or a parse error, never both."""

    source: str
    value: Optional[float] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the value, or raise the captured ParseError."""
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        d: dict = {"input": self.source, "ok": self.ok}
        if self.error is not None:
            d["error"] = self.error.to_dict()
        else:
            # JSON has no inf/nan literals
            d["value"] = self.value if math.isfinite(self.value) else str(self.value)
        return d


@dataclass(frozen=True)
class SelfTestCase:
    """One row of the demonstration table."""

    source: str
    expected: float


@dataclass
class CaseOutcome:
    """What the evaluator produced for a SelfTestCase."""

    case: SelfTestCase
    value: Optional[float] = None
    error: Optional[ParseError] = None

    @property
    def passed(self) -> bool:
        # Exact equality on purpose: the table's expectations are computed
        # with the same float operations the grammar performs.
        return self.error is None and self.value == self.case.expected

    @property
    def verdict(self) -> str:
        if self.error is not None:
            return "error"
        return "ok" if self.passed else "failed"


@dataclass
class SelfTestReport:
    """All outcomes of one self-test run."""

    outcomes: list[CaseOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0
