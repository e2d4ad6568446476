"""Named constants and unary functions available to expressions.

The table is built once and never mutated; extend() hands back a new table.
"""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional

UnaryFunction = Callable[[float], float]


def _ieee(fn: UnaryFunction) -> UnaryFunction:
    """Wrap a math function so domain errors give NaN and overflow gives inf.

    Python's math module raises where the C library returns a special value;
    expressions only ever see numbers.
    """
    if getattr(fn, "_ieee", False):
        return fn

    @functools.wraps(fn)
    def wrapped(x: float) -> float:
        try:
            return fn(x)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    # extend() rebuilds tables from already wrapped functions
    wrapped._ieee = True
    return wrapped


@dataclass(frozen=True)
class SymbolTable:
    """Read-only constant and function lookup for the Identifier production."""

    constants: Mapping[str, float] = field(default_factory=dict)
    functions: Mapping[str, UnaryFunction] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze copies so callers' dicts can't change a table after the fact.
        object.__setattr__(self, "constants", MappingProxyType(dict(self.constants)))
        object.__setattr__(
            self,
            "functions",
            MappingProxyType({name: _ieee(fn) for name, fn in self.functions.items()}),
        )

    def constant(self, name: str) -> Optional[float]:
        return self.constants.get(name)

    def function(self, name: str) -> Optional[UnaryFunction]:
        return self.functions.get(name)

    def names(self) -> list[str]:
        return sorted(set(self.constants) | set(self.functions))

    def extend(
        self,
        constants: Optional[Mapping[str, float]] = None,
        functions: Optional[Mapping[str, UnaryFunction]] = None,
    ) -> SymbolTable:
        """Return a new table with extra (or overriding) entries."""
        return SymbolTable(
            constants={**self.constants, **(constants or {})},
            functions={**self.functions, **(functions or {})},
        )


DEFAULT_SYMBOLS = SymbolTable(
    constants={
        "e": math.exp(1),
        "pi": math.atan(1) * 4,
    },
    functions={
        "cos": math.cos,
        "sin": math.sin,
        "sqrt": math.sqrt,
    },
)
