"""Runtime settings for the rdcalc CLI, read from the environment.

RDCALC_PROMPT     prompt shown by the interactive loop (default ">> ")
RDCALC_PRECISION  significant digits when printing results, 1-17 (default 6)
RDCALC_SELFTEST   run the self-test before the interactive loop (default on)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROMPT = ">> "
DEFAULT_PRECISION = 6

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _parse_bool(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be one of {', '.join(_TRUE + _FALSE)}, got {raw!r}")


def _parse_precision(name: str, raw: str) -> int:
    try:
        precision = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if not 1 <= precision <= 17:
        raise ValueError(f"{name} must be between 1 and 17, got {precision}")
    return precision


@dataclass(frozen=True)
class Settings:
    """CLI settings; see the module docstring for the variables."""

    prompt: str = DEFAULT_PROMPT
    precision: int = DEFAULT_PRECISION
    selftest: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from `env` (defaults to os.environ).

        Raises ValueError naming the variable when a value is malformed.
        """
        env = os.environ if env is None else env
        return cls(
            prompt=env.get("RDCALC_PROMPT", DEFAULT_PROMPT),
            precision=_parse_precision("RDCALC_PRECISION", env.get("RDCALC_PRECISION", str(DEFAULT_PRECISION))),
            selftest=_parse_bool("RDCALC_SELFTEST", env.get("RDCALC_SELFTEST", "1")),
        )
