"""Data models for range driver runs.

Provides the RunResult dataclass returned by RangeSumService.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RunResult:
    """Outcome of one driver run over ``[n, m]``.

    Attributes:
        n: Lower loop bound (inclusive).
        m: Upper loop bound (inclusive).
        total: Final accumulated sum of ``double(j)``.
        gcd: GCD of ``n`` and ``m``.
        iterations: Number of loop bodies executed (0 when n > m).
    """

    n: int
    m: int
    total: int = 0
    gcd: int = 0
    iterations: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert RunResult to a plain dict suitable for JSON output."""
        return {
            "n": int(self.n),
            "m": int(self.m),
            "sum": int(self.total),
            "gcd": int(self.gcd),
            "iterations": int(self.iterations),
        }
