"""Range driver service.

Walks ``i`` over ``[n, m]``, emits the parity-signed value of each ``i`` and
accumulates ``double(j)`` into a running sum, then computes ``gcd(n, m)``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from rangesum.core.arithmetic import add, double, gcd
from rangesum.core.config import config
from rangesum.core.models import RunResult

logger = logging.getLogger(__name__)


def parity_sign(i: int) -> int:
    """Return ``-i`` for even ``i`` and ``i`` for odd ``i``."""
    if i % 2 == 0:
        return -i
    return i


class RangeSumService:
    """Runs the range loop and the final GCD for a pair of bounds."""

    def __init__(self, gcd_max_steps: int | None = None) -> None:
        """Initialize service.

        Args:
            gcd_max_steps: Step bound passed to gcd; 0 or negative means
                unbounded. Defaults to the configured GCD_MAX_STEPS.
        """
        if gcd_max_steps is None:
            self.gcd_max_steps = config.gcd_step_limit
        else:
            self.gcd_max_steps = gcd_max_steps if gcd_max_steps > 0 else None

    def iter_values(self, n: int, m: int) -> Iterator[int]:
        """Yield ``j`` for each ``i`` from ``n`` to ``m`` inclusive."""
        for i in range(n, m + 1):
            yield parity_sign(i)

    def run(
        self,
        n: int,
        m: int,
        emit: Callable[[int], None] | None = None,
        on_sum: Callable[[int], None] | None = None,
    ) -> RunResult:
        """Run the loop over ``[n, m]`` and compute ``gcd(n, m)``.

        The sum is final (and passed to ``on_sum``) before gcd starts, so a
        diverging gcd never hides it.

        Args:
            n: Lower bound (inclusive).
            m: Upper bound (inclusive). No iterations when ``n > m``.
            emit: Called with each ``j`` as it is produced.
            on_sum: Called with the final sum before gcd is computed.

        Returns:
            RunResult with the final sum and GCD.

        Raises:
            GcdDivergenceError: If a step bound is set and gcd exceeds it.
        """
        result = self.accumulate(n, m, emit=emit)
        if on_sum is not None:
            on_sum(result.total)
        result.gcd = gcd(n, m, max_steps=self.gcd_max_steps)
        logger.info("gcd(%d, %d) = %d", n, m, result.gcd)
        return result

    def accumulate(self, n: int, m: int, emit: Callable[[int], None] | None = None) -> RunResult:
        """Loop phase only: sum ``double(j)`` over ``[n, m]``; ``gcd`` is left at 0."""
        logger.info("Running range [%d, %d]", n, m)
        total = 0
        iterations = 0
        for j in self.iter_values(n, m):
            if emit is not None:
                emit(j)
            total = add(total, double(j))
            iterations += 1
            logger.debug("j=%d sum=%d", j, total)

        logger.info("Finished %d iterations: sum=%d", iterations, total)
        return RunResult(n=n, m=m, total=total, iterations=iterations)

__all__ = ["RangeSumService", "parity_sign"]
