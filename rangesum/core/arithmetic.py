"""Integer arithmetic primitives used by the range driver."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class GcdDivergenceError(ValueError):
    """Raised when subtraction GCD exceeds its step bound without converging."""

    def __init__(self, a: int, b: int, steps: int) -> None:
        self.a = a
        self.b = b
        self.steps = steps
        super().__init__(
            f"gcd({a}, {b}) did not converge within {steps} subtraction steps"
        )


def add(a: int, b: int) -> int:
    return a + b


def double(x: int) -> int:
    return x * 2


def gcd(a: int, b: int, max_steps: int | None = None) -> int:
    """Greatest common divisor by repeated subtraction.

    Subtracts the smaller operand from the larger until both are equal. Only
    positive operands converge; zero or negative operands loop forever
    unless ``max_steps`` is given.

    Args:
        a: First operand.
        b: Second operand.
        max_steps: Optional bound on subtraction steps. ``None`` means
            unbounded.

    Returns:
        The common value both operands reduce to.

    Raises:
        GcdDivergenceError: If ``max_steps`` is set and exceeded.
    """
    orig_a, orig_b = a, b
    steps = 0
    while a != b:
        if max_steps is not None and steps >= max_steps:
            raise GcdDivergenceError(orig_a, orig_b, steps)
        if a > b:
            a = a - b
        else:
            b = b - a
        steps += 1
    logger.debug("gcd(%d, %d) = %d after %d steps", orig_a, orig_b, a, steps)
    return a


__all__ = ["GcdDivergenceError", "add", "double", "gcd"]
