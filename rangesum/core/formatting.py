"""Formatting utilities for driver output."""

from __future__ import annotations


def format_value(j: int) -> str:
    return str(j)


def format_sum(total: int) -> str:
    return f"sum = {total}"


def format_gcd(divisor: int) -> str:
    return f"gcd (n, m) = {divisor}"
