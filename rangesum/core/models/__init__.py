"""Models package re-exports.

Allows `from rangesum.core.models import RunResult`.
"""

from __future__ import annotations

from .models import RunResult

__all__ = ["RunResult"]
