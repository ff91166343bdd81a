"""Top-level rangesum package.

Sums parity-signed values over an integer range and reports the GCD of the
bounds. See `rangesum.main` for the console entry point.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
