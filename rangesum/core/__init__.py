"""rangesum.core package.

Import submodules explicitly where needed; nothing is pulled in at package
import time.
"""

from __future__ import annotations

__all__: list[str] = []
