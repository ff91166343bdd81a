"""Services wrapping the arithmetic primitives behind a simple run API."""

from rangesum.core.services.driver import RangeSumService, parity_sign

__all__ = ["RangeSumService", "parity_sign"]
