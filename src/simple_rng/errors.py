"""
Errors - Caller Contract Violations

TigerStyle: Explicit error types.
Programming errors (bad seed, negative lengths) are asserted instead.
"""

from __future__ import annotations


class RngError(Exception):
    """Base error for generator operations."""

    pass


class InvalidRangeError(RngError, ValueError):
    """gen_range was called with min > max, or a span wider than 64 bits."""

    def __init__(self, min_val: int, max_val: int, reason: str = "min must be <= max"):
        self.min_val = min_val
        self.max_val = max_val
        super().__init__(f"invalid range [{min_val}, {max_val}]: {reason}")


class InvalidBitWidthError(RngError, ValueError):
    """A sized integer was requested with an unsupported bit width."""

    def __init__(self, size: int, supported: tuple[int, ...]):
        self.size = size
        self.supported = supported
        super().__init__(f"unsupported bit width {size}, expected one of {supported}")


class TimeSeedingDisabledError(RngError):
    """Time-based seeding was requested while running in constrained mode."""

    pass
