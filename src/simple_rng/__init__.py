"""
simple_rng - Deterministic Pseudo-Random Numbers

A small, seedable 64-bit Linear Congruential Generator with:
- Reproducible raw 64-bit output (Rng.next)
- Unbiased inclusive ranges, floats, booleans and sized integers
- Random selection and in-place shuffling
- Injectable time sources for seeding, with a constrained mode that turns
  time seeding off (SIMPLE_RNG_STD=false)

Not a cryptographic generator.

Usage:
    from simple_rng import Rng

    rng = Rng.new(42)
    roll = rng.gen_range(1, 6)
"""

from .clock import ManualClock, TimeSource, system_time_ns
from .config import Settings, configure_logging, get_settings, seed_from_env_or_time
from .errors import (
    InvalidBitWidthError,
    InvalidRangeError,
    RngError,
    TimeSeedingDisabledError,
)
from .rng import Rng

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Generator
    "Rng",
    # Time sources
    "TimeSource",
    "ManualClock",
    "system_time_ns",
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
    "seed_from_env_or_time",
    # Errors
    "RngError",
    "InvalidRangeError",
    "InvalidBitWidthError",
    "TimeSeedingDisabledError",
]
