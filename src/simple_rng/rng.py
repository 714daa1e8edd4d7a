"""
Rng - Linear Congruential Generator

TigerStyle: All randomness is seeded and reproducible.
A single 64-bit state word advanced by state = state * A + C (mod 2**64),
with A and C fixed in constants.py. Every derived value (ranged ints,
floats, booleans, sized ints, picks) is post-processing of next() outputs.

Not suitable for cryptographic use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import MutableSequence, Optional, Sequence, TypeVar

from .clock import TimeSource, system_time_ns
from .config import seed_from_env_or_time, time_seeding_enabled
from .constants import (
    BIT_WIDTHS_SUPPORTED,
    FLOAT32_MANTISSA_BITS_COUNT,
    FLOAT32_SCALE,
    FLOAT64_MANTISSA_BITS_COUNT,
    FLOAT64_SCALE,
    LCG_INCREMENT,
    LCG_MULTIPLIER,
    MIX_GAMMA,
    MIX_MULTIPLIER_1,
    MIX_MULTIPLIER_2,
    WORD_BITS_COUNT,
    WORD_BYTES_COUNT,
    WORD_MASK,
    WORD_VALUES_COUNT,
)
from .errors import InvalidBitWidthError, InvalidRangeError, TimeSeedingDisabledError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def mix64(value: int) -> int:
    """Scramble a 64-bit word with the SplitMix64 finalizer.

    Used to derive fork seeds: a raw LCG word would put the child on the
    parent's own sequence.
    """
    z = (value + MIX_GAMMA) & WORD_MASK
    z = ((z ^ (z >> 30)) * MIX_MULTIPLIER_1) & WORD_MASK
    z = ((z ^ (z >> 27)) * MIX_MULTIPLIER_2) & WORD_MASK
    return z ^ (z >> 31)


@dataclass
class Rng:
    """Deterministic 64-bit LCG random number generator.

    TigerStyle:
    - All operations are deterministic given the same seed
    - The state word is the only mutable data
    - Never use global random state

    An Rng is not safe for concurrent use. Confine each instance to one
    thread, guard it with your own lock, or give each thread its own
    generator (see fork()).

    Usage:
        rng = Rng.new(42)
        rng.next()            # raw 64-bit word
        rng.gen_range(1, 6)   # inclusive
        rng.pick_random(["a", "b", "c"])
    """

    _seed: int
    _state: int = field(init=False, repr=False)
    _fork_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Initialize the state word from the seed.

        TigerStyle: Assert preconditions.
        """
        assert 0 <= self._seed <= WORD_MASK, f"seed ({self._seed}) must fit in 64 unsigned bits"
        self._state = self._seed

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(cls, seed: int) -> Rng:
        """Create a generator from an explicit seed. Zero is a valid seed."""
        return cls(_seed=seed)

    @classmethod
    def from_time(cls, time_source: TimeSource = system_time_ns) -> Rng:
        """Create a generator seeded from a time source.

        Args:
            time_source: Zero-argument callable returning an integer,
                typically nanoseconds since the epoch. Only the low 64 bits
                are used.

        Raises:
            TimeSeedingDisabledError: Running in constrained mode
                (SIMPLE_RNG_STD=false).
        """
        if not time_seeding_enabled():
            raise TimeSeedingDisabledError("time seeding is disabled (SIMPLE_RNG_STD=false)")

        seed = time_source() & WORD_MASK
        logger.debug(f"Seeded from time source: {seed}")
        return cls.new(seed)

    @classmethod
    def from_env(cls, time_source: TimeSource = system_time_ns) -> Rng:
        """Create a generator from SIMPLE_RNG_SEED, or the time source if unset."""
        return cls.new(seed_from_env_or_time(time_source))

    @property
    def seed(self) -> int:
        """Get the original seed."""
        return self._seed

    @property
    def state(self) -> int:
        """Get the current state word."""
        return self._state

    # =========================================================================
    # Core
    # =========================================================================

    def next(self) -> int:
        """Advance the generator and return the new 64-bit state word."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) & WORD_MASK
        return self._state

    # =========================================================================
    # Derivation
    # =========================================================================

    def gen_range(self, min_val: int, max_val: int) -> int:
        """Generate a random integer in [min_val, max_val].

        TigerStyle: Explicit bounds, inclusive range.

        Uses multiply-and-shift with rejection of the biased region, so
        every value in the range is equally likely.

        Raises:
            InvalidRangeError: min_val > max_val, or the range holds more
                than 2**64 values. Bounds are never swapped.
        """
        assert isinstance(min_val, int), f"min_val ({min_val!r}) must be an int"
        assert isinstance(max_val, int), f"max_val ({max_val!r}) must be an int"

        if min_val > max_val:
            raise InvalidRangeError(min_val, max_val)

        span = max_val - min_val + 1
        if span > WORD_VALUES_COUNT:
            raise InvalidRangeError(min_val, max_val, "range holds more than 2**64 values")

        return min_val + self._below(span)

    def _below(self, span: int) -> int:
        """Uniform integer in [0, span) for 1 <= span <= 2**64."""
        product = self.next() * span
        low = product & WORD_MASK
        if low < span:
            # 2**64 mod span; draws landing below it would skew the result
            threshold = (WORD_VALUES_COUNT - span) % span
            while low < threshold:
                product = self.next() * span
                low = product & WORD_MASK
        return product >> WORD_BITS_COUNT

    def gen_float(self) -> float:
        """Generate a random float in [0.0, 1.0) with 53 bits of precision."""
        return (self.next() >> (WORD_BITS_COUNT - FLOAT64_MANTISSA_BITS_COUNT)) * FLOAT64_SCALE

    def gen_f32(self) -> float:
        """Generate a random float in [0.0, 1.0) with 24 bits of precision.

        The result is exactly representable as an IEEE-754 single.
        """
        return (self.next() >> (WORD_BITS_COUNT - FLOAT32_MANTISSA_BITS_COUNT)) * FLOAT32_SCALE

    def gen_bool(self) -> bool:
        """Generate a random boolean from the top bit of the next word."""
        return (self.next() >> (WORD_BITS_COUNT - 1)) == 1

    def gen_unsigned(self, size: int) -> int:
        """Generate an unsigned integer of the given bit width.

        Args:
            size: One of 8, 16, 32, 64.

        Returns:
            The top ``size`` bits of the next word, in [0, 2**size).

        Raises:
            InvalidBitWidthError: Unsupported size.
        """
        if size not in BIT_WIDTHS_SUPPORTED:
            raise InvalidBitWidthError(size, BIT_WIDTHS_SUPPORTED)
        return self.next() >> (WORD_BITS_COUNT - size)

    def gen_signed(self, size: int) -> int:
        """Generate a two's-complement signed integer of the given bit width.

        Same bits as gen_unsigned, with the top bit of the slice as sign.
        Result is in [-2**(size-1), 2**(size-1)).
        """
        value = self.gen_unsigned(size)
        if value >> (size - 1):
            value -= 1 << size
        return value

    def gen_bytes(self, length: int) -> bytes:
        """Generate random bytes.

        Each word contributes 8 bytes, most significant first.

        Args:
            length: Number of bytes to generate.
        """
        assert length >= 0, f"length ({length}) must be non-negative"
        buf = bytearray()
        while len(buf) < length:
            buf += self.next().to_bytes(WORD_BYTES_COUNT, "big")
        return bytes(buf[:length])

    # =========================================================================
    # Selection
    # =========================================================================

    def pick_random(self, sequence: Sequence[T]) -> Optional[T]:
        """Choose a random element of a sequence.

        Returns the element object itself, or None if the sequence is
        empty. An empty sequence consumes no randomness. The sequence is
        never modified.

        If the sequence can hold None, a None result is ambiguous: check
        len(sequence) first to tell an empty input from a picked None.
        """
        if len(sequence) == 0:
            return None
        return sequence[self.gen_range(0, len(sequence) - 1)]

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle a sequence in place (Fisher-Yates).

        TigerStyle: Mutates in place, returns None.
        """
        for i in range(len(items) - 1, 0, -1):
            j = self.gen_range(0, i)
            items[i], items[j] = items[j], items[i]

    # =========================================================================
    # Streams
    # =========================================================================

    def fork(self) -> Rng:
        """Create an independent generator seeded from this one.

        The child seed is the next word passed through mix64, so the child
        does not replay this generator's upcoming output. Advances this
        generator by exactly one step.
        """
        self._fork_count += 1
        child = type(self).new(mix64(self.next()))
        logger.debug(f"Forked generator {self._fork_count} with seed {child.seed}")
        return child

    def fork_count(self) -> int:
        """Get the number of times this generator has been forked."""
        return self._fork_count
