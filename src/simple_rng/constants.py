"""
simple_rng Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: WORD_BITS_COUNT not BITS_PER_WORD.

The LCG constants are part of the reproducibility contract. Changing either
one changes every value produced for every seed.
"""

# =============================================================================
# State Word
# =============================================================================

WORD_BITS_COUNT: int = 64
WORD_MASK: int = (1 << WORD_BITS_COUNT) - 1
WORD_VALUES_COUNT: int = 1 << WORD_BITS_COUNT  # 2**64
WORD_BYTES_COUNT: int = WORD_BITS_COUNT // 8

# =============================================================================
# LCG Transition (Knuth MMIX)
# =============================================================================

# Hull-Dobell over 2**64: increment odd, multiplier ≡ 1 (mod 4)
LCG_MULTIPLIER: int = 6364136223846793005
LCG_INCREMENT: int = 1442695040888963407

# =============================================================================
# Fork Seed Mixing (SplitMix64 finalizer)
# =============================================================================

MIX_GAMMA: int = 0x9E3779B97F4A7C15
MIX_MULTIPLIER_1: int = 0xBF58476D1CE4E5B9
MIX_MULTIPLIER_2: int = 0x94D049BB133111EB

# =============================================================================
# Float Derivation
# =============================================================================

FLOAT64_MANTISSA_BITS_COUNT: int = 53
FLOAT64_SCALE: float = 1.0 / (1 << FLOAT64_MANTISSA_BITS_COUNT)  # 2**-53

FLOAT32_MANTISSA_BITS_COUNT: int = 24
FLOAT32_SCALE: float = 1.0 / (1 << FLOAT32_MANTISSA_BITS_COUNT)  # 2**-24

# =============================================================================
# Sized Integers
# =============================================================================

BIT_WIDTHS_SUPPORTED: tuple[int, ...] = (8, 16, 32, 64)

# =============================================================================
# Time Constants
# =============================================================================

TIME_EPOCH_NS: int = 0  # ManualClock start time
TIME_NS_PER_SEC: int = 1_000_000_000
