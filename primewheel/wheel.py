"""
Wheel tables for the mod-30 wheel.

Only numbers coprime to 30 = 2*3*5 are stored. In every block of 30
consecutive integers there are exactly 8 of them:

    1, 7, 11, 13, 17, 19, 23, 29

so one byte holds one block ("cycle"). This is 8/30 ~ 27% of a plain bit
sieve.

Index mapping:
- Byte k, bit i → 30k + RESIDUES[i]
- n (coprime to 30) → byte n // 30, the bit cleared by CLEAR_MASK[n % 30]

For n=49: 49 // 30 = 1, CLEAR_MASK[19] = 0b11011111 → byte 1, bit 5 ✓
For n=91: 91 // 30 = 3, CLEAR_MASK[1]  = 0b11111110 → byte 3, bit 0 ✓
"""

import numpy as np

WHEEL = 30

RESIDUES = np.array([1, 7, 11, 13, 17, 19, 23, 29], dtype=np.uint8)

# Distance to the next residue coprime to 30, indexed by x % 30.
# Non-residue slots hold 1 and are never used for a real step.
INCREMENT = np.ones(WHEEL, dtype=np.int64)
INCREMENT[RESIDUES] = [6, 4, 2, 4, 2, 4, 6, 2]

# Byte mask with only that residue's bit cleared; 0 (clear everything)
# for non-residues.
CLEAR_MASK = np.zeros(WHEEL, dtype=np.uint8)
CLEAR_MASK[RESIDUES] = 0xFF ^ (1 << np.arange(8, dtype=np.uint8))


def increment(residue: int) -> int:
    """Step from `residue` to the next residue coprime to 30."""
    if 0 <= residue < WHEEL:
        return int(INCREMENT[residue])
    return 1


def clear_mask(residue: int) -> int:
    """
    Mask that clears the candidate bit of `residue` and keeps the other 7.

    Examples: 1 → 0b11111110, 7 → 0b11111101, 29 → 0b01111111.
    Any value that is not a residue coprime to 30 gives 0.
    """
    if 0 <= residue < WHEEL:
        return int(CLEAR_MASK[residue])
    return 0


def index_to_n(k: int, i: int) -> int:
    """Convert (byte, bit) to the number it represents."""
    # (0, 0) → 1, (0, 1) → 7, (1, 0) → 31, (1, 5) → 49, ...
    return WHEEL * k + int(RESIDUES[i])
