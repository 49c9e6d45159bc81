"""
Candidate buffer for the mod-30 wheel.

Byte k holds the 8 candidates 30k + r, r in RESIDUES; bit i is set while
30k + RESIDUES[i] may still be prime. Bit order is little-endian, so
np.unpackbits(..., bitorder='little') yields flags in ascending residue
order.
"""

import numpy as np

from .wheel import RESIDUES, WHEEL

# Byte 0 starts without residue 1, since 1 is not prime
FIRST_BYTE = 0b11111110
FULL_BYTE = 0b11111111

# Set bits in each byte value 0..255
POPCOUNT = np.array([bin(b).count('1') for b in range(256)], dtype=np.uint8)

# Bytes handled per pass when counting or decoding, bounding temporaries
CHUNK_BYTES = 1 << 16


def build_candidate_buffer(num_bytes: int) -> np.ndarray:
    """
    Allocate the candidate buffer with every coprime residue marked.

    Parameters
    ----------
    num_bytes : int
        Number of wheel cycles, ceil(N / 30).

    Returns
    -------
    np.ndarray
        uint8 array of length num_bytes: [0xFE, 0xFF, 0xFF, ...].
    """
    if num_bytes < 0:
        raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")

    buf = np.full(num_bytes, FULL_BYTE, dtype=np.uint8)
    if num_bytes > 0:
        buf[0] = FIRST_BYTE
    return buf


def count_candidates(buf: np.ndarray, chunk_bytes: int = CHUNK_BYTES) -> int:
    """Number of set bits in the buffer, via the POPCOUNT table."""
    total = 0
    for start in range(0, len(buf), chunk_bytes):
        total += int(POPCOUNT[buf[start:start + chunk_bytes]].sum(dtype=np.int64))
    return total


def decode_candidates(buf: np.ndarray, first_byte: int = 0) -> np.ndarray:
    """
    Return every number whose bit is set, in ascending order.

    Unpacks one bit per byte, so pass a slice of the buffer when it is large.

    Parameters
    ----------
    buf : np.ndarray
        Candidate buffer (uint8), or a slice of one.
    first_byte : int
        Index of buf[0] within the full buffer.

    Returns
    -------
    np.ndarray
        int64 array of 30k + RESIDUES[i] for each set bit (k, i).
    """
    flags = np.unpackbits(buf, bitorder='little')
    idx = np.flatnonzero(flags)
    return WHEEL * ((idx >> 3) + first_byte) + RESIDUES[idx & 7].astype(np.int64)
