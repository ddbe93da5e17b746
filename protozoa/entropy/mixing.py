"""Seed folding and per-stream parameter derivation.

Raw entropy and ``(seed, consumer key)`` pairs are hashed with SHA-256 and
read back as big-endian unsigned 64-bit words (never Python's salted
``hash()``), so the same input gives the same words on every platform. Only
the stream's output function, ``mix64``, works on the words directly.
"""

import hashlib
from typing import Tuple

MASK64 = (1 << 64) - 1

# SplitMix64 increment (2**64 / golden ratio, forced odd)
GOLDEN_GAMMA = 0x9E3779B97F4A7C15

# A gamma with fewer bit transitions than this walks the counter too
# regularly; such gammas are xored with an alternating bit pattern
MIN_GAMMA_TRANSITIONS = 24
_GAMMA_FIX = 0xAAAAAAAAAAAAAAAA

_SEED_DOMAIN = b"protozoa/seed|"
_STREAM_DOMAIN = b"protozoa/stream|"


def mix64(z: int) -> int:
    """SplitMix64 finalizer: an invertible avalanche over 64 bits."""
    z &= MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


def _word(digest: bytes, index: int) -> int:
    return int.from_bytes(digest[index * 8:(index + 1) * 8], "big")


def fold_entropy(data: bytes) -> int:
    """Fold arbitrary-length bytes into one 64-bit word via SHA-256."""
    return _word(hashlib.sha256(_SEED_DOMAIN + data).digest(), 0)


def fix_gamma(gamma: int) -> int:
    """Force ``gamma`` odd and give it enough bit transitions."""
    gamma = (gamma & MASK64) | 1
    if bin(gamma ^ (gamma >> 1)).count("1") < MIN_GAMMA_TRANSITIONS:
        gamma ^= _GAMMA_FIX
    return gamma


def stream_parameters(seed_value: int, consumer_key: bytes) -> Tuple[int, int]:
    """Derive ``(initial_state, gamma)`` from ``sha256(seed || key)``.

    The seed is always eight bytes, so the concatenation is unambiguous.
    """
    digest = hashlib.sha256(_STREAM_DOMAIN + (seed_value & MASK64).to_bytes(8, "big") + consumer_key).digest()
    return _word(digest, 0), fix_gamma(_word(digest, 1))
