"""Seeded entropy: reproducible seeds and independent random streams.

- ``Seed``: fixed-width root value folded from external entropy
- ``Stream``: per-consumer deterministic generator (a ``random.Random``)
- ``SeededEntropySource``: owns a seed and derives streams by consumer key
"""

from protozoa.entropy.seeding import (
    Seed,
    block_entropy,
    derive_stream,
    draw_identifier,
    seed_from_block,
    seed_from_entropy,
    to_base36,
)
from protozoa.entropy.source import SeededEntropySource
from protozoa.entropy.stream import Stream

__all__ = [
    "Seed",
    "Stream",
    "SeededEntropySource",
    "seed_from_entropy",
    "seed_from_block",
    "block_entropy",
    "derive_stream",
    "draw_identifier",
    "to_base36",
]
