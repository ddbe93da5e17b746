"""SeededEntropySource: the owner of one seed.

Instances replace any notion of a process-wide random service. Each source
holds exactly one seed and hands out fresh streams by consumer key; there is
no shared generator for consumers to perturb.
"""

import logging
from typing import TYPE_CHECKING

from protozoa.entropy.seeding import (
    RawEntropy,
    Seed,
    derive_stream,
    seed_from_block,
    seed_from_entropy,
)
from protozoa.entropy.stream import Stream

if TYPE_CHECKING:
    from protozoa.models import BlockData

logger = logging.getLogger(__name__)


class SeededEntropySource:
    """Turns external entropy into a seed and independent sub-streams.

    Example:
        source = SeededEntropySource.from_block(block)
        stream = source.derive_stream("organism-1")
        record = TraitGenesisEngine().generate("organism-1", stream)
    """

    def __init__(self, seed: Seed) -> None:
        if not isinstance(seed, Seed):
            raise TypeError(f"Expected Seed, got {type(seed).__name__}")
        self._seed = seed

    @classmethod
    def from_entropy(cls, raw_entropy: RawEntropy) -> "SeededEntropySource":
        return cls(seed_from_entropy(raw_entropy))

    @classmethod
    def from_block(cls, block: "BlockData") -> "SeededEntropySource":
        return cls(seed_from_block(block))

    @property
    def seed(self) -> Seed:
        return self._seed

    def derive_stream(self, consumer_key: str) -> Stream:
        """Return a new stream for ``consumer_key``, positioned at its start.

        Each call returns a fresh object; callers own the returned stream.
        """
        stream = derive_stream(self._seed, consumer_key)
        logger.debug("Derived stream %r from %s", consumer_key, self._seed)
        return stream

    def __repr__(self) -> str:
        return f"SeededEntropySource({self._seed})"
