"""Seed derivation from external entropy.

A ``Seed`` is the deterministic root of all randomness for a run. It is built
from raw bytes (typically a block hash plus nonce) with the SHA-256
folding in ``protozoa.entropy.mixing``, so the same block produces the same
seed on every platform.
"""

import logging
import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from protozoa.entropy.mixing import MASK64, fold_entropy, stream_parameters
from protozoa.entropy.stream import Stream
from protozoa.exceptions import InvalidSeedError

if TYPE_CHECKING:
    from protozoa.models import BlockData

logger = logging.getLogger(__name__)

_BASE36_ALPHABET = string.digits + string.ascii_lowercase

RawEntropy = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Seed:
    """An unsigned 64-bit seed value."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidSeedError(f"Seed value must be int, got {type(self.value).__name__}")
        if not 0 <= self.value <= MASK64:
            raise InvalidSeedError(f"Seed value {self.value} outside unsigned 64-bit range")

    def hex(self) -> str:
        return f"{self.value:016x}"

    def __str__(self) -> str:
        return f"Seed#{self.hex()}"


def seed_from_entropy(raw_entropy: RawEntropy) -> Seed:
    """Fold arbitrary-length entropy into a fixed-width seed.

    Raises:
        InvalidSeedError: If ``raw_entropy`` is not bytes-like or is empty.
    """
    if not isinstance(raw_entropy, (bytes, bytearray, memoryview)):
        raise InvalidSeedError(
            f"Raw entropy must be bytes, got {type(raw_entropy).__name__}"
        )
    data = bytes(raw_entropy)
    if not data:
        raise InvalidSeedError("Raw entropy is empty")
    return Seed(fold_entropy(data))


def block_entropy(block: "BlockData") -> bytes:
    """Entropy bytes for a block: ASCII hash, a separator, big-endian nonce."""
    try:
        hash_bytes = block.hash.encode("ascii")
    except UnicodeEncodeError as exc:
        raise InvalidSeedError(f"Block hash is not ASCII: {block.hash!r}") from exc
    if not hash_bytes:
        raise InvalidSeedError("Block hash is empty")
    return hash_bytes + b":" + int(block.nonce).to_bytes(8, "big")


def seed_from_block(block: "BlockData") -> Seed:
    """Derive the seed for a block from its hash and nonce."""
    seed = seed_from_entropy(block_entropy(block))
    logger.debug("Derived %s from block height=%s", seed, block.height)
    return seed


def derive_stream(seed: Seed, consumer_key: str) -> Stream:
    """Return the stream bound to ``(seed, consumer_key)``.

    The same pair always yields the same sequence. Different keys give
    independent sequences, so adding a consumer never perturbs the draws of
    existing consumers.

    Raises:
        ValueError: If ``consumer_key`` is not a non-empty string.
    """
    if not isinstance(consumer_key, str) or not consumer_key:
        raise ValueError(f"Consumer key must be a non-empty string, got {consumer_key!r}")
    state, gamma = stream_parameters(seed.value, consumer_key.encode("utf-8"))
    return Stream(state, gamma, key=consumer_key)


def to_base36(value: int, width: int) -> str:
    """Render ``value`` in lowercase base 36, zero-padded to ``width``."""
    if value < 0:
        raise ValueError("value must be non-negative")
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits)).rjust(width, "0")


def draw_identifier(stream: Stream, prefix: str, length: int) -> str:
    """Draw a ``<prefix>-<base36>`` identifier from ``stream``."""
    token = stream.next_int(0, 36**length)
    return f"{prefix}-{to_base36(token, length)}"
