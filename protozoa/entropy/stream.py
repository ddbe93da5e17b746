"""Deterministic random streams.

``Stream`` subclasses ``random.Random`` and replaces its base generator with a
SplitMix64-style counter. Overriding ``random()`` and ``getrandbits()`` means
every inherited helper (``uniform``, ``choice``, ``shuffle``, ``gauss``) draws
from the same reproducible sequence, so code written against
``random.Random`` accepts a ``Stream`` unchanged.

A stream's cursor belongs to the stream alone. Never advance one stream from
two threads; give each consumer its own stream instead.
"""

import random
from typing import Any, List, Tuple

from protozoa.entropy.mixing import GOLDEN_GAMMA, MASK64, mix64

# 53 significant bits -> exact float in [0, 1)
_FLOAT_SCALE = 1.0 / (1 << 53)

_STATE_VERSION = 1


class Stream(random.Random):
    """An independent, ordered sequence of pseudo-random draws.

    Attributes:
        key: Consumer key the stream was derived for (informational)
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> "Stream":
        # The C base accepts at most one positional argument
        return super().__new__(cls)

    def __init__(self, state: int = 0, gamma: int = GOLDEN_GAMMA, key: str = "") -> None:
        self._gamma = (int(gamma) & MASK64) | 1
        self.key = key
        super().__init__(state)

    def seed(self, a: Any = None, version: int = 2) -> None:
        """Reset the stream to start from integer state ``a``."""
        if not isinstance(a, int) or isinstance(a, bool):
            raise TypeError(f"Stream state must be an int, got {type(a).__name__}")
        self._origin = a & MASK64
        self._state = self._origin
        self._draws = 0
        self.gauss_next = None

    def _next_word(self) -> int:
        self._state = (self._state + self._gamma) & MASK64
        self._draws += 1
        return mix64(self._state)

    # -- random.Random base generator -------------------------------------

    def random(self) -> float:
        return (self._next_word() >> 11) * _FLOAT_SCALE

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        result = 0
        bits = 0
        while bits < k:
            result = (result << 64) | self._next_word()
            bits += 64
        return result >> (bits - k)

    def getstate(self) -> Tuple[Any, ...]:
        return (_STATE_VERSION, self._origin, self._state, self._gamma, self._draws, self.key, self.gauss_next)

    def setstate(self, state: Tuple[Any, ...]) -> None:
        version = state[0]
        if version != _STATE_VERSION:
            raise ValueError(f"Unsupported stream state version {version!r}")
        _, self._origin, self._state, self._gamma, self._draws, self.key, self.gauss_next = state

    # -- documented stream operations ---------------------------------------

    @property
    def draws(self) -> int:
        """Number of 64-bit words consumed so far (the cursor position)."""
        return self._draws

    def next_float(self) -> float:
        """Return a float in ``[0, 1)``."""
        return self.random()

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)`` without modulo bias.

        Raises:
            ValueError: If the range is empty.
        """
        span = high - low
        if span <= 0:
            raise ValueError(f"empty range for next_int({low}, {high})")
        bits = (span - 1).bit_length()
        value = self.getrandbits(bits)
        while value >= span:
            value = self.getrandbits(bits)
        return low + value

    def next_floats(self, count: int, low: float = 0.0, high: float = 1.0) -> List[float]:
        """Draw ``count`` floats in ``[low, high)``."""
        return [low + (high - low) * self.random() for _ in range(count)]

    def clone(self) -> "Stream":
        """Return an independent copy positioned at the same cursor."""
        twin = Stream(0, self._gamma, self.key)
        twin.setstate(self.getstate())
        return twin

    def reset(self) -> None:
        """Rewind to the stream's first draw."""
        self._state = self._origin
        self._draws = 0
        self.gauss_next = None

    def __repr__(self) -> str:
        return f"Stream(key={self.key!r}, draws={self._draws})"
