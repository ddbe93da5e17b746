"""Mutation rate calculation.

Mutation in this system is a replacement: when a trait mutates it is re-drawn
from scratch with its genesis mapping. This module only decides how likely
that is.

The effective rate is ``base_rate * difficulty_multiplier``. The multiplier is
a hook for scaling mutation with blockchain difficulty; no mapping from
difficulty to rate has been decided, so it is fixed at 1.0 and ignores its
input.
"""

import math
from dataclasses import dataclass
from typing import Optional

from protozoa.config.genetics import BASE_MUTATION_RATE, DIFFICULTY_MULTIPLIER
from protozoa.exceptions import ConfigurationError


def clamp_rate(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class MutationConfig:
    """Configuration for mutation rate calculation.

    Attributes:
        base_rate: Per-trait mutation probability before scaling
        min_rate: Lower clamp applied after scaling
        max_rate: Upper clamp applied after scaling
    """

    base_rate: float = BASE_MUTATION_RATE
    min_rate: float = 0.0
    max_rate: float = 1.0

    def __post_init__(self) -> None:
        for name in ("base_rate", "min_rate", "max_rate"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ConfigurationError(f"MutationConfig.{name} must be a finite number, got {value!r}")
        if not 0.0 <= self.min_rate <= self.max_rate <= 1.0:
            raise ConfigurationError(
                f"MutationConfig bounds must satisfy 0 <= min_rate <= max_rate <= 1, "
                f"got min_rate={self.min_rate}, max_rate={self.max_rate}"
            )


DEFAULT_MUTATION_CONFIG = MutationConfig()


@dataclass(frozen=True)
class MutationContext:
    """Contextual inputs available when a mutation rate is requested."""

    difficulty: Optional[float] = None
    block_height: Optional[int] = None


class MutationRateCalculator:
    """Pure function object producing an effective mutation probability."""

    def __init__(self, config: Optional[MutationConfig] = None) -> None:
        self.config = config or DEFAULT_MUTATION_CONFIG

    def difficulty_multiplier(self, context: Optional[MutationContext] = None) -> float:
        """Scaling factor derived from block difficulty.

        Inert: always returns 1.0 regardless of ``context``.
        """
        return DIFFICULTY_MULTIPLIER

    def rate(self, context: Optional[MutationContext] = None) -> float:
        """Return the mutation probability, always within ``[0, 1]``."""
        raw = self.config.base_rate * self.difficulty_multiplier(context)
        bounded = clamp_rate(raw, self.config.min_rate, self.config.max_rate)
        return clamp_rate(bounded)
