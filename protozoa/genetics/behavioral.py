"""Behavioral traits: how an organism moves and interacts."""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from protozoa.config.genetics import (
    AGGRESSION_MAX,
    AGGRESSION_MIN,
    EFFICIENCY_MAX,
    EFFICIENCY_MIN,
    SPEED_MAX,
    SPEED_MIN,
)
from protozoa.genetics.trait import TraitCategory, TraitKind, TraitSpec

BEHAVIORAL_TRAIT_SPECS: Tuple[TraitSpec, ...] = (
    TraitSpec("speed", SPEED_MIN, SPEED_MAX),
    TraitSpec("aggression", AGGRESSION_MIN, AGGRESSION_MAX, kind=TraitKind.DISCRETE),
    TraitSpec("sociability", 0.0, 1.0),
    TraitSpec("curiosity", 0.0, 1.0),
    TraitSpec("efficiency", EFFICIENCY_MIN, EFFICIENCY_MAX),
    TraitSpec("adaptability", 0.0, 1.0),
)


@dataclass(frozen=True)
class BehavioralTraits(TraitCategory):
    """Behavioral tendencies.

    ``aggression`` is an integer level from 1 (passive) to 10; the rest are
    continuous multipliers or unit-interval tendencies.
    """

    CATEGORY: ClassVar[str] = "behavioral"
    SPECS: ClassVar[Tuple[TraitSpec, ...]] = BEHAVIORAL_TRAIT_SPECS

    speed: float
    aggression: int
    sociability: float
    curiosity: float
    efficiency: float
    adaptability: float
