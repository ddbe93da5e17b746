"""Evolutionary traits."""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from protozoa.config.genetics import FITNESS_MAX, FITNESS_MIN, LONGEVITY_MAX, LONGEVITY_MIN
from protozoa.genetics.trait import TraitCategory, TraitSpec

EVOLUTIONARY_TRAIT_SPECS: Tuple[TraitSpec, ...] = (
    TraitSpec("fitness", FITNESS_MIN, FITNESS_MAX),
    TraitSpec("stability", 0.0, 1.0),
    TraitSpec("reproductivity", 0.0, 1.0),
    TraitSpec("longevity", LONGEVITY_MIN, LONGEVITY_MAX),
)


@dataclass(frozen=True)
class EvolutionaryTraits(TraitCategory):
    """Traits describing an organism's evolutionary standing.

    Generation is tracked on the record itself, not here.
    """

    CATEGORY: ClassVar[str] = "evolutionary"
    SPECS: ClassVar[Tuple[TraitSpec, ...]] = EVOLUTIONARY_TRAIT_SPECS

    fitness: float
    stability: float
    reproductivity: float
    longevity: float
