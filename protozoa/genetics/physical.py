"""Physical traits for organisms.

These feed the physics collaborator (mass, collision radius) and the
energy model (capacity, durability, regeneration).
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from protozoa.config.genetics import (
    COLLISION_RADIUS_MAX,
    COLLISION_RADIUS_MIN,
    DURABILITY_MAX,
    DURABILITY_MIN,
    ENERGY_CAPACITY_MAX,
    ENERGY_CAPACITY_MIN,
    MASS_MAX,
    MASS_MIN,
    REGENERATION_MAX,
    REGENERATION_MIN,
)
from protozoa.genetics.trait import TraitCategory, TraitSpec

PHYSICAL_TRAIT_SPECS: Tuple[TraitSpec, ...] = (
    TraitSpec("mass", MASS_MIN, MASS_MAX),
    TraitSpec("collision_radius", COLLISION_RADIUS_MIN, COLLISION_RADIUS_MAX),
    TraitSpec("energy_capacity", ENERGY_CAPACITY_MIN, ENERGY_CAPACITY_MAX),
    TraitSpec("durability", DURABILITY_MIN, DURABILITY_MAX),
    TraitSpec("regeneration", REGENERATION_MIN, REGENERATION_MAX),
)


@dataclass(frozen=True)
class PhysicalTraits(TraitCategory):
    """Physical attributes of an organism."""

    CATEGORY: ClassVar[str] = "physical"
    SPECS: ClassVar[Tuple[TraitSpec, ...]] = PHYSICAL_TRAIT_SPECS

    mass: float
    collision_radius: float
    energy_capacity: float
    durability: float
    regeneration: float
