"""Visual traits: how an organism looks when rendered."""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from protozoa.config.genetics import (
    GLOW_INTENSITY_MAX,
    GLOW_INTENSITY_MIN,
    OPACITY_MAX,
    OPACITY_MIN,
    ORGANISM_SHAPES,
    PARTICLE_DENSITY_MAX,
    PARTICLE_DENSITY_MIN,
    VISUAL_SIZE_MAX,
    VISUAL_SIZE_MIN,
)
from protozoa.genetics.trait import TraitCategory, TraitKind, TraitSpec

VISUAL_TRAIT_SPECS: Tuple[TraitSpec, ...] = (
    TraitSpec("primary_color", kind=TraitKind.COLOR),
    TraitSpec("secondary_color", kind=TraitKind.COLOR),
    TraitSpec("size", VISUAL_SIZE_MIN, VISUAL_SIZE_MAX),
    TraitSpec("opacity", OPACITY_MIN, OPACITY_MAX),
    TraitSpec("shape", kind=TraitKind.CHOICE, choices=ORGANISM_SHAPES),
    TraitSpec("particle_density", PARTICLE_DENSITY_MIN, PARTICLE_DENSITY_MAX),
    TraitSpec("glow_intensity", GLOW_INTENSITY_MIN, GLOW_INTENSITY_MAX),
)


@dataclass(frozen=True)
class VisualTraits(TraitCategory):
    """Appearance traits consumed by the rendering collaborator."""

    CATEGORY: ClassVar[str] = "visual"
    SPECS: ClassVar[Tuple[TraitSpec, ...]] = VISUAL_TRAIT_SPECS

    primary_color: str
    secondary_color: str
    size: float
    opacity: float
    shape: str
    particle_density: float
    glow_intensity: float
