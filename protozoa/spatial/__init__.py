"""Spatial formation patterns.

- ``SpatialPatternGenerator``: id + count -> ``FormationPattern``
- ``blend_patterns``: interpolate between two patterns
"""

from protozoa.spatial.blending import blend_patterns
from protozoa.spatial.generator import SpatialPatternGenerator
from protozoa.spatial.patterns import (
    BUILTIN_PATTERNS,
    FormationPattern,
    PatternClass,
    PatternDefinition,
)

__all__ = [
    "SpatialPatternGenerator",
    "FormationPattern",
    "PatternClass",
    "PatternDefinition",
    "BUILTIN_PATTERNS",
    "blend_patterns",
]
