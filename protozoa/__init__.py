"""Deterministic core for a block-seeded protozoa simulation.

This package contains the pure, render-free logic that turns external entropy
(a block hash and nonce) into organisms and group layouts:

- entropy: seeds and independent per-consumer random streams
- genetics: trait schema, founder genesis and the record codec
- evolution: mutation rates and two-parent inheritance
- spatial: named formation patterns
- groups: group membership, lifecycle and formation layout

The public API is re-exported here; use subpackage imports for helpers.
"""

from . import entropy as entropy
from . import evolution as evolution
from . import genetics as genetics
from . import groups as groups
from . import spatial as spatial
from .entropy import SeededEntropySource, Seed, Stream
from .evolution import GeneticInheritanceEngine, MutationConfig, MutationRateCalculator
from .exceptions import (
    ConfigurationError,
    EntropyError,
    GeneticsError,
    InheritanceMismatchError,
    InvalidSeedError,
    InvalidTraitRecordError,
    OutOfRangeError,
    ProtozoaError,
)
from .genetics import MutationEvent, TraitGenesisEngine, TraitRecord
from .groups import FormationConfig, Group, GroupBehavior, GroupCoordinator
from .models import BlockData
from .spatial import FormationPattern, SpatialPatternGenerator, blend_patterns

__version__ = "0.1.0"

__all__ = [
    "entropy",
    "evolution",
    "genetics",
    "groups",
    "spatial",
    "BlockData",
    "Seed",
    "Stream",
    "SeededEntropySource",
    "TraitGenesisEngine",
    "TraitRecord",
    "MutationEvent",
    "GeneticInheritanceEngine",
    "MutationConfig",
    "MutationRateCalculator",
    "SpatialPatternGenerator",
    "FormationPattern",
    "blend_patterns",
    "GroupCoordinator",
    "Group",
    "GroupBehavior",
    "FormationConfig",
    "ProtozoaError",
    "EntropyError",
    "InvalidSeedError",
    "GeneticsError",
    "OutOfRangeError",
    "InheritanceMismatchError",
    "InvalidTraitRecordError",
    "ConfigurationError",
]
