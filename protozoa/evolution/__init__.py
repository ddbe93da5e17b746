"""Evolution module: inheritance and mutation of trait records.

The module consolidates:
- Mutation: probability of replacing an inherited trait with a fresh draw
- Inheritance: per-trait 50/50 parent selection followed by mutation

There is no fitness function here. Which organisms get to breed is decided
by whatever system consumes these records.
"""

from protozoa.evolution.inheritance import GeneticInheritanceEngine, check_compatible
from protozoa.evolution.mutation import (
    DEFAULT_MUTATION_CONFIG,
    MutationConfig,
    MutationContext,
    MutationRateCalculator,
    clamp_rate,
)

__all__ = [
    # Inheritance
    "GeneticInheritanceEngine",
    "check_compatible",
    # Mutation
    "MutationRateCalculator",
    "MutationConfig",
    "MutationContext",
    "DEFAULT_MUTATION_CONFIG",
    "clamp_rate",
]
