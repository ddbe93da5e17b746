"""Genetics package: trait schema, genesis, and trait records.

This package provides:

- Declarative trait specifications (TraitSpec) grouped into four frozen
  category containers (visual, behavioral, physical, evolutionary)
- TraitGenesisEngine, which draws a complete founder record from a stream
- TraitRecord and MutationEvent, the organism description consumed by
  rendering and physics collaborators
- A dict/JSON codec for moving records across process boundaries
"""

from protozoa.genetics.behavioral import BEHAVIORAL_TRAIT_SPECS, BehavioralTraits
from protozoa.genetics.evolutionary import EVOLUTIONARY_TRAIT_SPECS, EvolutionaryTraits
from protozoa.genetics.genesis import TraitGenesisEngine
from protozoa.genetics.physical import PHYSICAL_TRAIT_SPECS, PhysicalTraits
from protozoa.genetics.record import (
    CATEGORY_TYPES,
    MutationCause,
    MutationEvent,
    TraitRecord,
)
from protozoa.genetics.record_codec import (
    record_from_dict,
    record_from_json,
    record_to_dict,
    record_to_json,
)
from protozoa.genetics.trait import TraitCategory, TraitKind, TraitSpec
from protozoa.genetics.validation import validate_category, validate_record
from protozoa.genetics.visual import VISUAL_TRAIT_SPECS, VisualTraits

__all__ = [
    # Engine
    "TraitGenesisEngine",
    # Records
    "TraitRecord",
    "MutationEvent",
    "MutationCause",
    "CATEGORY_TYPES",
    # Trait specifications
    "TraitSpec",
    "TraitKind",
    "TraitCategory",
    "VISUAL_TRAIT_SPECS",
    "BEHAVIORAL_TRAIT_SPECS",
    "PHYSICAL_TRAIT_SPECS",
    "EVOLUTIONARY_TRAIT_SPECS",
    # Category containers
    "VisualTraits",
    "BehavioralTraits",
    "PhysicalTraits",
    "EvolutionaryTraits",
    # Serialization
    "record_to_dict",
    "record_from_dict",
    "record_to_json",
    "record_from_json",
    # Validation
    "validate_category",
    "validate_record",
]
