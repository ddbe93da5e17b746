"""Trait records: the externally visible description of an organism."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Type

from protozoa.config.genetics import TRAIT_CATEGORY_ORDER, TRAIT_SCHEMA_VERSION
from protozoa.exceptions import OutOfRangeError
from protozoa.genetics.behavioral import BehavioralTraits
from protozoa.genetics.evolutionary import EvolutionaryTraits
from protozoa.genetics.physical import PhysicalTraits
from protozoa.genetics.trait import TraitCategory, TraitValue
from protozoa.genetics.visual import VisualTraits

CATEGORY_TYPES: Dict[str, Type[TraitCategory]] = {
    VisualTraits.CATEGORY: VisualTraits,
    BehavioralTraits.CATEGORY: BehavioralTraits,
    PhysicalTraits.CATEGORY: PhysicalTraits,
    EvolutionaryTraits.CATEGORY: EvolutionaryTraits,
}

# (category, field names) pairs, in draw order
TraitSchema = Tuple[Tuple[str, Tuple[str, ...]], ...]


class MutationCause(Enum):
    """Why a trait value was replaced."""

    INHERITANCE = "inheritance"
    SPONTANEOUS = "spontaneous"


@dataclass(frozen=True)
class MutationEvent:
    """One replaced trait value. Append-only history entry.

    Attributes:
        trait_key: ``"<category>.<field>"``
        old_value: Value before mutation (the inherited value for offspring)
        new_value: Freshly drawn value
        cause: What triggered the mutation
    """

    trait_key: str
    old_value: TraitValue
    new_value: TraitValue
    cause: MutationCause


@dataclass(frozen=True)
class TraitRecord:
    """Complete, categorized trait description of one organism.

    Attributes:
        organism_id: Caller-assigned or stream-drawn identifier
        visual: Appearance traits
        behavioral: Behavioral traits
        physical: Physical traits
        evolutionary: Evolutionary traits
        parent_ids: Empty for founders, ``(parent_a, parent_b)`` for offspring
        generation: 0 for founders, ``max(parents) + 1`` for offspring
        mutation_history: Mutations applied to this record, oldest first
        generated_at: Caller-supplied timestamp (epoch seconds); the core never
            reads a clock so records stay reproducible
        schema_version: Trait schema the record was built against
    """

    organism_id: str
    visual: VisualTraits
    behavioral: BehavioralTraits
    physical: PhysicalTraits
    evolutionary: EvolutionaryTraits
    parent_ids: Tuple[str, ...] = ()
    generation: int = 0
    mutation_history: Tuple[MutationEvent, ...] = ()
    generated_at: float = 0.0
    schema_version: int = TRAIT_SCHEMA_VERSION

    def categories(self) -> Dict[str, TraitCategory]:
        """Category containers keyed by name, in draw order."""
        return {name: getattr(self, name) for name in TRAIT_CATEGORY_ORDER}

    def category(self, name: str) -> TraitCategory:
        if name not in TRAIT_CATEGORY_ORDER:
            raise KeyError(f"Unknown trait category {name!r}")
        return getattr(self, name)

    def schema(self) -> TraitSchema:
        return tuple(
            (name, category.field_names()) for name, category in self.categories().items()
        )

    def trait_value(self, trait_key: str) -> TraitValue:
        """Look up a value by ``"<category>.<field>"`` key."""
        category_name, _, field_name = trait_key.partition(".")
        category = self.category(category_name)
        category.spec_for(field_name)
        return getattr(category, field_name)

    @property
    def is_founder(self) -> bool:
        return not self.parent_ids

    def validate(self) -> List[str]:
        """Validate trait ranges/types; returns a list of issues (empty means valid)."""
        from protozoa.genetics.validation import validate_record

        return validate_record(self)

    def assert_valid(self) -> None:
        """Raise OutOfRangeError if validation finds problems."""
        issues = self.validate()
        if issues:
            raise OutOfRangeError("Invalid trait record:\n" + "\n".join(issues))
