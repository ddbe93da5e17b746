"""Genetic inheritance: combining two parent records into a child.

For every trait, in genesis draw order, the engine makes two draws from the
caller's stream:

1. Selection: below ``0.5`` takes parent A's value, otherwise parent B's.
   This is a pure per-trait choice, never a numeric blend.
2. Mutation: below the current mutation rate re-draws the trait with its
   genesis mapping (consuming one more draw) and records a ``MutationEvent``.

The same parents and the same stream position always produce the same child.
"""

import dataclasses
import logging
from typing import Dict, List, Optional

from protozoa.config.genetics import (
    ORGANISM_ID_LENGTH,
    ORGANISM_ID_PREFIX,
    PARENT_SELECTION_THRESHOLD,
    TRAIT_CATEGORY_ORDER,
)
from protozoa.entropy.seeding import draw_identifier
from protozoa.entropy.stream import Stream
from protozoa.evolution.mutation import MutationContext, MutationRateCalculator
from protozoa.exceptions import InheritanceMismatchError
from protozoa.genetics.genesis import TraitGenesisEngine
from protozoa.genetics.record import (
    CATEGORY_TYPES,
    MutationCause,
    MutationEvent,
    TraitRecord,
)
from protozoa.genetics.trait import TraitValue
from protozoa.util.rng import require_stream

logger = logging.getLogger(__name__)


def check_compatible(parent_a: TraitRecord, parent_b: TraitRecord) -> None:
    """Raise InheritanceMismatchError unless both parents share one schema."""
    if parent_a.schema_version != parent_b.schema_version:
        raise InheritanceMismatchError(
            f"Schema version mismatch: {parent_a.organism_id} has v{parent_a.schema_version}, "
            f"{parent_b.organism_id} has v{parent_b.schema_version}"
        )
    schema_a = parent_a.schema()
    schema_b = parent_b.schema()
    if schema_a != schema_b:
        raise InheritanceMismatchError(
            f"Category layout mismatch between {parent_a.organism_id} and {parent_b.organism_id}"
        )


class GeneticInheritanceEngine:
    """Produces offspring from two parents, and mutates single records."""

    def __init__(
        self,
        genesis: Optional[TraitGenesisEngine] = None,
        rate_calculator: Optional[MutationRateCalculator] = None,
    ) -> None:
        self.genesis = genesis or TraitGenesisEngine()
        self.rate_calculator = rate_calculator or MutationRateCalculator()

    def select_parent_trait(self, value_a: TraitValue, value_b: TraitValue, stream: Stream) -> TraitValue:
        """50/50 choice between the two parent values (one draw)."""
        return value_a if stream.next_float() < PARENT_SELECTION_THRESHOLD else value_b

    def apply_mutation(
        self,
        category: str,
        field: str,
        value: TraitValue,
        stream: Stream,
        *,
        rate: float,
        cause: MutationCause,
        events: List[MutationEvent],
    ) -> TraitValue:
        """Possibly replace ``value`` with a fresh draw, recording the event."""
        if stream.next_float() >= rate:
            return value
        new_value = self.genesis.mutate_field(category, field, stream)
        events.append(MutationEvent(f"{category}.{field}", value, new_value, cause))
        return new_value

    def inherit(
        self,
        parent_a: TraitRecord,
        parent_b: TraitRecord,
        stream: Optional[Stream],
        *,
        child_id: Optional[str] = None,
        context: Optional[MutationContext] = None,
        generated_at: Optional[float] = None,
    ) -> TraitRecord:
        """Combine two parents into a child record.

        Args:
            parent_a: First parent (wins selection draws below 0.5)
            parent_b: Second parent
            stream: Stream owned by this inheritance call
            child_id: Identifier for the child; drawn from ``stream`` after
                all trait draws when omitted
            context: Inputs for the mutation rate calculator
            generated_at: Timestamp for the child; defaults to the later
                parent timestamp

        Raises:
            InheritanceMismatchError: If the parents' schemas differ.
            MissingStreamError: If no stream was provided.
        """
        stream = require_stream(stream, "GeneticInheritanceEngine.inherit")
        check_compatible(parent_a, parent_b)

        events: List[MutationEvent] = []
        categories: Dict[str, object] = {}
        for name in TRAIT_CATEGORY_ORDER:
            values_a = parent_a.category(name).values()
            values_b = parent_b.category(name).values()
            child_values: Dict[str, TraitValue] = {}
            for field in values_a:
                selected = self.select_parent_trait(values_a[field], values_b[field], stream)
                rate = self.rate_calculator.rate(context)
                child_values[field] = self.apply_mutation(
                    name,
                    field,
                    selected,
                    stream,
                    rate=rate,
                    cause=MutationCause.INHERITANCE,
                    events=events,
                )
            categories[name] = CATEGORY_TYPES[name].from_values(child_values)

        if child_id is None:
            child_id = draw_identifier(stream, ORGANISM_ID_PREFIX, ORGANISM_ID_LENGTH)
        if generated_at is None:
            generated_at = max(parent_a.generated_at, parent_b.generated_at)

        child = TraitRecord(
            organism_id=child_id,
            parent_ids=(parent_a.organism_id, parent_b.organism_id),
            generation=max(parent_a.generation, parent_b.generation) + 1,
            mutation_history=tuple(events),
            generated_at=float(generated_at),
            schema_version=parent_a.schema_version,
            **categories,
        )
        child.assert_valid()

        logger.debug(
            "Bred %s (gen %d) from %s x %s with %d mutation(s)",
            child.organism_id,
            child.generation,
            parent_a.organism_id,
            parent_b.organism_id,
            len(events),
        )
        return child

    def mutate(
        self,
        record: TraitRecord,
        stream: Optional[Stream],
        *,
        context: Optional[MutationContext] = None,
    ) -> TraitRecord:
        """Apply spontaneous mutation to every trait of ``record``.

        One mutation draw per trait; hits are re-drawn and appended to the
        existing history. Identity, parents and generation are unchanged.
        """
        stream = require_stream(stream, "GeneticInheritanceEngine.mutate")
        rate = self.rate_calculator.rate(context)

        events: List[MutationEvent] = []
        categories = {}
        for name, category in record.categories().items():
            values = category.values()
            for field, value in values.items():
                values[field] = self.apply_mutation(
                    name,
                    field,
                    value,
                    stream,
                    rate=rate,
                    cause=MutationCause.SPONTANEOUS,
                    events=events,
                )
            categories[name] = type(category).from_values(values)

        if not events:
            return record
        logger.debug("Mutated %s: %d trait(s) replaced", record.organism_id, len(events))
        return dataclasses.replace(
            record,
            mutation_history=record.mutation_history + tuple(events),
            **categories,
        )
