"""Trait genesis: turning one stream into a complete trait record.

Draw order (part of the reproducibility contract, never reorder silently):

1. visual: primary_color, secondary_color, size, opacity, shape,
   particle_density, glow_intensity
2. behavioral: speed, aggression, sociability, curiosity, efficiency,
   adaptability
3. physical: mass, collision_radius, energy_capacity, durability,
   regeneration
4. evolutionary: fitness, stability, reproductivity, longevity

Every field makes one ``next_float`` or ``next_int`` call. An integer field
can consume more than one 64-bit word when rejection sampling retries, so
the stream cursor is not simply the field count. Changing a field, a bound,
or this order requires bumping ``TRAIT_SCHEMA_VERSION``.
"""

import logging
from typing import Optional

from protozoa.config.genetics import TRAIT_CATEGORY_ORDER
from protozoa.entropy.stream import Stream
from protozoa.genetics.record import CATEGORY_TYPES, TraitRecord, TraitSchema
from protozoa.genetics.trait import TraitSpec, TraitValue
from protozoa.util.rng import require_stream

logger = logging.getLogger(__name__)


class TraitGenesisEngine:
    """Builds founder trait records from deterministic streams.

    The engine holds no mutable state; one instance can serve any number of
    streams, including from different threads.
    """

    def generate(
        self,
        organism_id: str,
        stream: Optional[Stream],
        *,
        generated_at: float = 0.0,
    ) -> TraitRecord:
        """Generate a founder record for ``organism_id``.

        Re-invoking with a stream at the same cursor position reproduces the
        identical record.

        Raises:
            ValueError: If ``organism_id`` is empty.
            MissingStreamError: If no stream was provided.
            OutOfRangeError: If a mapping produced an out-of-bounds value.
        """
        if not isinstance(organism_id, str) or not organism_id:
            raise ValueError(f"organism_id must be a non-empty string, got {organism_id!r}")
        stream = require_stream(stream, "TraitGenesisEngine.generate")

        start = stream.draws
        categories = {name: CATEGORY_TYPES[name].random(stream) for name in TRAIT_CATEGORY_ORDER}
        record = TraitRecord(
            organism_id=organism_id,
            generated_at=float(generated_at),
            **categories,
        )
        record.assert_valid()

        logger.debug(
            "Generated organism %s from stream %r (%d words consumed)",
            organism_id,
            stream.key,
            stream.draws - start,
        )
        return record

    def mutate_field(self, category: str, field: str, stream: Stream) -> TraitValue:
        """Re-draw a single trait value, independent of its current value."""
        return self.spec_for(category, field).random_value(stream)

    @staticmethod
    def spec_for(category: str, field: str) -> TraitSpec:
        try:
            category_type = CATEGORY_TYPES[category]
        except KeyError:
            raise KeyError(f"Unknown trait category {category!r}") from None
        return category_type.spec_for(field)

    @staticmethod
    def schema() -> TraitSchema:
        """The current trait schema, in draw order."""
        return tuple((name, CATEGORY_TYPES[name].field_names()) for name in TRAIT_CATEGORY_ORDER)
