"""SpatialPatternGenerator: named formations for a given member count."""

import logging
from typing import Dict, Iterable, Optional, Tuple

from protozoa.config.spatial import DEFAULT_PATTERN_ENTROPY, FALLBACK_PATTERN_ID
from protozoa.entropy.seeding import Seed, derive_stream, seed_from_entropy
from protozoa.entropy.stream import Stream
from protozoa.spatial.patterns import BUILTIN_PATTERNS, FormationPattern, PatternDefinition

logger = logging.getLogger(__name__)


class SpatialPatternGenerator:
    """Builds formation patterns by id.

    Geometric patterns are pure functions of ``count``. Stochastic patterns
    draw from the caller's stream; when none is given the generator derives
    one from its own seed under the key ``pattern:<id>:<count>``, so the same
    request always yields the same layout.

    Example:
        generator = SpatialPatternGenerator()
        pattern = generator.generate("fibonacci-spiral", 12)
    """

    def __init__(
        self,
        seed: Optional[Seed] = None,
        patterns: Optional[Iterable[PatternDefinition]] = None,
    ) -> None:
        self._seed = seed if seed is not None else seed_from_entropy(DEFAULT_PATTERN_ENTROPY)
        self._patterns: Dict[str, PatternDefinition] = dict(BUILTIN_PATTERNS)
        for definition in patterns or ():
            self.register(definition)

    @property
    def seed(self) -> Seed:
        return self._seed

    def register(self, definition: PatternDefinition) -> None:
        """Add or replace a pattern on this generator only."""
        if not definition.pattern_id:
            raise ValueError("pattern_id must be a non-empty string")
        self._patterns[definition.pattern_id] = definition

    def available_patterns(self) -> Tuple[str, ...]:
        return tuple(sorted(self._patterns))

    def is_known_pattern(self, pattern_id: str) -> bool:
        return pattern_id in self._patterns

    def generate(self, pattern_id: str, count: int, stream: Optional[Stream] = None) -> FormationPattern:
        """Return ``count`` positions arranged as ``pattern_id``.

        Raises:
            TypeError: If ``count`` is not an integer
            ValueError: If ``count`` is negative
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {type(count).__name__}")
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        definition = self._patterns.get(pattern_id)
        fallback = definition is None
        if definition is None:
            logger.debug("Unknown pattern %r, falling back to %r", pattern_id, FALLBACK_PATTERN_ID)
            definition = self._patterns[FALLBACK_PATTERN_ID]

        if definition.needs_stream and stream is None:
            stream = derive_stream(self._seed, f"pattern:{pattern_id}:{count}")

        positions = definition.build(count, stream)
        return FormationPattern(
            id=pattern_id,
            positions=tuple(positions),
            pattern_class=definition.pattern_class,
            fallback=fallback,
        )

    def __repr__(self) -> str:
        return f"SpatialPatternGenerator({self._seed}, patterns={len(self._patterns)})"
