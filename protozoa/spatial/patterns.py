"""Formation pattern types and the built-in pattern registry."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from protozoa.entropy.stream import Stream
from protozoa.math_utils import Vector3
from protozoa.spatial import geometry


class PatternClass(Enum):
    GEOMETRIC = "geometric"
    STOCHASTIC = "stochastic"


@dataclass(frozen=True)
class FormationPattern:
    """A named arrangement of positions.

    ``id`` is the id that was requested. ``fallback`` is True when that id had
    no registered geometry and the scatter pattern was used instead.
    """

    id: str
    positions: Tuple[Vector3, ...]
    pattern_class: PatternClass
    fallback: bool = False

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def is_empty(self) -> bool:
        return not self.positions


# Builders take (count, stream); geometric builders ignore the stream
PatternBuilder = Callable[[int, Optional[Stream]], List[Vector3]]


@dataclass(frozen=True)
class PatternDefinition:
    pattern_id: str
    pattern_class: PatternClass
    build: PatternBuilder
    description: str = ""

    @property
    def needs_stream(self) -> bool:
        return self.pattern_class is PatternClass.STOCHASTIC


def _geometric(pattern_id: str, func: Callable[[int], List[Vector3]], description: str) -> PatternDefinition:
    return PatternDefinition(
        pattern_id=pattern_id,
        pattern_class=PatternClass.GEOMETRIC,
        build=lambda count, _stream: func(count),
        description=description,
    )


def _stochastic(
    pattern_id: str, func: Callable[[int, Stream], List[Vector3]], description: str
) -> PatternDefinition:
    return PatternDefinition(
        pattern_id=pattern_id,
        pattern_class=PatternClass.STOCHASTIC,
        build=lambda count, stream: func(count, stream),
        description=description,
    )


BUILTIN_PATTERNS: Dict[str, PatternDefinition] = {
    definition.pattern_id: definition
    for definition in (
        _geometric("fibonacci-spiral", geometry.fibonacci_spiral, "Fibonacci sphere"),
        _geometric("sphere", geometry.sphere, "Golden spiral from pole to pole"),
        _geometric("helix", geometry.helix, "Rising three-turn helix"),
        _geometric("torus", geometry.torus, "Ring doughnut"),
        _geometric("line", geometry.line, "Straight line along x"),
        _geometric("circle", geometry.circle, "Flat ring in the xz plane"),
        _geometric("cube", geometry.cube, "Cubic grid"),
        _stochastic("scatter", geometry.scatter, "Uniform points in a cube"),
        _stochastic("random-sphere", geometry.random_sphere, "Uniform points on a sphere surface"),
        _stochastic("cylinder", geometry.cylinder, "Layered cylinder with random radii"),
    )
}
