"""Declarative trait specifications.

This module provides:
- TraitKind: how a single stream draw maps onto a trait value
- TraitSpec: bounds and mapping for one named trait
- TraitCategory: base for the frozen per-category trait containers

Each spec makes one call (one ``next_float`` or one ``next_int``) when it
generates a value. ``next_int`` may read several words before accepting one. Categories generate their fields in ``SPECS``
order, which is what makes genesis reproducible.
"""

import dataclasses
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Mapping, Tuple, Type, TypeVar, Union

from protozoa.config.genetics import COLOR_CHANNEL_SPACE
from protozoa.exceptions import ConfigurationError, OutOfRangeError

if TYPE_CHECKING:
    from protozoa.entropy.stream import Stream

TraitValue = Union[float, int, str]

C = TypeVar("C", bound="TraitCategory")

_COLOR_PATTERN = re.compile(r"^#[0-9a-f]{6}$")


class TraitKind(Enum):
    """How a trait value is represented and drawn."""

    CONTINUOUS = "continuous"
    DISCRETE = "discrete"
    COLOR = "color"
    CHOICE = "choice"


@dataclass(frozen=True)
class TraitSpec:
    """Declarative specification for a single trait.

    Attributes:
        name: Attribute name on the category container
        min_val: Minimum allowed value (numeric kinds)
        max_val: Maximum allowed value (numeric kinds)
        kind: Representation and draw mapping
        choices: Allowed values for ``TraitKind.CHOICE``
    """

    name: str
    min_val: float = 0.0
    max_val: float = 1.0
    kind: TraitKind = TraitKind.CONTINUOUS
    choices: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is TraitKind.CHOICE and not self.choices:
            raise ConfigurationError(f"Choice trait {self.name!r} has no choices")
        if self.kind in (TraitKind.CONTINUOUS, TraitKind.DISCRETE) and self.min_val > self.max_val:
            raise ConfigurationError(
                f"Trait {self.name!r} has min {self.min_val} above max {self.max_val}"
            )

    def random_value(self, stream: "Stream") -> TraitValue:
        """Draw a value for this trait from ``stream``.

        This is also the single-field mutation primitive: a mutated trait is
        simply re-drawn, independent of its previous value.

        Raises:
            OutOfRangeError: If the mapped value falls outside the bounds.
        """
        value: TraitValue
        if self.kind is TraitKind.CONTINUOUS:
            value = self.min_val + stream.next_float() * (self.max_val - self.min_val)
        elif self.kind is TraitKind.DISCRETE:
            value = stream.next_int(int(self.min_val), int(self.max_val) + 1)
        elif self.kind is TraitKind.COLOR:
            value = f"#{stream.next_int(0, COLOR_CHANNEL_SPACE):06x}"
        else:
            value = self.choices[stream.next_int(0, len(self.choices))]

        if not self.contains(value):
            raise OutOfRangeError(f"{self.name}: mapped value {value!r} not in {self.describe_bounds()}")
        return value

    def contains(self, value: Any) -> bool:
        """Whether ``value`` has the right type and lies within bounds."""
        if self.kind is TraitKind.CONTINUOUS:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            return math.isfinite(value) and self.min_val <= value <= self.max_val
        if self.kind is TraitKind.DISCRETE:
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            return int(self.min_val) <= value <= int(self.max_val)
        if self.kind is TraitKind.COLOR:
            return isinstance(value, str) and _COLOR_PATTERN.match(value) is not None
        return value in self.choices

    def describe_bounds(self) -> str:
        if self.kind is TraitKind.CONTINUOUS:
            return f"[{self.min_val}, {self.max_val}]"
        if self.kind is TraitKind.DISCRETE:
            return f"[{int(self.min_val)}, {int(self.max_val)}]"
        if self.kind is TraitKind.COLOR:
            return "#000000..#ffffff"
        return "{" + ", ".join(self.choices) + "}"


@dataclass(frozen=True)
class TraitCategory:
    """Base class for a frozen group of traits.

    Subclasses declare ``CATEGORY`` and ``SPECS`` and one dataclass field per
    spec, in the same order.
    """

    CATEGORY: ClassVar[str] = ""
    SPECS: ClassVar[Tuple[TraitSpec, ...]] = ()

    @classmethod
    def random(cls: Type[C], stream: "Stream") -> C:
        """Generate every trait of this category, in ``SPECS`` order."""
        values = {}
        for spec in cls.SPECS:
            values[spec.name] = spec.random_value(stream)
        return cls(**values)

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(spec.name for spec in cls.SPECS)

    @classmethod
    def spec_for(cls, name: str) -> TraitSpec:
        for spec in cls.SPECS:
            if spec.name == name:
                return spec
        raise KeyError(f"{cls.CATEGORY} has no trait {name!r}")

    @classmethod
    def from_values(cls: Type[C], data: Mapping[str, Any]) -> C:
        """Build from a mapping holding exactly this category's fields."""
        expected = set(cls.field_names())
        provided = set(data)
        if expected != provided:
            missing = sorted(expected - provided)
            unknown = sorted(provided - expected)
            raise KeyError(f"{cls.CATEGORY}: missing={missing} unknown={unknown}")
        return cls(**{name: data[name] for name in cls.field_names()})

    def values(self) -> Dict[str, TraitValue]:
        """Trait values keyed by name, in ``SPECS`` order."""
        return {spec.name: getattr(self, spec.name) for spec in self.SPECS}

    def with_value(self: C, name: str, value: TraitValue) -> C:
        self.spec_for(name)
        return dataclasses.replace(self, **{name: value})
