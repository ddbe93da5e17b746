"""Group value types."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from protozoa.exceptions import ConfigurationError
from protozoa.math_utils import Vector3


class GroupBehavior(Enum):
    FLOCK = "flock"
    SWARM = "swarm"
    FORMATION = "formation"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: Union["GroupBehavior", str]) -> "GroupBehavior":
        """Accept an enum member or its string value.

        Raises:
            ValueError: If ``value`` names no behavior
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        valid = ", ".join(b.value for b in cls)
        raise ValueError(f"Unknown group behavior {value!r}; expected one of: {valid}")


@dataclass(frozen=True)
class Group:
    """Snapshot of a group.

    Groups are immutable; the coordinator replaces the snapshot on every
    change, so a held reference never changes underneath its holder.
    """

    id: str
    members: Tuple[str, ...]
    behavior: GroupBehavior
    center: Vector3 = field(default_factory=Vector3)
    formation_id: Optional[str] = None
    created_at: float = 0.0

    @property
    def size(self) -> int:
        return len(self.members)

    def __contains__(self, member_id: object) -> bool:
        return member_id in self.members


@dataclass(frozen=True)
class FormationConfig:
    """Request to lay a group out as a named pattern.

    ``scale`` multiplies every generated position.
    """

    pattern_id: str
    scale: float = 1.0

    def __post_init__(self) -> None:
        if not self.pattern_id:
            raise ConfigurationError("pattern_id must be a non-empty string")
        if not math.isfinite(self.scale) or self.scale <= 0.0:
            raise ConfigurationError(f"scale must be a positive finite number, got {self.scale}")


@dataclass(frozen=True)
class GroupMetrics:
    total_groups: int
    groups_by_behavior: Dict[GroupBehavior, int]
    average_size: float
