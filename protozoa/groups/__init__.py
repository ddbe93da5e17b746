"""Group coordination."""

from protozoa.groups.coordinator import GroupCoordinator
from protozoa.groups.models import FormationConfig, Group, GroupBehavior, GroupMetrics

__all__ = [
    "GroupCoordinator",
    "Group",
    "GroupBehavior",
    "GroupMetrics",
    "FormationConfig",
]
