"""GroupCoordinator: creation, membership and layout of organism groups.

The coordinator owns three pieces of state: the current ``Group`` snapshot
per id, a lifecycle state machine per id, and a member -> group index that
enforces single-group membership. It performs no locking; callers must keep
to one writer at a time.
"""

import dataclasses
import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Union

from protozoa.config.groups import (
    GROUP_FORMATION_STREAM_PREFIX,
    GROUP_ID_LENGTH,
    GROUP_ID_PREFIX,
    GROUP_ID_STREAM_KEY,
)
from protozoa.entropy.seeding import draw_identifier
from protozoa.entropy.source import SeededEntropySource
from protozoa.groups.models import FormationConfig, Group, GroupBehavior, GroupMetrics
from protozoa.math_utils import Vector3, centroid
from protozoa.protocols import PositionResolver
from protozoa.spatial.generator import SpatialPatternGenerator
from protozoa.spatial.patterns import FormationPattern
from protozoa.state_machine import GroupState, StateMachine, create_group_state_machine

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class GroupCoordinator:
    """Forms, updates and dissolves groups.

    Example:
        coordinator = GroupCoordinator(source, pattern_generator=SpatialPatternGenerator())
        group = coordinator.form_group(["org-a", "org-b"], "swarm")
        coordinator.apply_formation_to_group(group.id, FormationConfig("helix"))
    """

    def __init__(
        self,
        entropy_source: SeededEntropySource,
        pattern_generator: Optional[SpatialPatternGenerator] = None,
        position_resolver: Optional[PositionResolver] = None,
        clock: Clock = time.time,
    ) -> None:
        self._entropy_source = entropy_source
        self._pattern_generator = pattern_generator
        self._position_resolver = position_resolver
        self._clock = clock
        self._id_stream = entropy_source.derive_stream(GROUP_ID_STREAM_KEY)

        self._groups: Dict[str, Group] = {}
        self._lifecycles: Dict[str, StateMachine[GroupState]] = {}
        self._membership: Dict[str, str] = {}
        self._layouts: Dict[str, FormationPattern] = {}

    def configure(
        self,
        pattern_generator: Optional[SpatialPatternGenerator] = None,
        position_resolver: Optional[PositionResolver] = None,
    ) -> None:
        """Attach collaborators after construction. ``None`` leaves a slot unchanged."""
        if pattern_generator is not None:
            self._pattern_generator = pattern_generator
        if position_resolver is not None:
            self._position_resolver = position_resolver

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _new_group_id(self) -> str:
        while True:
            group_id = draw_identifier(self._id_stream, GROUP_ID_PREFIX, GROUP_ID_LENGTH)
            if group_id not in self._lifecycles:
                return group_id

    def form_group(
        self,
        member_ids: Iterable[str],
        behavior: Union[GroupBehavior, str],
    ) -> Group:
        """Create a group and move the given members into it.

        Duplicate ids collapse to their first occurrence. A member that
        already belongs to another group leaves that group; the old group
        stays in place even if it becomes empty.

        Raises:
            TypeError: If ``member_ids`` is a single string
            ValueError: If ``behavior`` is not a known behavior
        """
        behavior = GroupBehavior.parse(behavior)
        if isinstance(member_ids, (str, bytes)):
            raise TypeError("member_ids must be an iterable of ids, not a single string")
        members = tuple(dict.fromkeys(member_ids))

        for member_id in members:
            previous_id = self._membership.get(member_id)
            if previous_id is not None:
                self._remove_member(previous_id, member_id)

        group_id = self._new_group_id()
        lifecycle = create_group_state_machine(track_history=True)
        lifecycle.transition(GroupState.ACTIVE, reason="formed")

        group = Group(
            id=group_id,
            members=members,
            behavior=behavior,
            center=Vector3(),
            formation_id=None,
            created_at=self._clock(),
        )
        self._groups[group_id] = group
        self._lifecycles[group_id] = lifecycle
        for member_id in members:
            self._membership[member_id] = group_id

        logger.debug("Formed %s group %s with %d members", behavior.value, group_id, len(members))
        return group

    def _remove_member(self, group_id: str, member_id: str) -> None:
        """Take ``member_id`` out of ``group_id``.

        A layout no longer fits the shrunken membership, so it is dropped
        along with the group's ``formation_id``.
        """
        group = self._groups[group_id]
        remaining = tuple(m for m in group.members if m != member_id)
        if self._layouts.pop(group_id, None) is not None:
            group = dataclasses.replace(group, formation_id=None)
        self._groups[group_id] = dataclasses.replace(group, members=remaining)
        del self._membership[member_id]
        logger.debug("Moved member %s out of group %s", member_id, group_id)

    def dissolve_group(self, group_id: str) -> bool:
        """Dissolve ``group_id``. Returns False if there was no active group."""
        group = self._groups.pop(group_id, None)
        if group is None:
            return False
        for member_id in group.members:
            if self._membership.get(member_id) == group_id:
                del self._membership[member_id]
        self._layouts.pop(group_id, None)
        self._lifecycles[group_id].transition(GroupState.DISSOLVED, reason="dissolved")
        logger.debug("Dissolved group %s", group_id)
        return True

    def group_state(self, group_id: str) -> Optional[GroupState]:
        """Lifecycle state of ``group_id``, or None if it was never formed.

        Dissolved groups keep their lifecycle so this keeps answering
        DISSOLVED for them. Those records stay until ``prune_dissolved()`` or
        ``clear()``; long-running callers should prune periodically.
        """
        lifecycle = self._lifecycles.get(group_id)
        return lifecycle.state if lifecycle is not None else None

    def prune_dissolved(self) -> int:
        """Forget the lifecycles of dissolved groups. Returns how many were dropped.

        Pruned ids report None from ``group_state`` afterwards and no longer
        take part in the collision check for new ids. The id stream is not
        rewound, so the next id is the one that would have been drawn anyway.
        """
        dissolved = [gid for gid, lifecycle in self._lifecycles.items() if lifecycle.state is GroupState.DISSOLVED]
        for group_id in dissolved:
            del self._lifecycles[group_id]
        if dissolved:
            logger.debug("Pruned %d dissolved group lifecycle(s)", len(dissolved))
        return len(dissolved)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_group(self, group_id: str) -> Optional[Group]:
        return self._groups.get(group_id)

    def list_groups(self) -> List[Group]:
        return list(self._groups.values())

    def list_groups_by_behavior(self, behavior: Union[GroupBehavior, str]) -> List[Group]:
        behavior = GroupBehavior.parse(behavior)
        return [g for g in self._groups.values() if g.behavior is behavior]

    def group_of(self, member_id: str) -> Optional[Group]:
        group_id = self._membership.get(member_id)
        return self._groups.get(group_id) if group_id is not None else None

    def formation_layout(self, group_id: str) -> Optional[FormationPattern]:
        return self._layouts.get(group_id)

    # ------------------------------------------------------------------
    # Formation and center
    # ------------------------------------------------------------------

    def apply_formation_to_group(self, group_id: str, config: FormationConfig) -> bool:
        """Lay the group out as ``config.pattern_id``, one position per member.

        Returns False when the group does not exist or no pattern generator
        is configured.
        """
        group = self._groups.get(group_id)
        if group is None or self._pattern_generator is None:
            return False

        stream = self._entropy_source.derive_stream(f"{GROUP_FORMATION_STREAM_PREFIX}:{group_id}")
        pattern = self._pattern_generator.generate(config.pattern_id, len(group.members), stream)
        if config.scale != 1.0:
            pattern = dataclasses.replace(
                pattern, positions=tuple(p * config.scale for p in pattern.positions)
            )

        self._layouts[group_id] = pattern
        self._groups[group_id] = dataclasses.replace(
            group, behavior=GroupBehavior.FORMATION, formation_id=pattern.id
        )
        logger.debug(
            "Applied formation %s to group %s (%d positions%s)",
            pattern.id,
            group_id,
            len(pattern),
            ", fallback" if pattern.fallback else "",
        )
        return True

    def update_group_center(self, group_id: str) -> Optional[Vector3]:
        """Recompute the center from resolved member positions.

        Members the resolver cannot place are skipped. Without a resolver, or
        when no member resolves, the current center is kept. Returns the
        center, or None if the group does not exist.
        """
        group = self._groups.get(group_id)
        if group is None:
            return None
        if self._position_resolver is None:
            return group.center

        positions = []
        for member_id in group.members:
            position = self._position_resolver.resolve_position(member_id)
            if position is not None:
                positions.append(position)
        if not positions:
            return group.center

        center = centroid(positions)
        self._groups[group_id] = dataclasses.replace(group, center=center)
        return center

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def metrics(self) -> GroupMetrics:
        groups = list(self._groups.values())
        by_behavior = {behavior: 0 for behavior in GroupBehavior}
        for group in groups:
            by_behavior[group.behavior] += 1
        average = sum(g.size for g in groups) / len(groups) if groups else 0.0
        return GroupMetrics(
            total_groups=len(groups),
            groups_by_behavior=by_behavior,
            average_size=average,
        )

    def clear(self) -> None:
        """Drop every group, lifecycle, membership and layout.

        The id stream keeps its position, so ids issued after a clear never
        repeat ones issued before it.
        """
        self._groups.clear()
        self._lifecycles.clear()
        self._membership.clear()
        self._layouts.clear()
        logger.debug("Cleared all groups")

    def __len__(self) -> int:
        return len(self._groups)
