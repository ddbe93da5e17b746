"""Protocol-based abstractions for external collaborators.

The core never resolves entity positions itself. Anything that can answer
"where is this member right now" satisfies ``PositionResolver`` without
inheriting from it, which keeps physics and rendering code decoupled from the
group coordinator.
"""

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from protozoa.math_utils import Vector3


@runtime_checkable
class PositionResolver(Protocol):
    """Protocol for collaborators that know where group members are.

    Returning ``None`` means the member's position is currently unknown; the
    coordinator skips such members when recomputing a center.
    """

    def resolve_position(self, member_id: str) -> Optional["Vector3"]:
        ...
