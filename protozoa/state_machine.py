"""Explicit lifecycle state machines.

A machine is built from a table mapping every state to the states it may move
to. Anything missing from the table is rejected on the spot, so an object can
never drift into a state its owner does not expect.

    lifecycle = create_group_state_machine()
    lifecycle.transition(GroupState.ACTIVE)
    lifecycle.transition(GroupState.UNINITIALIZED)  # ValueError
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Generic, Iterable, List, Mapping, Optional, Tuple, TypeVar

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class StateTransition(Generic[E]):
    """One recorded move between two states."""

    source: E
    target: E
    reason: str = ""


class StateMachine(Generic[E]):
    """Tracks the current state of one object against a transition table."""

    def __init__(
        self,
        initial: E,
        transitions: Mapping[E, Iterable[E]],
        track_history: bool = False,
    ) -> None:
        table: Dict[E, FrozenSet[E]] = {state: frozenset(targets) for state, targets in transitions.items()}
        if initial not in table:
            known = ", ".join(state.name for state in table)
            raise ValueError(f"{initial.name} is not a state of this machine (known: {known})")
        self._table = table
        self._current = initial
        self._log: Optional[List[StateTransition[E]]] = [] if track_history else None

    @property
    def state(self) -> E:
        return self._current

    @property
    def history(self) -> Tuple[StateTransition[E], ...]:
        """Recorded transitions, oldest first; empty unless tracking was requested."""
        return tuple(self._log) if self._log is not None else ()

    @property
    def is_terminal(self) -> bool:
        return not self._table[self._current]

    def can_transition(self, target: E) -> bool:
        return target in self._table[self._current]

    def transition(self, target: E, reason: str = "") -> E:
        """Move to ``target`` and return it.

        Raises:
            ValueError: If the table has no edge from the current state to ``target``.
        """
        if not self.can_transition(target):
            allowed = sorted(state.name for state in self._table[self._current]) or ["<none>"]
            raise ValueError(
                f"Cannot move {self._current.name} -> {target.name}; allowed: {', '.join(allowed)}"
            )
        if self._log is not None:
            self._log.append(StateTransition(self._current, target, reason))
        self._current = target
        return target

    def __repr__(self) -> str:
        return f"<StateMachine {self._current.name}>"


class GroupState(Enum):
    """Lifecycle of a coordinated group."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    DISSOLVED = "dissolved"


GROUP_STATE_TRANSITIONS: Dict[GroupState, Tuple[GroupState, ...]] = {
    GroupState.UNINITIALIZED: (GroupState.ACTIVE,),
    GroupState.ACTIVE: (GroupState.DISSOLVED,),
    GroupState.DISSOLVED: (),
}


def create_group_state_machine(track_history: bool = False) -> StateMachine[GroupState]:
    """A fresh group lifecycle, starting UNINITIALIZED."""
    return StateMachine(GroupState.UNINITIALIZED, GROUP_STATE_TRANSITIONS, track_history=track_history)
