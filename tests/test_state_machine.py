"""Tests for the generic state machine and group lifecycle."""

from enum import Enum

import pytest

from protozoa.state_machine import (
    GroupState,
    StateMachine,
    StateTransition,
    create_group_state_machine,
)


class Light(Enum):
    RED = "red"
    GREEN = "green"


class TestStateMachine:
    def test_initial_state_must_be_known(self):
        with pytest.raises(ValueError):
            StateMachine(Light.RED, {Light.GREEN: [Light.RED]})

    def test_valid_transition(self):
        machine = StateMachine(Light.RED, {Light.RED: [Light.GREEN], Light.GREEN: [Light.RED]})
        assert machine.transition(Light.GREEN) is Light.GREEN
        assert machine.state is Light.GREEN
        assert not machine.is_terminal

    def test_invalid_transition(self):
        machine = StateMachine(Light.RED, {Light.RED: [], Light.GREEN: []})
        with pytest.raises(ValueError, match="RED -> GREEN"):
            machine.transition(Light.GREEN)
        assert machine.state is Light.RED

    def test_history_tracking(self):
        machine = StateMachine(
            Light.RED, {Light.RED: [Light.GREEN], Light.GREEN: [Light.RED]}, track_history=True
        )
        machine.transition(Light.GREEN, reason="go")
        assert machine.history == (StateTransition(Light.RED, Light.GREEN, "go"),)

    def test_history_disabled_by_default(self):
        machine = StateMachine(Light.RED, {Light.RED: [Light.GREEN], Light.GREEN: []})
        machine.transition(Light.GREEN)
        assert machine.history == ()


class TestGroupLifecycle:
    def test_happy_path(self):
        machine = create_group_state_machine()
        assert machine.state is GroupState.UNINITIALIZED
        machine.transition(GroupState.ACTIVE)
        machine.transition(GroupState.DISSOLVED)
        assert machine.is_terminal

    def test_cannot_skip_activation(self):
        machine = create_group_state_machine()
        assert not machine.can_transition(GroupState.DISSOLVED)
        with pytest.raises(ValueError):
            machine.transition(GroupState.DISSOLVED)

    def test_dissolved_is_terminal(self):
        machine = create_group_state_machine()
        machine.transition(GroupState.ACTIVE)
        machine.transition(GroupState.DISSOLVED)
        with pytest.raises(ValueError):
            machine.transition(GroupState.ACTIVE)
