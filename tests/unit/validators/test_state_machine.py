from __future__ import annotations

import pytest

from folio.orchestration.state_machine import InvalidTransitionError, StateMachine, project_lifecycle


def test_state_machine_allows_valid_transition():
    sm = StateMachine({"new": {"running"}, "running": {"completed"}})
    assert sm.can_transition("new", "running") is True
    sm.assert_transition("new", "running")


def test_state_machine_rejects_invalid_transition():
    sm = StateMachine({"new": {"running"}})
    with pytest.raises(InvalidTransitionError):
        sm.assert_transition("new", "completed")


def test_project_lifecycle_edges():
    assert project_lifecycle.can_transition("pending", "in_progress")
    assert project_lifecycle.can_transition("in_progress", "pending")
    assert project_lifecycle.can_transition("in_progress", "completed")
    assert not project_lifecycle.can_transition("completed", "in_progress")
    assert not project_lifecycle.can_transition("pending", "completed")


def test_completed_and_cancelled_are_terminal():
    assert project_lifecycle.is_terminal("completed")
    assert project_lifecycle.is_terminal("cancelled")
    assert not project_lifecycle.is_terminal("pending")
