"""Canonical state transition helpers for the project lifecycle."""

from __future__ import annotations

from folio.models.enums import ProjectStatus


class InvalidTransitionError(ValueError):
    """Raised when a disallowed state transition is attempted."""


class StateMachine:
    """Simple in-memory state machine over string states."""

    def __init__(self, transitions: dict[str, set[str]]) -> None:
        self._transitions = transitions

    def can_transition(self, current: str, target: str) -> bool:
        return target in self._transitions.get(current, set())

    def assert_transition(self, current: str, target: str) -> None:
        if not self.can_transition(current=current, target=target):
            raise InvalidTransitionError(f"Transition not allowed: {current} -> {target}")

    def is_terminal(self, state: str) -> bool:
        return not self._transitions.get(state)


PENDING = ProjectStatus.PENDING.value
IN_PROGRESS = ProjectStatus.IN_PROGRESS.value
COMPLETED = ProjectStatus.COMPLETED.value
CANCELLED = ProjectStatus.CANCELLED.value

# in_progress -> pending is the demote-to-waitlist edge.
PROJECT_TRANSITIONS: dict[str, set[str]] = {
    PENDING: {IN_PROGRESS, CANCELLED},
    IN_PROGRESS: {PENDING, COMPLETED, CANCELLED},
    COMPLETED: set(),
    CANCELLED: set(),
}

project_lifecycle = StateMachine(PROJECT_TRANSITIONS)
