from typing import Set

from prompt_studio.domain.invariants.exceptions import InvariantViolation

# Explicit allowed state transitions
ALLOWED_PROJECT_TRANSITIONS: dict[str, Set[str]] = {
    "draft": {"draft", "ready"},
    "ready": {"ready", "draft"},
}

def assert_project_status(status: str) -> None:
    if status not in ALLOWED_PROJECT_TRANSITIONS:
        raise InvariantViolation(f"Invalid project status: {status}")

def assert_project_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards project lifecycle transitions.
    Single source of truth for status changes.
    """
    assert_project_status(to_status)
    allowed = ALLOWED_PROJECT_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise InvariantViolation(
            f"Illegal project transition: {from_status} → {to_status}"
        )
