from typing import Set

LOADING = "loading"
READY = "ready"

# Explicit allowed editor state transitions
ALLOWED_EDITOR_TRANSITIONS: dict[str, Set[str]] = {
    LOADING: {READY},
    READY: {LOADING, READY},
}

def assert_editor_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards layout editor state changes.
    Single source of truth for status changes.
    """
    allowed = ALLOWED_EDITOR_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise ValueError(
            f"Illegal editor transition: {from_status} -> {to_status}"
        )
