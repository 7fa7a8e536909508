"""Lifecycle rules for booking and inquiry status changes."""

from typing import Dict, FrozenSet, Optional

from ..core.errors import InvalidTransitionError


def ensure_transition(
    kind: str,
    transitions: Dict[str, FrozenSet[str]],
    current: str,
    requested: Optional[str],
) -> None:
    """Raise ``InvalidTransitionError`` unless ``current -> requested`` is legal.

    ``None`` (status not part of the update) and same‑status updates are
    always allowed.  A status outside the known lifecycle is rejected.
    """
    if requested is None or requested == current:
        return
    if requested not in transitions.get(current, frozenset()):
        raise InvalidTransitionError(kind, current, requested)
