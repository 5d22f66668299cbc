"""Factory for creating fresh player states."""
from __future__ import annotations

from salvager.domain.state import DEFAULT_CAPTAIN_NAME, PlayerState


def create_player_state(name: str) -> PlayerState:
    """Instantiate a new captain with starting stats."""
    return PlayerState(name=name.strip() or DEFAULT_CAPTAIN_NAME)
