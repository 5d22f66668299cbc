"""Factories for runtime entities."""

from .player_factory import create_player_state

__all__ = ["create_player_state"]
