"""Shared type aliases for the core and domain layers."""
from typing import Literal

EncounterKind = Literal["combat", "riddle", "trade"]
SessionOutcome = Literal["won", "lost", "quit_saved", "quit_unsaved"]

__all__ = ["EncounterKind", "SessionOutcome"]
