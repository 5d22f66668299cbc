"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .session_controller import SessionController, TurnResult

__all__ = [
    "SessionController",
    "TurnResult",
]
