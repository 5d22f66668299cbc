"""Service layer exports."""

from .errors import SaveLoadError
from .encounter_service import EncounterPrompter, EncounterService, riddle_sum
from .exploration_service import ExplorationService, ExploreResult
from .save_service import HighScoreRecord, SaveService
from .status_service import StatusView, build_status_view
from .controllers import SessionController, TurnResult

__all__ = [
    "SaveLoadError",
    "EncounterPrompter",
    "EncounterService",
    "riddle_sum",
    "ExplorationService",
    "ExploreResult",
    "HighScoreRecord",
    "SaveService",
    "StatusView",
    "build_status_view",
    "SessionController",
    "TurnResult",
]
