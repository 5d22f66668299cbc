"""UI-agnostic session controller that sequences turns and detects the end of a game."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from salvager.core.rng import RNG
from salvager.core.types import SessionOutcome
from salvager.domain.state import WIN_SCORE, PlayerState
from salvager.services.encounter_service import EncounterPrompter
from salvager.services.errors import SaveLoadError
from salvager.services.exploration_service import ExplorationService
from salvager.services.save_service import DEFAULT_HIGHSCORE_FILE, HighScoreRecord, SaveService
from salvager.services.status_service import StatusView, build_status_view

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SessionEvent:
    """Base class for session-level narration."""


@dataclass(slots=True)
class GameSavedEvent(SessionEvent):
    path: str


@dataclass(slots=True)
class SaveFailedEvent(SessionEvent):
    path: str
    reason: str


@dataclass(slots=True)
class HighScoreRecordedEvent(SessionEvent):
    record: HighScoreRecord


@dataclass(slots=True)
class HighScoreFailedEvent(SessionEvent):
    reason: str


@dataclass(slots=True)
class ShipLostEvent(SessionEvent):
    name: str


@dataclass(slots=True)
class VictoryEvent(SessionEvent):
    name: str
    score: int
    threshold: int


@dataclass(slots=True)
class QuitEvent(SessionEvent):
    saved_high_score: bool


@dataclass(slots=True)
class TurnResult:
    """Events produced by one player action and the outcome it led to, if any."""

    events: List[object] = field(default_factory=list)
    outcome: SessionOutcome | None = None


class SessionController:
    """
    Drives one captain's session from the first turn to a terminal outcome.

    The controller owns the player state and the injected RNG. It does NOT
    render or prompt; encounter decisions come from the prompter passed to
    ``explore``.
    """

    def __init__(
        self,
        state: PlayerState,
        rng: RNG,
        *,
        exploration_service: ExplorationService,
        save_service: SaveService,
        highscore_path: Path | str = DEFAULT_HIGHSCORE_FILE,
        win_score: int = WIN_SCORE,
    ) -> None:
        self._state = state
        self._rng = rng
        self._exploration_service = exploration_service
        self._save_service = save_service
        self._highscore_path = Path(highscore_path)
        self._win_score = win_score
        self._outcome: SessionOutcome | None = None

    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def outcome(self) -> SessionOutcome | None:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome is not None

    def start(self) -> TurnResult:
        """Close out a session whose state is already terminal, e.g. a loaded save.

        Uses the same loss-then-win order as the post-turn check.
        """
        self._ensure_playing()
        return TurnResult(events=self._evaluate_terminal_conditions(), outcome=self._outcome)

    def explore(self, prompter: EncounterPrompter) -> TurnResult:
        """Run one exploration turn, then check for loss and victory."""
        self._ensure_playing()
        result = self._exploration_service.explore(self._state, self._rng, prompter)
        events: List[object] = list(result.events)
        events.extend(self._evaluate_terminal_conditions())
        return TurnResult(events=events, outcome=self._outcome)

    def status(self, *, detailed: bool = True) -> StatusView:
        """Return the status panel for the current state."""
        return build_status_view(self._state, detailed=detailed)

    def save(self, path: Path | str) -> TurnResult:
        """Write the current state to ``path``; failures leave the session running."""
        self._ensure_playing()
        try:
            target = self._save_service.save_game(self._state, path)
        except SaveLoadError as exc:
            return TurnResult(events=[SaveFailedEvent(path=str(path), reason=str(exc))])
        return TurnResult(events=[GameSavedEvent(path=str(target))])

    def save_high_score_and_quit(self) -> TurnResult:
        """Record the high score and end the session."""
        self._ensure_playing()
        events = self._record_high_score()
        events.append(QuitEvent(saved_high_score=True))
        self._outcome = "quit_saved"
        return TurnResult(events=events, outcome=self._outcome)

    def quit_without_saving(self) -> TurnResult:
        """End the session without touching any file."""
        self._ensure_playing()
        self._outcome = "quit_unsaved"
        return TurnResult(events=[QuitEvent(saved_high_score=False)], outcome=self._outcome)

    def _evaluate_terminal_conditions(self) -> List[object]:
        if not self._state.is_alive:
            self._outcome = "lost"
            logger.info("Session lost by %s with score %s", self._state.name, self._state.score)
            return [ShipLostEvent(name=self._state.name), *self._record_high_score()]
        if self._state.score >= self._win_score:
            self._outcome = "won"
            logger.info("Session won by %s with score %s", self._state.name, self._state.score)
            victory = VictoryEvent(name=self._state.name, score=self._state.score, threshold=self._win_score)
            return [victory, *self._record_high_score()]
        return []

    def _record_high_score(self) -> List[object]:
        try:
            record = self._save_service.append_high_score(self._state, self._highscore_path)
        except SaveLoadError as exc:
            return [HighScoreFailedEvent(reason=str(exc))]
        return [HighScoreRecordedEvent(record=record)]

    def _ensure_playing(self) -> None:
        if self._outcome is not None:
            raise RuntimeError(f"Session already ended ({self._outcome}).")
