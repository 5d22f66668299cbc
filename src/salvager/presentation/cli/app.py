"""Console-driven UI loops for Space Salvager."""
from __future__ import annotations

import logging
import secrets
from pathlib import Path
from typing import List, Literal, Sequence

from salvager.core.rng import RNG
from salvager.domain.state import PlayerState
from salvager.presentation.cli import config
from salvager.presentation.cli.render import debug_enabled, render_banner, render_menu, render_status
from salvager.services import EncounterService, ExplorationService, SaveLoadError, SaveService, SessionController
from salvager.services.controllers.session_controller import (
    GameSavedEvent,
    HighScoreFailedEvent,
    HighScoreRecordedEvent,
    QuitEvent,
    SaveFailedEvent,
    ShipLostEvent,
    VictoryEvent,
)
from salvager.services.encounter_service import (
    RIDDLE_RANGE,
    CombatResolvedEvent,
    EncounterStartedEvent,
    NothingToSellEvent,
    RiddleSolvedEvent,
    TradeCompletedEvent,
    TradeDeclinedEvent,
)
from salvager.services.exploration_service import (
    HostileApproachEvent,
    InventoryFullEvent,
    SalvageCollectedEvent,
    SalvageFoundEvent,
    WarpedEvent,
)
from salvager.services.factories import create_player_state

logger = logging.getLogger(__name__)

MenuAction = Literal["new_game", "load_game", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1
_MAIN_MENU_OPTIONS: tuple[tuple[str, MenuAction], ...] = (
    ("New Game", "new_game"),
    ("Load Game", "load_game"),
    ("Quit", "quit"),
)
_SESSION_MENU_OPTIONS: tuple[str, ...] = (
    "Explore",
    "Status",
    "Save",
    "Save High Score & Quit",
    "Quit without saving",
)
_ENCOUNTER_TITLES = {
    "combat": "Pirate skirmish!",
    "riddle": "Strange derelict beacon.",
    "trade": "Mysterious trader.",
}


def main() -> None:
    """Start the interactive CLI session."""
    settings = config.load_config()
    save_service = SaveService()
    state = _main_menu_loop(save_service)
    if state is None:
        print("Goodbye.")
        return
    seed = _prompt_seed()
    if debug_enabled():
        print(f"Session seed: {seed}")
    exploration_service = ExplorationService(
        EncounterService(cap_beacon_data=settings["cap_beacon_data"])
    )
    controller = SessionController(
        state,
        RNG(seed),
        exploration_service=exploration_service,
        save_service=save_service,
        highscore_path=Path(settings["highscore_file"]),
    )
    render_banner()
    print(f"Welcome, {state.name}! You are a Space Salvager.")
    render_status(controller.status(detailed=True))
    _render_events(controller.start().events)
    _run_session_loop(controller)


def _main_menu_loop(save_service: SaveService) -> PlayerState | None:
    while True:
        render_menu("Space Salvager", [label for label, _ in _MAIN_MENU_OPTIONS])
        _, action = _MAIN_MENU_OPTIONS[_prompt_int_in_range(1, len(_MAIN_MENU_OPTIONS)) - 1]
        if action == "new_game":
            return create_player_state(input("Enter your captain name: "))
        if action == "quit":
            return None
        filename = _prompt_non_empty("Enter filename to load (e.g., save.txt): ")
        try:
            state = save_service.load_game(filename)
        except SaveLoadError as exc:
            logger.debug("Load failed: %s", exc)
            print(f"Failed to load file: {filename}")
            continue
        print(f"Loaded game for {state.name}")
        return state


def _run_session_loop(controller: SessionController) -> None:
    while not controller.is_over:
        render_menu("Main Menu", _SESSION_MENU_OPTIONS)
        choice = _prompt_int_in_range(1, len(_SESSION_MENU_OPTIONS))
        if choice == 1:
            prompter = _ConsoleEncounterPrompter()
            result = controller.explore(prompter)
            prompter.flush(result.events)
        elif choice == 2:
            render_status(controller.status(detailed=True))
        elif choice == 3:
            filename = _prompt_non_empty("Enter filename to save (e.g., save.txt): ")
            _render_events(controller.save(filename).events)
        elif choice == 4:
            _render_events(controller.save_high_score_and_quit().events)
        else:
            _render_events(controller.quit_without_saving().events)


class _ConsoleEncounterPrompter:
    """Asks encounter questions on stdin after showing the narration so far."""

    def __init__(self) -> None:
        self._rendered = 0

    def flush(self, events: Sequence[object]) -> None:
        _render_events(events[self._rendered :])
        self._rendered = len(events)

    def ask_riddle_value(self, events: Sequence[object]) -> str:
        self.flush(events)
        low, high = RIDDLE_RANGE
        print("Solve this riddle to hack: compute recursive sum S(n) where S(n)=1+2+...+n")
        return input(f"Enter n ({low}-{high}): ")

    def ask_trade(self, events: Sequence[object]) -> bool:
        self.flush(events)
        answer = input("Trade: sell first item for credits? (y/n): ").strip()
        return answer[:1] in ("y", "Y")


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_int_in_range(min_value: int, max_value: int) -> int:
    while True:
        raw = input("> ").strip()
        try:
            value = int(raw)
        except ValueError:
            value = None
        if value is not None and min_value <= value <= max_value:
            return value
        print(f"Please enter a number between {min_value} and {max_value}.")


def _prompt_non_empty(prompt: str) -> str:
    while True:
        value = input(prompt).strip()
        if value:
            return value
        print("Please enter a non-empty value.")


def _render_events(events: Sequence[object]) -> None:
    for event in events:
        for line in _describe_event(event):
            print(line)


def _describe_event(event: object) -> List[str]:
    if isinstance(event, WarpedEvent):
        return [f"Warping from {event.from_location} to {event.to_location}..."]
    if isinstance(event, SalvageFoundEvent):
        return ["You find salvage..."]
    if isinstance(event, SalvageCollectedEvent):
        return [f"Collected: {event.item}"]
    if isinstance(event, InventoryFullEvent):
        return [f"Inventory full! You cannot pick up: {event.item}"]
    if isinstance(event, HostileApproachEvent):
        return ["Something hostile approaches..."]
    if isinstance(event, EncounterStartedEvent):
        return [f"Encounter type: {_ENCOUNTER_TITLES[event.kind]}"]
    if isinstance(event, CombatResolvedEvent):
        outcome = "Your ship is destroyed..." if event.ship_destroyed else "You escape but lose some hull."
        return [f"You take {event.damage} damage while dodging.", outcome]
    if isinstance(event, RiddleSolvedEvent):
        retrieved = "Artifact retrieved." if event.stored else f"Your hold is full. The {event.item} is lost."
        return [f"Riddle solved: S({event.n}) = {event.answer}", retrieved]
    if isinstance(event, TradeCompletedEvent):
        return [f"Sold {event.item} for {event.price} credits."]
    if isinstance(event, TradeDeclinedEvent):
        return ["You decline the trade."]
    if isinstance(event, NothingToSellEvent):
        return ["You have nothing to sell."]
    if isinstance(event, GameSavedEvent):
        return [f"Saved to {event.path}"]
    if isinstance(event, SaveFailedEvent):
        return [f"Failed to save. ({event.reason})"]
    if isinstance(event, HighScoreRecordedEvent):
        return [f"High score saved: {event.record.to_line()}"]
    if isinstance(event, HighScoreFailedEvent):
        return [f"Could not record high score. ({event.reason})"]
    if isinstance(event, ShipLostEvent):
        return ["", "Your ship was lost. Game over."]
    if isinstance(event, VictoryEvent):
        return ["", f"You reached score {event.threshold} - you win! Congratulations, {event.name}!"]
    if isinstance(event, QuitEvent):
        return ["Exiting..."] if event.saved_high_score else ["Quitting without saving."]
    return [f"- {event}"]
