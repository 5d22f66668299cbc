"""Application service for warping between locations and salvaging loot."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from salvager.core.rng import RNG
from salvager.domain.state import LOCATIONS, LOOT_TABLE, PlayerState
from salvager.services.encounter_service import EncounterPrompter, EncounterService

logger = logging.getLogger(__name__)

SALVAGE_CHANCE = 60
SALVAGE_SCORE_REWARD = 10
SALVAGE_CREDIT_REWARD = 5


@dataclass(slots=True)
class ExplorationEvent:
    """Base class for exploration narration."""


@dataclass(slots=True)
class WarpedEvent(ExplorationEvent):
    from_location: str
    to_location: str


@dataclass(slots=True)
class SalvageFoundEvent(ExplorationEvent):
    """The warp ended near something worth salvaging."""


@dataclass(slots=True)
class SalvageCollectedEvent(ExplorationEvent):
    item: str
    score: int
    credits: int


@dataclass(slots=True)
class InventoryFullEvent(ExplorationEvent):
    item: str


@dataclass(slots=True)
class HostileApproachEvent(ExplorationEvent):
    """The warp ended next to an encounter."""


@dataclass(slots=True)
class ExploreResult:
    """Narration produced by a single exploration."""

    events: List[object]


class ExplorationService:
    """Moves the captain to a random location and resolves what is found there."""

    def __init__(self, encounter_service: EncounterService) -> None:
        self._encounter_service = encounter_service

    def explore(self, state: PlayerState, rng: RNG, prompter: EncounterPrompter) -> ExploreResult:
        """Warp to a random location, then salvage or face an encounter.

        ``state`` is mutated in place; the returned events narrate the change.
        """
        previous = state.location_name
        state.location = rng.randint(0, len(LOCATIONS) - 1)
        events: List[object] = [WarpedEvent(from_location=previous, to_location=state.location_name)]
        roll = rng.randint(0, 99)
        logger.debug("Warped %s -> %s, event roll %s", previous, state.location_name, roll)
        if roll < SALVAGE_CHANCE:
            events.append(SalvageFoundEvent())
            events.append(self._collect_salvage(state, rng.choice(LOOT_TABLE)))
        else:
            events.append(HostileApproachEvent())
            events.extend(self._encounter_service.resolve(state, rng, prompter, narrated=events))
        return ExploreResult(events=events)

    def _collect_salvage(self, state: PlayerState, item: str) -> ExplorationEvent:
        if not state.has_inventory_space:
            return InventoryFullEvent(item=item)
        state.inventory.append(item)
        state.score += SALVAGE_SCORE_REWARD
        state.credits += SALVAGE_CREDIT_REWARD
        return SalvageCollectedEvent(item=item, score=state.score, credits=state.credits)
