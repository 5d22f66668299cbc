from __future__ import annotations

from typing import Sequence

from salvager.core.rng import RNG
from salvager.domain.state import INVENTORY_CAPACITY, LOOT_TABLE, PlayerState
from salvager.services.encounter_service import CombatResolvedEvent, EncounterService, EncounterStartedEvent
from salvager.services.exploration_service import (
    ExplorationService,
    HostileApproachEvent,
    InventoryFullEvent,
    SalvageCollectedEvent,
    SalvageFoundEvent,
    WarpedEvent,
)
from tests.helpers.scripted_rng import ScriptedRNG


class _DecliningPrompter:
    def ask_riddle_value(self, events: Sequence[object]) -> str:
        return "3"

    def ask_trade(self, events: Sequence[object]) -> bool:
        return False


def _service() -> ExplorationService:
    return ExplorationService(EncounterService())


def test_salvage_branch_collects_loot() -> None:
    state = PlayerState()
    result = _service().explore(state, ScriptedRNG([2, 10, 1]), _DecliningPrompter())

    assert result.events == [
        WarpedEvent(from_location="Derelict Freighter", to_location="Abandoned Station"),
        SalvageFoundEvent(),
        SalvageCollectedEvent(item="Alien Relic", score=10, credits=55),
    ]
    assert state.location == 2
    assert state.inventory == ["Alien Relic"]


def test_salvage_roll_boundary_goes_hostile_at_sixty() -> None:
    state = PlayerState()
    result = _service().explore(state, ScriptedRNG([0, 60, 0, 12]), _DecliningPrompter())

    assert result.events[1:] == [
        HostileApproachEvent(),
        EncounterStartedEvent(kind="combat"),
        CombatResolvedEvent(damage=12, hp=88, credits=40, ship_destroyed=False),
    ]


def test_salvage_roll_fifty_nine_still_salvages() -> None:
    result = _service().explore(PlayerState(), ScriptedRNG([4, 59, 0]), _DecliningPrompter())
    assert isinstance(result.events[1], SalvageFoundEvent)


def test_full_inventory_salvage_is_a_narrated_no_op() -> None:
    items = ["a", "b", "c", "d", "e"]
    state = PlayerState(inventory=list(items), score=40, credits=60)
    result = _service().explore(state, ScriptedRNG([3, 0, 4]), _DecliningPrompter())

    assert result.events[-1] == InventoryFullEvent(item="Encrypted Chip")
    assert state.inventory == items
    assert (state.score, state.credits) == (40, 60)
    assert state.location == 3


def test_destination_may_equal_current_location() -> None:
    state = PlayerState(location=1)
    result = _service().explore(state, ScriptedRNG([1, 0, 0]), _DecliningPrompter())
    assert result.events[0] == WarpedEvent(from_location="Ice Field", to_location="Ice Field")


def test_inventory_never_exceeds_capacity_over_many_salvages() -> None:
    state = PlayerState()
    service = _service()
    for _ in range(12):
        service.explore(state, ScriptedRNG([0, 0, 2]), _DecliningPrompter())
        assert len(state.inventory) <= INVENTORY_CAPACITY
    assert state.inventory == [LOOT_TABLE[2]] * INVENTORY_CAPACITY
    assert state.score == 50


def test_seeded_exploration_is_deterministic() -> None:
    def run(seed: int) -> tuple[PlayerState, list]:
        state = PlayerState()
        rng = RNG(seed)
        service = _service()
        events = []
        for _ in range(20):
            if not state.is_alive:
                break
            events.extend(service.explore(state, rng, _DecliningPrompter()).events)
        return state, events

    assert run(99) == run(99)


def test_invariants_hold_under_random_play() -> None:
    rng = RNG(2024)
    service = _service()
    state = PlayerState()
    for _ in range(200):
        if not state.is_alive:
            state = PlayerState()
        service.explore(state, rng, _DecliningPrompter())
        assert state.hp >= 0
        assert state.credits >= 0
        assert 0 <= state.location < 5
