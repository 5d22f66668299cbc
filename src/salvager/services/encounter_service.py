"""Random encounter resolution: pirate combat, beacon riddles and traders."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Protocol, Sequence

from salvager.core.rng import RNG
from salvager.core.types import EncounterKind
from salvager.domain.state import BEACON_ITEM, PlayerState

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

ENCOUNTER_KINDS: tuple[EncounterKind, ...] = ("combat", "riddle", "trade")

COMBAT_DAMAGE_RANGE = (10, 30)
COMBAT_CREDIT_LOSS = 10
DESTROYED_SCORE_PENALTY = 20
RIDDLE_RANGE = (1, 20)
RIDDLE_DEFAULT = 1
RIDDLE_SCORE_REWARD = 20
RIDDLE_CREDIT_REWARD = 20
TRADE_PRICE_RANGE = (15, 45)
TRADE_SCORE_REWARD = 5


@dataclass(slots=True)
class EncounterEvent:
    """Base class for encounter narration."""


@dataclass(slots=True)
class EncounterStartedEvent(EncounterEvent):
    kind: EncounterKind


@dataclass(slots=True)
class CombatResolvedEvent(EncounterEvent):
    damage: int
    hp: int
    credits: int
    ship_destroyed: bool


@dataclass(slots=True)
class RiddleSolvedEvent(EncounterEvent):
    n: int
    answer: int
    item: str
    stored: bool


@dataclass(slots=True)
class TradeCompletedEvent(EncounterEvent):
    item: str
    price: int
    credits: int


@dataclass(slots=True)
class TradeDeclinedEvent(EncounterEvent):
    """The player turned the trader away."""


@dataclass(slots=True)
class NothingToSellEvent(EncounterEvent):
    """The player accepted a trade with an empty hold."""


class EncounterPrompter(Protocol):
    """Input source for encounters that need a decision from the player.

    ``events`` holds the narration produced so far in the current turn so an
    interactive prompter can show it before asking.
    """

    def ask_riddle_value(self, events: Sequence[object]) -> str:
        ...

    def ask_trade(self, events: Sequence[object]) -> bool:
        ...


def riddle_sum(n: int) -> int:
    """Return S(n) = n + S(n - 1), with S(n) = n for n <= 1."""
    if n <= 1:
        return n
    return n + riddle_sum(n - 1)


def parse_riddle_value(raw: str) -> int:
    """Read the leading integer of the riddle input, clamped into the allowed range.

    Trailing text after the number is ignored; no leading number means the default.
    """
    low, high = RIDDLE_RANGE
    match = _LEADING_INT.match(raw)
    if match is None:
        return RIDDLE_DEFAULT
    return max(low, min(high, int(match.group(1))))


class EncounterService:
    """Resolves hostile encounters against a player state."""

    def __init__(self, *, cap_beacon_data: bool = False) -> None:
        self._cap_beacon_data = cap_beacon_data

    def resolve(
        self,
        state: PlayerState,
        rng: RNG,
        prompter: EncounterPrompter,
        *,
        narrated: Sequence[object] = (),
    ) -> List[EncounterEvent]:
        """Pick an encounter kind at random and apply its outcome to ``state``."""
        kind = rng.choice(ENCOUNTER_KINDS)
        logger.debug("Encounter drawn: %s", kind)
        events: List[EncounterEvent] = [EncounterStartedEvent(kind=kind)]
        if kind == "combat":
            events.append(self.resolve_combat(state, rng.randint(*COMBAT_DAMAGE_RANGE)))
        elif kind == "riddle":
            raw = prompter.ask_riddle_value([*narrated, *events])
            events.append(self.resolve_riddle(state, parse_riddle_value(raw)))
        elif kind == "trade":
            accept = prompter.ask_trade([*narrated, *events])
            if not accept:
                events.append(TradeDeclinedEvent())
            elif not state.inventory:
                events.append(NothingToSellEvent())
            else:
                events.append(self.resolve_trade(state, rng.randint(*TRADE_PRICE_RANGE)))
        else:
            raise ValueError(f"Unknown encounter kind: {kind}")
        return events

    def resolve_combat(self, state: PlayerState, damage: int) -> CombatResolvedEvent:
        """Apply pirate damage; a destroyed ship costs score, an escape costs credits."""
        state.hp -= damage
        destroyed = state.hp <= 0
        if destroyed:
            state.hp = 0
            state.score -= DESTROYED_SCORE_PENALTY
            logger.info("Ship of %s destroyed by %s damage", state.name, damage)
        else:
            state.credits = max(0, state.credits - COMBAT_CREDIT_LOSS)
        return CombatResolvedEvent(damage=damage, hp=state.hp, credits=state.credits, ship_destroyed=destroyed)

    def resolve_riddle(self, state: PlayerState, n: int) -> RiddleSolvedEvent:
        """Solve the beacon riddle for ``n`` and collect its reward."""
        answer = riddle_sum(n)
        stored = not self._cap_beacon_data or state.has_inventory_space
        if stored:
            state.inventory.append(BEACON_ITEM)
        state.score += RIDDLE_SCORE_REWARD
        state.credits += RIDDLE_CREDIT_REWARD
        return RiddleSolvedEvent(n=n, answer=answer, item=BEACON_ITEM, stored=stored)

    def resolve_trade(self, state: PlayerState, price: int) -> TradeCompletedEvent:
        """Sell the oldest inventory item for ``price`` credits."""
        if not state.inventory:
            raise ValueError("Cannot trade with an empty inventory.")
        item = state.inventory.pop(0)
        state.credits += price
        state.score += TRADE_SCORE_REWARD
        logger.debug("Sold %s for %s credits", item, price)
        return TradeCompletedEvent(item=item, price=price, credits=state.credits)
