"""Domain-level player state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

LOCATIONS: tuple[str, ...] = (
    "Derelict Freighter",
    "Ice Field",
    "Abandoned Station",
    "Asteroid Belt",
    "Quantum Ruins",
)

LOOT_TABLE: tuple[str, ...] = (
    "Nano-kit",
    "Alien Relic",
    "Fuel Cell",
    "Scrap Metal",
    "Encrypted Chip",
)

DEFAULT_CAPTAIN_NAME = "Captain"
STARTING_HP = 100
STARTING_CREDITS = 50
INVENTORY_CAPACITY = 5
BEACON_ITEM = "Beacon Data"
WIN_SCORE = 100


@dataclass
class PlayerState:
    """Progress of a single captain.

    Mutated in place by the exploration and encounter services. ``hp`` and
    ``credits`` are clamped at zero where they are reduced; ``score`` is not.
    """

    name: str = DEFAULT_CAPTAIN_NAME
    hp: int = STARTING_HP
    credits: int = STARTING_CREDITS
    inventory: List[str] = field(default_factory=list)
    score: int = 0
    location: int = 0

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def location_name(self) -> str:
        return LOCATIONS[self.location]

    @property
    def has_inventory_space(self) -> bool:
        return len(self.inventory) < INVENTORY_CAPACITY
