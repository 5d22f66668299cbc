"""Read-only status views of a player state."""
from __future__ import annotations

from dataclasses import dataclass

from salvager.domain.state import PlayerState


@dataclass(frozen=True, slots=True)
class StatusView:
    """Presentation data for the status panel.

    ``location`` and ``inventory`` are only filled for detailed views.
    """

    name: str
    hp: int
    credits: int
    score: int
    location: str | None = None
    inventory: tuple[str, ...] | None = None

    @property
    def detailed(self) -> bool:
        return self.inventory is not None


def build_status_view(state: PlayerState, *, detailed: bool) -> StatusView:
    """Snapshot ``state`` for rendering."""
    if not detailed:
        return StatusView(name=state.name, hp=state.hp, credits=state.credits, score=state.score)
    return StatusView(
        name=state.name,
        hp=state.hp,
        credits=state.credits,
        score=state.score,
        location=state.location_name,
        inventory=tuple(state.inventory),
    )
