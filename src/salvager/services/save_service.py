"""Line-oriented save files and the append-only high-score log.

Save file layout::

    <name>
    <hp> <credits> <score> <location>
    <inventory count>
    <one inventory item per line>
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from salvager.domain.state import DEFAULT_CAPTAIN_NAME, LOCATIONS, PlayerState
from salvager.services.errors import SaveLoadError

logger = logging.getLogger(__name__)

DEFAULT_HIGHSCORE_FILE = "highscores.txt"


@dataclass(frozen=True, slots=True)
class HighScoreRecord:
    """One entry of the high-score log."""

    name: str
    score: int
    credits: int

    def to_line(self) -> str:
        return f"{self.name} {self.score} {self.credits}"


class SaveService:
    """Converts player state to/from the save file format."""

    def encode(self, state: PlayerState) -> str:
        """Return the save file text for ``state``."""
        lines = [
            state.name,
            f"{state.hp} {state.credits} {state.score} {state.location}",
            str(len(state.inventory)),
            *state.inventory,
        ]
        return "\n".join(lines) + "\n"

    def decode(self, text: str) -> PlayerState:
        """Parse save file text into a new PlayerState.

        Fewer item lines than the declared count yield a shorter inventory.
        Anything else malformed fails the whole load.
        """
        lines = text.splitlines()
        if len(lines) < 2:
            raise SaveLoadError("Save data is missing the stats line.")
        name = lines[0] or DEFAULT_CAPTAIN_NAME
        hp, credits, score, location = self._parse_stats(lines[1])
        if len(lines) < 3:
            raise SaveLoadError("Save data is missing the inventory count.")
        count = self._parse_count(lines[2])
        inventory: List[str] = [item for item in lines[3 : 3 + count] if item]
        return PlayerState(
            name=name,
            hp=hp,
            credits=credits,
            inventory=inventory,
            score=score,
            location=location,
        )

    def save_game(self, state: PlayerState, path: Path | str) -> Path:
        """Write ``state`` to ``path``, replacing any previous contents."""
        target = Path(path)
        try:
            target.write_text(self.encode(state), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write save file %s: %s", target, exc)
            raise SaveLoadError(f"Cannot write save file '{target}'.") from exc
        logger.info("Saved %s to %s", state.name, target)
        return target

    def load_game(self, path: Path | str) -> PlayerState:
        """Read and decode the save file at ``path``."""
        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read save file %s: %s", source, exc)
            raise SaveLoadError(f"Cannot read save file '{source}'.") from exc
        state = self.decode(text)
        logger.info("Loaded %s from %s", state.name, source)
        return state

    def append_high_score(self, state: PlayerState, path: Path | str = DEFAULT_HIGHSCORE_FILE) -> HighScoreRecord:
        """Append one ``name score credits`` line to the high-score log."""
        record = HighScoreRecord(name=state.name, score=state.score, credits=state.credits)
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("a", encoding="utf-8") as handle:
                handle.write(record.to_line() + "\n")
        except OSError as exc:
            logger.warning("Could not append high score to %s: %s", target, exc)
            raise SaveLoadError(f"Cannot write high-score file '{target}'.") from exc
        logger.info("Recorded high score %s", record.to_line())
        return record

    @staticmethod
    def _parse_stats(line: str) -> tuple[int, int, int, int]:
        parts = line.split()
        if len(parts) != 4:
            raise SaveLoadError("Stats line must hold hp, credits, score and location.")
        try:
            hp, credits, score, location = (int(part) for part in parts)
        except ValueError as exc:
            raise SaveLoadError("Stats line must contain integers.") from exc
        if hp < 0 or credits < 0:
            raise SaveLoadError("HP and credits cannot be negative.")
        if not 0 <= location < len(LOCATIONS):
            raise SaveLoadError(f"Location index {location} is out of range.")
        return hp, credits, score, location

    @staticmethod
    def _parse_count(line: str) -> int:
        try:
            count = int(line.strip())
        except ValueError as exc:
            raise SaveLoadError("Inventory count must be an integer.") from exc
        if count < 0:
            raise SaveLoadError("Inventory count cannot be negative.")
        return count
