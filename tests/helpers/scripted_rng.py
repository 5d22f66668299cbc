"""RNG stand-in that replays a fixed script of draws."""
from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

T_co = TypeVar("T_co")


class ScriptedRNG:
    """Returns pre-recorded values; ``choice`` consumes an index from the script."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws: List[int] = list(draws)

    @property
    def remaining(self) -> int:
        return len(self._draws)

    def randint(self, a: int, b: int) -> int:
        value = self._next()
        assert a <= value <= b, f"scripted draw {value} outside [{a}, {b}]"
        return value

    def choice(self, seq: Sequence[T_co]) -> T_co:
        return seq[self.randint(0, len(seq) - 1)]

    def _next(self) -> int:
        if not self._draws:
            raise AssertionError("ScriptedRNG ran out of draws.")
        return self._draws.pop(0)
