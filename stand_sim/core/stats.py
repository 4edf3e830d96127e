"""Stand stat sheet on the classic A-E ranking."""

from __future__ import annotations

from dataclasses import asdict, dataclass

_RANK_LETTERS: dict[int, str] = {5: "A", 4: "B", 3: "C", 2: "D", 1: "E"}


def rank(value: int) -> str:
    """Map a 1..5 stat value to its rank letter.  Out-of-range values rank as '?'."""
    return _RANK_LETTERS.get(value, "?")


@dataclass(frozen=True, slots=True)
class StandStats:
    destructive_power: int = 5          # A
    speed: int = 4                      # B
    range: int = 2                      # D (close-range)
    durability: int = 4                 # B
    precision: int = 4                  # B
    development_potential: int = 5      # A

    def ranks(self) -> dict[str, str]:
        return {name: rank(value) for name, value in asdict(self).items()}
