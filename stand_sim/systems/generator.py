"""Roster generator — reproducible targets for demo battles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stand_sim.core.enums import Domain
from stand_sim.core.models import Target, Vector3

if TYPE_CHECKING:
    from stand_sim.config import StandConfig
    from stand_sim.systems.rng import DeterministicRNG


_NAMES: tuple[str, ...] = (
    "Josuke Higashikata",
    "Okuyasu Nijimura",
    "Koichi Hirose",
    "Jotaro Kujo",
    "Rohan Kishibe",
    "Shigechi Shigekiyo",
    "Hayato Kawajiri",
    "Yukako Yamagishi",
)

# Scripted roster: (id, name, position, heat)
DEFAULT_ROSTER: tuple[tuple[int, str, tuple[float, float, float], float], ...] = (
    (1, "Josuke Higashikata", (10.0, 0.0, 5.0), 37.2),
    (2, "Okuyasu Nijimura", (15.0, 2.0, 3.0), 36.8),
    (3, "Koichi Hirose", (8.0, -1.0, 7.0), 36.5),
)


def default_roster(health: int = 100) -> list[Target]:
    """The fixed three-target roster used by the scripted battle."""
    return [
        Target(id=tid, name=name, pos=Vector3(*pos), health=health, heat=heat)
        for tid, name, pos, heat in DEFAULT_ROSTER
    ]


class RosterGenerator:
    """Spawns targets with deterministic positions and body heat."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: StandConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def spawn(self, target_id: int) -> Target:
        cfg = self._config
        pos = Vector3(
            round(self._rng.next_uniform(Domain.SPAWN, target_id, 0, 0.0, cfg.arena_size), 2),
            round(self._rng.next_uniform(Domain.SPAWN, target_id, 1, 0.0, cfg.arena_size), 2),
            round(self._rng.next_uniform(Domain.SPAWN, target_id, 2, 0.0, cfg.arena_size), 2),
        )
        heat = round(self._rng.next_uniform(Domain.HEAT, target_id, 0, cfg.heat_min, cfg.heat_max), 1)
        base = _NAMES[self._rng.next_int(Domain.NAME, target_id, 0, 0, len(_NAMES) - 1)]
        return Target(id=target_id, name=f"{base} #{target_id}", pos=pos, health=cfg.reset_health, heat=heat)

    def roster(self, count: int) -> list[Target]:
        """Targets with ids 1..count."""
        return [self.spawn(tid) for tid in range(1, count + 1)]
