"""Core data models: Vector3, Target, Effect."""

from __future__ import annotations

import math
from dataclasses import dataclass

from stand_sim.core.enums import EffectKind


@dataclass(frozen=True, slots=True)
class Vector3:
    """Immutable 3D coordinate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance(self, other: Vector3) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def __repr__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(slots=True)
class Target:
    """A combatant the stand can attach effects to."""

    id: int
    name: str
    pos: Vector3 = Vector3()
    health: int = 100
    heat: float = 36.5          # Body temperature, used only by heat-seeking selection

    @property
    def alive(self) -> bool:
        return self.health > 0

    def defeat(self) -> None:
        self.health = 0

    def copy(self) -> Target:
        return Target(id=self.id, name=self.name, pos=self.pos, health=self.health, heat=self.heat)


@dataclass(slots=True)
class Effect:
    """An ability instance attached to exactly one target."""

    kind: EffectKind
    target_id: int
    created_at: float
    power: int
    active: bool = True
    fuse_ticks: int | None = None   # None = no countdown armed

    @property
    def armed(self) -> bool:
        return self.fuse_ticks is not None

    def copy(self) -> Effect:
        return Effect(
            kind=self.kind,
            target_id=self.target_id,
            created_at=self.created_at,
            power=self.power,
            active=self.active,
            fuse_ticks=self.fuse_ticks,
        )

    def __repr__(self) -> str:
        return f"Effect({self.kind.name}, target={self.target_id}, power={self.power})"
