"""Immutable snapshot of the engine state for callers and replays."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

import xxhash

from stand_sim.core.models import Effect, Target

if TYPE_CHECKING:
    from stand_sim.core.registry import TargetRegistry


@dataclass(frozen=True, slots=True)
class EngineSnapshot:
    """Read-only view of both registries plus the modal fields.

    Targets and effects are copies wrapped in MappingProxyType, so holding
    a snapshot can never mutate the engine.
    """

    targets: Mapping[int, Target]
    effects: Mapping[int, Effect]
    heat_seeking_active: bool
    reset_lock_target: int | None
    reset_count: int

    @classmethod
    def capture(
        cls,
        targets: TargetRegistry,
        effects: dict[int, Effect],
        heat_seeking_active: bool,
        reset_lock_target: int | None,
        reset_count: int,
    ) -> EngineSnapshot:
        return cls(
            targets=MappingProxyType({t.id: t.copy() for t in targets}),
            effects=MappingProxyType({tid: e.copy() for tid, e in effects.items()}),
            heat_seeking_active=heat_seeking_active,
            reset_lock_target=reset_lock_target,
            reset_count=reset_count,
        )

    def fingerprint(self) -> str:
        """Hex digest of the observable state.  Timestamps are excluded."""
        h = xxhash.xxh64()
        for tid in sorted(self.targets):
            t = self.targets[tid]
            h.update(struct.pack("<qqd", t.id, t.health, t.heat))
            h.update(struct.pack("<ddd", t.pos.x, t.pos.y, t.pos.z))
        for tid in sorted(self.effects):
            e = self.effects[tid]
            fuse = -1 if e.fuse_ticks is None else e.fuse_ticks
            h.update(struct.pack("<qiiq", tid, int(e.kind), e.power, fuse))
        lock = -1 if self.reset_lock_target is None else self.reset_lock_target
        h.update(struct.pack("<?qq", self.heat_seeking_active, lock, self.reset_count))
        return h.hexdigest()
