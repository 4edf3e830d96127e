"""StandArena — test fixture around a StandEngine with a controllable clock.

Usage:
    arena = StandArena()
    arena.add_target(1, pos=(0, 0, 0), heat=36.5)
    arena.engine.place_direct(1)
    arena.check()          # asserts every engine invariant
"""

from __future__ import annotations

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from stand_sim.config import StandConfig
from stand_sim.core.enums import EffectKind
from stand_sim.core.models import Target, Vector3
from stand_sim.core.snapshot import EngineSnapshot
from stand_sim.engine.stand_engine import StandEngine


class FakeClock:
    """Monotonic clock that advances only when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 1.0) -> None:
        self.now += seconds


def assert_invariants(snap: EngineSnapshot) -> None:
    """Check the cross-registry invariants on a snapshot."""
    kinds = [e.kind for e in snap.effects.values()]
    assert kinds.count(EffectKind.DIRECT) <= 1, "more than one direct bomb"
    assert kinds.count(EffectKind.HEAT_SEEKING) <= 1, "more than one heat-seeking bomb"
    for tid, effect in snap.effects.items():
        assert effect.target_id == tid, f"effect keyed by {tid} points at {effect.target_id}"
        assert tid in snap.targets, f"orphaned effect on {tid}"
    assert snap.heat_seeking_active == (EffectKind.HEAT_SEEKING in kinds)
    if snap.reset_lock_target is not None:
        assert snap.reset_lock_target in snap.targets
    for t in snap.targets.values():
        assert t.alive == (t.health > 0)


class StandArena:
    def __init__(self, **config_overrides) -> None:
        self.clock = FakeClock()
        self.config = StandConfig(**config_overrides)
        self.engine = StandEngine(self.config, clock=self.clock)

    def add_target(
        self, tid: int, pos: tuple = (0.0, 0.0, 0.0), heat: float = 36.5,
        health: int = 100, name: str | None = None,
    ) -> Target:
        target = Target(id=tid, name=name or f"Target {tid}", pos=Vector3(*pos), health=health, heat=heat)
        self.engine.register_target(target)
        return target

    def target(self, tid: int) -> Target:
        return self.engine.lookup_target(tid).unwrap()

    def kill(self, tid: int) -> None:
        """Knock a target out by re-registering it at 0 health."""
        t = self.target(tid)
        t.health = 0
        self.engine.register_target(t)

    def snapshot(self) -> EngineSnapshot:
        return self.engine.snapshot()

    def check(self) -> None:
        assert_invariants(self.engine.snapshot())
