"""Tests for direct bomb placement, detonation and defusal."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from tests.helpers.stand_arena import StandArena
from stand_sim.core.enums import EffectKind, ErrorKind
from stand_sim.core.results import StandError


@pytest.fixture
def arena() -> StandArena:
    a = StandArena()
    a.add_target(1, pos=(0.0, 0.0, 0.0), heat=36.5)
    a.add_target(2, pos=(3.0, 4.0, 0.0), heat=36.8)     # distance 5.0 from 1
    a.add_target(3, pos=(20.0, 0.0, 0.0), heat=37.2)
    return a


class TestPlaceDirect:
    def test_place_creates_direct_effect(self, arena):
        out = arena.engine.place_direct(1)
        assert out.ok
        effect = out.value
        assert effect.kind == EffectKind.DIRECT
        assert effect.target_id == 1
        assert effect.power == 100
        assert effect.active
        assert effect.created_at == arena.clock.now
        assert arena.engine.status().active_effect_count == 1
        arena.check()

    def test_second_bomb_on_other_target_conflicts(self, arena):
        assert arena.engine.place_direct(1).ok
        out = arena.engine.place_direct(2)
        assert not out.ok
        assert out.failure.kind == ErrorKind.EFFECT_CONFLICT
        assert arena.engine.effect_on(2) is None
        arena.check()

    def test_second_bomb_on_same_target_conflicts(self, arena):
        assert arena.engine.place_direct(1).ok
        assert arena.engine.place_direct(1).failure.kind == ErrorKind.EFFECT_CONFLICT

    def test_conflict_is_checked_before_lookup(self, arena):
        assert arena.engine.place_direct(1).ok
        assert arena.engine.place_direct(99).failure.kind == ErrorKind.EFFECT_CONFLICT

    def test_unknown_target_not_found(self, arena):
        before = arena.snapshot().fingerprint()
        out = arena.engine.place_direct(99)
        assert out.failure.kind == ErrorKind.NOT_FOUND
        assert arena.snapshot().fingerprint() == before

    def test_place_has_no_other_side_effects(self, arena):
        arena.engine.place_direct(1)
        status = arena.engine.status()
        assert status.alive_targets == 3
        assert not status.heat_seeking_active
        assert not status.reset_lock_active

    def test_unwrap_raises_on_failure(self, arena):
        with pytest.raises(StandError) as info:
            arena.engine.place_direct(99).unwrap()
        assert info.value.kind == ErrorKind.NOT_FOUND


class TestDetonate:
    def test_detonate_without_effect_fails_and_changes_nothing(self, arena):
        before = arena.snapshot().fingerprint()
        out = arena.engine.detonate(1)
        assert out.failure.kind == ErrorKind.NO_EFFECT
        assert arena.snapshot().fingerprint() == before

    def test_detonate_unregistered_target_is_no_effect(self, arena):
        assert arena.engine.detonate(99).failure.kind == ErrorKind.NO_EFFECT

    def test_detonate_destroys_target(self, arena):
        arena.engine.place_direct(1)
        result = arena.engine.detonate(1).unwrap()
        assert result.target_id == 1
        assert result.damage_dealt == 100
        assert result.explosion_radius == 5.0
        t = arena.target(1)
        assert t.health == 0
        assert not t.alive
        assert arena.engine.effect_on(1) is None
        arena.check()

    def test_blast_reports_targets_on_boundary(self, arena):
        arena.engine.place_direct(1)
        result = arena.engine.detonate(1).unwrap()
        assert result.affected_targets == (2,)

    def test_blast_applies_no_damage(self, arena):
        arena.engine.place_direct(1)
        arena.engine.detonate(1)
        assert arena.target(2).health == 100
        assert arena.target(2).alive

    def test_blast_skips_dead_targets(self, arena):
        arena.kill(2)
        arena.engine.place_direct(1)
        assert arena.engine.detonate(1).unwrap().affected_targets == ()

    def test_can_place_again_after_detonation(self, arena):
        arena.engine.place_direct(1)
        arena.engine.detonate(1)
        assert arena.engine.place_direct(2).ok

    def test_detonating_heat_seeking_bomb_ends_run(self, arena):
        launched = arena.engine.activate_heat_seeking().unwrap()
        assert launched.target_id == 3
        result = arena.engine.detonate(3).unwrap()
        assert result.damage_dealt == 80
        assert not arena.engine.heat_seeking_active
        arena.check()


class TestDefuse:
    def test_defuse_removes_effect_without_harm(self, arena):
        arena.engine.place_direct(2)
        out = arena.engine.defuse(2)
        assert out.ok
        assert not out.value.active
        assert arena.engine.effect_on(2) is None
        assert arena.target(2).health == 100
        assert arena.engine.place_direct(1).ok
        arena.check()

    def test_defuse_without_effect_fails(self, arena):
        assert arena.engine.defuse(1).failure.kind == ErrorKind.NO_EFFECT

    def test_defusing_reset_anchor_keeps_lock(self, arena):
        arena.engine.activate_reset_lock(1)
        arena.engine.defuse(1)
        assert arena.engine.effect_on(1) is None
        assert arena.engine.reset_lock_target == 1
        assert arena.engine.activate_reset_lock(2).failure.kind == ErrorKind.ALREADY_ACTIVE
        assert arena.engine.trigger_reset().unwrap().reset_targets == (2, 3)
        arena.check()
