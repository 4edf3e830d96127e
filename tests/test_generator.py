"""Tests for the deterministic RNG and roster generation."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from stand_sim.config import StandConfig
from stand_sim.core.enums import Domain
from stand_sim.systems.generator import DEFAULT_ROSTER, RosterGenerator, default_roster
from stand_sim.systems.rng import DeterministicRNG


class TestDeterministicRNG:
    def test_pure_function_of_inputs(self):
        a = DeterministicRNG(5)
        b = DeterministicRNG(5)
        assert a.next_float(Domain.SPAWN, 3, 9) == b.next_float(Domain.SPAWN, 3, 9)

    def test_domains_are_separated(self):
        rng = DeterministicRNG(5)
        assert rng.next_float(Domain.SPAWN, 1, 1) != rng.next_float(Domain.HEAT, 1, 1)

    def test_ranges(self):
        rng = DeterministicRNG(11)
        for step in range(200):
            f = rng.next_float(Domain.SEQUENCE, 0, step)
            assert 0.0 <= f < 1.0
            assert 3 <= rng.next_int(Domain.SEQUENCE, 1, step, 3, 6) <= 6
            assert 2.0 <= rng.next_uniform(Domain.SEQUENCE, 2, step, 2.0, 4.0) < 4.0


class TestRosterGenerator:
    def test_same_seed_same_roster(self):
        cfg = StandConfig(seed=77)
        r1 = RosterGenerator(cfg, DeterministicRNG(cfg.seed)).roster(6)
        r2 = RosterGenerator(cfg, DeterministicRNG(cfg.seed)).roster(6)
        assert [(t.pos, t.heat, t.name) for t in r1] == [(t.pos, t.heat, t.name) for t in r2]

    def test_different_seed_differs(self):
        cfg = StandConfig()
        r1 = RosterGenerator(cfg, DeterministicRNG(1)).roster(4)
        r2 = RosterGenerator(cfg, DeterministicRNG(2)).roster(4)
        assert [t.pos for t in r1] != [t.pos for t in r2]

    def test_values_within_config_bounds(self):
        cfg = StandConfig(arena_size=12.0, heat_min=36.0, heat_max=37.0, reset_health=80)
        roster = RosterGenerator(cfg, DeterministicRNG(3)).roster(10)
        assert [t.id for t in roster] == list(range(1, 11))
        for t in roster:
            for coord in (t.pos.x, t.pos.y, t.pos.z):
                assert 0.0 <= coord <= 12.0
            assert 36.0 <= t.heat <= 37.0
            assert t.health == 80
            assert t.alive

    def test_default_roster(self):
        roster = default_roster()
        assert [t.id for t in roster] == [row[0] for row in DEFAULT_ROSTER]
        assert max(roster, key=lambda t: t.heat).id == 1
