"""Support systems: deterministic RNG and roster generation."""

from stand_sim.systems.generator import RosterGenerator
from stand_sim.systems.rng import DeterministicRNG

__all__ = ["DeterministicRNG", "RosterGenerator"]
