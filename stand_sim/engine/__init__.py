"""Engine layer: the stand ability state machine and its targeting helpers."""

from stand_sim.engine.stand_engine import StandEngine
from stand_sim.engine.targeting import explosion_falloff, hottest, targets_in_radius

__all__ = ["StandEngine", "explosion_falloff", "hottest", "targets_in_radius"]
