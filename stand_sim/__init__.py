"""Stand ability simulation: direct bombs, heat-seeking retargeting and reality resets."""

from stand_sim.config import StandConfig
from stand_sim.core.models import Effect, Target, Vector3
from stand_sim.core.results import Outcome, StandError
from stand_sim.engine.stand_engine import StandEngine

__all__ = ["Effect", "Outcome", "StandConfig", "StandEngine", "StandError", "Target", "Vector3"]
