"""Core data models, registries and result types."""

from stand_sim.core.enums import Domain, EffectKind, ErrorKind, Gesture
from stand_sim.core.models import Effect, Target, Vector3
from stand_sim.core.registry import TargetRegistry
from stand_sim.core.results import (
    ExplosionResult,
    Outcome,
    ResetResult,
    RetargetResult,
    StandError,
    StandFailure,
    StandStatus,
)
from stand_sim.core.snapshot import EngineSnapshot
from stand_sim.core.stats import StandStats

__all__ = [
    "Domain",
    "Effect",
    "EffectKind",
    "EngineSnapshot",
    "ErrorKind",
    "ExplosionResult",
    "Gesture",
    "Outcome",
    "ResetResult",
    "RetargetResult",
    "StandError",
    "StandFailure",
    "StandStats",
    "StandStatus",
    "Target",
    "TargetRegistry",
    "Vector3",
]
