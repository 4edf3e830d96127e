"""Pydantic models for serialized engine results (replays and ``--json`` output)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from stand_sim.core.models import Effect, Target
from stand_sim.core.results import (
    ExplosionResult,
    ResetResult,
    RetargetResult,
    StandFailure,
    StandStatus,
)
from stand_sim.core.snapshot import EngineSnapshot


class TargetSchema(BaseModel):
    id: int
    name: str
    x: float
    y: float
    z: float
    health: int
    heat: float
    alive: bool


class EffectSchema(BaseModel):
    kind: str
    target_id: int
    power: int
    active: bool = True
    fuse_ticks: int | None = None


class ExplosionSchema(BaseModel):
    target_id: int
    damage_dealt: int
    explosion_radius: float
    affected_targets: list[int] = Field(default_factory=list)


class ResetSchema(BaseModel):
    loop_number: int
    timestamp: float
    reset_targets: list[int] = Field(default_factory=list)


class RetargetSchema(BaseModel):
    previous_target_id: int | None = None
    new_target_id: int | None = None
    deactivated: bool = False


class StatusSchema(BaseModel):
    active_effect_count: int
    heat_seeking_active: bool
    reset_lock_active: bool
    reset_count: int
    alive_targets: int


class FailureSchema(BaseModel):
    kind: str
    message: str


class SnapshotSchema(BaseModel):
    targets: list[TargetSchema] = Field(default_factory=list)
    effects: list[EffectSchema] = Field(default_factory=list)
    heat_seeking_active: bool = False
    reset_lock_target: int | None = None
    reset_count: int = 0
    fingerprint: str = ""


class CommandRecord(BaseModel):
    """One command issued against the engine, as stored in a replay."""

    step: int
    command: str
    args: dict[str, Any] = Field(default_factory=dict)
    ok: bool = True
    result: Any = None
    failure: FailureSchema | None = None
    status: StatusSchema
    fingerprint: str = ""


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------

def target_schema(t: Target) -> TargetSchema:
    return TargetSchema(
        id=t.id, name=t.name, x=t.pos.x, y=t.pos.y, z=t.pos.z,
        health=t.health, heat=t.heat, alive=t.alive,
    )


def effect_schema(e: Effect) -> EffectSchema:
    return EffectSchema(
        kind=e.kind.name.lower(), target_id=e.target_id, power=e.power,
        active=e.active, fuse_ticks=e.fuse_ticks,
    )


def status_schema(s: StandStatus) -> StatusSchema:
    return StatusSchema(
        active_effect_count=s.active_effect_count,
        heat_seeking_active=s.heat_seeking_active,
        reset_lock_active=s.reset_lock_active,
        reset_count=s.reset_count,
        alive_targets=s.alive_targets,
    )


def failure_schema(f: StandFailure) -> FailureSchema:
    return FailureSchema(kind=f.kind.name.lower(), message=f.message)


def snapshot_schema(snap: EngineSnapshot) -> SnapshotSchema:
    return SnapshotSchema(
        targets=[target_schema(snap.targets[tid]) for tid in sorted(snap.targets)],
        effects=[effect_schema(snap.effects[tid]) for tid in sorted(snap.effects)],
        heat_seeking_active=snap.heat_seeking_active,
        reset_lock_target=snap.reset_lock_target,
        reset_count=snap.reset_count,
        fingerprint=snap.fingerprint(),
    )


def result_schema(value: Any) -> Any:
    """Convert any engine return value to a JSON-ready structure."""
    if value is None:
        return None
    if isinstance(value, list):
        return [result_schema(v) for v in value]
    if isinstance(value, ExplosionResult):
        return ExplosionSchema(
            target_id=value.target_id, damage_dealt=value.damage_dealt,
            explosion_radius=value.explosion_radius,
            affected_targets=list(value.affected_targets),
        ).model_dump()
    if isinstance(value, ResetResult):
        return ResetSchema(
            loop_number=value.loop_number, timestamp=value.timestamp,
            reset_targets=list(value.reset_targets),
        ).model_dump()
    if isinstance(value, RetargetResult):
        return RetargetSchema(
            previous_target_id=value.previous_target_id,
            new_target_id=value.new_target_id,
            deactivated=value.deactivated,
        ).model_dump()
    if isinstance(value, Effect):
        return effect_schema(value).model_dump()
    if isinstance(value, Target):
        return target_schema(value).model_dump()
    if isinstance(value, StandStatus):
        return status_schema(value).model_dump()
    raise TypeError(f"No schema for {type(value).__name__}")
