"""StandEngine — the ability state machine of a single stand user.

Owns the target registry, the effect registry and the three pieces of modal
state (heat-seeking run, reset lock, reset counter).  Callers drive it one
command at a time; every public operation validates first, then mutates,
and reports failures as values.

Invariants kept by every operation:
  - at most one DIRECT effect in the registry
  - at most one reset-locked target
  - every effect is keyed by a registered target id
  - heat_seeking_active <=> a HEAT_SEEKING effect exists
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from stand_sim.config import StandConfig
from stand_sim.core.enums import EffectKind, ErrorKind
from stand_sim.core.models import Effect, Target
from stand_sim.core.registry import TargetRegistry
from stand_sim.core.results import (
    ExplosionResult,
    Outcome,
    ResetResult,
    RetargetResult,
    StandError,
    StandStatus,
)
from stand_sim.core.snapshot import EngineSnapshot
from stand_sim.engine.targeting import hottest, targets_in_radius
from stand_sim.utils.event_log import EventLog

logger = logging.getLogger(__name__)


class StandEngine:
    """Single-actor ability controller.

    One coarse lock guards the whole instance so cross-registry invariants
    change atomically when the engine is shared between threads.
    """

    def __init__(
        self,
        config: StandConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or StandConfig()
        self._clock = clock
        self._targets = TargetRegistry()
        self._effects: dict[int, Effect] = {}
        self._heat_seeking_active: bool = False
        self._reset_lock_target: int | None = None
        self._reset_count: int = 0
        self._events = EventLog()
        self._lock = threading.Lock()
        self._power: dict[EffectKind, int] = {
            EffectKind.DIRECT: self._config.direct_power,
            EffectKind.HEAT_SEEKING: self._config.heat_seeking_power,
            EffectKind.REALITY_RESET: self._config.reality_reset_power,
        }

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def config(self) -> StandConfig:
        return self._config

    @property
    def heat_seeking_active(self) -> bool:
        return self._heat_seeking_active

    @property
    def reset_lock_target(self) -> int | None:
        return self._reset_lock_target

    @property
    def reset_count(self) -> int:
        return self._reset_count

    @property
    def events(self) -> EventLog:
        return self._events

    def status(self) -> StandStatus:
        with self._lock:
            return StandStatus(
                active_effect_count=len(self._effects),
                heat_seeking_active=self._heat_seeking_active,
                reset_lock_active=self._reset_lock_target is not None,
                reset_count=self._reset_count,
                alive_targets=len(self._targets.all_alive()),
            )

    def snapshot(self) -> EngineSnapshot:
        with self._lock:
            return EngineSnapshot.capture(
                self._targets,
                self._effects,
                self._heat_seeking_active,
                self._reset_lock_target,
                self._reset_count,
            )

    def effect_on(self, target_id: int) -> Effect | None:
        """Copy of the effect attached to *target_id*, if any."""
        with self._lock:
            effect = self._effects.get(target_id)
            return effect.copy() if effect is not None else None

    # ------------------------------------------------------------------
    # Target registry
    # ------------------------------------------------------------------

    def register_target(self, target: Target) -> None:
        """Insert or replace a target by id.  The engine keeps its own copy."""
        with self._lock:
            self._targets.register(target.copy())
            self._events.record("target", f"Target {target.id} ({target.name}) registered", (target.id,))
        logger.debug("Registered target %d %s at %s", target.id, target.name, target.pos)

    def lookup_target(self, target_id: int) -> Outcome[Target]:
        with self._lock:
            try:
                return Outcome.success(self._targets.lookup(target_id).copy())
            except StandError as exc:
                return self._reject("lookup_target", exc)

    # ------------------------------------------------------------------
    # Direct effect
    # ------------------------------------------------------------------

    def place_direct(self, target_id: int) -> Outcome[Effect]:
        """Turn a target into a bomb.  Only one direct bomb may exist at a time."""
        with self._lock:
            try:
                existing = next(
                    (e for e in self._effects.values() if e.kind == EffectKind.DIRECT), None
                )
                if existing is not None:
                    raise StandError(
                        ErrorKind.EFFECT_CONFLICT,
                        f"Direct bomb already placed on target {existing.target_id}. Detonate first.",
                    )
                self._targets.lookup(target_id)
            except StandError as exc:
                return self._reject("place_direct", exc)

            effect = self._new_effect(EffectKind.DIRECT, target_id)
            self._attach(effect)
            self._events.record("bomb", f"Direct bomb placed on target {target_id}", (target_id,))
            logger.info("Direct bomb placed on target %d", target_id)
            return Outcome.success(effect.copy())

    def detonate(self, target_id: int) -> Outcome[ExplosionResult]:
        """Detonate whatever effect is attached to *target_id*."""
        with self._lock:
            try:
                result = self._detonate(target_id)
            except StandError as exc:
                return self._reject("detonate", exc)
            return Outcome.success(result)

    def defuse(self, target_id: int) -> Outcome[Effect]:
        """Remove the effect on *target_id* without detonating it."""
        with self._lock:
            try:
                effect = self._require_effect(target_id)
            except StandError as exc:
                return self._reject("defuse", exc)

            del self._effects[target_id]
            self._release(effect)
            effect.active = False
            self._events.record("defuse", f"{effect.kind.name} effect on target {target_id} defused", (target_id,))
            logger.info("Defused %s effect on target %d", effect.kind.name, target_id)
            return Outcome.success(effect.copy())

    # ------------------------------------------------------------------
    # Fuses
    # ------------------------------------------------------------------

    def set_fuse(self, target_id: int, ticks: int) -> Outcome[Effect]:
        """Arm a countdown on an existing effect; it detonates when the fuse runs out."""
        with self._lock:
            try:
                if ticks < 1:
                    raise StandError(ErrorKind.INVALID_FUSE, f"Fuse must be at least 1 tick, got {ticks}")
                effect = self._require_effect(target_id)
            except StandError as exc:
                return self._reject("set_fuse", exc)

            effect.fuse_ticks = ticks
            self._events.record("fuse", f"Fuse set on target {target_id}: {ticks} ticks", (target_id,))
            logger.debug("Fuse armed on target %d (%d ticks)", target_id, ticks)
            return Outcome.success(effect.copy())

    def tick_fuses(self) -> list[ExplosionResult]:
        """Advance every armed fuse by one tick and detonate the expired ones."""
        with self._lock:
            due: list[int] = []
            for tid in sorted(self._effects):
                effect = self._effects[tid]
                if effect.fuse_ticks is None:
                    continue
                effect.fuse_ticks -= 1
                if effect.fuse_ticks <= 0:
                    due.append(tid)
            return [self._detonate(tid) for tid in due]

    # ------------------------------------------------------------------
    # Heat-seeking effect
    # ------------------------------------------------------------------

    def activate_heat_seeking(self) -> Outcome[Effect]:
        """Launch the autonomous bomb at the hottest alive target."""
        with self._lock:
            try:
                if self._heat_seeking_active:
                    raise StandError(ErrorKind.ALREADY_ACTIVE, "Heat-seeking bomb already active")
                target = hottest(self._targets.all_alive())
                if target is None:
                    raise StandError(ErrorKind.NO_VALID_TARGETS, "No valid targets for heat-seeking bomb")
            except StandError as exc:
                return self._reject("activate_heat_seeking", exc)

            effect = self._new_effect(EffectKind.HEAT_SEEKING, target.id)
            self._attach(effect)
            self._heat_seeking_active = True
            self._events.record("heat_seeking", f"Heat-seeking bomb locked on target {target.id}", (target.id,))
            logger.info("Heat-seeking bomb activated on target %d (heat %.1f)", target.id, target.heat)
            return Outcome.success(effect.copy())

    def tick_heat_seeking(self) -> RetargetResult | None:
        """Re-evaluate the heat-seeking target.

        Returns None when nothing changed (inactive, or the current target is
        still alive).  Otherwise reports the move, or the shutdown when no
        alive target remains.
        """
        with self._lock:
            if not self._heat_seeking_active:
                return None

            current = next(
                (e for e in self._effects.values() if e.kind == EffectKind.HEAT_SEEKING), None
            )
            if current is not None:
                target = self._targets.get(current.target_id)
                if target is not None and target.alive:
                    return None
                del self._effects[current.target_id]
            previous_id = current.target_id if current is not None else None

            new_target = hottest(self._targets.all_alive())
            if new_target is None:
                self._heat_seeking_active = False
                self._events.record("heat_seeking", "Heat-seeking bomb deactivated: no targets left")
                logger.info("Heat-seeking bomb deactivated, no alive targets")
                return RetargetResult(previous_id, None)

            self._attach(self._new_effect(EffectKind.HEAT_SEEKING, new_target.id))
            self._events.record(
                "heat_seeking", f"Heat-seeking bomb retargeted to {new_target.id}", (new_target.id,)
            )
            logger.info("Heat-seeking bomb retargeting %s -> %d", previous_id, new_target.id)
            return RetargetResult(previous_id, new_target.id)

    # ------------------------------------------------------------------
    # Reality-reset effect
    # ------------------------------------------------------------------

    def activate_reset_lock(self, target_id: int) -> Outcome[Effect]:
        """Anchor the reset on *target_id*; that target is exempt from every reset."""
        with self._lock:
            try:
                if self._reset_lock_target is not None:
                    raise StandError(
                        ErrorKind.ALREADY_ACTIVE,
                        f"Reset lock already active on target {self._reset_lock_target}",
                    )
                self._targets.lookup(target_id)
            except StandError as exc:
                return self._reject("activate_reset_lock", exc)

            effect = self._new_effect(EffectKind.REALITY_RESET, target_id)
            self._attach(effect)
            self._reset_lock_target = target_id
            self._events.record("reset_lock", f"Reset lock placed on target {target_id}", (target_id,))
            logger.info("Reset lock activated on target %d", target_id)
            return Outcome.success(effect.copy())

    def trigger_reset(self) -> Outcome[ResetResult]:
        """Revive and heal every target except the locked one, and prune other effects.

        The lock stays in place, so the reset can be triggered again.
        """
        with self._lock:
            lock = self._reset_lock_target
            if lock is None:
                return self._reject(
                    "trigger_reset", StandError(ErrorKind.NOT_ACTIVE, "Reset lock not active")
                )

            self._reset_count += 1
            reset_ids: list[int] = []
            for target in self._targets:
                if target.id != lock:
                    target.health = self._config.reset_health
                    reset_ids.append(target.id)

            self._effects = {
                tid: e for tid, e in self._effects.items()
                if e.kind == EffectKind.REALITY_RESET and tid == lock
            }
            self._heat_seeking_active = False

            result = ResetResult(
                loop_number=self._reset_count,
                timestamp=self._clock(),
                reset_targets=tuple(sorted(reset_ids)),
            )
            self._events.record("reset", f"Reality reset #{self._reset_count}", result.reset_targets)
            logger.info("Reality reset #%d: %d targets restored", self._reset_count, len(reset_ids))
            return Outcome.success(result)

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _new_effect(self, kind: EffectKind, target_id: int) -> Effect:
        return Effect(kind=kind, target_id=target_id, created_at=self._clock(), power=self._power[kind])

    def _require_effect(self, target_id: int) -> Effect:
        effect = self._effects.get(target_id)
        if effect is None:
            raise StandError(ErrorKind.NO_EFFECT, f"No effect found on target {target_id}")
        return effect

    def _attach(self, effect: Effect) -> None:
        """Key *effect* by its target, replacing (and releasing) any previous one."""
        displaced = self._effects.get(effect.target_id)
        if displaced is not None:
            self._release(displaced)
            logger.debug("%s effect on target %d displaced by %s",
                         displaced.kind.name, effect.target_id, effect.kind.name)
        self._effects[effect.target_id] = effect

    def _release(self, effect: Effect) -> None:
        """End the heat-seeking run when its effect leaves the registry.

        The reset lock outlives its anchor effect; only activate_reset_lock sets it.
        """
        if effect.kind == EffectKind.HEAT_SEEKING:
            self._heat_seeking_active = False

    def _detonate(self, target_id: int) -> ExplosionResult:
        effect = self._require_effect(target_id)
        target = self._targets.lookup(target_id)

        del self._effects[target_id]
        self._release(effect)
        target.defeat()

        radius = self._config.explosion_radius
        result = ExplosionResult(
            target_id=target_id,
            damage_dealt=effect.power,
            explosion_radius=radius,
            affected_targets=targets_in_radius(self._targets, target.pos, radius, exclude=target_id),
        )
        self._events.record("explosion", f"Target {target_id} destroyed", (target_id, *result.affected_targets))
        logger.info("Detonated %s effect on target %d (%d caught in blast)",
                    effect.kind.name, target_id, len(result.affected_targets))
        return result

    def _reject(self, command: str, exc: StandError) -> Outcome:
        logger.debug("%s rejected: %s (%s)", command, exc.message, exc.kind.name)
        return Outcome.fail(exc)
