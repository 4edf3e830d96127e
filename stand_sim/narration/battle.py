"""Scripted battle driver — issues commands in a fixed order and narrates them."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, TextIO

from stand_sim.core.enums import EffectKind
from stand_sim.core.models import Target
from stand_sim.core.results import Outcome, StandStatus
from stand_sim.core.stats import StandStats
from stand_sim.engine.stand_engine import StandEngine
from stand_sim.narration import render
from stand_sim.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)


class BattleNarrator:
    """Drives a StandEngine through the three-phase demo battle.

    Every rendered line is kept in ``lines`` and, when *out* is given,
    written to it as well.
    """

    def __init__(
        self,
        engine: StandEngine,
        out: TextIO | None = sys.stdout,
        recorder: ReplayRecorder | None = None,
        heat_ticks: int = 3,
    ) -> None:
        self.engine = engine
        self.out = out
        self.recorder = recorder
        self.heat_ticks = heat_ticks
        self.lines: list[str] = []

    def say(self, *lines: str) -> None:
        for line in lines:
            self.lines.append(line)
            if self.out is not None:
                print(line, file=self.out)

    def _issue(self, command: str, call: Callable[..., Any], **args: Any) -> Any:
        returned = call(**args)
        if self.recorder is not None:
            self.recorder.record(command, returned, self.engine, **args)
        return returned

    def _phase(self, title: str) -> None:
        self.say("", title, "-" * len(title))

    def run(self, roster: list[Target], reset_lock_id: int | None = None) -> StandStatus:
        """Play the battle against *roster* and return the final status.

        The first roster entry receives the direct bomb; the reset lock goes on
        *reset_lock_id* (default: last roster entry).
        """
        if not roster:
            raise ValueError("roster must contain at least one target")
        cfg = self.engine.config
        first_id = roster[0].id
        lock_id = reset_lock_id if reset_lock_id is not None else roster[-1].id

        self.say(f"🎭 {cfg.stand_name} Stand Simulation", *render.render_stats(cfg, StandStats()))
        self.say(render.sound_cue("menacing"), render.emphasize(render.stand_cry(cfg)))

        for target in roster:
            self.say(f"➕ Adding target: {target.name}")
            self.engine.register_target(target)
            if self.recorder is not None:
                self.recorder.record("register_target", None, self.engine, target_id=target.id)

        self._phase("🎯 Battle Phase 1: Primary Bomb")
        placed: Outcome = self._issue("place_direct", self.engine.place_direct, target_id=first_id)
        if placed.ok:
            self.say(render.sound_cue("bomb_place"), "✅ Primary bomb placed successfully!")
        else:
            self.say(render.render_failure("Bomb placement", placed.failure))
        status = self.engine.status()
        self.say(f"📊 Status: {status.active_effect_count} active bombs, {status.alive_targets} alive targets")

        detonated: Outcome = self._issue("detonate", self.engine.detonate, target_id=first_id)
        if detonated.ok:
            self.say(render.gesture_line(cfg, EffectKind.DIRECT), render.sound_cue("explosion"))
            self.say(*render.render_explosion(detonated.value, self.engine.snapshot(), cfg.splash_falloff_range))
        else:
            self.say(render.render_failure("Detonation", detonated.failure))

        self._phase("🔥 Battle Phase 2: Sheer Heart Attack")
        launched: Outcome = self._issue("activate_heat_seeking", self.engine.activate_heat_seeking)
        if launched.ok:
            self.say(render.gesture_line(cfg, EffectKind.HEAT_SEEKING), render.sound_cue("heat_seeking"))
            self.say(f"✅ Sheer Heart Attack activated! Targeting hottest enemy (ID: {launched.value.target_id})")
        else:
            self.say(render.render_failure("Sheer Heart Attack", launched.failure))
        for cycle in range(1, self.heat_ticks + 1):
            moved = self._issue("tick_heat_seeking", self.engine.tick_heat_seeking)
            self.say(render.render_retarget(moved, cycle))

        self._phase("⏰ Battle Phase 3: Bites the Dust")
        locked: Outcome = self._issue("activate_reset_lock", self.engine.activate_reset_lock, target_id=lock_id)
        if locked.ok:
            self.say(render.gesture_line(cfg, EffectKind.REALITY_RESET), "✅ Bites the Dust activated!")
        else:
            self.say(render.render_failure("Bites the Dust", locked.failure))
        reset: Outcome = self._issue("trigger_reset", self.engine.trigger_reset)
        if reset.ok:
            self.say(render.sound_cue("reality_reset"), *render.render_reset(reset.value))
        else:
            self.say(render.render_failure("Time loop", reset.failure))

        final = self.engine.status()
        self.say("", *render.render_status(final, title="Final Battle Status"))
        self.say("", "🎭 Simulation complete!")
        logger.debug("Battle finished after %d events", len(self.engine.events))
        return final
