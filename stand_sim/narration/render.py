"""Text rendering for engine results.  Nothing here touches engine state."""

from __future__ import annotations

from stand_sim.config import StandConfig
from stand_sim.core.enums import GESTURE_FOR_KIND, EffectKind, Gesture
from stand_sim.core.results import (
    ExplosionResult,
    ResetResult,
    RetargetResult,
    StandFailure,
    StandStatus,
)
from stand_sim.core.snapshot import EngineSnapshot
from stand_sim.core.stats import StandStats
from stand_sim.engine.targeting import explosion_falloff

SOUND_CUES: dict[str, str] = {
    "bomb_place": "*Click* - Bomb armed",
    "explosion": "💥 BOOOOM! 💥",
    "heat_seeking": "*Mechanical whirring* SHEER HEART ATTACK!",
    "reality_reset": "⏰ *Time reversal sound* BITES THE DUST!",
    "menacing": "ゴゴゴゴ (Menacing aura)",
}

_GESTURE_TEXT: dict[Gesture, str] = {
    Gesture.THUMB_PRESS: "presses the trigger with a thumb",
    Gesture.FINGER_SNAP: "snaps a finger",
    Gesture.HAND_CLENCH: "clenches a fist",
}


def sound_cue(name: str) -> str:
    return "🔊 " + SOUND_CUES.get(name, "*Unknown sound effect*")


def stand_cry(config: StandConfig) -> str:
    return f"{config.stand_name.upper()}!"


def emphasize(text: str) -> str:
    return f"✨ {text.upper()} ✨"


def gesture_line(config: StandConfig, kind: EffectKind) -> str:
    return f"{config.user_name} {_GESTURE_TEXT[GESTURE_FOR_KIND[kind]]}"


def render_failure(action: str, failure: StandFailure) -> str:
    return f"❌ {action} failed: {failure.message}"


def render_stats(config: StandConfig, stats: StandStats) -> list[str]:
    lines = [f"{config.stand_name} (user: {config.user_name})"]
    for label, letter in stats.ranks().items():
        lines.append(f"   - {label.replace('_', ' ').title()}: {letter}")
    return lines


def render_explosion(
    result: ExplosionResult,
    snapshot: EngineSnapshot | None = None,
    falloff_range: float = 10.0,
) -> list[str]:
    """Describe a detonation.  With a snapshot, caught targets get a projected splash figure."""
    lines = [
        "💥 Explosion successful!",
        f"   - Target: {result.target_id}",
        f"   - Damage: {result.damage_dealt}",
        f"   - Radius: {result.explosion_radius}",
    ]
    if not result.affected_targets:
        lines.append("   - Caught in blast: none")
        return lines
    lines.append(f"   - Caught in blast: {list(result.affected_targets)}")
    if snapshot is not None and result.target_id in snapshot.targets:
        center = snapshot.targets[result.target_id].pos
        for tid in result.affected_targets:
            caught = snapshot.targets.get(tid)
            if caught is None:
                continue
            projected = explosion_falloff(result.damage_dealt, caught.pos.distance(center), falloff_range)
            lines.append(f"     * {tid} {caught.name}: projected splash {projected}")
    return lines


def render_retarget(result: RetargetResult | None, cycle: int) -> str:
    if result is None:
        return f"🔄 Update cycle {cycle}: still on course"
    if result.deactivated:
        return f"🔄 Update cycle {cycle}: heat-seeking bomb deactivated - no targets"
    return f"🎯 Update cycle {cycle}: retargeting {result.previous_target_id} -> {result.new_target_id}"


def render_reset(result: ResetResult) -> list[str]:
    return [
        "🔄 Time loop triggered!",
        f"   - Loop number: {result.loop_number}",
        f"   - Reset targets: {list(result.reset_targets)}",
    ]


def render_status(status: StandStatus, title: str = "Status") -> list[str]:
    return [
        f"📈 {title}:",
        f"Active bombs: {status.active_effect_count}",
        f"Sheer Heart Attack: {status.heat_seeking_active}",
        f"Bites the Dust: {status.reset_lock_active}",
        f"Time loops: {status.reset_count}",
        f"Alive targets: {status.alive_targets}",
    ]
