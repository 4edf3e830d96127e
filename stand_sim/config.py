"""Stand configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StandConfig:
    """Immutable configuration for one stand engine."""

    # Identity
    user_name: str = "Yoshikage Kira"
    stand_name: str = "Killer Queen"

    # Effect power per kind
    direct_power: int = 100
    heat_seeking_power: int = 80
    reality_reset_power: int = 200

    # Detonation
    explosion_radius: float = 5.0
    splash_falloff_range: float = 10.0     # Distance at which projected splash reaches 0

    # Reality reset
    reset_health: int = 100                # Health every non-locked target is restored to

    # Roster generation
    seed: int = 42
    arena_size: float = 20.0
    heat_min: float = 35.5
    heat_max: float = 38.5

    # Logging
    log_level: str = "INFO"
    replay_file: str = "replay.json"
