"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class EffectKind(IntEnum):
    """Tag of an effect attached to a target."""

    DIRECT = 0          # Touch bomb, detonated on command
    HEAT_SEEKING = 1    # Autonomous bomb chasing the hottest target
    REALITY_RESET = 2   # Time-reset anchor on the locked target


@unique
class ErrorKind(IntEnum):
    """Caller-facing failure categories."""

    NOT_FOUND = 0
    EFFECT_CONFLICT = 1
    NO_EFFECT = 2
    ALREADY_ACTIVE = 3
    NO_VALID_TARGETS = 4
    NOT_ACTIVE = 5
    INVALID_FUSE = 6


@unique
class Gesture(IntEnum):
    """Hand gesture the stand user performs for each ability."""

    THUMB_PRESS = 0
    FINGER_SNAP = 1
    HAND_CLENCH = 2


GESTURE_FOR_KIND: dict[int, Gesture] = {
    EffectKind.DIRECT: Gesture.THUMB_PRESS,
    EffectKind.HEAT_SEEKING: Gesture.FINGER_SNAP,
    EffectKind.REALITY_RESET: Gesture.HAND_CLENCH,
}


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    SPAWN = 0
    HEAT = 1
    NAME = 2
    SEQUENCE = 3
