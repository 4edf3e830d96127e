"""Result types returned across the engine boundary.

Design:
  - Engine internals raise ``StandError`` on the first violated precondition.
  - Public engine operations catch it and hand back ``Outcome.fail``, so no
    exception escapes the boundary.
  - Callers that prefer exceptions can call ``Outcome.unwrap()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from stand_sim.core.enums import ErrorKind

T = TypeVar("T")


class StandError(Exception):
    """A rule violation detected while validating a command."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"StandError({self.kind.name}, {self.message!r})"


@dataclass(frozen=True, slots=True)
class StandFailure:
    """Value form of a rejected command."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or a failure, never both."""

    value: T | None = None
    failure: StandFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, error: StandError) -> Outcome[T]:
        return cls(failure=StandFailure(error.kind, error.message))

    def unwrap(self) -> T:
        """Return the value or raise the failure as a ``StandError``."""
        if self.failure is not None:
            raise StandError(self.failure.kind, self.failure.message)
        return self.value  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class ExplosionResult:
    """Outcome of a detonation.

    ``affected_targets`` only reports who was inside the blast; no damage
    is applied to them.
    """

    target_id: int
    damage_dealt: int
    explosion_radius: float
    affected_targets: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class ResetResult:
    """Outcome of a reality reset."""

    loop_number: int
    timestamp: float
    reset_targets: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class RetargetResult:
    """A heat-seeking effect moved (or shut down when new_target_id is None)."""

    previous_target_id: int | None
    new_target_id: int | None

    @property
    def deactivated(self) -> bool:
        return self.new_target_id is None


@dataclass(frozen=True, slots=True)
class StandStatus:
    active_effect_count: int
    heat_seeking_active: bool
    reset_lock_active: bool
    reset_count: int
    alive_targets: int
