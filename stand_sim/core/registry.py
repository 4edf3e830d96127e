"""Target registry — identity to combat attributes."""

from __future__ import annotations

from collections.abc import Iterator

from stand_sim.core.enums import ErrorKind
from stand_sim.core.models import Target
from stand_sim.core.results import StandError


class AliveView:
    """Lazy, restartable view over the alive targets of a registry.

    Every iteration re-scans the registry, so the view stays valid
    across mutations.
    """

    __slots__ = ("_targets",)

    def __init__(self, targets: dict[int, Target]) -> None:
        self._targets = targets

    def __iter__(self) -> Iterator[Target]:
        return (t for t in self._targets.values() if t.alive)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)


class TargetRegistry:
    """Owns every registered target, keyed by id."""

    __slots__ = ("_targets",)

    def __init__(self) -> None:
        self._targets: dict[int, Target] = {}

    def register(self, target: Target) -> None:
        """Insert or replace by id."""
        self._targets[target.id] = target

    def lookup(self, target_id: int) -> Target:
        target = self._targets.get(target_id)
        if target is None:
            raise StandError(ErrorKind.NOT_FOUND, f"Target {target_id} not found")
        return target

    def get(self, target_id: int) -> Target | None:
        return self._targets.get(target_id)

    def all_alive(self) -> AliveView:
        return AliveView(self._targets)

    def __contains__(self, target_id: object) -> bool:
        return target_id in self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(self._targets.values())
