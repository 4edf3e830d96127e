"""Pure target-selection helpers shared by the engine and narration."""

from __future__ import annotations

from collections.abc import Iterable

from stand_sim.core.models import Target, Vector3


def hottest(targets: Iterable[Target]) -> Target | None:
    """Return the target with the highest heat.

    Ties go to the lowest id.  Returns None for an empty iterable.
    """
    return max(targets, key=lambda t: (t.heat, -t.id), default=None)


def targets_in_radius(
    targets: Iterable[Target],
    center: Vector3,
    radius: float,
    exclude: int | None = None,
) -> tuple[int, ...]:
    """Ids of alive targets within *radius* of *center* (boundary inclusive), sorted."""
    return tuple(sorted(
        t.id for t in targets
        if t.alive and t.id != exclude and t.pos.distance(center) <= radius
    ))


def explosion_falloff(power: int, distance: float, falloff_range: float = 10.0) -> int:
    """Projected damage at *distance* from a blast: linear falloff to 0 at *falloff_range*."""
    if falloff_range <= 0:
        return 0
    falloff = 1.0 - min(distance / falloff_range, 1.0)
    return int(power * falloff)
