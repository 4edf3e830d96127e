"""Domain-separated deterministic RNG using xxhash.

Formula: RNG_Value = Hash(Seed, Domain, EntityID, Step)

Each value is a pure function of its inputs, so a roster or an operation
sequence built from the same seed is identical on every run.
"""

from __future__ import annotations

import struct

import xxhash

from stand_sim.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, entity_id: int, step: int) -> int:
        payload = struct.pack("<qiqi", self._seed, domain.value, entity_id, step)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, entity_id: int, step: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, entity_id, step) / (self._MAX_UINT64 + 1)

    def next_uniform(self, domain: Domain, entity_id: int, step: int, low: float, high: float) -> float:
        """Return a deterministic float in [low, high)."""
        return low + self.next_float(domain, entity_id, step) * (high - low)

    def next_int(self, domain: Domain, entity_id: int, step: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, entity_id, step)
        return low + int(f * (high - low + 1))
