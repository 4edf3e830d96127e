"""Thread-safe log of the state transitions an engine performed."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StandEvent:
    """A single engine event for narration and replays."""

    seq: int
    category: str
    message: str
    target_ids: tuple[int, ...] = ()


class EventLog:
    """Unbounded event log. Writers append; readers snapshot a slice.

    Sequence numbers are assigned on append and grow monotonically.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self) -> None:
        self._buffer: deque[StandEvent] = deque()
        self._lock = threading.Lock()
        self._next_seq = 1

    def record(self, category: str, message: str, target_ids: tuple[int, ...] = ()) -> StandEvent:
        with self._lock:
            event = StandEvent(self._next_seq, category, message, target_ids)
            self._next_seq += 1
            self._buffer.append(event)
        return event

    def latest(self, count: int = 50) -> list[StandEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
