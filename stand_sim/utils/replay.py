"""Replay serialization — records every command issued against an engine."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from stand_sim.core.results import Outcome
from stand_sim.narration.schemas import (
    CommandRecord,
    failure_schema,
    result_schema,
    snapshot_schema,
    status_schema,
)

if TYPE_CHECKING:
    from stand_sim.engine.stand_engine import StandEngine

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates command records and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_seed", "_records")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed
        self._records: list[CommandRecord] = []

    @property
    def records(self) -> list[CommandRecord]:
        return list(self._records)

    def record(self, command: str, returned: Any, engine: StandEngine, **args: Any) -> CommandRecord:
        """Record one command and the engine state right after it.

        *returned* is whatever the engine call returned: an Outcome, a plain
        result, a list of results, or None.
        """
        if isinstance(returned, Outcome):
            ok = returned.ok
            result = result_schema(returned.value) if returned.ok else None
            failure = failure_schema(returned.failure) if returned.failure is not None else None
        else:
            ok, result, failure = True, result_schema(returned), None

        rec = CommandRecord(
            step=len(self._records) + 1,
            command=command,
            args=args,
            ok=ok,
            result=result,
            failure=failure,
            status=status_schema(engine.status()),
            fingerprint=engine.snapshot().fingerprint(),
        )
        self._records.append(rec)
        return rec

    def to_dict(self, engine: StandEngine | None = None) -> dict[str, Any]:
        replay: dict[str, Any] = {
            "version": "1.0",
            "seed": self._seed,
            "total_commands": len(self._records),
            "commands": [r.model_dump() for r in self._records],
        }
        if engine is not None:
            replay["final_state"] = snapshot_schema(engine.snapshot()).model_dump()
        return replay

    def flush(self, engine: StandEngine | None = None) -> None:
        """Write accumulated data to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.to_dict(engine), indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d commands)", self._path, len(self._records))
