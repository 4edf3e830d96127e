"""Entry point: ``python -m stand_sim``.

Runs the scripted three-phase battle headlessly:
  - ``python -m stand_sim``                 → fixed three-target roster
  - ``python -m stand_sim --targets 6``     → seeded random roster
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger("stand_sim.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Stand ability battle simulation")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--targets", type=int, default=0,
                        help="Generate a random roster of this size (0 = scripted roster)")
    parser.add_argument("--ticks", type=int, default=3, help="Heat-seeking update cycles")
    parser.add_argument("--replay", type=str, default=None, help="Write a JSON replay to this path")
    parser.add_argument("--json", action="store_true", help="Print the final engine state as JSON")
    parser.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])
    return parser


def main(argv: list[str] | None = None) -> None:
    from stand_sim.config import StandConfig
    from stand_sim.engine.stand_engine import StandEngine
    from stand_sim.narration.battle import BattleNarrator
    from stand_sim.narration.schemas import snapshot_schema
    from stand_sim.systems.generator import RosterGenerator, default_roster
    from stand_sim.systems.rng import DeterministicRNG
    from stand_sim.utils.logging import setup_logging
    from stand_sim.utils.replay import ReplayRecorder

    args = _build_parser().parse_args(argv)
    if args.targets < 0:
        raise SystemExit("--targets must be >= 0")

    config = StandConfig(
        seed=args.seed,
        log_level=args.log_level,
        replay_file=args.replay or StandConfig.replay_file,
    )
    setup_logging(config)

    if args.targets:
        roster = RosterGenerator(config, DeterministicRNG(config.seed)).roster(args.targets)
    else:
        roster = default_roster(config.reset_health)

    engine = StandEngine(config)
    recorder = ReplayRecorder(config.replay_file, config.seed) if args.replay else None
    out = None if args.json else sys.stdout
    narrator = BattleNarrator(engine, out=out, recorder=recorder, heat_ticks=args.ticks)
    narrator.run(roster)

    if recorder is not None:
        recorder.flush(engine)

    if args.json:
        print(json.dumps(snapshot_schema(engine.snapshot()).model_dump(), indent=2))

    for event in engine.events.latest(5):
        logger.debug("#%d %s: %s", event.seq, event.category, event.message)
    logger.info("Done. %d events recorded", len(engine.events))


if __name__ == "__main__":
    main()
