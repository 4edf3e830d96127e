"""Tests for package logging setup and the engine event log."""

import sys
import os
import io
import logging

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.helpers.stand_arena import StandArena
from stand_sim.__main__ import main
from stand_sim.config import StandConfig
from stand_sim.utils.event_log import EventLog
from stand_sim.utils.logging import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (package_logger.level, list(package_logger.handlers), package_logger.propagate)
    yield
    package_logger.setLevel(saved[0])
    package_logger.handlers[:] = saved[1]
    package_logger.propagate = saved[2]


class TestSetupLogging:
    def test_config_level_applies_to_package_logger(self):
        package_logger = setup_logging(StandConfig(log_level="DEBUG"), stream=io.StringIO())
        assert package_logger is logging.getLogger("stand_sim")
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger("stand_sim.engine.stand_engine").isEnabledFor(logging.DEBUG)

    def test_root_logger_untouched(self):
        root = logging.getLogger()
        before = (root.level, list(root.handlers))
        setup_logging(StandConfig(log_level="DEBUG"), stream=io.StringIO())
        assert (root.level, list(root.handlers)) == before

    def test_repeat_setup_replaces_handler(self):
        setup_logging(StandConfig(log_level="INFO"), stream=io.StringIO())
        package_logger = setup_logging(StandConfig(log_level="WARNING"), stream=io.StringIO())
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_lines_carry_stand_name_and_respect_level(self):
        stream = io.StringIO()
        setup_logging(StandConfig(log_level="INFO", stand_name="Killer Queen"), stream=stream)
        logging.getLogger("stand_sim.narration.battle").debug("hidden")
        logging.getLogger("stand_sim.narration.battle").info("shown")
        text = stream.getvalue()
        assert "shown" in text and "Killer Queen" in text
        assert "hidden" not in text

    def test_unknown_level_falls_back_to_info(self):
        package_logger = setup_logging(StandConfig(log_level="chatty"), stream=io.StringIO())
        assert package_logger.level == logging.INFO


class TestEventLog:
    def test_latest_returns_most_recent_in_order(self):
        log = EventLog()
        for i in range(4):
            log.record("fuse", f"event {i}")
        latest = log.latest(2)
        assert [e.seq for e in latest] == [3, 4]
        assert len(log) == 4

    def test_engine_commands_feed_the_log(self):
        arena = StandArena()
        arena.add_target(1)
        arena.engine.place_direct(1)
        categories = [e.category for e in arena.engine.events.latest()]
        assert categories == ["target", "bomb"]


class TestCliLogging:
    def test_debug_level_logs_to_stderr_only(self, capsys):
        main(["--json", "--log-level", "DEBUG"])
        captured = capsys.readouterr()
        assert "events recorded" in captured.err
        assert "events recorded" not in captured.out
        assert captured.out.lstrip().startswith("{")
