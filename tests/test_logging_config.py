# Area: Shared Tests
"""Tests for logging setup and play mode."""

import json
import logging

import pytest
from console_games._shared.logging_config import (
    JSONFormatter,
    PlayModeFilter,
    TerminalFormatter,
    disable_play_mode,
    enable_play_mode,
    is_play_mode_enabled,
    log_game_error,
    setup_logging,
)
from console_games.errors import InvalidStateError


@pytest.fixture
def pkg_logger():
    """Yield the package logger and undo setup_logging afterwards."""
    pkg = logging.getLogger("console_games")
    saved = (list(pkg.handlers), pkg.level, pkg.propagate)
    yield pkg
    for handler in pkg.handlers:
        handler.close()
    pkg.handlers[:] = saved[0]
    pkg.setLevel(saved[1])
    pkg.propagate = saved[2]
    disable_play_mode()


def make_record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("console_games.test", level, __file__, 1, msg, None, None)


class TestPlayMode:
    """Tests for the play-mode switch and filter."""

    def test_toggle(self):
        """Test enabling and disabling play mode."""
        enable_play_mode()
        assert is_play_mode_enabled() is True
        disable_play_mode()
        assert is_play_mode_enabled() is False

    def test_filter_blocks_only_in_play_mode(self):
        """Test that the filter drops records only in play mode."""
        log_filter = PlayModeFilter()
        assert log_filter.filter(make_record()) is True
        enable_play_mode()
        try:
            assert log_filter.filter(make_record()) is False
        finally:
            disable_play_mode()


class TestFormatters:
    """Tests for the terminal and JSON formatters."""

    def test_json_formatter(self):
        """Test that records become one JSON object."""
        line = JSONFormatter().format(make_record(logging.WARNING, "careful"))
        data = json.loads(line)
        assert data["level"] == "WARNING"
        assert data["logger"] == "console_games.test"
        assert data["message"] == "careful"
        assert "timestamp" in data

    def test_terminal_formatter_colors_level(self):
        """Test that the level is colored without touching the record."""
        record = make_record(logging.ERROR)
        text = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[31mERROR\033[0m" in text
        assert record.levelname == "ERROR"


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_writes_json_lines(self, pkg_logger, tmp_path):
        """Test that the file handler writes JSON lines."""
        log_path = tmp_path / "logs" / "games.log"
        setup_logging(str(log_path), logging.DEBUG)

        logging.getLogger("console_games.rps").info("round played")
        for handler in pkg_logger.handlers:
            handler.flush()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "round played"
        assert pkg_logger.propagate is False

    def test_file_keeps_logs_in_play_mode(self, pkg_logger, tmp_path, capsys):
        """Test that play mode mutes the terminal but not the file."""
        log_path = tmp_path / "games.log"
        setup_logging(str(log_path))

        enable_play_mode()
        logging.getLogger("console_games.ttt").info("hidden from screen")
        for handler in pkg_logger.handlers:
            handler.flush()

        assert "hidden from screen" not in capsys.readouterr().out
        assert "hidden from screen" in log_path.read_text(encoding="utf-8")

    def test_repeated_setup_does_not_stack_handlers(self, pkg_logger, tmp_path):
        """Test that calling setup twice keeps two handlers."""
        setup_logging(str(tmp_path / "a.log"))
        setup_logging(str(tmp_path / "b.log"))
        assert len(pkg_logger.handlers) == 2


class TestLogGameError:
    """Tests for log_game_error()."""

    def test_prints_block_to_stderr(self, pkg_logger, tmp_path, capsys):
        """Test that game errors print the boxed block."""
        setup_logging(str(tmp_path / "games.log"))
        log_game_error(InvalidStateError("ttt", "place", "ROUND_COMPLETE"))
        err = capsys.readouterr().err
        assert "INVALID_STATE" in err
        assert "Operation:    place" in err
