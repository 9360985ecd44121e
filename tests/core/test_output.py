"""Tests for loguru setup."""

import sys
from pathlib import Path

import pytest
from loguru import logger

from playlist_replay.core.output import log, setup_loguru


@pytest.fixture(autouse=True)
def restore_loguru():
    """Put loguru back to its default stderr sink after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLoguru:
    """Test sink configuration."""

    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "replay.log"
        setup_loguru(log_file, level="INFO")
        logger.info("hello from test")
        logger.debug("below threshold")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "hello from test" in content
        assert "| INFO     |" in content
        assert "below threshold" not in content

    def test_console_output_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_loguru(None, level="WARNING", console_output=True)
        logger.warning("careful")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "WARNING: careful" in captured.err

    def test_no_sinks_is_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_loguru(None, level="DEBUG")
        logger.error("nobody hears this")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_unwritable_log_dir_falls_back_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        setup_loguru(blocker / "replay.log", level="WARNING")
        logger.warning("still visible")

        captured = capsys.readouterr()
        assert "cannot write log file" in captured.err
        assert "still visible" in captured.err


class TestLog:
    """Test the user-facing log() helper."""

    def test_echoes_to_stderr_and_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        log_file = tmp_path / "replay.log"
        setup_loguru(log_file, level="INFO")
        log("status message")
        logger.remove()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "status message" in captured.err
        assert "status message" in log_file.read_text(encoding="utf-8")
