"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from fuzzywhich import __version__
from fuzzywhich.cli import _setup_logging, app


runner = CliRunner()


def _always(path: Path) -> bool:
    return True


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "bin"
    directory.mkdir()
    for name in ("lsx", "lsa", "grep"):
        (directory / name).write_text("#!/bin/sh\n")
    return directory


@pytest.fixture(autouse=True)
def isolated_command():
    with patch("fuzzywhich.cli.default_predicate", return_value=_always), patch(
        "fuzzywhich.cli._setup_logging"
    ):
        yield


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("fuzzywhich.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("fuzzywhich.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestMainCommand:
    """Tests for the search command."""

    def test_lists_matches(self, bin_dir: Path) -> None:
        """Prints each match on its own line, sorted."""
        result = runner.invoke(app, ["LS", "--path", str(bin_dir)])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines == [str(bin_dir / "lsa"), str(bin_dir / "lsx")]

    def test_reads_path_environment(self, bin_dir: Path) -> None:
        """Uses PATH when no search path is given."""
        result = runner.invoke(app, ["grep"], env={"PATH": str(bin_dir)})

        assert result.exit_code == 0
        assert str(bin_dir / "grep") in result.stdout

    def test_missing_path_variable(self) -> None:
        """Exits with status 1 when PATH is unset."""
        result = runner.invoke(app, ["ls"], env={"PATH": None})

        assert result.exit_code == 1
        assert "PATH is not defined in the environment." in result.stdout

    def test_empty_pattern(self, bin_dir: Path) -> None:
        """Exits with status 1 for an empty pattern."""
        with patch("fuzzywhich.cli.find_executables") as mock_find:
            result = runner.invoke(app, ["", "--path", str(bin_dir)])

        assert result.exit_code == 1
        assert "Search pattern cannot be empty" in result.stdout
        mock_find.assert_not_called()

    def test_whitespace_pattern_is_searched(self, bin_dir: Path) -> None:
        """Only an empty pattern is rejected."""
        with patch("fuzzywhich.cli.find_executables", return_value=[]) as mock_find:
            result = runner.invoke(app, ["  ", "--path", str(bin_dir)])

        assert result.exit_code == 0
        assert mock_find.call_args[0][1] == "  "

    def test_no_matches(self, bin_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Leaves stdout empty and logs when nothing matches."""
        with caplog.at_level(logging.INFO, logger="fuzzywhich.cli"):
            result = runner.invoke(app, ["zzzzzz", "--path", str(bin_dir)])

        assert result.exit_code == 0
        assert result.stdout == ""
        assert "No matches found" in caplog.text

    def test_unknown_color(self, bin_dir: Path) -> None:
        """Rejects color names rich cannot parse."""
        result = runner.invoke(app, ["ls", "--path", str(bin_dir), "--color", "notacolor"])

        assert result.exit_code == 2

    def test_color_off(self, bin_dir: Path) -> None:
        """Disabling color still prints matches."""
        result = runner.invoke(app, ["ls", "--path", str(bin_dir), "-c", "off"])

        assert result.exit_code == 0
        assert str(bin_dir / "lsx") in result.stdout

    def test_threshold_out_of_range(self, bin_dir: Path) -> None:
        """Rejects thresholds above 1.0."""
        result = runner.invoke(app, ["ls", "--path", str(bin_dir), "--threshold", "1.5"])

        assert result.exit_code == 2

    def test_threshold_passed_through(self, bin_dir: Path) -> None:
        """Forwards pattern and threshold to the scanner."""
        with patch("fuzzywhich.cli.find_executables", return_value=[]) as mock_find:
            result = runner.invoke(app, ["ls", "--path", str(bin_dir), "-T", "0.9"])

        assert result.exit_code == 0
        args = mock_find.call_args[0]
        assert args[0] == [bin_dir]
        assert args[1] == "ls"
        assert args[2] == 0.9

    def test_print_time(self, bin_dir: Path) -> None:
        """Prints the elapsed time when asked."""
        result = runner.invoke(app, ["ls", "--path", str(bin_dir), "--print-time"])

        assert result.exit_code == 0
        assert "Elapsed: " in result.stdout

    def test_verbose_logs_scores(self, bin_dir: Path) -> None:
        """Verbose mode logs the score of every match."""
        with patch("fuzzywhich.cli.LOGGER") as mock_logger:
            result = runner.invoke(app, ["ls", "--path", str(bin_dir), "-v"])

        assert result.exit_code == 0
        assert mock_logger.debug.call_count == 2

    def test_version(self) -> None:
        """Prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout
