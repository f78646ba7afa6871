"""Tests for run progress and summary rendering."""

import io
from datetime import datetime
from pathlib import Path

import pytest
from rich.console import Console

from cmdy.cli.output import ConsoleProgress, format_duration, format_run_summary
from cmdy.core.types import CommandResult, ExecutionRecord


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=100, color_system=None), buffer


def _record(*results: CommandResult) -> ExecutionRecord:
    return ExecutionRecord(
        timestamp=datetime(2024, 1, 1),
        command_set_name="Build",
        directory=Path("/tmp"),
        results=results,
    )


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0.25, "250ms"), (1.0, "1.0s"), (12.34, "12.3s"), (83, "1m 23s")],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_progress_lines() -> None:
    console, buffer = _console()
    progress = ConsoleProgress(console)

    progress.command_started(0, 2, "make")
    progress.command_finished(0, 2, CommandResult("make", 0, True, 0.5))
    progress.command_started(1, 2, "make test")
    progress.command_finished(1, 2, CommandResult("make test", 2, False, 2.0))

    output = buffer.getvalue()
    assert "[1/2] Running: make" in output
    assert "✓ make (500ms)" in output
    assert "[2/2] Running: make test" in output
    assert "✗ make test exited 2 (2.0s)" in output


def test_summary_success() -> None:
    console, buffer = _console()

    console.print(format_run_summary(_record(CommandResult("true", 0, True))))

    output = buffer.getvalue()
    assert "Build" in output
    assert "All 1 commands succeeded" in output
    assert "Directory: /tmp" in output


def test_summary_lists_failed_commands() -> None:
    console, buffer = _console()

    console.print(
        format_run_summary(
            _record(
                CommandResult("true", 0, True),
                CommandResult("false", 1, False),
            )
        )
    )

    output = buffer.getvalue()
    assert "1 of 2 commands failed" in output
    assert "exit 1: false" in output
