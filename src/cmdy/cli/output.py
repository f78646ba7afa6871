"""Output utilities for CLI commands with clear intent.

user_output() is for messages meant for the person at the terminal (stderr).
machine_output() is for data a script might consume (stdout).
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from cmdy.core.executor import ProgressListener
from cmdy.core.types import CommandResult, ExecutionRecord


def user_output(message: str = "") -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write program output to stdout."""
    click.echo(message)


def format_duration(seconds: float) -> str:
    """Format a duration as '850ms', '12.3s' or '1m 23s'."""
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m {secs}s"


class ConsoleProgress(ProgressListener):
    """Print-based progress feedback for a running command set.

    Visual output format:
    - Start: `[1/3] Running: make build` (bold)
    - Success: `  ✓ make build (1.2s)` (green)
    - Failure: `  ✗ make test exited 2 (3.4s)` (red)
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def command_started(self, index: int, total: int, command: str) -> None:
        self._console.print(
            Text(f"[{index + 1}/{total}] Running: {command}", style="bold"),
        )

    def command_finished(self, index: int, total: int, result: CommandResult) -> None:
        duration = format_duration(result.duration_seconds)
        if result.succeeded:
            self._console.print(Text(f"  ✓ {result.command} ({duration})", style="green"))
        else:
            self._console.print(
                Text(
                    f"  ✗ {result.command} exited {result.exit_status} ({duration})",
                    style="red",
                )
            )


def format_run_summary(record: ExecutionRecord) -> Panel:
    """Format final summary box with status, counts and failed commands.

    Example:
        >>> panel = format_run_summary(record)
        >>> console.print(panel)
    """
    total = len(record.results)
    lines: list[Text] = []

    if record.succeeded:
        lines.append(Text(f"✅ All {total} commands succeeded", style="green"))
    else:
        lines.append(
            Text(f"❌ {record.failed_count} of {total} commands failed", style="red"),
        )

    lines.append(Text(f"📁 Directory: {record.directory}"))
    duration = sum(result.duration_seconds for result in record.results)
    lines.append(Text(f"⏱  Duration: {format_duration(duration)}"))

    if not record.succeeded:
        lines.append(Text(""))
        for result in record.results:
            if not result.succeeded:
                lines.append(Text(f"exit {result.exit_status}: {result.command}", style="red"))

    content = Text("\n").join(lines)
    return Panel(
        content,
        title=record.command_set_name,
        border_style="green" if record.succeeded else "red",
        padding=(1, 2),
    )
