"""Sequential execution of a command set.

The Executor runs every command of a set in order inside one working
directory. A failing command is recorded and the run continues with the next
one; the caller gets an ExecutionRecord with one CommandResult per command.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from cmdy.core.command_runner import CommandRunner
from cmdy.core.time.abc import Time
from cmdy.core.types import CommandResult, ExecutionRecord

logger = logging.getLogger(__name__)


class ProgressListener(ABC):
    """Receives start/finish notifications for each command of a run.

    Indices are zero-based; total is the number of commands in the run.
    """

    @abstractmethod
    def command_started(self, index: int, total: int, command: str) -> None: ...

    @abstractmethod
    def command_finished(self, index: int, total: int, result: CommandResult) -> None: ...


class SilentProgress(ProgressListener):
    """Listener that ignores all notifications."""

    def command_started(self, index: int, total: int, command: str) -> None:
        pass

    def command_finished(self, index: int, total: int, result: CommandResult) -> None:
        pass


class Executor:
    """Runs ordered shell commands and records the outcome of each."""

    def __init__(self, runner: CommandRunner, time: Time) -> None:
        self._runner = runner
        self._time = time

    def run(
        self,
        commands: Sequence[str],
        working_dir: Path,
        command_set_name: str,
        progress: ProgressListener | None = None,
    ) -> ExecutionRecord:
        """Execute commands in order and return the execution record.

        Args:
            commands: Shell command strings, executed in the given order
            working_dir: Working directory for every command
            command_set_name: Name stored in the record
            progress: Optional listener notified before and after each command

        Returns:
            ExecutionRecord with exactly len(commands) results, in order
        """
        listener = progress if progress is not None else SilentProgress()
        timestamp = self._time.now()
        total = len(commands)
        logger.debug(
            "Executing command set: name=%s, commands=%d, working_dir=%s",
            command_set_name,
            total,
            working_dir,
        )

        results: list[CommandResult] = []
        for index, command in enumerate(commands):
            listener.command_started(index, total, command)
            started = self._time.monotonic()
            exit_status = self._runner.run(command, working_dir)
            result = CommandResult(
                command=command,
                exit_status=exit_status,
                succeeded=exit_status == 0,
                duration_seconds=self._time.monotonic() - started,
            )
            if not result.succeeded:
                logger.debug("Command failed, continuing: %r exited %d", command, exit_status)
            results.append(result)
            listener.command_finished(index, total, result)

        return ExecutionRecord(
            timestamp=timestamp,
            command_set_name=command_set_name,
            directory=working_dir,
            results=tuple(results),
        )
