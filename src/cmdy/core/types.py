"""Core data types for command sets and execution records.

All types are frozen. Config updates return new CmdyConfig instances so the
store only ever sees whole, validated snapshots.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path

from cmdy.core.errors import CommandSetNotFoundError, DuplicateCommandSetError


@dataclass(frozen=True)
class CommandSet:
    """A named, ordered list of shell commands."""

    name: str
    commands: tuple[str, ...]

    @property
    def is_runnable(self) -> bool:
        return len(self.commands) > 0


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single command within a run.

    Attributes:
        command: The shell command string as stored in the set
        exit_status: Process exit status (127 when the shell could not start)
        succeeded: True when exit_status is zero
        duration_seconds: Wall time spent on the command, for display only
    """

    command: str
    exit_status: int
    succeeded: bool
    duration_seconds: float = 0.0


@dataclass(frozen=True)
class ExecutionRecord:
    """Immutable record of one run of a command set."""

    timestamp: datetime
    command_set_name: str
    directory: Path
    results: tuple[CommandResult, ...]

    @property
    def succeeded(self) -> bool:
        return all(result.succeeded for result in self.results)

    @property
    def succeeded_count(self) -> int:
        return sum(1 for result in self.results if result.succeeded)

    @property
    def failed_count(self) -> int:
        return len(self.results) - self.succeeded_count


@dataclass(frozen=True)
class CmdyConfig:
    """In-memory representation of the command-set config file.

    Example file:
      {
        "directories": ["/home/me/notes"],
        "command_sets": [
          {"name": "Sync", "commands": ["git pull", "git push"]}
        ]
      }
    """

    directories: tuple[str, ...] = field(default_factory=tuple)
    command_sets: tuple[CommandSet, ...] = field(default_factory=tuple)

    @staticmethod
    def empty() -> "CmdyConfig":
        return CmdyConfig(directories=(), command_sets=())

    def command_set_names(self) -> list[str]:
        return [command_set.name for command_set in self.command_sets]

    def find_command_set(self, name: str) -> CommandSet | None:
        for command_set in self.command_sets:
            if command_set.name == name:
                return command_set
        return None

    def with_command_set(self, command_set: CommandSet) -> "CmdyConfig":
        """Return a new config with the command set appended.

        Raises:
            DuplicateCommandSetError: If a set with the same name is stored
        """
        if self.find_command_set(command_set.name) is not None:
            raise DuplicateCommandSetError(command_set.name)
        return replace(self, command_sets=(*self.command_sets, command_set))

    def without_command_set(self, name: str) -> "CmdyConfig":
        """Return a new config without the named command set.

        Raises:
            CommandSetNotFoundError: If no set has this name
        """
        if self.find_command_set(name) is None:
            raise CommandSetNotFoundError(name)
        remaining = tuple(cs for cs in self.command_sets if cs.name != name)
        return replace(self, command_sets=remaining)

    def with_directory(self, directory: str) -> "CmdyConfig":
        """Return a new config with the directory saved (no duplicates)."""
        if directory in self.directories:
            return self
        return replace(self, directories=(*self.directories, directory))
