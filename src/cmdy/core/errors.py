"""Domain exceptions raised by the cmdy core.

The CLI layer converts these into styled error output and a non-zero exit.
"""


class CmdyError(Exception):
    """Base class for all cmdy errors."""


class ConfigNotFoundError(CmdyError):
    """The command-set config file does not exist."""


class ConfigParseError(CmdyError):
    """The command-set config file is not valid JSON or has the wrong shape."""


class CommandSetNotFoundError(CmdyError):
    """No command set with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command set '{name}' not found")
        self.name = name


class DuplicateCommandSetError(CmdyError):
    """A command set with the same name is already stored."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command set '{name}' already exists")
        self.name = name


class LogWriteError(CmdyError, OSError):
    """Appending an execution record to the log file failed."""


class LogReadError(CmdyError, OSError):
    """The log file exists but could not be read."""
