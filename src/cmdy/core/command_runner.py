"""Shell command launching abstraction.

This module provides abstraction over subprocess execution, enabling
dependency injection for testing without mock.patch.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

# Shell conventions for "command not found" and "not executable"
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


class CommandRunner(ABC):
    """Abstract interface for running one shell command to completion."""

    @abstractmethod
    def run(self, command: str, cwd: Path) -> int:
        """Run a shell command and block until it exits.

        stdout and stderr are inherited so output appears live.

        Args:
            command: Shell command string, passed to the shell unmodified
            cwd: Working directory for the command

        Returns:
            The process exit status
        """
        ...


class RealCommandRunner(CommandRunner):
    """Production implementation running `<shell> -c <command>` via subprocess."""

    def __init__(self, shell: str) -> None:
        self._shell = shell

    @property
    def shell(self) -> str:
        return self._shell

    def run(self, command: str, cwd: Path) -> int:
        argv = [self._shell, "-c", command]
        logger.debug("Running command: argv=%s, cwd=%s", argv, cwd)
        try:
            result = subprocess.run(argv, cwd=cwd, check=False)
        except FileNotFoundError:
            logger.warning("Could not launch shell '%s' in %s", self._shell, cwd)
            return EXIT_NOT_FOUND
        except PermissionError:
            logger.warning("Shell '%s' is not executable", self._shell)
            return EXIT_NOT_EXECUTABLE
        except OSError as e:
            logger.warning("Could not launch shell '%s': %s", self._shell, e)
            return EXIT_NOT_FOUND
        logger.debug("Command exited: command=%r, returncode=%d", command, result.returncode)
        return result.returncode
