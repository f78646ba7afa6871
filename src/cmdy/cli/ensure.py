"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from pathlib import Path
from typing import NoReturn, TypeVar

import click

from cmdy.cli.output import user_output
from cmdy.core.config_store import ConfigStore
from cmdy.core.errors import ConfigNotFoundError, ConfigParseError
from cmdy.core.types import CmdyConfig

T = TypeVar("T")


def fail(error_message: str) -> NoReturn:
    """Output a styled error and exit with code 1.

    Raises:
        SystemExit: Always (with exit code 1)
    """
    user_output(click.style("Error: ", fg="red") + error_message)
    raise SystemExit(1)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing: takes `T | None` and returns `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            fail(error_message)
        return value

    @staticmethod
    def not_empty(value: str | list | tuple | None, error_message: str) -> None:
        """Ensure value is not empty, otherwise output styled error and exit.

        Raises:
            SystemExit: If value is None or empty

        Example:
            >>> Ensure.not_empty(commands, "A command set needs at least one command")
        """
        if not value:
            fail(error_message)

    @staticmethod
    def directory_exists(path: Path) -> None:
        """Ensure path is an existing directory, otherwise output styled error and exit.

        Raises:
            SystemExit: If path is missing or not a directory
        """
        if not path.exists():
            fail(f"Directory not found: {path}")
        if not path.is_dir():
            fail(f"Not a directory: {path}")

    @staticmethod
    def config_loaded(store: ConfigStore) -> CmdyConfig:
        """Load the config, exiting with a styled error if it's missing or malformed.

        Raises:
            SystemExit: If the config cannot be loaded
        """
        try:
            return store.load()
        except ConfigNotFoundError:
            fail(
                f"No config found at {store.path()}\n"
                "Run 'cmdy run' to create your first command set."
            )
        except ConfigParseError as e:
            fail(str(e))

    @staticmethod
    def config_loaded_or_empty(store: ConfigStore) -> CmdyConfig:
        """Load the config, treating a missing file as empty.

        Raises:
            SystemExit: If the config exists but is malformed
        """
        try:
            return store.load_or_empty()
        except ConfigParseError as e:
            fail(str(e))
