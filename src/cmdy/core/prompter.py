"""Interactive selection of directories and command sets.

The Prompter interface has one method per question the run flow asks.
ClickPrompter renders numbered menus on the terminal; tests use a fake that
returns scripted answers.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import click

CURRENT_DIRECTORY_LABEL = "Current Directory"
NEW_DIRECTORY_LABEL = "Enter New Directory"
NEW_COMMAND_SET_LABEL = "Create new command set"


@dataclass(frozen=True)
class DirectoryChoice:
    """Selected working directory.

    is_new is True when the user typed a path that isn't saved yet.
    """

    path: str
    is_new: bool


@dataclass(frozen=True)
class CommandSetChoice:
    """Selected command set name.

    is_new is True when the user asked to create a new set with this name.
    """

    name: str
    is_new: bool


def parse_command_list(raw: str) -> list[str]:
    """Split comma-separated input into trimmed, non-empty commands."""
    return [part.strip() for part in raw.split(",") if part.strip()]


class Prompter(ABC):
    """Abstract interface for the questions asked by `cmdy run`."""

    @abstractmethod
    def choose_directory(self, current_dir: Path, saved_dirs: Sequence[str]) -> DirectoryChoice:
        """Ask for the working directory: current, a saved one, or a new path."""
        ...

    @abstractmethod
    def choose_command_set(self, names: Sequence[str]) -> CommandSetChoice:
        """Ask for a command set: an existing one, or a new name."""
        ...

    @abstractmethod
    def ask_commands(self, name: str) -> list[str]:
        """Ask for the commands of a new command set."""
        ...


class ClickPrompter(Prompter):
    """Terminal prompter using numbered menus and click.prompt."""

    def _select(self, title: str, options: Sequence[str]) -> int:
        click.echo(click.style(title, bold=True), err=True)
        for number, option in enumerate(options, start=1):
            click.echo(f"  {number}. {option}", err=True)
        choice = click.prompt(
            "Choice",
            type=click.IntRange(1, len(options)),
            default=1,
            err=True,
        )
        return choice - 1

    def choose_directory(self, current_dir: Path, saved_dirs: Sequence[str]) -> DirectoryChoice:
        options = [f"{CURRENT_DIRECTORY_LABEL} ({current_dir})", *saved_dirs, NEW_DIRECTORY_LABEL]
        index = self._select("Select a directory", options)
        if index == 0:
            return DirectoryChoice(path=str(current_dir), is_new=False)
        if index == len(options) - 1:
            new_dir = click.prompt("Enter directory path", type=str, err=True).strip()
            return DirectoryChoice(path=new_dir, is_new=new_dir not in saved_dirs)
        return DirectoryChoice(path=saved_dirs[index - 1], is_new=False)

    def choose_command_set(self, names: Sequence[str]) -> CommandSetChoice:
        options = [*names, NEW_COMMAND_SET_LABEL]
        index = self._select("Select a command set", options)
        if index == len(options) - 1:
            name = click.prompt("Enter new command set name", type=str, err=True).strip()
            return CommandSetChoice(name=name, is_new=name not in names)
        return CommandSetChoice(name=names[index], is_new=False)

    def ask_commands(self, name: str) -> list[str]:
        raw = click.prompt(f"Enter commands for '{name}' (comma-separated)", type=str, err=True)
        return parse_command_list(raw)
