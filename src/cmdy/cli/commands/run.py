"""Run command implementation."""

import logging
from pathlib import Path

import click
from rich.console import Console

from cmdy.cli.ensure import Ensure, fail
from cmdy.cli.output import ConsoleProgress, format_run_summary, user_output
from cmdy.core.context import CmdyContext
from cmdy.core.errors import LogWriteError
from cmdy.core.types import CmdyConfig, CommandSet

logger = logging.getLogger(__name__)


def _to_working_dir(ctx: CmdyContext, raw: str) -> Path:
    """Expand ~ and resolve relative paths against the invocation directory."""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = ctx.cwd / path
    return path


def _resolve_directory(
    ctx: CmdyContext, config: CmdyConfig, directory: str | None
) -> tuple[CmdyConfig, Path]:
    """Pick the working directory from --dir or the directory prompt.

    A newly entered directory is validated and saved to the config.
    """
    if directory is not None:
        working_dir = _to_working_dir(ctx, directory)
        Ensure.directory_exists(working_dir)
        return config, working_dir

    choice = ctx.prompter.choose_directory(ctx.cwd, config.directories)
    Ensure.not_empty(choice.path, "Directory path cannot be empty")
    working_dir = _to_working_dir(ctx, choice.path)
    Ensure.directory_exists(working_dir)

    if choice.is_new:
        config = config.with_directory(str(working_dir))
        ctx.config_store.save(config)
        logger.debug("Saved new directory: %s", working_dir)
    return config, working_dir


def _resolve_command_set(
    ctx: CmdyContext, config: CmdyConfig, set_name: str | None
) -> tuple[CmdyConfig, CommandSet]:
    """Pick the command set from --set or the command set prompt.

    Choosing "Create new command set" with an unused name asks for its
    commands and saves the new set before it runs.
    """
    if set_name is not None:
        command_set = Ensure.not_none(
            config.find_command_set(set_name),
            f"Command set '{set_name}' not found. Run 'cmdy list' to see stored sets.",
        )
        return config, command_set

    choice = ctx.prompter.choose_command_set(config.command_set_names())
    Ensure.not_empty(choice.name, "Command set name cannot be empty")

    existing = config.find_command_set(choice.name)
    if existing is not None:
        return config, existing

    commands = ctx.prompter.ask_commands(choice.name)
    Ensure.not_empty(commands, "A command set needs at least one command")
    command_set = CommandSet(name=choice.name, commands=tuple(commands))
    config = config.with_command_set(command_set)
    ctx.config_store.save(config)
    user_output(click.style(f"✓ Saved command set: {command_set.name}", fg="green"))
    return config, command_set


@click.command("run")
@click.option(
    "-d",
    "--dir",
    "directory",
    metavar="PATH",
    help="Run in this directory instead of choosing one interactively.",
)
@click.option(
    "-s",
    "--set",
    "set_name",
    metavar="NAME",
    help="Run this command set instead of choosing one interactively.",
)
@click.pass_obj
def run_cmd(ctx: CmdyContext, directory: str | None, set_name: str | None) -> None:
    """Run a command set in a directory.

    Commands run one after another. A failing command is reported and the
    remaining commands still run. Every run is appended to the log.
    """
    config = Ensure.config_loaded_or_empty(ctx.config_store)
    config, working_dir = _resolve_directory(ctx, config, directory)
    config, command_set = _resolve_command_set(ctx, config, set_name)

    if not command_set.is_runnable:
        fail(f"Command set '{command_set.name}' has no commands")

    user_output(f"\n🚀 Executing command set: {command_set.name}")
    console = Console(stderr=True)
    record = ctx.executor.run(
        command_set.commands,
        working_dir,
        command_set.name,
        progress=ConsoleProgress(console),
    )
    console.print(format_run_summary(record))

    try:
        ctx.log_writer.append(record)
    except LogWriteError as e:
        logger.debug("Log write failed", exc_info=True)
        user_output(click.style("Warning: ", fg="yellow") + str(e))
