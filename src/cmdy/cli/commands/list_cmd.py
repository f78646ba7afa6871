"""List command implementation."""

import click
from rich.console import Console
from rich.table import Table

from cmdy.cli.ensure import Ensure
from cmdy.cli.output import user_output
from cmdy.core.context import CmdyContext


@click.command("list")
@click.pass_obj
def list_cmd(ctx: CmdyContext) -> None:
    """List stored command sets and saved directories."""
    config = Ensure.config_loaded(ctx.config_store)

    if not config.command_sets:
        user_output("No command sets stored.")
    else:
        table = Table(title="📌 Stored Command Sets", show_lines=False)
        table.add_column("#", justify="right", no_wrap=True)
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Commands")
        for number, command_set in enumerate(config.command_sets, start=1):
            commands = "\n".join(command_set.commands) if command_set.commands else "(none)"
            table.add_row(str(number), command_set.name, commands)
        Console().print(table)

    if config.directories:
        user_output(click.style("\nSaved directories:", bold=True))
        for directory in config.directories:
            user_output(f"  {directory}")
