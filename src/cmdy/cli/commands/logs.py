"""Logs command implementation."""

import click

from cmdy.cli.ensure import fail
from cmdy.cli.output import machine_output, user_output
from cmdy.core.context import CmdyContext
from cmdy.core.errors import LogReadError


@click.command("logs")
@click.pass_obj
def logs_cmd(ctx: CmdyContext) -> None:
    """Show the execution log."""
    try:
        content = ctx.log_writer.read()
    except LogReadError as e:
        fail(str(e))
    if not content:
        user_output("No logs found.")
        return

    user_output(click.style(f"📜 Execution Logs ({ctx.log_writer.path()}):", bold=True))
    machine_output(content.rstrip("\n"))
