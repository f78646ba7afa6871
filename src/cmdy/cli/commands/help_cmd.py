"""Help command implementation."""

import click

from cmdy.cli.output import machine_output


@click.command("help")
@click.pass_context
def help_cmd(click_ctx: click.Context) -> None:
    """Show this help message."""
    parent = click_ctx.parent if click_ctx.parent is not None else click_ctx
    machine_output(parent.get_help())
