"""Delete command implementation."""

import click

from cmdy.cli.ensure import Ensure, fail
from cmdy.cli.output import user_output
from cmdy.core.context import CmdyContext
from cmdy.core.errors import CommandSetNotFoundError


@click.command("delete")
@click.argument("name", metavar="NAME")
@click.pass_obj
def delete_cmd(ctx: CmdyContext, name: str) -> None:
    """Delete the command set NAME."""
    config = Ensure.config_loaded(ctx.config_store)

    try:
        updated = config.without_command_set(name)
    except CommandSetNotFoundError as e:
        fail(str(e))

    ctx.config_store.save(updated)
    user_output(f"🗑️ Deleted command set: {name}")
