import logging
import os

import click

from cmdy.cli.commands.config import config_group
from cmdy.cli.commands.delete import delete_cmd
from cmdy.cli.commands.help_cmd import help_cmd
from cmdy.cli.commands.list_cmd import list_cmd
from cmdy.cli.commands.logs import logs_cmd
from cmdy.cli.commands.run import run_cmd
from cmdy.cli.ensure import fail
from cmdy.cli.help_formatter import GroupedCommandGroup
from cmdy.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if CMDY_DEBUG environment variable is set
if os.getenv("CMDY_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(cls=GroupedCommandGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="cmdy")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Save sets of shell commands and replay them in your directories."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            fail(str(e))


cli.add_command(run_cmd)
cli.add_command(list_cmd)
cli.add_command(logs_cmd)
cli.add_command(delete_cmd)
cli.add_command(help_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `cmdy` console script."""
    cli()
