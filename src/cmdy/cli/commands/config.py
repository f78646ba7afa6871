"""Config command implementation for user-level settings."""

import click

from cmdy.cli.ensure import Ensure
from cmdy.cli.output import machine_output, user_output
from cmdy.core.context import CmdyContext
from cmdy.core.settings import SETTINGS_KEYS, save_setting, settings_path


def _ensure_known_key(key: str) -> None:
    Ensure.invariant(
        key in SETTINGS_KEYS,
        f"Invalid key: {key}\nValid keys: {', '.join(SETTINGS_KEYS)}",
    )


@click.group("config")
def config_group() -> None:
    """Manage cmdy settings."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: CmdyContext) -> None:
    """Print a list of settings keys and values."""
    user_output(click.style(f"Settings ({settings_path()}):", bold=True))
    for key in SETTINGS_KEYS:
        machine_output(f"  {key}={ctx.settings.get(key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: CmdyContext, key: str) -> None:
    """Print the value of a given settings key."""
    _ensure_known_key(key)
    machine_output(ctx.settings.get(key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
def config_set(key: str, value: str) -> None:
    """Update settings with a value for the given key."""
    _ensure_known_key(key)
    Ensure.not_empty(value.strip(), f"Value for {key} cannot be empty")
    save_setting(key, value)
    user_output(f"Set {key}={value}")
