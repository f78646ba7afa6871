"""Tests for CLI help formatter sections."""

import click
from click.testing import CliRunner

from cmdy.cli.cli import cli
from cmdy.cli.help_formatter import GroupedCommandGroup


def test_help_groups_commands_into_sections() -> None:
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    output = result.output
    assert output.index("Command Sets:") < output.index("History:") < output.index("Setup:")
    command_sets = output[output.index("Command Sets:") : output.index("History:")]
    assert "run" in command_sets
    assert "delete" in command_sets


def test_unknown_commands_go_to_other_section() -> None:
    @click.group(cls=GroupedCommandGroup)
    def group() -> None:
        """Test group."""

    @group.command("run")
    def run() -> None:
        """Run things."""

    @group.command("extra")
    def extra() -> None:
        """Something else."""

    @group.command("secret", hidden=True)
    def secret() -> None:
        """Hidden."""

    result = CliRunner().invoke(group, ["--help"])

    assert "Command Sets:" in result.output
    assert "Other:" in result.output
    assert "extra" in result.output
    assert "secret" not in result.output
