"""Custom Click help formatter for organized command display."""

import click

COMMAND_SECTIONS: list[tuple[str, list[str]]] = [
    ("Command Sets", ["run", "list", "delete"]),
    ("History", ["logs"]),
    ("Setup", ["config", "help"]),
]


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into sections in help output.

    Commands not named in COMMAND_SECTIONS are listed under "Other".
    """

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands: dict[str, click.Command] = {}
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands[subcommand] = cmd

        if not commands:
            return

        placed: set[str] = set()
        for title, names in COMMAND_SECTIONS:
            section = [(name, commands[name]) for name in names if name in commands]
            placed.update(name for name, _ in section)
            if section:
                with formatter.section(title):
                    self._format_command_list(formatter, section)

        other = [(name, cmd) for name, cmd in commands.items() if name not in placed]
        if other:
            with formatter.section("Other"):
                self._format_command_list(formatter, other)

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = [(name, cmd.get_short_help_str(limit=formatter.width)) for name, cmd in commands]
        if rows:
            formatter.write_dl(rows)
