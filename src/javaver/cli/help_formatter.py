"""Custom Click group: sectioned help output and the domain error boundary."""

import click

from javaver.cli.output import user_output
from javaver.core.errors import JavaverError


class JavaverGroup(click.Group):
    """Click Group that organizes commands into sections and reports domain errors.

    Commands are organized into sections based on their usage patterns:
    - SDK Selection: switching and inspecting the active SDK
    - Registry: managing the list of known SDKs
    - Command Groups: organized subcommands

    Any JavaverError escaping a command (or context creation) is printed as a
    one-line styled message and turned into the error's exit code.
    """

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except JavaverError as e:
            user_output(click.style(f"{e.label}: ", fg="red") + str(e))
            raise SystemExit(e.exit_code) from None

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd))

        if not commands:
            return

        selection = ["sel", "current"]
        registry = ["add", "rm", "list", "auto"]

        selection_cmds = []
        registry_cmds = []
        group_cmds = []
        for name, cmd in commands:
            if name in selection:
                selection_cmds.append((name, cmd))
            elif name in registry:
                registry_cmds.append((name, cmd))
            else:
                group_cmds.append((name, cmd))

        if selection_cmds:
            with formatter.section("SDK Selection"):
                self._format_command_list(ctx, formatter, selection_cmds)

        if registry_cmds:
            with formatter.section("Registry"):
                self._format_command_list(ctx, formatter, registry_cmds)

        if group_cmds:
            with formatter.section("Command Groups"):
                self._format_command_list(ctx, formatter, group_cmds)

    def _format_command_list(
        self,
        ctx: click.Context,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = []
        for name, cmd in commands:
            help_text = cmd.get_short_help_str(limit=formatter.width)
            rows.append((name, help_text))

        if rows:
            formatter.write_dl(rows)
