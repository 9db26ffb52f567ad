"""Current command implementation - displays the active SDK name."""

import click

from javaver.cli.output import machine_output
from javaver.core.context import JavaverContext
from javaver.core.switch import find_active_sdk, split_path_value


@click.command("current")
@click.pass_obj
def current_cmd(ctx: JavaverContext) -> None:
    """Show the registered SDK that leads the system-wide PATH."""
    environment = ctx.environment
    path_entries = split_path_value(environment.read_path(), environment.path_separator)
    active = find_active_sdk(ctx.registry, path_entries)

    if active is None:
        raise SystemExit(1)

    machine_output(active.name)
