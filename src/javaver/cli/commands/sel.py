"""Sel command implementation - switches the system-wide active SDK."""

import click

from javaver.cli.ensure import Ensure
from javaver.cli.output import user_output
from javaver.core.context import JavaverContext
from javaver.core.registry import Registry
from javaver.core.switch import JAVA_HOME, activate_sdk


def prompt_for_sdk(registry: Registry) -> str:
    """Show registered SDKs as a numbered list and return the chosen name."""
    Ensure.invariant(
        bool(registry),
        "There are no SDKs added. Use 'javaver add' or 'javaver auto' first.",
    )

    user_output("Choose existing SDK from the list:")
    entries = registry.entries
    for index, entry in enumerate(entries, start=1):
        user_output(f"  {index}. {entry.name} ({entry.path})")

    choice = click.prompt("Selection", type=click.IntRange(1, len(entries)), err=True)
    return entries[choice - 1].name


@click.command("sel")
@click.argument("name", required=False)
@click.pass_obj
def sel_cmd(ctx: JavaverContext, name: str | None) -> None:
    """Select an added SDK as current.

    Moves the SDK's bin directory to the front of the system-wide PATH and
    sets JAVA_HOME for this process. Without NAME, pick from a list.
    Requires administrator rights.
    """
    if name is None:
        name = prompt_for_sdk(ctx.registry)

    result = activate_sdk(ctx.registry, name, ctx.environment)
    # JAVA_HOME only reaches this process and its children, not running shells
    ctx.environment.set_process_variable(JAVA_HOME, str(result.java_home))

    user_output(
        click.style(f"Successfully selected '{result.entry.name}' as current Java SDK", fg="green")
    )
    if not result.broadcast_delivered:
        user_output("Open a new terminal for the PATH change to take effect.")
