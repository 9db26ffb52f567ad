"""Rm command implementation - forgets a registered SDK."""

import click

from javaver.cli.output import user_output
from javaver.core.context import JavaverContext


@click.command("rm")
@click.argument("name")
@click.pass_obj
def rm_cmd(ctx: JavaverContext, name: str) -> None:
    """Remove an already-added SDK from the list."""
    removed = ctx.registry.remove(name)
    user_output(f"Successfully removed '{removed.name}' from the SDK list.")
