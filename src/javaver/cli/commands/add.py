"""Add command implementation - registers an SDK manually."""

from pathlib import Path

import click

from javaver.cli.ensure import Ensure
from javaver.cli.output import user_output
from javaver.core.context import JavaverContext
from javaver.core.registry import SdkEntry
from javaver.core.validation import validate_sdk_root


@click.command("add")
@click.argument("name")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def add_cmd(ctx: JavaverContext, name: str, path: Path) -> None:
    """Manually add an SDK.

    NAME is the short name used with `javaver sel`. PATH is the SDK
    installation root (the directory containing bin/).
    """
    Ensure.invariant(bool(name.strip()), "SDK name must not be empty.")

    sdk_root = path.expanduser().resolve()
    # Validate before touching the registry so a bad path never gets persisted
    validate_sdk_root(sdk_root)
    ctx.registry.add(SdkEntry(name=name, path=sdk_root))

    user_output(f"Successfully added '{sdk_root}' under the name '{name}'.")
