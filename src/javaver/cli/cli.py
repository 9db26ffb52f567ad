import logging
import os

import click

from javaver.cli.commands.add import add_cmd
from javaver.cli.commands.auto import auto_cmd
from javaver.cli.commands.config import config_group
from javaver.cli.commands.current import current_cmd
from javaver.cli.commands.list_cmd import list_cmd
from javaver.cli.commands.rm import rm_cmd
from javaver.cli.commands.sel import sel_cmd
from javaver.cli.help_formatter import JavaverGroup
from javaver.core.context import JavaverContext, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "JAVAVER_DEBUG"


def configure_logging() -> None:
    """Enable debug logging if JAVAVER_DEBUG environment variable is set."""
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(cls=JavaverGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="javaver")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print system PATH, registry and config writes instead of performing them.",
)
@click.pass_context
def cli(ctx: click.Context, dry_run: bool) -> None:
    """Register installed Java SDKs and switch the system-wide active one."""
    configure_logging()
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)


@cli.result_callback()
@click.pass_obj
def persist_registry(ctx: JavaverContext, result: object, **kwargs: object) -> None:
    """Write the registry back after a command completes without error."""
    ctx.registry_store.save(ctx.registry)


cli.add_command(add_cmd)
cli.add_command(auto_cmd)
cli.add_command(config_group)
cli.add_command(current_cmd)
cli.add_command(list_cmd)
cli.add_command(rm_cmd)
cli.add_command(sel_cmd)


def main() -> None:
    """CLI entry point used by the `javaver` console script."""
    cli()
