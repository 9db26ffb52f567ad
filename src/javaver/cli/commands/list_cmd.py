"""List command implementation - shows registered SDKs."""

import click

from javaver.cli.json_output import emit_json
from javaver.cli.json_schemas import ListCommandResponse, SdkInfo
from javaver.cli.output import user_output
from javaver.core.context import JavaverContext


@click.command("list")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
def list_cmd(ctx: JavaverContext, output_json: bool) -> None:
    """List all added SDKs."""
    if output_json:
        response = ListCommandResponse(
            registry_path=str(ctx.registry_store.path()),
            sdks=[SdkInfo(name=entry.name, path=str(entry.path)) for entry in ctx.registry],
        )
        emit_json(response.model_dump(mode="json"))
        return

    if not ctx.registry:
        user_output("There are no SDKs added.")
        return

    user_output("Displaying all SDKs:")
    for entry in ctx.registry:
        user_output(f"{click.style(entry.name, fg='cyan', bold=True)}: {entry.path}")
