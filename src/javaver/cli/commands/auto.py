"""Auto command implementation - discovers installed SDKs."""

from pathlib import Path

import click

from javaver.cli.output import user_output
from javaver.core.context import JavaverContext
from javaver.core.discovery import SearchDirResult, discover_sdks, search_dirs_for


def _render_search_dir(result: SearchDirResult) -> None:
    user_output(f"Searching in: {result.search_dir}")

    if not result.exists:
        user_output("  Path does not exist. Skipping...")
        return

    if result.error is not None:
        user_output(
            click.style(
                f"  Error encountered while trying to fetch subdirectories: {result.error}",
                fg="red",
            )
        )
        user_output("  Skipping...")
        return

    for entry in result.added:
        message = f"  Successfully added: '{entry.path}' under the name '{entry.name}'."
        user_output(click.style(message, fg="green"))
    for entry in result.duplicates:
        user_output(
            click.style(
                f"  SDK under the name '{entry.name}' has already been added. "
                f"Please choose a different name and add the SDK manually.",
                fg="yellow",
            )
        )
    for candidate in result.invalid:
        user_output(
            click.style(f"  {candidate.name} is not a Java SDK path. Skipping...", dim=True)
        )


@click.command("auto")
@click.argument("search_path", required=False, type=click.Path(path_type=Path))
@click.pass_obj
def auto_cmd(ctx: JavaverContext, search_path: Path | None) -> None:
    """Automatically search for SDKs to add in directories.

    Scans the standard install locations, any search_dirs from the global
    config, and SEARCH_PATH if given.
    """
    search_dirs = search_dirs_for(list(ctx.global_config.search_dirs), search_path)
    report = discover_sdks(ctx.registry, search_dirs)

    for result in report.results:
        _render_search_dir(result)

    user_output(f"Added {len(report.added)} SDK(s).")
