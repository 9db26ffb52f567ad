"""Output utilities for CLI commands with clear intent.

Human-readable messages go to stderr via user_output(); data meant for other
programs (e.g. ``list --json``) goes to stdout via machine_output().
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a message for the person at the terminal (stderr)."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Print data for programs consuming javaver output (stdout)."""
    click.echo(message, nl=nl)
