import os
from dataclasses import replace
from pathlib import Path

import click

from javaver.cli.ensure import Ensure
from javaver.cli.output import machine_output, user_output
from javaver.core.context import JavaverContext
from javaver.core.global_config import GlobalConfig

CONFIG_KEYS = ("registry_path", "search_dirs")


def _format_value(config: GlobalConfig, key: str) -> str:
    match key:
        case "registry_path":
            return str(config.registry_path)
        case "search_dirs":
            return os.pathsep.join(str(d) for d in config.search_dirs)
        case _:
            Ensure.invariant(False, f"Invalid key: {key}")
            return ""


def _update_global_config_field(current_config: GlobalConfig, key: str, value: str) -> GlobalConfig:
    """Return a new GlobalConfig with one field replaced.

    search_dirs values are separated by the OS path-list separator; an empty
    value clears the list.
    """
    match key:
        case "registry_path":
            Ensure.invariant(bool(value), "registry_path must not be empty.")
            return replace(current_config, registry_path=Path(value).expanduser())
        case "search_dirs":
            dirs = tuple(Path(part).expanduser() for part in value.split(os.pathsep) if part)
            return replace(current_config, search_dirs=dirs)
        case _:
            Ensure.invariant(False, f"Invalid key: {key}")
            return current_config


@click.group("config")
def config_group() -> None:
    """Manage javaver configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: JavaverContext) -> None:
    """Print a list of configuration keys and values."""
    user_output(click.style("Global configuration:", bold=True))
    if not ctx.config_ops.exists():
        user_output(f"  (using defaults - no config file at {ctx.config_ops.path()})")
    for key in CONFIG_KEYS:
        user_output(f"  {key}={_format_value(ctx.global_config, key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: JavaverContext, key: str) -> None:
    """Print the value of a given configuration key."""
    Ensure.invariant(key in CONFIG_KEYS, f"Invalid key: {key}")
    machine_output(_format_value(ctx.global_config, key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: JavaverContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    Ensure.invariant(key in CONFIG_KEYS, f"Invalid key: {key}")

    new_config = _update_global_config_field(ctx.global_config, key, value)
    ctx.config_ops.save(new_config)
    user_output(f"Set {key}={_format_value(new_config, key)}")
