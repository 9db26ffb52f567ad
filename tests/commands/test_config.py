"""Tests for the config command group."""

import os
from pathlib import Path

from click.testing import CliRunner

from javaver.cli.cli import cli
from javaver.core.global_config import InMemoryGlobalConfigOps
from tests.fakes.context import build_global_config, create_test_context


def test_config_list_shows_defaults_when_no_file() -> None:
    ctx = create_test_context()

    runner = CliRunner()
    result = runner.invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Global configuration:" in result.output
    assert "using defaults" in result.output
    assert f"registry_path={Path('/fake/javaver/javaver-config.json')}" in result.output
    assert "search_dirs=" in result.output


def test_config_get_prints_value() -> None:
    config = build_global_config(Path("/data/registry.json"), search_dirs=(Path("/a"), Path("/b")))
    ctx = create_test_context(config_ops=InMemoryGlobalConfigOps(config))

    runner = CliRunner()
    result = runner.invoke(cli, ["config", "get", "search_dirs"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output.strip() == os.pathsep.join([str(Path("/a")), str(Path("/b"))])


def test_config_set_search_dirs_saves_config() -> None:
    config_ops = InMemoryGlobalConfigOps()
    ctx = create_test_context(config_ops=config_ops)
    value = os.pathsep.join(["/srv/jdks", "/opt/java"])

    runner = CliRunner()
    result = runner.invoke(cli, ["config", "set", "search_dirs", value], obj=ctx)

    assert result.exit_code == 0, result.output
    assert config_ops.exists()
    assert config_ops.load().search_dirs == (Path("/srv/jdks"), Path("/opt/java"))


def test_config_set_registry_path_saves_config() -> None:
    config_ops = InMemoryGlobalConfigOps()
    ctx = create_test_context(config_ops=config_ops)

    runner = CliRunner()
    result = runner.invoke(
        cli, ["config", "set", "registry_path", "/data/registry.json"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert config_ops.load().registry_path == Path("/data/registry.json")


def test_config_rejects_unknown_key() -> None:
    ctx = create_test_context()

    runner = CliRunner()
    result = runner.invoke(cli, ["config", "get", "editor"], obj=ctx)

    assert result.exit_code == 1
    assert "Invalid key: editor" in result.output


def test_config_set_dry_run_leaves_config_unchanged() -> None:
    config_ops = InMemoryGlobalConfigOps()
    ctx = create_test_context(config_ops=config_ops, dry_run=True)

    runner = CliRunner()
    result = runner.invoke(cli, ["config", "set", "registry_path", "/data/registry.json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would write global config" in result.output
    assert not config_ops.exists()
