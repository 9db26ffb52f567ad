"""End-to-end tests that build the real context from $JAVAVER_HOME."""

import json
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from javaver.cli.cli import cli
from tests.test_utils.sdk_helpers import make_sdk_root


def test_add_then_list_persists_registry_file(tmp_path: Path) -> None:
    home = tmp_path / "home"
    sdk_root = make_sdk_root(tmp_path, "jdk-21")
    env = {"JAVAVER_HOME": str(home)}

    runner = CliRunner()
    add_result = runner.invoke(cli, ["add", "jdk-21", str(sdk_root)], env=env)
    list_result = runner.invoke(cli, ["list", "--json"], env=env)

    assert add_result.exit_code == 0, add_result.output
    assert list_result.exit_code == 0, list_result.output
    data = json.loads((home / "javaver-config.json").read_text(encoding="utf-8"))
    assert data == {"sdk": [{"name": "jdk-21", "path": str(sdk_root.resolve())}]}
    assert json.loads(list_result.output)["sdks"][0]["name"] == "jdk-21"


def test_corrupt_registry_aborts_before_command_runs(tmp_path: Path) -> None:
    registry_file = tmp_path / "javaver-config.json"
    registry_file.write_text("{not json", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["list"], env={"JAVAVER_HOME": str(tmp_path)})

    assert result.exit_code == 6
    assert "Failed to read SDK registry" in result.output
    assert registry_file.read_text(encoding="utf-8") == "{not json"


def test_malformed_config_is_reported(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("search_dirs = 5\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["list"], env={"JAVAVER_HOME": str(tmp_path)})

    assert result.exit_code == 10
    assert "search_dirs" in result.output


def test_dry_run_does_not_create_registry_file(tmp_path: Path) -> None:
    sdk_root = make_sdk_root(tmp_path, "jdk-21")
    home = tmp_path / "home"

    runner = CliRunner()
    result = runner.invoke(
        cli, ["--dry-run", "add", "jdk-21", str(sdk_root)], env={"JAVAVER_HOME": str(home)}
    )

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would save 1 SDK(s)" in result.output
    assert not (home / "javaver-config.json").exists()


@pytest.mark.skipif(sys.platform == "win32", reason="switching is supported on Windows")
def test_sel_on_unsupported_platform(tmp_path: Path) -> None:
    sdk_root = make_sdk_root(tmp_path, "jdk-21")
    env = {"JAVAVER_HOME": str(tmp_path / "home")}

    runner = CliRunner()
    runner.invoke(cli, ["add", "jdk-21", str(sdk_root)], env=env)
    result = runner.invoke(cli, ["sel", "jdk-21"], env=env)

    assert result.exit_code == 9
    assert sys.platform in result.output


def test_help_lists_sections(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"], env={"JAVAVER_HOME": str(tmp_path)})

    assert result.exit_code == 0
    assert "SDK Selection:" in result.output
    assert "Registry:" in result.output
