"""Tests for the current command."""

from pathlib import Path

from click.testing import CliRunner

from javaver.cli.cli import cli
from javaver.core.registry import SdkEntry
from tests.fakes.context import create_test_context
from tests.fakes.registry_store import FakeRegistryStore
from tests.fakes.system_environment import FakeSystemEnvironment

JDK_11 = SdkEntry(name="jdk-11", path=Path("/opt/jdk-11"))
JDK_17 = SdkEntry(name="jdk-17", path=Path("/opt/jdk-17"))


def test_current_prints_sdk_earliest_on_path() -> None:
    env = FakeSystemEnvironment(path=f"/usr/bin;{JDK_17.bin_dir};{JDK_11.bin_dir}")
    ctx = create_test_context(
        environment=env, registry_store=FakeRegistryStore(entries=[JDK_11, JDK_17])
    )

    runner = CliRunner()
    result = runner.invoke(cli, ["current"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "jdk-17"


def test_current_follows_sel() -> None:
    env = FakeSystemEnvironment(path=f"{JDK_11.bin_dir}")
    ctx = create_test_context(
        environment=env, registry_store=FakeRegistryStore(entries=[JDK_11, JDK_17])
    )

    runner = CliRunner()
    runner.invoke(cli, ["sel", "jdk-17"], obj=ctx)
    result = runner.invoke(cli, ["current"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.strip() == "jdk-17"


def test_current_without_registered_sdk_on_path_exits_1() -> None:
    env = FakeSystemEnvironment(path="/usr/bin")
    ctx = create_test_context(environment=env, registry_store=FakeRegistryStore(entries=[JDK_11]))

    runner = CliRunner()
    result = runner.invoke(cli, ["current"], obj=ctx)

    assert result.exit_code == 1
    assert result.output == ""
