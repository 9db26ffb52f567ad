"""Tests for the rm command."""

from pathlib import Path

from click.testing import CliRunner

from javaver.cli.cli import cli
from javaver.core.registry import SdkEntry
from tests.fakes.context import create_test_context
from tests.fakes.registry_store import FakeRegistryStore

JDK_11 = SdkEntry(name="jdk-11", path=Path("/opt/jdk-11"))
JDK_17 = SdkEntry(name="jdk-17", path=Path("/opt/jdk-17"))


def test_rm_removes_entry_and_persists() -> None:
    store = FakeRegistryStore(entries=[JDK_11, JDK_17])
    ctx = create_test_context(registry_store=store)

    runner = CliRunner()
    result = runner.invoke(cli, ["rm", "jdk-11"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Successfully removed 'jdk-11'" in result.output
    assert store.persisted_names == ["jdk-17"]


def test_rm_matches_name_case_insensitively() -> None:
    store = FakeRegistryStore(entries=[JDK_17])
    ctx = create_test_context(registry_store=store)

    runner = CliRunner()
    result = runner.invoke(cli, ["rm", "JDK-17"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert store.persisted_names == []


def test_rm_unknown_name_fails_without_saving() -> None:
    store = FakeRegistryStore(entries=[JDK_11])
    ctx = create_test_context(registry_store=store)

    runner = CliRunner()
    result = runner.invoke(cli, ["rm", "jdk-8"], obj=ctx)

    assert result.exit_code == 4
    assert "There is no SDK added named 'jdk-8'" in result.output
    assert store.saved == []
    assert ctx.registry.names == ["jdk-11"]
