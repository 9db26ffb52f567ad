"""Tests for SDK root validation."""

from pathlib import Path

import pytest

from javaver.core.errors import InvalidSdkPathError
from javaver.core.validation import (
    is_valid_sdk_root,
    java_executable_name,
    validate_sdk_root,
)
from tests.test_utils.sdk_helpers import make_sdk_root


def test_java_executable_name_per_platform() -> None:
    assert java_executable_name("win32") == "java.exe"
    assert java_executable_name("linux") == "java"
    assert java_executable_name("darwin") == "java"


def test_sdk_root_with_java_launcher_is_valid(tmp_path: Path) -> None:
    root = make_sdk_root(tmp_path, "jdk-17")

    assert is_valid_sdk_root(root)
    validate_sdk_root(root)


def test_missing_path_is_invalid(tmp_path: Path) -> None:
    missing = tmp_path / "nope"

    assert not is_valid_sdk_root(missing)
    with pytest.raises(InvalidSdkPathError) as exc_info:
        validate_sdk_root(missing)

    assert "doesn't exist" in str(exc_info.value)
    assert exc_info.value.exit_code == 5


def test_directory_without_launcher_is_invalid(tmp_path: Path) -> None:
    jre_like = tmp_path / "not-a-jdk"
    (jre_like / "bin").mkdir(parents=True)

    assert not is_valid_sdk_root(jre_like)
    with pytest.raises(InvalidSdkPathError) as exc_info:
        validate_sdk_root(jre_like)

    assert "not a JDK installation" in str(exc_info.value)
