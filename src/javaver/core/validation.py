"""SDK root validation.

A directory is a usable SDK root when it exists and contains bin/java
(bin/java.exe on Windows). Validation happens at add-time only; the switch
trusts entries that are already registered.
"""

import sys
from pathlib import Path

from javaver.core.errors import InvalidSdkPathError


def java_executable_name(platform: str | None = None) -> str:
    """Name of the java launcher inside an SDK's bin directory."""
    platform = platform if platform is not None else sys.platform
    if platform == "win32":
        return "java.exe"
    return "java"


def java_executable_path(sdk_root: Path) -> Path:
    return sdk_root / "bin" / java_executable_name()


def is_valid_sdk_root(path: Path) -> bool:
    return path.exists() and java_executable_path(path).exists()


def validate_sdk_root(path: Path) -> None:
    """Check that path is an SDK installation root.

    Raises:
        InvalidSdkPathError: If the path does not exist or has no java launcher
    """
    if not path.exists():
        raise InvalidSdkPathError(path, "Provided path doesn't exist")
    if not java_executable_path(path).exists():
        raise InvalidSdkPathError(path, "Provided path is not a JDK installation")
