"""Domain errors for javaver operations.

Every error kind carries its own process exit code so scripts can tell
failures apart. The CLI group catches JavaverError at the boundary and exits
with ``exit_code``; core code never prints or exits on its own.

Exit codes:
    3  DuplicateNameError
    4  UnknownSdkError
    5  InvalidSdkPathError
    6  DeserializeError
    7  RegistryWriteError
    8  EnvironmentPermissionError
    9  UnsupportedPlatformError
    10 ConfigError
"""

from pathlib import Path


class JavaverError(Exception):
    """Base class for all errors reported to the user without a stack trace."""

    exit_code: int = 1
    label: str = "Error"


class DuplicateNameError(JavaverError):
    """An SDK with the same name is already registered."""

    exit_code = 3

    def __init__(self, name: str) -> None:
        super().__init__(f"The name '{name}' is already in use.")
        self.name = name


class UnknownSdkError(JavaverError):
    """No registered SDK has the requested name."""

    exit_code = 4

    def __init__(self, name: str) -> None:
        super().__init__(f"There is no SDK added named '{name}'.")
        self.name = name


class InvalidSdkPathError(JavaverError):
    """A path failed SDK root validation."""

    exit_code = 5

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class DeserializeError(JavaverError):
    """The persisted registry file exists but cannot be read back."""

    exit_code = 6

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Failed to read SDK registry at {path} - quitting.\n{detail}")
        self.path = path


class RegistryWriteError(JavaverError):
    """The registry could not be written back to disk."""

    exit_code = 7
    label = "Warning"

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(
            f"Failed to write SDK registry to {path}. "
            f"Changes to the SDK list have not been saved.\n{cause}"
        )
        self.path = path


class EnvironmentPermissionError(JavaverError):
    """The machine-wide environment store rejected a write."""

    exit_code = 8

    def __init__(self, variable: str, cause: OSError) -> None:
        super().__init__(
            f"Error when modifying system-wide '{variable}' environment variable: {cause}\n"
            f"Changing machine-wide variables requires administrator rights. "
            f"Re-run javaver from an elevated terminal."
        )
        self.variable = variable


class UnsupportedPlatformError(JavaverError):
    """The machine-wide environment store is not available on this OS."""

    exit_code = 9

    def __init__(self, platform: str) -> None:
        super().__init__(
            f"Switching the system-wide Java SDK is only supported on Windows "
            f"(current platform: {platform})."
        )
        self.platform = platform


class ConfigError(JavaverError):
    """The global config file is malformed."""

    exit_code = 10
