"""Environment store used on platforms without a machine-wide PATH store."""

import os
import sys

from javaver.core.environment.abc import SystemEnvironment
from javaver.core.errors import UnsupportedPlatformError


class UnsupportedSystemEnvironment(SystemEnvironment):
    """Refuses every machine-wide operation with UnsupportedPlatformError.

    Commands that only touch the registry (add, rm, list, auto) keep working;
    sel and current fail with a clear message.
    """

    def __init__(self, platform: str | None = None) -> None:
        self._platform = platform if platform is not None else sys.platform

    @property
    def path_separator(self) -> str:
        return os.pathsep

    def read_path(self) -> str:
        raise UnsupportedPlatformError(self._platform)

    def write_path(self, value: str) -> None:
        raise UnsupportedPlatformError(self._platform)

    def broadcast_change(self) -> bool:
        return False

    def set_process_variable(self, name: str, value: str) -> None:
        os.environ[name] = value
