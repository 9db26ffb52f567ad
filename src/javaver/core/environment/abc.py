"""Machine-wide environment store abstraction.

The switch algorithm only talks to this interface, so it can run against an
in-memory fake in tests instead of the operating system's store.
"""

from abc import ABC, abstractmethod


class SystemEnvironment(ABC):
    """Abstract access to the machine-wide PATH and to process variables."""

    @property
    @abstractmethod
    def path_separator(self) -> str:
        """Separator between PATH entries (";" on Windows)."""
        ...

    @abstractmethod
    def read_path(self) -> str:
        """Read the raw machine-wide PATH value.

        Returns:
            The stored value, or "" if PATH is not set
        """
        ...

    @abstractmethod
    def write_path(self, value: str) -> None:
        """Overwrite the machine-wide PATH value in a single write.

        Args:
            value: Complete new PATH value

        Raises:
            OSError: If the store rejects the write (commonly PermissionError)
        """
        ...

    @abstractmethod
    def broadcast_change(self) -> bool:
        """Notify running processes that the environment changed.

        Best-effort only.

        Returns:
            True if the notification was delivered, False otherwise
        """
        ...

    @abstractmethod
    def set_process_variable(self, name: str, value: str) -> None:
        """Set a variable for the current process and the children it spawns.

        Does not affect already-running shells or the machine-wide store.
        """
        ...
