"""Dry-run wrapper for the machine-wide environment store."""

from javaver.cli.output import user_output
from javaver.core.environment.abc import SystemEnvironment


class DryRunSystemEnvironment(SystemEnvironment):
    """Delegates reads, prints write intentions instead of executing them.

    Usage:
        real = WindowsSystemEnvironment()
        dry = DryRunSystemEnvironment(real)

        # Prints the new PATH instead of writing it
        dry.write_path("C:\\jdk-17\\bin;C:\\Windows")
    """

    def __init__(self, wrapped: SystemEnvironment) -> None:
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    @property
    def path_separator(self) -> str:
        return self._wrapped.path_separator

    def read_path(self) -> str:
        return self._wrapped.read_path()

    # Destructive operations: print dry-run message instead of executing

    def write_path(self, value: str) -> None:
        user_output(f"[DRY RUN] Would set system-wide PATH to: {value}")

    def broadcast_change(self) -> bool:
        user_output("[DRY RUN] Would broadcast environment change")
        return True

    def set_process_variable(self, name: str, value: str) -> None:
        user_output(f"[DRY RUN] Would set {name}={value}")
