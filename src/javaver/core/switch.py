"""Active-SDK switching.

Makes one registered SDK the one resolved by ``java`` for every process
launched after the switch, by moving its bin directory to the front of the
machine-wide PATH.

The sequence is a read-modify-write of PATH with no locking: another writer
between read_path() and write_path() loses its change. javaver is run
interactively by one user at a time, so this race is accepted.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from javaver.core.environment.abc import SystemEnvironment
from javaver.core.errors import EnvironmentPermissionError
from javaver.core.registry import Registry, SdkEntry

logger = logging.getLogger(__name__)

JAVA_HOME = "JAVA_HOME"


@dataclass(frozen=True)
class SwitchResult:
    """Outcome of a successful switch.

    Attributes:
        entry: The activated SDK
        path_entries: PATH entries as written to the environment store
        java_home: Value of JAVA_HOME for the current process (the SDK root, not bin/)
        broadcast_delivered: Whether running processes were notified
    """

    entry: SdkEntry
    path_entries: list[str]
    java_home: Path
    broadcast_delivered: bool


def split_path_value(value: str, separator: str) -> list[str]:
    """Split a raw PATH value into entries.

    An empty value yields no entries. Empty segments inside a non-empty value
    (e.g. a trailing separator) are kept so the value round-trips unchanged.
    """
    if not value:
        return []
    return value.split(separator)


def _same_dir(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


def move_to_front(entries: list[str], target: str) -> list[str]:
    """Return entries with target first and the first matching occurrence removed.

    Matching is case-insensitive. Only the first match found scanning left to
    right is removed; later duplicates and every other entry keep their
    relative order.

    Example:
        >>> move_to_front(["A", "B", "t", "C"], "T")
        ['T', 'A', 'B', 'C']
    """
    result = list(entries)
    for index, existing in enumerate(result):
        if _same_dir(existing, target):
            del result[index]
            break
    result.insert(0, target)
    return result


def java_home_for(entry: SdkEntry) -> Path:
    return entry.path


def activate_sdk(registry: Registry, name: str, environment: SystemEnvironment) -> SwitchResult:
    """Make the named SDK authoritative on the machine-wide PATH.

    Steps: resolve the entry, move its bin directory to the front of PATH,
    write PATH back in one overwrite, broadcast the change. JAVA_HOME is not
    assigned here; the returned java_home is applied by the caller.

    Args:
        registry: Registry to resolve name against
        name: SDK name (case-insensitive)
        environment: Machine-wide environment store

    Returns:
        SwitchResult describing the new state

    Raises:
        UnknownSdkError: If name is not registered; nothing is read or written
        EnvironmentPermissionError: If the PATH write is rejected; no
            broadcast is sent
    """
    entry = registry.get(name)
    target_bin = str(entry.bin_dir)

    separator = environment.path_separator
    current = split_path_value(environment.read_path(), separator)
    updated = move_to_front(current, target_bin)
    logger.debug("PATH before switch: %s", current)
    logger.debug("PATH after switch: %s", updated)

    try:
        environment.write_path(separator.join(updated))
    except OSError as e:
        raise EnvironmentPermissionError("Path", e) from e

    delivered = environment.broadcast_change()
    if not delivered:
        logger.debug("Environment change broadcast was not delivered to running processes")

    return SwitchResult(
        entry=entry,
        path_entries=updated,
        java_home=java_home_for(entry),
        broadcast_delivered=delivered,
    )


def find_active_sdk(registry: Registry, path_entries: list[str]) -> SdkEntry | None:
    """Return the registered SDK whose bin directory appears earliest on PATH.

    Returns:
        The matching entry, or None if no registered SDK is on PATH
    """
    for path_entry in path_entries:
        for entry in registry:
            if _same_dir(path_entry, str(entry.bin_dir)):
                return entry
    return None
