"""In-memory SDK registry.

The registry is an ordered list of named SDK installations. Names are unique
under case-insensitive comparison; the casing the user typed is kept for
display and persistence.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from javaver.core.errors import DuplicateNameError, UnknownSdkError


@dataclass(frozen=True)
class SdkEntry:
    """A registered SDK installation.

    Attributes:
        name: Short identifier chosen by the user (e.g. "jdk-17")
        path: Absolute path to the SDK installation root (the directory holding bin/)
    """

    name: str
    path: Path

    @property
    def bin_dir(self) -> Path:
        """Directory that must lead PATH for this SDK to be active."""
        return self.path / "bin"


def _name_key(name: str) -> str:
    return name.casefold()


class Registry:
    """Ordered collection of SdkEntry with unique names.

    Mutated in place by add() and remove(); insertion order is preserved.
    """

    def __init__(self, entries: Iterable[SdkEntry] = ()) -> None:
        """Create a registry from existing entries.

        Raises:
            DuplicateNameError: If two entries share a name
        """
        self._entries: list[SdkEntry] = []
        for entry in entries:
            self.add(entry)

    @property
    def entries(self) -> tuple[SdkEntry, ...]:
        return tuple(self._entries)

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def contains_name(self, name: str) -> bool:
        return self.find(name) is not None

    def find(self, name: str) -> SdkEntry | None:
        """Look up an entry by name, or None if absent."""
        key = _name_key(name)
        for entry in self._entries:
            if _name_key(entry.name) == key:
                return entry
        return None

    def get(self, name: str) -> SdkEntry:
        """Look up an entry by name.

        Raises:
            UnknownSdkError: If no entry has that name
        """
        entry = self.find(name)
        if entry is None:
            raise UnknownSdkError(name)
        return entry

    def add(self, entry: SdkEntry) -> None:
        """Append an entry.

        Raises:
            DuplicateNameError: If an entry with the same name already exists.
                The registry is left unchanged.
        """
        if self.contains_name(entry.name):
            raise DuplicateNameError(entry.name)
        self._entries.append(entry)

    def remove(self, name: str) -> SdkEntry:
        """Remove the entry with the given name and return it.

        Raises:
            UnknownSdkError: If no entry has that name
        """
        entry = self.get(name)
        self._entries.remove(entry)
        return entry

    def __iter__(self) -> Iterator[SdkEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Registry):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Registry({self._entries!r})"
