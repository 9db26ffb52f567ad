"""Persistence for the SDK registry.

Architecture:
- RegistryStore: Abstract base class defining the interface
- FileRegistryStore: Production implementation reading/writing a JSON file
- DryRunRegistryStore: Dry-run wrapper that delegates loads, prints save intentions

File format (entire file is read and rewritten on every invocation):

    {"sdk": [{"name": "jdk-17", "path": "C:\\\\Program Files\\\\Java\\\\jdk-17"}]}
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from javaver.cli.output import user_output
from javaver.core.errors import DeserializeError, DuplicateNameError, RegistryWriteError
from javaver.core.registry import Registry, SdkEntry

logger = logging.getLogger(__name__)


class SdkRecord(BaseModel):
    """One persisted registry entry."""

    model_config = ConfigDict(strict=True)

    name: str
    path: str


class RegistryFile(BaseModel):
    """Top-level shape of the persisted registry file."""

    model_config = ConfigDict(strict=True)

    sdk: list[SdkRecord]


def registry_to_file(registry: Registry) -> RegistryFile:
    return RegistryFile(
        sdk=[SdkRecord(name=entry.name, path=str(entry.path)) for entry in registry]
    )


def registry_from_file(data: RegistryFile) -> Registry:
    """Build a Registry from parsed file contents.

    Raises:
        DuplicateNameError: If the file lists the same name twice
    """
    return Registry(SdkEntry(name=record.name, path=Path(record.path)) for record in data.sdk)


class RegistryStore(ABC):
    """Abstract interface for loading and saving the SDK registry."""

    @abstractmethod
    def load(self) -> Registry:
        """Load the registry.

        Returns:
            The persisted Registry, or an empty Registry if nothing was persisted yet

        Raises:
            DeserializeError: If persisted data exists but is malformed
        """
        ...

    @abstractmethod
    def save(self, registry: Registry) -> None:
        """Persist the full registry, overwriting previous contents.

        Raises:
            RegistryWriteError: If the write fails
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Location of the persisted registry (for messages and debugging)."""
        ...


class FileRegistryStore(RegistryStore):
    """Production implementation backed by a JSON file."""

    def __init__(self, registry_path: Path) -> None:
        self._registry_path = registry_path

    def load(self) -> Registry:
        registry_path = self._registry_path
        if not registry_path.exists():
            logger.debug("No registry at %s, starting empty", registry_path)
            return Registry()

        try:
            content = registry_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DeserializeError(registry_path, str(e)) from e

        try:
            data = RegistryFile.model_validate_json(content)
        except ValidationError as e:
            raise DeserializeError(registry_path, str(e)) from e

        try:
            registry = registry_from_file(data)
        except DuplicateNameError as e:
            raise DeserializeError(registry_path, str(e)) from e

        logger.debug("Loaded %d SDK(s) from %s", len(registry), registry_path)
        return registry

    def save(self, registry: Registry) -> None:
        registry_path = self._registry_path
        content = registry_to_file(registry).model_dump_json(indent=2)
        try:
            registry_path.parent.mkdir(parents=True, exist_ok=True)
            registry_path.write_text(content + "\n", encoding="utf-8")
        except OSError as e:
            raise RegistryWriteError(registry_path, e) from e
        logger.debug("Saved %d SDK(s) to %s", len(registry), registry_path)

    def path(self) -> Path:
        return self._registry_path


class DryRunRegistryStore(RegistryStore):
    """Dry-run wrapper: loads delegate to the wrapped store, saves are only announced."""

    def __init__(self, wrapped: RegistryStore) -> None:
        self._wrapped = wrapped

    def load(self) -> Registry:
        return self._wrapped.load()

    def save(self, registry: Registry) -> None:
        user_output(f"[DRY RUN] Would save {len(registry)} SDK(s) to {self._wrapped.path()}")

    def path(self) -> Path:
        return self._wrapped.path()
