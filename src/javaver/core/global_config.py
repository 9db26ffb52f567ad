"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.javaver/config.toml
(or $JAVAVER_HOME/config.toml). A missing file means defaults.

Example config:
    registry_path = "D:\\tools\\javaver\\javaver-config.json"
    search_dirs = ["D:\\jdks", "C:\\Program Files\\Zulu"]
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from javaver.cli.output import user_output
from javaver.core.errors import ConfigError

REGISTRY_FILE_NAME = "javaver-config.json"
CONFIG_FILE_NAME = "config.toml"
CONFIG_DIR_ENV_VAR = "JAVAVER_HOME"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in JavaverContext.
    """

    registry_path: Path
    search_dirs: tuple[Path, ...]


def default_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".javaver"


def default_global_config(config_dir: Path) -> GlobalConfig:
    return GlobalConfig(registry_path=config_dir / REGISTRY_FILE_NAME, search_dirs=())


def parse_global_config(data: dict, config_dir: Path, source: Path) -> GlobalConfig:
    """Build GlobalConfig from parsed TOML, filling defaults.

    Raises:
        ConfigError: If a key has the wrong type
    """
    defaults = default_global_config(config_dir)

    registry_path = data.get("registry_path")
    if registry_path is not None and not isinstance(registry_path, str):
        raise ConfigError(f"'registry_path' in {source} must be a string")

    search_dirs = data.get("search_dirs", [])
    if not isinstance(search_dirs, list) or not all(isinstance(d, str) for d in search_dirs):
        raise ConfigError(f"'search_dirs' in {source} must be a list of strings")

    return GlobalConfig(
        registry_path=(
            Path(registry_path).expanduser() if registry_path else defaults.registry_path
        ),
        search_dirs=tuple(Path(d).expanduser() for d in search_dirs),
    )


class GlobalConfigOps(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config, falling back to defaults when absent.

        Raises:
            ConfigError: If the config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config.

        Raises:
            ConfigError: If the file cannot be written
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages)."""
        ...


class FilesystemGlobalConfigOps(GlobalConfigOps):
    """Production implementation that reads/writes <config dir>/config.toml."""

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir if config_dir is not None else default_config_dir()

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        config_path = self.path()
        if not config_path.exists():
            return default_global_config(self._config_dir)

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to read global config at {config_path}: {e}") from e

        return parse_global_config(data, self._config_dir, config_path)

    def save(self, config: GlobalConfig) -> None:
        """Write config.toml, preserving comments already in the file."""
        config_path = self.path()

        try:
            if config_path.exists():
                doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
            else:
                doc = tomlkit.document()
                doc.add(tomlkit.comment("Global javaver configuration"))

            doc["registry_path"] = str(config.registry_path)
            doc["search_dirs"] = [str(d) for d in config.search_dirs]

            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        except OSError as e:
            raise ConfigError(
                f"Cannot write global config to {config_path}: {e}\n"
                f"Check permissions on {config_path.parent}."
            ) from e

    def path(self) -> Path:
        return self._config_dir / CONFIG_FILE_NAME


class DryRunGlobalConfigOps(GlobalConfigOps):
    """Dry-run wrapper: reads delegate to the wrapped ops, saves are only announced."""

    def __init__(self, wrapped: GlobalConfigOps) -> None:
        self._wrapped = wrapped

    def exists(self) -> bool:
        return self._wrapped.exists()

    def load(self) -> GlobalConfig:
        return self._wrapped.load()

    def save(self, config: GlobalConfig) -> None:
        user_output(f"[DRY RUN] Would write global config to {self._wrapped.path()}")

    def path(self) -> Path:
        return self._wrapped.path()

class InMemoryGlobalConfigOps(GlobalConfigOps):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config ops.

        Args:
            config: Initial config state (None = config doesn't exist, defaults apply)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return default_global_config(self.path().parent)
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/javaver/config.toml")
