"""Application context with dependency injection."""

import sys
from dataclasses import dataclass

from javaver.core.environment import (
    DryRunSystemEnvironment,
    SystemEnvironment,
    UnsupportedSystemEnvironment,
)
from javaver.core.global_config import (
    DryRunGlobalConfigOps,
    FilesystemGlobalConfigOps,
    GlobalConfig,
    GlobalConfigOps,
)
from javaver.core.registry import Registry
from javaver.core.registry_store import DryRunRegistryStore, FileRegistryStore, RegistryStore


@dataclass(frozen=True)
class JavaverContext:
    """Immutable context holding all dependencies for javaver operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime; the registry object
    itself is mutated in place by commands and persisted after they return.
    """

    environment: SystemEnvironment
    registry_store: RegistryStore
    config_ops: GlobalConfigOps
    global_config: GlobalConfig
    registry: Registry
    dry_run: bool


def create_system_environment(platform: str | None = None) -> SystemEnvironment:
    """Pick the machine-wide environment store for this OS."""
    platform = platform if platform is not None else sys.platform
    if platform == "win32":
        from javaver.core.environment.windows import WindowsSystemEnvironment

        return WindowsSystemEnvironment()
    return UnsupportedSystemEnvironment(platform)


def create_context(*, dry_run: bool) -> JavaverContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap the environment store, registry store and config
                 ops with dry-run wrappers that print intended writes without executing them

    Returns:
        JavaverContext with the registry already loaded

    Raises:
        ConfigError: If the global config is malformed
        DeserializeError: If the persisted registry is malformed; nothing has
            been mutated at this point
    """
    # 1. Load global config (defaults if absent)
    config_ops: GlobalConfigOps = FilesystemGlobalConfigOps()
    global_config = config_ops.load()

    # 2. Create stores
    registry_store: RegistryStore = FileRegistryStore(global_config.registry_path)
    environment = create_system_environment()

    # 3. Apply dry-run wrappers if needed
    if dry_run:
        registry_store = DryRunRegistryStore(registry_store)
        environment = DryRunSystemEnvironment(environment)
        config_ops = DryRunGlobalConfigOps(config_ops)

    # 4. Load the registry last so a corrupt file aborts before any command runs
    registry = registry_store.load()

    return JavaverContext(
        environment=environment,
        registry_store=registry_store,
        config_ops=config_ops,
        global_config=global_config,
        registry=registry,
        dry_run=dry_run,
    )
