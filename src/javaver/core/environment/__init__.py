from javaver.core.environment.abc import SystemEnvironment
from javaver.core.environment.dry_run import DryRunSystemEnvironment
from javaver.core.environment.unsupported import UnsupportedSystemEnvironment

__all__ = [
    "DryRunSystemEnvironment",
    "SystemEnvironment",
    "UnsupportedSystemEnvironment",
]
