"""Auto-discovery of installed SDKs.

Each immediate subdirectory of a search directory is a candidate, named after
the subdirectory. Candidates go through the same validation and add contract
as a manual ``javaver add``.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from javaver.core.errors import DuplicateNameError
from javaver.core.registry import Registry, SdkEntry
from javaver.core.validation import is_valid_sdk_root

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DIRS: tuple[Path, ...] = (
    Path("C:\\Program Files\\Java"),
    Path("C:\\Program Files\\Eclipse Adoptium"),
)


@dataclass(frozen=True)
class SearchDirResult:
    """What happened while scanning one search directory."""

    search_dir: Path
    exists: bool
    error: str | None = None
    added: list[SdkEntry] = field(default_factory=list)
    duplicates: list[SdkEntry] = field(default_factory=list)
    invalid: list[Path] = field(default_factory=list)


@dataclass(frozen=True)
class DiscoveryReport:
    results: list[SearchDirResult]

    @property
    def added(self) -> list[SdkEntry]:
        return [entry for result in self.results for entry in result.added]

    @property
    def duplicates(self) -> list[SdkEntry]:
        return [entry for result in self.results for entry in result.duplicates]


def search_dirs_for(extra_dirs: list[Path], search_path: Path | None) -> list[Path]:
    """Build the ordered list of directories to scan, without repeats."""
    dirs: list[Path] = []
    candidates = [*DEFAULT_SEARCH_DIRS, *extra_dirs]
    if search_path is not None:
        candidates.append(search_path)
    for candidate in candidates:
        if candidate not in dirs:
            dirs.append(candidate)
    return dirs


def list_candidates(search_dir: Path) -> list[Path]:
    """Immediate subdirectories of search_dir, sorted by name.

    Raises:
        OSError: If the directory cannot be listed
    """
    return sorted((child for child in search_dir.iterdir() if child.is_dir()), key=lambda p: p.name)


def scan_search_dir(registry: Registry, search_dir: Path) -> SearchDirResult:
    """Register every valid SDK directly under search_dir.

    Duplicate names and invalid candidates are skipped, never fatal.
    """
    if not search_dir.exists():
        return SearchDirResult(search_dir=search_dir, exists=False)

    try:
        candidates = list_candidates(search_dir)
    except OSError as e:
        return SearchDirResult(search_dir=search_dir, exists=True, error=str(e))

    result = SearchDirResult(search_dir=search_dir, exists=True)
    for candidate in candidates:
        if not is_valid_sdk_root(candidate):
            logger.debug("Skipping %s: not an SDK root", candidate)
            result.invalid.append(candidate)
            continue

        entry = SdkEntry(name=candidate.name, path=candidate.resolve())
        try:
            registry.add(entry)
        except DuplicateNameError:
            result.duplicates.append(entry)
            continue
        result.added.append(entry)

    return result


def discover_sdks(registry: Registry, search_dirs: list[Path]) -> DiscoveryReport:
    """Scan search_dirs in order, adding discovered SDKs to registry in place."""
    return DiscoveryReport(results=[scan_search_dir(registry, d) for d in search_dirs])
