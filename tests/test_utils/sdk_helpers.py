"""Helpers for building fake SDK installations on disk."""

from pathlib import Path

from javaver.core.validation import java_executable_name


def make_sdk_root(parent: Path, name: str) -> Path:
    """Create parent/name/bin/java (java.exe on Windows) and return parent/name."""
    root = parent / name
    bin_dir = root / "bin"
    bin_dir.mkdir(parents=True)
    (bin_dir / java_executable_name()).write_text("", encoding="utf-8")
    return root
