"""Configuration dataclasses with validation."""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Optional


DEFAULT_EXTENSION = "cbz"


class ArchiverBackend(Enum):
    """Which archiver writes the archive files."""
    ZIPFILE = "zipfile"   # In-process, Python's zipfile module
    ZIP_COMMAND = "zip"   # External `zip` executable


class Compression(Enum):
    """How archive members are stored."""
    DEFLATED = "deflated"
    STORED = "stored"     # No compression, usual for image archives


@dataclass(slots=True)
class PackConfig:
    """Main configuration for a packing run.

    All fields are validated on construction.
    This is the only configuration object passed through the system.
    """
    # Required
    folders: tuple[Path, ...]

    # Folder selection
    recursive: bool = False
    follow_symlinks: bool = False

    # Output
    extension: str = DEFAULT_EXTENSION
    archiver: ArchiverBackend = ArchiverBackend.ZIPFILE
    compression: Compression = Compression.DEFLATED

    # Post-processing
    delete: bool = False

    # Performance (None = executor default)
    workers: Optional[int] = None

    # Execution mode
    dry_run: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.folders:
            raise ValueError("At least one folder is required")

        if self.workers is not None and self.workers < 1:
            raise ValueError("Workers must be at least 1")

        extension = self.extension.strip().lstrip(".")
        if not extension:
            raise ValueError("Extension must not be empty")
        if "/" in extension or "\\" in extension:
            raise ValueError(f"Extension must not contain path separators: {self.extension}")
        self.extension = extension

        self.folders = tuple(Path(folder) for folder in self.folders)

    @property
    def suffix(self) -> str:
        """Extension as a path suffix, e.g. '.cbz'."""
        return f".{self.extension}"

    def with_overrides(self, **kwargs) -> "PackConfig":
        """Create a new config with some values overridden."""
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(kwargs)
        return PackConfig(**current)
