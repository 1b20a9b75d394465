"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Optional, Protocol, Sequence

from .models import ArchiveStatus, RunStats


class Archiver(Protocol):
    """Interface for writing an ordered list of files into one archive.

    Implementations:
    - ZipFileArchiver: In-process zipfile module
    - ZipCommandArchiver: External `zip` executable
    """

    @abstractmethod
    def create_archive(
        self,
        target: Path,
        files: Sequence[Path],
        root: Optional[Path] = None,
    ) -> ArchiveStatus:
        """Write files, in the given order, to target.

        Members are named relative to root when given. Callers verify the
        target exists afterwards; the returned status is not trusted alone.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Archiver name for logging."""
        ...


class ProgressReporter(Protocol):
    """Interface for progress reporting.

    Implementations must tolerate calls from several worker threads.
    """

    @abstractmethod
    def start_phase(self, name: str, total: int) -> None:
        """Start a new processing phase."""
        ...

    @abstractmethod
    def advance_phase(self, amount: int = 1) -> None:
        """Advance the current phase by an amount."""
        ...

    @abstractmethod
    def end_phase(self) -> None:
        """Complete current phase."""
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        """Log an info message."""
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        """Log a success message."""
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log a warning message."""
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        """Log an error message."""
        ...

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log a debug message (verbose mode only)."""
        ...

    @abstractmethod
    def print_stats(self, stats: RunStats) -> None:
        """Print end-of-run statistics."""
        ...
