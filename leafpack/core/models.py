"""Domain models - immutable data classes."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import ErrorKind


class ArchiveOutcome(Enum):
    """What happened to a folder."""
    ARCHIVED = "archived"
    ARCHIVED_AND_DELETED = "archived_and_deleted"
    PLANNED = "planned"  # Dry run
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class FolderTask:
    """One folder to archive, with its position in the batch."""
    folder: Path
    index: int  # 1-based
    total: int

    def __post_init__(self) -> None:
        if not 1 <= self.index <= self.total:
            raise ValueError(f"Task index {self.index} out of range 1..{self.total}")

    @property
    def label(self) -> str:
        return f"[{self.index} / {self.total}]"


@dataclass(frozen=True, slots=True)
class ArchiveStatus:
    """What an archiver reports back after writing an archive."""
    success: bool
    detail: str = ""

    @classmethod
    def ok(cls, detail: str = "ok") -> "ArchiveStatus":
        return cls(success=True, detail=detail)

    @classmethod
    def failed(cls, detail: str) -> "ArchiveStatus":
        return cls(success=False, detail=detail)


@dataclass(frozen=True, slots=True)
class ArchiveResult:
    """Result of processing a single FolderTask."""
    task: FolderTask
    outcome: ArchiveOutcome
    target_path: Optional[Path] = None
    file_count: int = 0
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.outcome != ArchiveOutcome.FAILED

    @classmethod
    def failure(
        cls,
        task: FolderTask,
        kind: ErrorKind,
        error: str,
        target_path: Optional[Path] = None,
    ) -> "ArchiveResult":
        return cls(
            task=task,
            outcome=ArchiveOutcome.FAILED,
            target_path=target_path,
            error_kind=kind,
            error=error,
        )


@dataclass(slots=True)
class RunStats:
    """Mutable statistics for a packing run.

    Only the coordinating thread updates this, after each task settles.
    """
    total: int = 0
    processed: int = 0
    archived: int = 0
    deleted: int = 0
    planned: int = 0
    failed: int = 0
    files: int = 0
    elapsed_seconds: float = 0.0

    def record(self, result: ArchiveResult) -> None:
        """Record a processing result."""
        self.processed += 1
        self.files += result.file_count
        match result.outcome:
            case ArchiveOutcome.ARCHIVED:
                self.archived += 1
            case ArchiveOutcome.ARCHIVED_AND_DELETED:
                self.archived += 1
                self.deleted += 1
            case ArchiveOutcome.PLANNED:
                self.planned += 1
            case ArchiveOutcome.FAILED:
                self.failed += 1

    def summary(self) -> dict[str, int]:
        return {
            "total": self.total,
            "processed": self.processed,
            "archived": self.archived,
            "deleted": self.deleted,
            "planned": self.planned,
            "failed": self.failed,
            "files": self.files,
        }
