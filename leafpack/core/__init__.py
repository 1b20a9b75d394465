"""Core domain models and protocols."""
from .protocols import (
    Archiver,
    ProgressReporter,
)
from .models import (
    ArchiveOutcome,
    ArchiveResult,
    ArchiveStatus,
    FolderTask,
    RunStats,
)
from .errors import (
    ErrorKind,
    LeafpackError,
    PathNotFoundError,
    NotADirectoryFolderError,
    ArchiveCreationError,
    DeletionError,
)
from .config import PackConfig, ArchiverBackend, Compression

__all__ = [
    # Protocols
    "Archiver",
    "ProgressReporter",
    # Models
    "ArchiveOutcome",
    "ArchiveResult",
    "ArchiveStatus",
    "FolderTask",
    "RunStats",
    # Errors
    "ErrorKind",
    "LeafpackError",
    "PathNotFoundError",
    "NotADirectoryFolderError",
    "ArchiveCreationError",
    "DeletionError",
    # Config
    "PackConfig",
    "ArchiverBackend",
    "Compression",
]
