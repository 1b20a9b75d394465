"""Per-folder error types.

Every error raised while packing a folder is scoped to that folder: the
packer catches it, reports it and turns it into a failed ArchiveResult.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Why a folder could not be packed."""
    PATH_NOT_FOUND = "path_not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    ARCHIVE_CREATION_FAILED = "archive_creation_failed"
    DELETION_FAILED = "deletion_failed"
    UNEXPECTED = "unexpected"


class LeafpackError(Exception):
    """Base class for errors that abort a single folder."""
    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class PathNotFoundError(LeafpackError):
    kind = ErrorKind.PATH_NOT_FOUND

    def __init__(self, path: Path):
        super().__init__(f"{path} doesn't exist", path)


class NotADirectoryFolderError(LeafpackError):
    kind = ErrorKind.NOT_A_DIRECTORY

    def __init__(self, path: Path):
        super().__init__(f"{path} is not a directory", path)


class ArchiveCreationError(LeafpackError):
    """Archiver reported failure, or the target is missing afterwards."""
    kind = ErrorKind.ARCHIVE_CREATION_FAILED

    def __init__(self, target: Path, detail: str):
        super().__init__(f"Problem creating {target}: {detail}", target)
        self.detail = detail


class DeletionError(LeafpackError):
    kind = ErrorKind.DELETION_FAILED

    def __init__(self, path: Path, detail: str):
        super().__init__(f"Archived but could not delete {path}: {detail}", path)
        self.detail = detail
