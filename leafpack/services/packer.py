"""Per-folder archive pipeline.

Steps for one FolderTask, strictly in order:
validate -> collect -> sort -> archive -> verify -> delete (optional).
Any failure stops this folder only and comes back as a failed result.
"""
from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import (
    ArchiveCreationError,
    LeafpackError,
    NotADirectoryFolderError,
    PathNotFoundError,
)
from ..core.models import ArchiveOutcome, ArchiveResult, FolderTask
from ..core.protocols import Archiver, ProgressReporter
from .file_ops import FileManager
from .scanner import FolderScanner


logger = logging.getLogger(__name__)


class FolderPacker:
    """Packs a single folder into an archive next to it."""

    def __init__(
        self,
        archiver: Archiver,
        scanner: FolderScanner,
        file_manager: FileManager,
        progress: ProgressReporter,
        delete: bool = False,
        dry_run: bool = False,
    ):
        """Initialize the packer.

        Args:
            archiver: Writes the archive file.
            scanner: Collects and orders the folder's files.
            file_manager: Derives targets and deletes folders.
            progress: Where progress and errors are reported.
            delete: Remove the folder once its archive is confirmed.
            dry_run: Report the plan without archiving or deleting.
        """
        self._archiver = archiver
        self._scanner = scanner
        self._file_manager = file_manager
        self._progress = progress
        self._delete = delete
        self._dry_run = dry_run

    def pack(self, task: FolderTask) -> ArchiveResult:
        """Run the pipeline for one task. Never raises LeafpackError."""
        try:
            return self._pack(task)
        except LeafpackError as e:
            self._progress.error(f"{task.label} {e}")
            return ArchiveResult.failure(task, e.kind, str(e))

    def _pack(self, task: FolderTask) -> ArchiveResult:
        folder = task.folder
        self.validate(folder)

        self._progress.info(f'{task.label} Starting "{folder}"...')

        files = self._scanner.collect_files(folder)
        for path in files:
            self._progress.debug(str(path))

        target = self._file_manager.archive_target(folder)

        if self._dry_run:
            self._progress.info(
                f'{task.label} Would write {len(files)} files to "{target}"'
            )
            return ArchiveResult(
                task=task,
                outcome=ArchiveOutcome.PLANNED,
                target_path=target,
                file_count=len(files),
            )

        self.archive(target, files, folder)

        outcome = ArchiveOutcome.ARCHIVED
        if self._delete:
            self._file_manager.remove_folder(folder)
            outcome = ArchiveOutcome.ARCHIVED_AND_DELETED

        self._progress.info(f'{task.label} Finished "{folder}"...')
        return ArchiveResult(
            task=task,
            outcome=outcome,
            target_path=target,
            file_count=len(files),
        )

    @staticmethod
    def validate(folder: Path) -> None:
        """Raise unless folder exists and is a directory."""
        if not folder.exists():
            raise PathNotFoundError(folder)
        if not folder.is_dir():
            raise NotADirectoryFolderError(folder)

    def archive(self, target: Path, files: list[Path], folder: Path) -> None:
        """Write the archive and check it actually landed on disk.

        Raises:
            ArchiveCreationError: If the archive could not be written or verified.
        """
        if not files:
            raise ArchiveCreationError(target, "no files to archive")

        logger.debug(f"{self._archiver.name}: {len(files)} files -> {target}")
        status = self._archiver.create_archive(target, files, root=folder)

        if not status.success or not target.exists():
            detail = status.detail if not status.success else f"{status.detail}, but target is missing"
            raise ArchiveCreationError(target, detail)
