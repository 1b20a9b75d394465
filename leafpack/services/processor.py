"""Main folder processor - orchestrates all services."""
from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ..core.config import PackConfig
from ..core.errors import ArchiveCreationError, ErrorKind
from ..core.models import ArchiveResult, FolderTask, RunStats
from ..core.protocols import Archiver, ProgressReporter
from .file_ops import FileManager
from .packer import FolderPacker
from .scanner import FolderScanner


logger = logging.getLogger(__name__)


def unique_folders(folders: Iterable[Path]) -> list[Path]:
    """Drop repeated paths, keeping the first occurrence's position."""
    return list(dict.fromkeys(folders))


def build_tasks(folders: list[Path]) -> list[FolderTask]:
    total = len(folders)
    return [FolderTask(folder, index, total) for index, folder in enumerate(folders, start=1)]


@dataclass
class ProcessorDependencies:
    """All dependencies needed by the processor.

    This is explicitly passed in - no globals or singletons.
    """
    archiver: Archiver
    scanner: FolderScanner
    file_manager: FileManager
    progress: ProgressReporter


class FolderProcessor:
    """Resolves folders and packs each one on a thread pool.

    Every folder is an independent task: one failing never stops the others,
    and the run is complete once all tasks settle.
    """

    def __init__(self, config: PackConfig, deps: ProcessorDependencies):
        """Initialize processor with config and dependencies.

        Args:
            config: Run configuration.
            deps: All required dependencies.
        """
        self._config = config
        self._deps = deps
        self._packer = FolderPacker(
            archiver=deps.archiver,
            scanner=deps.scanner,
            file_manager=deps.file_manager,
            progress=deps.progress,
            delete=config.delete,
            dry_run=config.dry_run,
        )

    def plan(self) -> list[FolderTask]:
        """Resolve and deduplicate the configured folders into tasks."""
        folders = self._deps.scanner.resolve(self._config.folders, self._config.recursive)
        folders = unique_folders(folders)
        return build_tasks(folders)

    def shared_targets(self, tasks: list[FolderTask]) -> dict[int, ArchiveCreationError]:
        """Tasks whose archive target was already claimed by an earlier task.

        'Chapter 1.1' and 'Chapter 1.2' both map to 'Chapter 1.cbz'; only the
        first may write it, or the second would overwrite the first's pages.

        Returns:
            The error to fail each losing task with, keyed by task index.
        """
        owners: dict[Path, Path] = {}
        clashes: dict[int, ArchiveCreationError] = {}
        for task in tasks:
            target = self._deps.file_manager.archive_target(task.folder)
            owner = owners.setdefault(target.absolute(), task.folder)
            if owner != task.folder:
                clashes[task.index] = ArchiveCreationError(
                    target, f"target shared with {owner}"
                )
        return clashes

    def process(self) -> tuple[RunStats, list[ArchiveResult]]:
        """Pack every resolved folder.

        Returns:
            Run statistics and one result per task, in task order.
        """
        started = time.monotonic()
        stats = RunStats()
        progress = self._deps.progress

        tasks = self.plan()
        stats.total = len(tasks)

        if not tasks:
            progress.info("No folders to pack")
            return stats, []

        clashes = self.shared_targets(tasks)
        results: dict[int, ArchiveResult] = {}

        def settle(task: FolderTask, result: ArchiveResult) -> None:
            results[task.index] = result
            stats.record(result)
            progress.advance_phase()

        progress.start_phase("Packing", len(tasks))
        try:
            for task in tasks:
                if task.index in clashes:
                    settle(task, self._reject(task, clashes[task.index]))

            with ThreadPoolExecutor(max_workers=self._config.workers) as executor:
                futures: dict[Future, FolderTask] = {
                    executor.submit(self._packer.pack, task): task
                    for task in tasks
                    if task.index not in clashes
                }
                for future in as_completed(futures):
                    task = futures[future]
                    settle(task, self._settle(task, future))
        finally:
            progress.end_phase()

        stats.elapsed_seconds = time.monotonic() - started
        progress.success("Done :D")
        return stats, [results[task.index] for task in tasks]

    def _reject(self, task: FolderTask, error: ArchiveCreationError) -> ArchiveResult:
        self._deps.progress.error(f"{task.label} {error}")
        return ArchiveResult.failure(task, error.kind, str(error), target_path=error.path)

    def _settle(self, task: FolderTask, future: Future) -> ArchiveResult:
        """Result of a finished task; unexpected crashes become failures."""
        try:
            return future.result()
        except Exception as e:
            logger.exception(f"Unexpected error packing {task.folder}")
            self._deps.progress.error(f"{task.label} {task.folder}: {e}")
            return ArchiveResult.failure(task, ErrorKind.UNEXPECTED, str(e))
