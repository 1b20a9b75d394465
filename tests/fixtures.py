"""Test fixtures for folder trees.

Fixture classes know how to write a folder of pages to disk and what
the resulting archive should contain.
"""
from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from leafpack.core.models import ArchiveStatus, RunStats


@dataclass
class PageFolder:
    """A folder of page files, e.g. one comic volume."""
    name: str
    pages: tuple[str, ...] = ("img1.jpg", "img10.jpg", "img2.jpg")
    subfolders: list["PageFolder"] = field(default_factory=list)

    def create(self, base_path: Path) -> Path:
        """Write the folder and its pages; returns the folder path."""
        folder = base_path / self.name
        folder.mkdir(parents=True, exist_ok=True)
        for page in self.pages:
            page_path = folder / page
            page_path.parent.mkdir(parents=True, exist_ok=True)
            page_path.write_bytes(f"page {page}".encode())
        for sub in self.subfolders:
            sub.create(folder)
        return folder

    def expected_order(self) -> list[str]:
        """Member names in the natural order they should be archived in."""
        from leafpack.services.natural_sort import natural_sorted
        return natural_sorted(list(self.pages))


def archive_members(archive: Path) -> list[str]:
    """Member names of a zip archive, in stored order."""
    with zipfile.ZipFile(archive) as zf:
        return zf.namelist()


class RecordingArchiver:
    """Archiver double that records calls and can be told to fail."""

    def __init__(self, succeed: bool = True, create_file: bool = True):
        self.succeed = succeed
        self.create_file = create_file
        self.calls: list[tuple[Path, list[Path], Optional[Path]]] = []

    @property
    def name(self) -> str:
        return "recording"

    def create_archive(self, target, files, root=None) -> ArchiveStatus:
        self.calls.append((target, list(files), root))
        if self.create_file:
            target.write_bytes(b"archive")
        if self.succeed:
            return ArchiveStatus.ok("exit status 0")
        return ArchiveStatus.failed("exit status 12")


class RecordingReporter:
    """Progress reporter double that keeps every message."""

    def __init__(self):
        self.infos: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.debugs: list[str] = []
        self.phases: list[tuple[str, int]] = []
        self.advanced = 0
        self.ended = 0
        self.stats: Optional[RunStats] = None

    def start_phase(self, name: str, total: int) -> None:
        self.phases.append((name, total))

    def advance_phase(self, amount: int = 1) -> None:
        self.advanced += amount

    def end_phase(self) -> None:
        self.ended += 1

    def info(self, message: str) -> None:
        self.infos.append(message)

    def success(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def debug(self, message: str) -> None:
        self.debugs.append(message)

    def print_config(self, config_items: dict) -> None:
        pass

    def print_stats(self, stats: RunStats) -> None:
        self.stats = stats
