"""Directory scanning service: leaf folder resolution and file collection."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from .natural_sort import natural_sort_key, natural_sorted


logger = logging.getLogger(__name__)


def list_children(folder: Path) -> list[Path]:
    """List the immediate children of a folder.

    Raises:
        OSError: If the folder cannot be read.
    """
    return list(folder.iterdir())


def child_folders(folder: Path, follow_symlinks: bool = False) -> list[Path]:
    """Immediate subdirectories of folder, naturally sorted.

    Symlinked directories are ignored unless follow_symlinks is set.

    A folder that cannot be listed is treated as having no subdirectories,
    so it is classified as a leaf rather than aborting resolution.
    """
    try:
        children = list_children(folder)
    except OSError as e:
        logger.warning(f"Could not list {folder}, treating it as a leaf: {e}")
        return []
    return natural_sorted(
        child for child in children
        if child.is_dir() and (follow_symlinks or not child.is_symlink())
    )


def walk_files(folder: Path, follow_symlinks: bool = False) -> list[Path]:
    """All files at any depth beneath folder. Unreadable entries are skipped."""
    def on_error(e: OSError) -> None:
        logger.debug(f"Skipping unreadable entry {e.filename}: {e.strerror}")

    files = []
    walker = os.walk(folder, onerror=on_error, followlinks=follow_symlinks)
    for dirpath, _dirnames, filenames in walker:
        base = Path(dirpath)
        for filename in filenames:
            path = base / filename
            if path.is_file():
                files.append(path)
    return files


class FolderScanner:
    """Decides which folders get archived and what goes into each archive."""

    def __init__(self, follow_symlinks: bool = False):
        """Initialize the scanner.

        Args:
            follow_symlinks: Whether to descend into symlinked directories.
        """
        self._follow_symlinks = follow_symlinks

    def resolve(self, folders: Iterable[Path], recursive: bool = False) -> list[Path]:
        """Expand input folders into the folders to archive.

        Without recursion the input is returned unchanged. With recursion
        every input is replaced by its leaf descendants (folders with no
        subdirectories); a folder that is already a leaf stays as-is.
        Missing or non-directory inputs pass through untouched and fail
        later, per folder.

        Args:
            folders: Candidate folders, in user order.
            recursive: Whether to descend to leaf folders.

        Returns:
            Folders to archive, depth-first in input order.
        """
        folders = [Path(folder) for folder in folders]
        if not recursive:
            return folders

        resolved: list[Path] = []
        # Reversed so popping yields the same order as depth-first recursion.
        stack = list(reversed(folders))
        while stack:
            folder = stack.pop()
            if not folder.is_dir():
                resolved.append(folder)
                continue

            children = child_folders(folder, self._follow_symlinks)
            if children:
                stack.extend(reversed(children))
            else:
                resolved.append(folder)

        return resolved

    def collect_files(self, folder: Path) -> list[Path]:
        """All files beneath folder in natural sort order."""
        return sorted(walk_files(folder, self._follow_symlinks), key=natural_sort_key)
