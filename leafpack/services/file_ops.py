"""File operations service."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..core.errors import DeletionError


logger = logging.getLogger(__name__)


class FileManager:
    """Derives archive targets and removes archived folders."""

    def __init__(self, extension: str, dry_run: bool = False):
        """Initialize file manager.

        Args:
            extension: Archive extension without the leading dot.
            dry_run: If True, never remove anything.
        """
        self._suffix = f".{extension.lstrip('.')}"
        self._dry_run = dry_run

    def archive_target(self, folder: Path) -> Path:
        """Archive path for a folder: a sibling with the folder's suffix replaced.

        'Vol 01' becomes 'Vol 01.cbz'; a folder named 'Chapter 1.5'
        becomes 'Chapter 1.cbz', as the trailing '.5' counts as its suffix.

        Args:
            folder: Folder to be archived.

        Returns:
            Path of the archive file.
        """
        # '.' and similar have no name to derive a target from.
        if not folder.name or folder.name == "..":
            folder = folder.resolve()
        return folder.with_suffix(self._suffix)

    def remove_folder(self, folder: Path) -> bool:
        """Recursively delete a folder and all its contents.

        Args:
            folder: Folder to delete.

        Returns:
            True if the folder was removed, False in dry-run mode.

        Raises:
            DeletionError: If the folder could not be removed.
        """
        if self._dry_run:
            return False

        try:
            shutil.rmtree(folder)
        except OSError as e:
            raise DeletionError(folder, str(e)) from e

        logger.debug(f"Removed {folder}")
        return True
