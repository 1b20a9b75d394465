"""Archiver implementations.

ZipFileArchiver: in-process zipfile (default, no external tools)
ZipCommandArchiver: shells out to the `zip` program
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
import zipfile
from pathlib import Path
from typing import Optional, Sequence

from ..core.config import ArchiverBackend, Compression
from ..core.models import ArchiveStatus


logger = logging.getLogger(__name__)


def member_name(path: Path, root: Optional[Path]) -> str:
    """Name of a file inside the archive, relative to root when possible."""
    if root is not None:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            pass
    return path.as_posix()


def partial_path(target: Path) -> Path:
    """Hidden sibling an archive is written to before it replaces target."""
    return target.with_name(f".{target.name}.partial")


class ZipFileArchiver:
    """Archiver using Python's zipfile module.

    The archive is written beside the target and moved over it only once
    complete, so a failed write leaves an existing target untouched.
    Targets are unique within a run, so the partial file name is too.
    """

    def __init__(self, compression: Compression = Compression.DEFLATED):
        """Initialize the archiver.

        Args:
            compression: Whether members are deflated or stored.
        """
        self._compression = (
            zipfile.ZIP_STORED if compression == Compression.STORED else zipfile.ZIP_DEFLATED
        )

    @property
    def name(self) -> str:
        return "zipfile"

    def create_archive(
        self,
        target: Path,
        files: Sequence[Path],
        root: Optional[Path] = None,
    ) -> ArchiveStatus:
        """Write files to target in the given order."""
        partial = partial_path(target)
        try:
            with zipfile.ZipFile(partial, "w", compression=self._compression) as zf:
                for path in files:
                    zf.write(path, arcname=member_name(path, root))
            os.replace(partial, target)
        except (OSError, ValueError) as e:
            logger.debug(f"zipfile failed for {target}: {e}")
            partial.unlink(missing_ok=True)
            return ArchiveStatus.failed(str(e))

        return ArchiveStatus.ok(f"{len(files)} files")


class ZipCommandArchiver:
    """Archiver using the external `zip` executable.

    Member names are fed on stdin (`zip -@`), so folders with thousands of
    pages never hit the command-line length limit. zip runs inside root,
    which makes member names relative to it.
    """

    def __init__(
        self,
        compression: Compression = Compression.DEFLATED,
        executable: str = "zip",
    ):
        """Initialize the archiver.

        Args:
            compression: Whether members are deflated or stored.
            executable: Name or path of the zip program.
        """
        self._compression = compression
        self._executable = executable

    @property
    def name(self) -> str:
        return "zip"

    @property
    def is_available(self) -> bool:
        return shutil.which(self._executable) is not None

    def build_command(self, target: Path) -> list[str]:
        command = [self._executable, "-q"]
        if self._compression == Compression.STORED:
            command.append("-0")
        command += ["-@", str(target)]
        return command

    def create_archive(
        self,
        target: Path,
        files: Sequence[Path],
        root: Optional[Path] = None,
    ) -> ArchiveStatus:
        """Write files to target in the given order."""
        # zip runs in root, so the target must not be relative to our cwd.
        target = target.absolute()
        names = "\n".join(member_name(path, root) for path in files)

        try:
            result = subprocess.run(
                self.build_command(target),
                input=names + "\n",
                cwd=root,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            return ArchiveStatus.failed(f"'{self._executable}' not found")
        except OSError as e:
            return ArchiveStatus.failed(f"could not run '{self._executable}': {e}")

        if result.returncode != 0:
            detail = result.stderr.strip() or result.stdout.strip()
            return ArchiveStatus.failed(f"exit status {result.returncode}: {detail}")

        return ArchiveStatus.ok("exit status 0")


def create_archiver(
    backend: ArchiverBackend = ArchiverBackend.ZIPFILE,
    compression: Compression = Compression.DEFLATED,
) -> ZipFileArchiver | ZipCommandArchiver:
    """Factory function to create the configured archiver.

    Args:
        backend: Which archiver to use.
        compression: Whether members are deflated or stored.

    Returns:
        An Archiver implementation.
    """
    if backend == ArchiverBackend.ZIP_COMMAND:
        archiver = ZipCommandArchiver(compression)
        if not archiver.is_available:
            logger.warning("'zip' not found on PATH, every archive will fail")
        return archiver

    return ZipFileArchiver(compression)
