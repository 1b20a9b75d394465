"""CLI: pack folders into archives, one archive per leaf folder."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .core.config import (
    DEFAULT_EXTENSION,
    ArchiverBackend,
    Compression,
    PackConfig,
)
from .logging.rich_logger import (
    QuietProgressReporter,
    RichProgressReporter,
    configure_logging,
)


logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="leafpack",
        description="Compress folders sensibly: one naturally ordered archive per folder.",
    )
    parser.add_argument(
        "folders",
        nargs="+",
        type=Path,
        help="Folders to compress",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (lists every archived file)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only show warnings and errors",
    )
    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Archive the leaf folders below each folder instead of the folder itself",
    )
    parser.add_argument(
        "-d", "--delete",
        action="store_true",
        help="Delete each folder after its archive has been created",
    )
    parser.add_argument(
        "-e", "--extension",
        type=str,
        default=DEFAULT_EXTENSION,
        help=f"Archive file extension (default: {DEFAULT_EXTENSION})",
    )
    parser.add_argument(
        "-w", "-j", "--workers",
        dest="workers",
        type=int,
        default=None,
        help="Number of folders packed in parallel (default: CPU count + 4, max 32)",
    )
    parser.add_argument(
        "--archiver",
        type=str,
        choices=[backend.value for backend in ArchiverBackend],
        default=ArchiverBackend.ZIPFILE.value,
        help="Archive writer: built-in zipfile or the external zip program (default: zipfile)",
    )
    parser.add_argument(
        "--store",
        action="store_true",
        help="Store files without compression",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into and archive files from symlinked directories",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be archived without writing or deleting anything",
    )
    return parser


def build_config(args: argparse.Namespace) -> PackConfig:
    """Build a validated PackConfig from parsed arguments."""
    return PackConfig(
        folders=tuple(args.folders),
        recursive=args.recursive,
        follow_symlinks=args.follow_symlinks,
        delete=args.delete,
        extension=args.extension,
        workers=args.workers,
        archiver=ArchiverBackend(args.archiver),
        compression=Compression.STORED if args.store else Compression.DEFLATED,
        dry_run=args.dry_run,
    )


def cmd_pack(config: PackConfig, reporter) -> int:
    """Pack every configured folder."""
    from .engines.archiver import create_archiver
    from .services.file_ops import FileManager
    from .services.processor import FolderProcessor, ProcessorDependencies
    from .services.scanner import FolderScanner

    reporter.print_config({
        "Folders": ", ".join(str(folder) for folder in config.folders),
        "Recursive": config.recursive,
        "Follow Symlinks": config.follow_symlinks,
        "Delete After": config.delete,
        "Extension": config.extension,
        "Archiver": config.archiver.value,
        "Compression": config.compression.value,
        "Workers": config.workers or "auto",
        "Dry Run": config.dry_run,
    })

    deps = ProcessorDependencies(
        archiver=create_archiver(config.archiver, config.compression),
        scanner=FolderScanner(follow_symlinks=config.follow_symlinks),
        file_manager=FileManager(config.extension, dry_run=config.dry_run),
        progress=reporter,
    )

    processor = FolderProcessor(config=config, deps=deps)
    stats, _results = processor.process()
    reporter.print_stats(stats)

    # Per-folder failures are reported above; they do not fail the run.
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.quiet:
        reporter = QuietProgressReporter()
        configure_logging(verbose=False)
    else:
        reporter = RichProgressReporter(verbose=args.verbose)
        configure_logging(verbose=args.verbose, console=reporter.console)

    try:
        config = build_config(args)
        with reporter:
            return cmd_pack(config, reporter)

    except KeyboardInterrupt:
        # Clean exit on Ctrl+C - no stack trace
        return 130
    except Exception as e:
        reporter.error(f"Error: {e}")
        if args.verbose:
            logger.exception("Unhandled error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
