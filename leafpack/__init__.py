"""Pack leaf folders of paginated content into naturally ordered archives."""

__version__ = "1.0.0"

# Core exports
from .core.config import PackConfig, ArchiverBackend, Compression
from .core.models import FolderTask, ArchiveResult, ArchiveOutcome, ArchiveStatus, RunStats
from .core.protocols import Archiver, ProgressReporter

# Engine exports
from .engines.archiver import ZipFileArchiver, ZipCommandArchiver, create_archiver

# Service exports
from .services.natural_sort import natural_sort_key, natural_sorted
from .services.scanner import FolderScanner
from .services.file_ops import FileManager
from .services.packer import FolderPacker
from .services.processor import FolderProcessor, ProcessorDependencies

# Logging exports
from .logging.rich_logger import RichProgressReporter

__all__ = [
    # Core
    "PackConfig",
    "ArchiverBackend",
    "Compression",
    "FolderTask",
    "ArchiveResult",
    "ArchiveOutcome",
    "ArchiveStatus",
    "RunStats",
    "Archiver",
    "ProgressReporter",
    # Engines
    "ZipFileArchiver",
    "ZipCommandArchiver",
    "create_archiver",
    # Services
    "natural_sort_key",
    "natural_sorted",
    "FolderScanner",
    "FileManager",
    "FolderPacker",
    "FolderProcessor",
    "ProcessorDependencies",
    # Logging
    "RichProgressReporter",
]
