"""Service layer - business logic."""
from .natural_sort import natural_sort_key, natural_sorted, split_and_pad, PAD_WIDTH
from .scanner import FolderScanner, list_children, walk_files
from .file_ops import FileManager
from .packer import FolderPacker
from .processor import FolderProcessor, ProcessorDependencies

__all__ = [
    "natural_sort_key",
    "natural_sorted",
    "split_and_pad",
    "PAD_WIDTH",
    "FolderScanner",
    "list_children",
    "walk_files",
    "FileManager",
    "FolderPacker",
    "FolderProcessor",
    "ProcessorDependencies",
]
