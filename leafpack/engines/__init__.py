"""Archiver implementations."""
from .archiver import ZipFileArchiver, ZipCommandArchiver, create_archiver

__all__ = [
    "ZipFileArchiver",
    "ZipCommandArchiver",
    "create_archiver",
]
