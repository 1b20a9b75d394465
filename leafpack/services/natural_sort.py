"""Natural sorting for page files (e.g., page2 before page10).

Digit runs are left-padded with zeros to PAD_WIDTH so that plain string
comparison of segments orders them by numeric value. Runs longer than
PAD_WIDTH are left as-is and lose numeric ordering against shorter runs.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, TypeVar, Union

# Changing this changes archive page order for numbers above 99999.
PAD_WIDTH = 5

DIGITS = frozenset("0123456789")

SortKey = tuple[str, ...]

P = TypeVar("P", str, Path)


def split_and_pad(text: str, width: int = PAD_WIDTH) -> SortKey:
    """Split text into alternating text/digit segments, padding digit runs.

    A digit run at the very end is padded too, so extensionless names
    such as "page9" and "page10" still sort numerically.

    Args:
        text: String to split.
        width: Minimum width of digit segments.

    Returns:
        Tuple of segments; empty tuple for an empty string.

    Example:
        >>> split_and_pad("page2.png")
        ('page', '00002', '.png')
    """
    pieces: list[str] = []
    current: list[str] = []
    is_digit = False

    for char in text:
        if (char in DIGITS) != is_digit:
            if current:
                pieces.append(_close(current, is_digit, width))
                current = []
            is_digit = not is_digit
        current.append(char)

    if current:
        pieces.append(_close(current, is_digit, width))

    return tuple(pieces)


def _close(chars: list[str], is_digit: bool, width: int) -> str:
    segment = "".join(chars)
    return segment.rjust(width, "0") if is_digit else segment


def natural_sort_key(path: Union[str, Path]) -> SortKey:
    """Sort key for a file path, compared segment by segment."""
    return split_and_pad(str(path))


def natural_sorted(paths: Iterable[P]) -> list[P]:
    """Sort paths using natural (human-friendly) ordering.

    Example:
        >>> natural_sorted(["img10.jpg", "img2.jpg", "img1.jpg"])
        ['img1.jpg', 'img2.jpg', 'img10.jpg']
    """
    return sorted(paths, key=natural_sort_key)
