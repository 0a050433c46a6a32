"""File-type classification used to colorize listing entries.

Classification is derived from ``lstat`` metadata each time it is asked for;
nothing is cached between calls.
"""

from __future__ import annotations

import enum
import logging
import os
import stat
from pathlib import Path

ARCHIVE_MARKERS = (".tar", ".gz", ".zip")

logger = logging.getLogger(__name__)


class ColorCategory(enum.Enum):
    """Display category of one directory entry."""

    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SPECIAL_DEVICE = "special_device"
    EXECUTABLE = "executable"
    ARCHIVE = "archive"
    DEFAULT = "default"


def is_archive_name(name: str) -> bool:
    """Return whether ``name`` contains an archive marker anywhere."""
    return any(marker in name for marker in ARCHIVE_MARKERS)


def classify_mode(name: str, mode: int) -> ColorCategory:
    """Map an ``st_mode`` plus entry name to a category, first match wins."""
    if stat.S_ISDIR(mode):
        return ColorCategory.DIRECTORY
    if stat.S_ISLNK(mode):
        return ColorCategory.SYMLINK
    if stat.S_ISCHR(mode) or stat.S_ISBLK(mode) or stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode):
        return ColorCategory.SPECIAL_DEVICE
    if mode & stat.S_IXUSR:
        return ColorCategory.EXECUTABLE
    if is_archive_name(name):
        return ColorCategory.ARCHIVE
    return ColorCategory.DEFAULT


def classify_entry(name: str, directory: Path | str = ".") -> ColorCategory:
    """Classify ``name`` inside ``directory`` without following symlinks.

    Entries whose metadata cannot be read (for example removed since the
    directory was scanned) are ``DEFAULT``.
    """
    try:
        mode = os.lstat(os.path.join(directory, name)).st_mode
    except OSError as exc:
        logger.debug("lstat failed for %r: %s", name, exc)
        return ColorCategory.DEFAULT
    return classify_mode(name, mode)


__all__ = [
    "ARCHIVE_MARKERS",
    "ColorCategory",
    "classify_entry",
    "classify_mode",
    "is_archive_name",
]
