"""Filesystem scanning for one non-recursive directory listing."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import NameCollection

logger = logging.getLogger(__name__)


class DirectoryUnavailableError(OSError):
    """The listing target cannot be opened or enumerated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot open directory '{path}': {reason}")
        self.path = path
        self.reason = reason


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` follows the dot-file hidden convention."""
    return name.startswith(".")


def read_directory_names(directory: Path | str | None = None) -> NameCollection:
    """Collect visible child names of ``directory`` in enumeration order.

    ``directory`` defaults to the current working directory. Names starting
    with ``.`` are skipped, which also drops the ``.`` and ``..`` entries.
    Raises ``DirectoryUnavailableError`` when the directory cannot be opened
    or read.
    """
    target = Path(directory) if directory is not None else Path(".")
    collection = NameCollection()
    try:
        with os.scandir(target) as entries:
            for entry in entries:
                name = entry.name
                if is_hidden_name(name):
                    continue
                collection.add(name)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise DirectoryUnavailableError(target, reason) from exc

    logger.debug("read %d visible entries from %s (maxlen=%d)", len(collection), target, collection.maxlen)
    return collection
