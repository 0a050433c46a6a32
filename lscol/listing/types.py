"""Domain datatypes for one directory listing."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field


def _name_sort_key(name: str) -> bytes:
    """Byte-wise ordering key matching the raw on-disk name."""
    return os.fsencode(name)


def sort_names(names: Iterable[str]) -> tuple[str, ...]:
    """Return ``names`` ascending by byte-wise comparison.

    Comparison is case-sensitive and ignores locale, so ``"Zebra"`` sorts
    before ``"apple"``.
    """
    return tuple(sorted(names, key=_name_sort_key))


@dataclass
class NameCollection:
    """Visible entry names of one directory plus the longest name length."""

    names: list[str] = field(default_factory=list)
    maxlen: int = 0

    def add(self, name: str) -> None:
        """Append ``name`` and widen ``maxlen`` when needed."""
        self.names.append(name)
        if len(name) > self.maxlen:
            self.maxlen = len(name)

    def sorted(self) -> SortedNames:
        """Freeze this collection into byte-wise ascending order."""
        return SortedNames(names=sort_names(self.names), maxlen=self.maxlen)

    def __len__(self) -> int:
        return len(self.names)


@dataclass(frozen=True)
class SortedNames:
    """Immutable, ordered names handed to the renderer."""

    names: tuple[str, ...] = ()
    maxlen: int = 0

    def __len__(self) -> int:
        return len(self.names)


__all__ = [
    "NameCollection",
    "SortedNames",
    "sort_names",
]
