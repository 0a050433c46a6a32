"""Directory reading and name ordering for listings."""

from .fs import DirectoryUnavailableError, is_hidden_name, read_directory_names
from .types import NameCollection, SortedNames, sort_names

__all__ = [
    "DirectoryUnavailableError",
    "NameCollection",
    "SortedNames",
    "is_hidden_name",
    "read_directory_names",
    "sort_names",
]
