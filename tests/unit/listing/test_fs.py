"""Tests for directory reading and name ordering."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lscol.listing import (
    DirectoryUnavailableError,
    NameCollection,
    SortedNames,
    read_directory_names,
    sort_names,
)


class ReadDirectoryNamesTests(unittest.TestCase):
    def test_hidden_entries_are_skipped_and_maxlen_tracked(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("apple", "banana", ".hidden", "Zebra"):
                (root / name).write_text("", encoding="utf-8")
            (root / ".git").mkdir()
            (root / "docs").mkdir()

            collection = read_directory_names(root)

        self.assertEqual(set(collection.names), {"apple", "banana", "Zebra", "docs"})
        self.assertEqual(collection.maxlen, 6)

    def test_empty_directory_yields_empty_collection(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".only-hidden").write_text("", encoding="utf-8")

            collection = read_directory_names(root)

        self.assertEqual(collection.names, [])
        self.assertEqual(collection.maxlen, 0)
        self.assertEqual(len(collection), 0)

    def test_defaults_to_current_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "here.txt").write_text("", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                collection = read_directory_names()
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(collection.names, ["here.txt"])

    def test_missing_directory_raises_with_path_and_reason(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"

            with self.assertRaises(DirectoryUnavailableError) as ctx:
                read_directory_names(missing)

        self.assertEqual(ctx.exception.path, missing)
        self.assertIn(str(missing), str(ctx.exception))
        self.assertIn(ctx.exception.reason, str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    def test_regular_file_is_not_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")

            with self.assertRaises(DirectoryUnavailableError) as ctx:
                read_directory_names(target)

        self.assertIsInstance(ctx.exception.__cause__, NotADirectoryError)

    def test_permission_error_is_reported_as_unavailable(self) -> None:
        with mock.patch("lscol.listing.fs.os.scandir", side_effect=PermissionError(13, "Permission denied")):
            with self.assertRaises(DirectoryUnavailableError) as ctx:
                read_directory_names("/locked")

        self.assertEqual(ctx.exception.reason, "Permission denied")


class SortNamesTests(unittest.TestCase):
    def test_sort_is_bytewise_with_uppercase_first(self) -> None:
        self.assertEqual(sort_names(["apple", "banana", "Zebra"]), ("Zebra", "apple", "banana"))

    def test_sort_orders_digits_and_punctuation_by_code_point(self) -> None:
        self.assertEqual(sort_names(["b", "_a", "A", "10", "9"]), ("10", "9", "A", "_a", "b"))

    def test_collection_sorted_freezes_names_and_keeps_maxlen(self) -> None:
        collection = NameCollection()
        for name in ("delta", "Alpha", "charlie"):
            collection.add(name)

        frozen = collection.sorted()

        self.assertEqual(frozen, SortedNames(names=("Alpha", "charlie", "delta"), maxlen=7))


if __name__ == "__main__":
    unittest.main()
