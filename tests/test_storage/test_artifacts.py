"""Unit tests for source decoding and document export."""

import tempfile
import unittest
from datetime import date
from pathlib import Path

from disavowtui.core.exceptions import ExportError, SourceDecodeError, SourceReadError
from disavowtui.storage.artifacts import (
    decode_source,
    read_source,
    resolve_export_path,
    write_document,
)


class TestDecodeSource(unittest.TestCase):
    """Test decode_source()."""

    def test_strict_valid(self):
        source = decode_source("spam.com\nbücher.de".encode("utf-8"), "links.txt", strict_utf8=True)

        self.assertEqual(source.text, "spam.com\nbücher.de")
        self.assertTrue(source.verified)
        self.assertEqual(source.name, "links.txt")

    def test_strict_invalid_raises(self):
        with self.assertRaises(SourceDecodeError) as ctx:
            decode_source(b"spam.com\xff", "bad.txt", strict_utf8=True)

        self.assertEqual(ctx.exception.name, "bad.txt")

    def test_lenient_replaces(self):
        source = decode_source(b"spam\xff.com", "bad.txt")

        self.assertEqual(source.text, "spam\ufffd.com")
        self.assertFalse(source.verified)


class TestReadSource(unittest.TestCase):
    """Test read_source()."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.base = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_reads_file(self):
        path = self.base / "links.csv"
        path.write_bytes(b"url\r\nhttps://spam.com/a\r\n")

        source = read_source(path)

        self.assertEqual(source.name, "links.csv")
        self.assertEqual(source.text, "url\r\nhttps://spam.com/a\r\n")

    def test_missing_file_raises(self):
        with self.assertRaises(SourceReadError):
            read_source(self.base / "missing.txt")

    def test_strict_decode_failure(self):
        path = self.base / "bad.txt"
        path.write_bytes(b"\xc3\x28")

        with self.assertRaises(SourceDecodeError):
            read_source(path, strict_utf8=True)


class TestWriteDocument(unittest.TestCase):
    """Test export path resolution and writing."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.base = Path(self.temp_dir.name)
        self.today = date(2026, 10, 18)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_directory_gets_dated_name(self):
        path = resolve_export_path(self.base, self.today)
        self.assertEqual(path, self.base / "disavow-20261018.txt")

    def test_file_path_used_as_is(self):
        target = self.base / "out.txt"
        self.assertEqual(resolve_export_path(target, self.today), target)

    def test_writes_utf8(self):
        written = write_document("# Disavow list\ndomain:bücher.de", self.base, self.today)

        self.assertEqual(written.name, "disavow-20261018.txt")
        self.assertEqual(written.read_bytes(), "# Disavow list\ndomain:bücher.de".encode("utf-8"))

    def test_creates_parent_directories(self):
        target = self.base / "a" / "b" / "list.txt"
        write_document("domain:a.com", target)

        self.assertTrue(target.exists())

    def test_empty_document_raises(self):
        with self.assertRaises(ExportError):
            write_document("  ", self.base)


if __name__ == "__main__":
    unittest.main()
