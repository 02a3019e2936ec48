"""Unit tests for DisavowSession.

Tests cover formatting and status lines, flag toggles that rerun the last
input, greenlist replacement and explicit reapplication, file loading with
and without strict UTF-8, preview assembly and reset.
"""

import tempfile
import unittest
from pathlib import Path

from disavowtui.core.constants import StatusKind
from disavowtui.core.models import AppSettings, SourceText
from disavowtui.orchestrator.session import DisavowSession


class TestSessionFormat(unittest.TestCase):
    """Test format() and its status lines."""

    def setUp(self):
        self.session = DisavowSession()

    def test_defaults_from_settings(self):
        """Test that flags and comment come from settings."""
        settings = AppSettings(comment="# mine", dedupe=False, skip_non_url=False, utf8_check=True)
        session = DisavowSession(settings)

        self.assertFalse(session.dedupe)
        self.assertFalse(session.skip_non_url)
        self.assertTrue(session.utf8_check)
        self.assertEqual(session.comment, "# mine")

    def test_format_sets_result_and_status(self):
        """Test that formatting reports the trimmed counts."""
        result = self.session.format("a.com\na.com\nb.com")

        self.assertEqual(result.filtered, ["domain:a.com", "domain:b.com"])
        self.assertEqual(self.session.status, "Trimmed 3 entries into 2.")
        self.assertEqual(self.session.last_processed, "a.com\na.com\nb.com")

    def test_format_uses_input_buffer(self):
        """Test that format() without text processes raw_input."""
        self.session.raw_input = "x.com"
        self.session.format()

        self.assertEqual(self.session.result.filtered, ["domain:x.com"])

    def test_blank_input_clears_state(self):
        """Test that blank input resets the result and last processed text."""
        self.session.format("a.com")
        self.session.format("   ")

        self.assertEqual(self.session.result.total, 0)
        self.assertEqual(self.session.result.filtered, [])
        self.assertIsNone(self.session.last_processed)
        self.assertEqual(self.session.status, "Nothing to format.")

    def test_preview_has_comment_then_domains(self):
        """Test that the preview starts with the comment line."""
        self.session.format("a.com\nb.com")

        self.assertEqual(self.session.preview, "# Disavow list\ndomain:a.com\ndomain:b.com")
        self.assertTrue(self.session.can_export)

    def test_blank_comment_omitted(self):
        """Test that an empty comment leaves only domains."""
        self.session.comment = "   "
        self.session.format("a.com")

        self.assertEqual(self.session.preview, "domain:a.com")


class TestSessionToggles(unittest.TestCase):
    """Test flag setters that rerun the last processed input."""

    def setUp(self):
        self.session = DisavowSession()

    def test_toggle_before_format_does_not_run(self):
        """Test that toggles only store the flag when nothing was formatted."""
        self.assertIsNone(self.session.set_dedupe(False))
        self.assertFalse(self.session.dedupe)
        self.assertEqual(self.session.status, "")

    def test_dedupe_toggle_reruns(self):
        """Test that toggling dedupe reprocesses with a dedicated status."""
        self.session.format("a.com\na.com\nb.com")

        result = self.session.set_dedupe(False)
        self.assertEqual(result.output_count, 3)
        self.assertEqual(self.session.status, "Showing all 3 entries.")

        result = self.session.set_dedupe(True)
        self.assertEqual(result.output_count, 2)
        self.assertEqual(self.session.status, "Removed duplicates: 2/3 domains left.")

    def test_skip_toggle_reruns(self):
        """Test that toggling the plain text filter reprocesses."""
        self.session.format("notes\na.com")

        result = self.session.set_skip_non_url(False)
        self.assertEqual(result.filtered, ["domain:notes", "domain:a.com"])
        self.assertEqual(self.session.status, "Including all 2 entries.")

        self.session.set_skip_non_url(True)
        self.assertEqual(self.session.status, "Skipped plain text: 1/2 entries kept.")

    def test_rerun_uses_last_processed_not_buffer(self):
        """Test that edits to the buffer after formatting are not picked up."""
        self.session.format("a.com")
        self.session.raw_input = "b.com"

        result = self.session.rerun()
        self.assertEqual(result.filtered, ["domain:a.com"])


class TestSessionGreenlist(unittest.TestCase):
    """Test greenlist replacement and reapplication."""

    def setUp(self):
        self.session = DisavowSession()

    def test_load_greenlist_replaces_without_rerun(self):
        """Test that loading only swaps the set."""
        self.session.format("example.com\nother.com")
        before = self.session.result

        entries = self.session.load_greenlist("example.com", "safe.txt")

        self.assertEqual(entries, frozenset({"domain:example.com"}))
        self.assertIs(self.session.result, before)
        self.assertEqual(self.session.greenlist_label, "safe.txt")
        self.assertEqual(self.session.status, "Greenlist loaded (1 domains).")

    def test_load_greenlist_is_wholesale(self):
        """Test that a new greenlist replaces the old one entirely."""
        self.session.load_greenlist("a.com\nb.com")
        self.session.load_greenlist("c.com")

        self.assertEqual(self.session.greenlist, frozenset({"domain:c.com"}))

    def test_apply_greenlist_reruns(self):
        """Test that apply composes load and rerun."""
        self.session.format("example.com\nother.com")

        result = self.session.apply_greenlist("example.com", "safe.txt")

        self.assertEqual(result.filtered, ["domain:other.com"])
        self.assertEqual(result.excluded_count, 1)
        self.assertEqual(self.session.status, "Greenlist applied: 1/2 domains kept.")

    def test_greenlist_used_by_later_formats(self):
        """Test that the greenlist persists across runs."""
        self.session.load_greenlist("example.com")
        result = self.session.format("example.com\nother.com")

        self.assertEqual(result.filtered, ["domain:other.com"])

    def test_clear_greenlist(self):
        """Test that clearing restores the full output."""
        self.session.format("example.com\nother.com")
        self.session.apply_greenlist("example.com", "safe.txt")

        result = self.session.clear_greenlist()

        self.assertEqual(self.session.greenlist, frozenset())
        self.assertIsNone(self.session.greenlist_label)
        self.assertEqual(result.output_count, 2)
        self.assertEqual(self.session.status, "Greenlist cleared: 2/2 domains available.")

    def test_empty_greenlist_status(self):
        """Test the status when a greenlist has no usable entries."""
        self.session.load_greenlist("domain:")
        self.assertEqual(self.session.status, "Greenlist empty; nothing to skip.")

    def test_paste_requires_text(self):
        """Test that an empty paste only sets a hint."""
        self.assertIsNone(self.session.apply_greenlist_paste("  "))
        self.assertEqual(self.session.status, "Paste greenlist domains first.")

    def test_paste_labels_greenlist(self):
        """Test that pasted greenlists get a fixed label."""
        self.session.apply_greenlist_paste("safe.com")
        self.assertEqual(self.session.greenlist_label, "Pasted greenlist")


class TestSessionSources(unittest.TestCase):
    """Test loading input and greenlist files."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.base = Path(self.temp_dir.name)
        self.session = DisavowSession()

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_append_source_joins_with_newline(self):
        """Test that file text is appended below existing input."""
        self.session.raw_input = "a.com"
        self.session.append_source(SourceText(name="links.txt", text="b.com"))

        self.assertEqual(self.session.raw_input, "a.com\nb.com")
        self.assertEqual(self.session.source_name, "links.txt")
        self.assertEqual(self.session.status, "Loaded links.txt")

    def test_load_input_file_strict(self):
        """Test that strict mode reports a verified load."""
        path = self.base / "links.txt"
        path.write_text("spam.com\n", encoding="utf-8")
        self.session.utf8_check = True

        self.assertTrue(self.session.load_input_file(path))
        self.assertEqual(self.session.raw_input, "spam.com\n")
        self.assertEqual(self.session.status, "UTF-8 verified: links.txt")
        self.assertEqual(self.session.status_kind, StatusKind.SUCCESS)

    def test_load_input_file_decode_failure(self):
        """Test that invalid UTF-8 becomes an error status, not input."""
        path = self.base / "bad.txt"
        path.write_bytes(b"spam.com\n\xff\xfe")
        self.session.utf8_check = True
        self.session.format("a.com")

        self.assertFalse(self.session.load_input_file(path))
        self.assertEqual(self.session.raw_input, "")
        self.assertIsNone(self.session.source_name)
        self.assertEqual(self.session.status, "UTF-8 verification failed for bad.txt")
        self.assertEqual(self.session.status_kind, StatusKind.ERROR)
        self.assertEqual(self.session.result.filtered, ["domain:a.com"])

    def test_lenient_load_flags_export(self):
        """Test that replaced bytes block export once UTF-8 checks are on."""
        path = self.base / "bad.txt"
        path.write_bytes(b"spam\xff.com\n")

        self.assertTrue(self.session.load_input_file(path))
        self.session.format()
        self.assertTrue(self.session.can_export)

        self.session.utf8_check = True
        self.assertFalse(self.session.utf8_safe)
        self.assertFalse(self.session.can_export)

    def test_missing_file(self):
        """Test that a missing file reports a read failure."""
        self.assertFalse(self.session.load_input_file(self.base / "missing.txt"))
        self.assertEqual(self.session.status, "Failed to read missing.txt")

    def test_load_greenlist_file(self):
        """Test that a greenlist file is applied with its name."""
        path = self.base / "safe.txt"
        path.write_text("example.com\n", encoding="utf-8")
        self.session.format("example.com\nother.com")

        self.assertTrue(self.session.load_greenlist_file(path))
        self.assertEqual(self.session.greenlist_label, "safe.txt")
        self.assertEqual(self.session.result.filtered, ["domain:other.com"])


class TestSessionReset(unittest.TestCase):
    """Test reset()."""

    def test_reset_restores_defaults(self):
        """Test that every field returns to the configured defaults."""
        session = DisavowSession()
        session.format("a.com")
        session.set_dedupe(False)
        session.comment = "# other"
        session.load_greenlist("a.com", "safe.txt")

        session.reset()

        self.assertTrue(session.dedupe)
        self.assertEqual(session.comment, "# Disavow list")
        self.assertEqual(session.greenlist, frozenset())
        self.assertIsNone(session.greenlist_label)
        self.assertIsNone(session.last_processed)
        self.assertEqual(session.result.total, 0)
        self.assertEqual(session.status, "")
        self.assertEqual(session.preview, "# Disavow list")
        self.assertTrue(session.can_export)

    def test_reset_with_blank_comment_cannot_export(self):
        """Test that nothing is exportable when the comment is cleared after reset."""
        session = DisavowSession()
        session.format("a.com")

        session.reset()
        session.comment = ""

        self.assertEqual(session.preview, "")
        self.assertFalse(session.can_export)


if __name__ == "__main__":
    unittest.main()
