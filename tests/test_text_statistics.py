"""
Unit tests for text statistics.
"""
import unittest

from src.services.text_statistics import compute_text_statistics


class TestTextStatistics(unittest.TestCase):
    """Test cases for compute_text_statistics."""

    def test_counts(self):
        """Test character, word and page counts."""
        text = "--- Page 1 ---\nFirst page text\n\n--- Page 2 ---\nSecond page"
        stats = compute_text_statistics(text)
        self.assertEqual(stats.characters, len(text))
        self.assertEqual(stats.words, 13)
        self.assertEqual(stats.pages, 2)

    def test_no_page_markers(self):
        """Test that plain text has zero pages."""
        stats = compute_text_statistics("just a line")
        self.assertEqual(stats.words, 3)
        self.assertEqual(stats.pages, 0)

    def test_page_marker_case_and_spacing(self):
        """Test that markers are found regardless of case and spacing."""
        stats = compute_text_statistics("---PAGE 1---\nx\n---  page 12  ---\ny")
        self.assertEqual(stats.pages, 2)

    def test_empty_text(self):
        """Test that empty and missing text count as zero."""
        for text in ("", None):
            with self.subTest(text=text):
                stats = compute_text_statistics(text)
                self.assertEqual((stats.characters, stats.words, stats.pages), (0, 0, 0))


if __name__ == '__main__':
    unittest.main()
