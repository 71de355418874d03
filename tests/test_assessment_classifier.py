"""
Unit tests for assessment tiers.
"""
import unittest
from unittest.mock import patch

from src.core.config import settings
from src.core.error_handling import ConfigurationError
from src.models import AssessmentTier
from src.services.verification import AssessmentClassifier


class TestStrictProfile(unittest.TestCase):
    """Test cases for the canonical 99/95/90/80 table."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = AssessmentClassifier("strict")

    def test_tier_thresholds(self):
        """Test that each threshold maps to its tier."""
        expected = {
            100: AssessmentTier.EXCELLENT,
            99: AssessmentTier.EXCELLENT,
            98: AssessmentTier.VERY_GOOD,
            95: AssessmentTier.VERY_GOOD,
            94: AssessmentTier.GOOD,
            90: AssessmentTier.GOOD,
            89: AssessmentTier.FAIR,
            80: AssessmentTier.FAIR,
            79: AssessmentTier.POOR,
            50: AssessmentTier.POOR,
            0: AssessmentTier.POOR,
        }
        for similarity, tier in expected.items():
            with self.subTest(similarity=similarity):
                self.assertEqual(self.classifier.classify(similarity, True).tier, tier)

    def test_messages(self):
        """Test semantic integrity and assessment wording."""
        assessment = self.classifier.classify(99, True)
        self.assertEqual(assessment.semantic_integrity, "Near-perfect accuracy")
        self.assertEqual(assessment.overall_assessment, "Exceptional accuracy (99%) - highly reliable")

        assessment = self.classifier.classify(82, True)
        self.assertEqual(assessment.semantic_integrity, "Some errors may affect meaning in places")
        self.assertEqual(assessment.overall_assessment, "Moderate accuracy (82%) - manual review required")

    def test_percentage_substituted(self):
        """Test that the percentage appears in every assessment."""
        for similarity in (100, 96, 91, 85, 12):
            with self.subTest(similarity=similarity):
                self.assertIn(f"({similarity}%)", self.classifier.classify(similarity, True).overall_assessment)

    def test_no_reference(self):
        """Test the fixed result when no reference text exists."""
        assessment = self.classifier.classify(100, False)
        self.assertEqual(assessment.tier, AssessmentTier.NO_REFERENCE_TEXT)
        self.assertEqual(assessment.semantic_integrity, "Cannot verify - no reference text available")
        self.assertIn("OCR is the only option", assessment.overall_assessment)


class TestLegacyProfile(unittest.TestCase):
    """Test cases for the earlier 95/85/70 table."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = AssessmentClassifier("legacy")

    def test_tier_thresholds(self):
        """Test that the legacy table has no VeryGood tier."""
        expected = {
            99: AssessmentTier.EXCELLENT,
            95: AssessmentTier.EXCELLENT,
            94: AssessmentTier.GOOD,
            85: AssessmentTier.GOOD,
            84: AssessmentTier.FAIR,
            70: AssessmentTier.FAIR,
            69: AssessmentTier.POOR,
        }
        for similarity, tier in expected.items():
            with self.subTest(similarity=similarity):
                self.assertEqual(self.classifier.classify(similarity, True).tier, tier)

    def test_messages(self):
        """Test legacy wording."""
        assessment = self.classifier.classify(87, True)
        self.assertTrue(assessment.semantic_integrity.startswith("Good - "))
        self.assertEqual(
            assessment.overall_assessment,
            "Good accuracy (87%) - Review recommended for critical use"
        )


class TestProfileSelection(unittest.TestCase):
    """Test cases for choosing a profile."""

    def test_default_from_settings(self):
        """Test that the profile comes from settings when not given."""
        with patch.object(settings, "ASSESSMENT_PROFILE", "legacy"):
            self.assertEqual(AssessmentClassifier().profile, "legacy")
        with patch.object(settings, "ASSESSMENT_PROFILE", "strict"):
            self.assertEqual(AssessmentClassifier().profile, "strict")

    def test_profile_case_insensitive(self):
        """Test that profile names ignore case."""
        self.assertEqual(AssessmentClassifier("LEGACY").profile, "legacy")

    def test_unknown_profile(self):
        """Test that an unknown profile is a configuration error."""
        with self.assertRaises(ConfigurationError) as context:
            AssessmentClassifier("lenient")
        self.assertIn("lenient", str(context.exception))


if __name__ == '__main__':
    unittest.main()
