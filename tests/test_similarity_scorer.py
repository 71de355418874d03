"""
Unit tests for similarity scoring (word Jaccard + character bigram Dice).
"""
import unittest

from src.services.verification import SimilarityScorer, normalize


class TestWordJaccard(unittest.TestCase):
    """Test cases for the word-level Jaccard metric."""

    def setUp(self):
        """Set up test fixtures."""
        self.scorer = SimilarityScorer(word_weight=0.7, bigram_weight=0.3)

    def test_duplicate_words_collapse(self):
        """Test that repeated words count once."""
        self.assertEqual(self.scorer.word_jaccard("a a b", "a b"), 1.0)

    def test_partial_overlap(self):
        """Test Jaccard on partially overlapping word sets."""
        jaccard = self.scorer.word_jaccard("the the quick brown fox", "a quick brown fox jumps")
        self.assertAlmostEqual(jaccard, 0.5)

    def test_disjoint(self):
        """Test that disjoint word sets score 0."""
        self.assertEqual(self.scorer.word_jaccard("alpha beta", "gamma delta"), 0.0)


class TestBigramDice(unittest.TestCase):
    """Test cases for the character bigram Dice metric."""

    def setUp(self):
        """Set up test fixtures."""
        self.scorer = SimilarityScorer(word_weight=0.7, bigram_weight=0.3)

    def test_multiset_intersection(self):
        """Test that repeated bigrams are matched as a multiset."""
        # "aaa" -> [aa, aa], "aa" -> [aa]; one common bigram
        self.assertAlmostEqual(self.scorer.bigram_dice("aaa", "aa"), 2 / 3)

    def test_identical(self):
        """Test that identical strings have Dice 1."""
        self.assertAlmostEqual(self.scorer.bigram_dice("night", "night"), 1.0)

    def test_no_bigrams(self):
        """Test that single characters produce no bigrams and score 0."""
        self.assertEqual(self.scorer.bigram_dice("a", "b"), 0.0)

    def test_hand_computed_example(self):
        """Test Dice on the quick-brown-fox pair (15 common bigrams out of 22 + 22)."""
        dice = self.scorer.bigram_dice("the the quick brown fox", "a quick brown fox jumps")
        self.assertAlmostEqual(dice, 30 / 44)


class TestCombinedScore(unittest.TestCase):
    """Test cases for SimilarityScorer.score."""

    def setUp(self):
        """Set up test fixtures."""
        self.scorer = SimilarityScorer(word_weight=0.7, bigram_weight=0.3)

    def test_identical_strings(self):
        """Test that identical strings score 1.0."""
        text = normalize("Patient was seen on 05/10/2023 by Dr. John Smith.")
        self.assertEqual(self.scorer.score(text, text), 1.0)

    def test_identical_empty_strings(self):
        """Test that two empty strings are identical."""
        self.assertEqual(self.scorer.score(normalize(""), normalize("")), 1.0)

    def test_one_empty_string(self):
        """Test that an empty string against anything scores 0."""
        self.assertEqual(self.scorer.score(normalize(""), normalize("anything")), 0.0)
        self.assertEqual(self.scorer.score("anything", ""), 0.0)

    def test_weighted_combination(self):
        """Test the combined score against a hand-computed value."""
        score = self.scorer.score("the the quick brown fox", "a quick brown fox jumps")
        expected = 0.7 * 0.5 + 0.3 * (30 / 44)
        self.assertAlmostEqual(score, expected)
        self.assertEqual(self.scorer.to_percentage(score), 55)

    def test_custom_weights(self):
        """Test that weights change the blend."""
        word_only = SimilarityScorer(word_weight=1.0, bigram_weight=0.0)
        score = word_only.score("the the quick brown fox", "a quick brown fox jumps")
        self.assertAlmostEqual(score, 0.5)

    def test_score_within_bounds(self):
        """Test that scores stay within [0, 1]."""
        pairs = [
            ("abc", "xyz"),
            ("hello world", "hello there world"),
            ("a", "ab"),
        ]
        for text1, text2 in pairs:
            with self.subTest(pair=(text1, text2)):
                score = self.scorer.score(text1, text2)
                self.assertGreaterEqual(score, 0.0)
                self.assertLessEqual(score, 1.0)

    def test_symmetric(self):
        """Test that argument order does not matter."""
        a = "invoice total due 1200"
        b = "invoice totl due 1200 now"
        self.assertAlmostEqual(self.scorer.score(a, b), self.scorer.score(b, a))


class TestToPercentage(unittest.TestCase):
    """Test cases for integer percentage conversion."""

    def test_rounds_half_up(self):
        """Test that .5 rounds up."""
        self.assertEqual(SimilarityScorer.to_percentage(0.125), 13)

    def test_rounds_down(self):
        """Test that values below .5 round down."""
        self.assertEqual(SimilarityScorer.to_percentage(0.994), 99)

    def test_bounds(self):
        """Test 0 and 1."""
        self.assertEqual(SimilarityScorer.to_percentage(0.0), 0)
        self.assertEqual(SimilarityScorer.to_percentage(1.0), 100)


if __name__ == '__main__':
    unittest.main()
