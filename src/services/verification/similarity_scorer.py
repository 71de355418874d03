"""
Similarity scoring for OCR verification.

Combines two metrics:
- Word-level Jaccard similarity (gross content match)
- Character bigram Dice coefficient (tolerates character-level OCR noise)
"""
import logging
from collections import Counter
from typing import List, Optional

from src.core.config import settings

logger = logging.getLogger(__name__)


class SimilarityScorer:
    """Calculate similarity between two normalized texts."""

    def __init__(self, word_weight: Optional[float] = None, bigram_weight: Optional[float] = None):
        """
        Initialize similarity scorer.

        Args:
            word_weight: Weight of the word Jaccard metric (defaults to settings)
            bigram_weight: Weight of the bigram Dice metric (defaults to settings)
        """
        self.word_weight = settings.SIMILARITY_WORD_WEIGHT if word_weight is None else word_weight
        self.bigram_weight = settings.SIMILARITY_BIGRAM_WEIGHT if bigram_weight is None else bigram_weight

    def word_jaccard(self, text1: str, text2: str) -> float:
        """
        Jaccard similarity on sets of whitespace-separated words.

        Duplicate words within a text collapse to a single element.

        Args:
            text1: First normalized text
            text2: Second normalized text

        Returns:
            Jaccard similarity between 0.0 and 1.0
        """
        words1 = set(text1.split())
        words2 = set(text2.split())

        union = len(words1 | words2)
        if union == 0:
            return 0.0

        return len(words1 & words2) / union

    @staticmethod
    def _bigrams(text: str) -> List[str]:
        """All length-2 substrings, stride 1, duplicates kept."""
        return [text[i:i + 2] for i in range(len(text) - 1)]

    def bigram_dice(self, text1: str, text2: str) -> float:
        """
        Dice coefficient on character bigrams.

        Common bigrams are counted by multiset intersection, so a bigram that
        appears twice in both texts contributes two matches.

        Args:
            text1: First normalized text
            text2: Second normalized text

        Returns:
            Dice coefficient between 0.0 and 1.0
        """
        bigrams1 = self._bigrams(text1)
        bigrams2 = self._bigrams(text2)

        total = len(bigrams1) + len(bigrams2)
        if total == 0:
            return 0.0

        common = sum((Counter(bigrams1) & Counter(bigrams2)).values())
        return 2 * common / total

    def score(self, text1: str, text2: str) -> float:
        """
        Combined similarity between two normalized texts.

        Identical texts score 1.0; otherwise an empty text scores 0.0.

        Args:
            text1: First normalized text
            text2: Second normalized text

        Returns:
            Weighted combination of word Jaccard and bigram Dice, between 0.0 and 1.0
        """
        if text1 == text2:
            return 1.0

        if not text1 or not text2:
            logger.debug("One text is empty, similarity is 0.0")
            return 0.0

        jaccard = self.word_jaccard(text1, text2)
        dice = self.bigram_dice(text1, text2)
        combined = self.word_weight * jaccard + self.bigram_weight * dice

        logger.debug(f"Word Jaccard: {jaccard:.2%}, bigram Dice: {dice:.2%}, combined: {combined:.2%}")

        return max(0.0, min(1.0, combined))  # Clamp to [0, 1]

    @staticmethod
    def to_percentage(score: float) -> int:
        """Convert a [0, 1] score to an integer percentage."""
        # Half-up rounding, not banker's rounding
        return int(score * 100 + 0.5)
