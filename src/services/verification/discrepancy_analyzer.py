"""
Discrepancy analysis between candidate (OCR) and reference text.

Detects 3 types of issues when similarity is below the analysis threshold:
1. Word count mismatch (critical error)
2. Line count mismatch (structural difference)
3. Low character accuracy (text accuracy issue)
"""
import logging
from dataclasses import dataclass, field
from typing import List

from src.core.config import settings
from src.core.constants import (
    LINE_COUNT_MISMATCH_TEMPLATE,
    LOW_ACCURACY_TEMPLATE,
    WORD_COUNT_MISMATCH_TEMPLATE,
)

logger = logging.getLogger(__name__)


@dataclass
class DiscrepancyReport:
    """Categorized issues found while comparing two texts."""
    critical_errors: List[str] = field(default_factory=list)
    structural_differences: List[str] = field(default_factory=list)
    text_accuracy_issues: List[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.critical_errors or self.structural_differences or self.text_accuracy_issues)


class DiscrepancyAnalyzer:
    """Derives categorized issues from raw and normalized text pairs."""

    def _check_word_count(self, candidate_norm: str, reference_norm: str) -> List[str]:
        """
        Critical error: word counts differ by more than the tolerated fraction
        of the reference word count.
        """
        candidate_words = len(candidate_norm.split())
        reference_words = len(reference_norm.split())

        if abs(candidate_words - reference_words) > reference_words * settings.WORD_COUNT_TOLERANCE:
            logger.debug(f"Word count mismatch: {candidate_words} vs {reference_words}")
            return [WORD_COUNT_MISMATCH_TEMPLATE.format(
                candidate=candidate_words,
                reference=reference_words
            )]
        return []

    def _check_line_count(self, candidate_raw: str, reference_raw: str) -> List[str]:
        """
        Structural difference: raw (pre-normalization) line counts differ by
        more than the tolerated number of lines.
        """
        candidate_lines = len(candidate_raw.split('\n'))
        reference_lines = len(reference_raw.split('\n'))

        if abs(candidate_lines - reference_lines) > settings.LINE_COUNT_TOLERANCE:
            logger.debug(f"Line count mismatch: {candidate_lines} vs {reference_lines}")
            return [LINE_COUNT_MISMATCH_TEMPLATE.format(
                candidate=candidate_lines,
                reference=reference_lines
            )]
        return []

    def _check_character_accuracy(self, similarity_pct: int) -> List[str]:
        """Text accuracy issue: similarity below the low-accuracy threshold."""
        threshold = settings.LOW_ACCURACY_THRESHOLD
        if similarity_pct < threshold:
            return [LOW_ACCURACY_TEMPLATE.format(threshold=threshold, similarity=similarity_pct)]
        return []

    def analyze(
        self,
        candidate_raw: str,
        reference_raw: str,
        candidate_norm: str,
        reference_norm: str,
        similarity_pct: int
    ) -> DiscrepancyReport:
        """
        Run all discrepancy checks.

        Checks only run when similarity is below DISCREPANCY_ANALYSIS_THRESHOLD;
        each check is independent, so zero to three messages may be produced.

        Args:
            candidate_raw: Candidate text as supplied
            reference_raw: Reference text as supplied
            candidate_norm: Normalized candidate text
            reference_norm: Normalized reference text
            similarity_pct: Integer similarity percentage

        Returns:
            DiscrepancyReport with categorized messages
        """
        if similarity_pct >= settings.DISCREPANCY_ANALYSIS_THRESHOLD:
            return DiscrepancyReport()

        report = DiscrepancyReport(
            critical_errors=self._check_word_count(candidate_norm, reference_norm),
            structural_differences=self._check_line_count(candidate_raw, reference_raw),
            text_accuracy_issues=self._check_character_accuracy(similarity_pct),
        )

        if report.has_issues:
            logger.info(
                f"Discrepancies at {similarity_pct}% similarity: "
                f"{len(report.critical_errors)} critical, "
                f"{len(report.structural_differences)} structural, "
                f"{len(report.text_accuracy_issues)} accuracy"
            )

        return report
