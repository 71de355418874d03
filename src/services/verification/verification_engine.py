"""
Verification orchestration for OCR output.

Coordinates normalization, similarity scoring, discrepancy analysis and
assessment into a single ComparisonResult.
"""
import logging
from typing import Optional

from src.core.config import settings
from src.models.verification_models import ComparisonResult

from .assessment_classifier import AssessmentClassifier
from .discrepancy_analyzer import DiscrepancyAnalyzer
from .similarity_scorer import SimilarityScorer
from .text_normalizer import TextNormalizer

logger = logging.getLogger(__name__)


class VerificationEngine:
    """Verifies candidate (OCR) text against reference (embedded) text."""

    def __init__(
        self,
        normalizer: Optional[TextNormalizer] = None,
        scorer: Optional[SimilarityScorer] = None,
        analyzer: Optional[DiscrepancyAnalyzer] = None,
        classifier: Optional[AssessmentClassifier] = None
    ):
        """
        Initialize verification engine.

        Args:
            normalizer: TextNormalizer instance (created if not provided)
            scorer: SimilarityScorer instance (created if not provided)
            analyzer: DiscrepancyAnalyzer instance (created if not provided)
            classifier: AssessmentClassifier instance (created if not provided)
        """
        self.normalizer = normalizer or TextNormalizer()
        self.scorer = scorer or SimilarityScorer()
        self.analyzer = analyzer or DiscrepancyAnalyzer()
        self.classifier = classifier or AssessmentClassifier()

    @staticmethod
    def has_reference_text(reference_raw: Optional[str]) -> bool:
        """Reference text is usable only when it is longer than the configured minimum after trimming."""
        return reference_raw is not None and len(reference_raw.strip()) > settings.MIN_REFERENCE_TEXT_LENGTH

    def compare(self, candidate_raw: Optional[str], reference_raw: Optional[str] = None) -> ComparisonResult:
        """
        Compare candidate text with reference text.

        Args:
            candidate_raw: Text produced by OCR (or direct extraction)
            reference_raw: Embedded text from the same document, if any

        Returns:
            ComparisonResult; when no usable reference exists, similarity is 0,
            all issue lists are empty and the fixed "no reference" messages are set
        """
        candidate_raw = candidate_raw or ""

        if not self.has_reference_text(reference_raw):
            logger.info("No usable reference text - skipping verification")
            assessment = self.classifier.classify(0, has_reference=False)
            return ComparisonResult(
                has_embedded_text=False,
                similarity=0,
                semantic_integrity=assessment.semantic_integrity,
                overall_assessment=assessment.overall_assessment,
                tier=assessment.tier,
            )

        candidate_norm = self.normalizer.normalize(candidate_raw)
        reference_norm = self.normalizer.normalize(reference_raw)

        score = self.scorer.score(candidate_norm, reference_norm)
        similarity_pct = self.scorer.to_percentage(score)

        report = self.analyzer.analyze(
            candidate_raw,
            reference_raw,
            candidate_norm,
            reference_norm,
            similarity_pct
        )
        assessment = self.classifier.classify(similarity_pct, has_reference=True)

        logger.info(
            f"Verification: similarity={similarity_pct}%, tier={assessment.tier}, "
            f"profile={self.classifier.profile}"
        )

        return ComparisonResult(
            has_embedded_text=True,
            similarity=similarity_pct,
            critical_errors=report.critical_errors,
            structural_differences=report.structural_differences,
            text_accuracy_issues=report.text_accuracy_issues,
            semantic_integrity=assessment.semantic_integrity,
            overall_assessment=assessment.overall_assessment,
            tier=assessment.tier,
        )


def compare(candidate_text: Optional[str], reference_text: Optional[str] = None) -> ComparisonResult:
    """Verify candidate text against reference text using default components."""
    return VerificationEngine().compare(candidate_text, reference_text)
