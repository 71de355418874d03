"""
Assessment tiers for similarity scores.

Two threshold tables exist. The strict four-threshold table is canonical; the
earlier three-threshold table is kept as the "legacy" profile. They are never
mixed: a classifier uses exactly one.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from src.core.config import settings
from src.core.error_handling import ConfigurationError
from src.core.constants import (
    ASSESSMENT_PROFILE_LEGACY,
    ASSESSMENT_PROFILE_STRICT,
    NO_REFERENCE_OVERALL_ASSESSMENT,
    NO_REFERENCE_SEMANTIC_INTEGRITY,
)
from src.models.verification_models import AssessmentTier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assessment:
    """Semantic integrity label and verdict for one similarity score."""
    semantic_integrity: str
    overall_assessment: str
    tier: AssessmentTier


# (minimum similarity %, tier, semantic integrity, overall assessment template)
# Ordered highest threshold first; the first row with threshold <= similarity wins.
ThresholdRow = Tuple[int, AssessmentTier, str, str]

STRICT_THRESHOLDS: List[ThresholdRow] = [
    (99, AssessmentTier.EXCELLENT,
     "Near-perfect accuracy",
     "Exceptional accuracy ({similarity}%) - highly reliable"),
    (95, AssessmentTier.VERY_GOOD,
     "Preserves meaning with minimal errors",
     "High accuracy ({similarity}%) - reliable for most purposes"),
    (90, AssessmentTier.GOOD,
     "Minor errors, meaning preserved",
     "Good accuracy ({similarity}%) - review recommended for critical use"),
    (80, AssessmentTier.FAIR,
     "Some errors may affect meaning in places",
     "Moderate accuracy ({similarity}%) - manual review required"),
    (0, AssessmentTier.POOR,
     "Significant errors likely change meaning",
     "Low accuracy ({similarity}%) - extensive manual correction needed"),
]

LEGACY_THRESHOLDS: List[ThresholdRow] = [
    (95, AssessmentTier.EXCELLENT,
     "Excellent - OCR text preserves meaning with minimal errors",
     "High accuracy ({similarity}%) - OCR text is reliable for most purposes"),
    (85, AssessmentTier.GOOD,
     "Good - Minor OCR errors present but overall meaning preserved",
     "Good accuracy ({similarity}%) - Review recommended for critical use"),
    (70, AssessmentTier.FAIR,
     "Fair - Multiple OCR errors may affect meaning in some sections",
     "Moderate accuracy ({similarity}%) - Manual review required"),
    (0, AssessmentTier.POOR,
     "Poor - Significant OCR errors likely change meaning",
     "Low accuracy ({similarity}%) - Extensive manual correction needed"),
]

THRESHOLD_PROFILES: Dict[str, List[ThresholdRow]] = {
    ASSESSMENT_PROFILE_STRICT: STRICT_THRESHOLDS,
    ASSESSMENT_PROFILE_LEGACY: LEGACY_THRESHOLDS,
}

NO_REFERENCE_ASSESSMENT = Assessment(
    semantic_integrity=NO_REFERENCE_SEMANTIC_INTEGRITY,
    overall_assessment=NO_REFERENCE_OVERALL_ASSESSMENT,
    tier=AssessmentTier.NO_REFERENCE_TEXT,
)


class AssessmentClassifier:
    """Maps a similarity percentage to an assessment tier."""

    def __init__(self, profile: Optional[str] = None):
        """
        Args:
            profile: Threshold table name ("strict" or "legacy"); defaults to settings

        Raises:
            ConfigurationError: If the profile name is unknown
        """
        profile = (profile or settings.ASSESSMENT_PROFILE).lower()
        if profile not in THRESHOLD_PROFILES:
            raise ConfigurationError(
                f"Unknown assessment profile '{profile}' (expected one of: {', '.join(THRESHOLD_PROFILES)})"
            )

        self.profile = profile
        self.thresholds = THRESHOLD_PROFILES[profile]

    def classify(self, similarity_pct: int, has_reference: bool) -> Assessment:
        """
        Classify a similarity percentage.

        Args:
            similarity_pct: Integer similarity percentage (0-100)
            has_reference: Whether reference text was available

        Returns:
            Assessment with tier and human-readable messages
        """
        if not has_reference:
            return NO_REFERENCE_ASSESSMENT

        for threshold, tier, semantic_integrity, overall_template in self.thresholds:
            if similarity_pct >= threshold:
                logger.debug(f"Classified {similarity_pct}% as {tier} (profile={self.profile})")
                return Assessment(
                    semantic_integrity=semantic_integrity,
                    overall_assessment=overall_template.format(similarity=similarity_pct),
                    tier=tier,
                )

        # Negative percentages fall through every row
        _, tier, semantic_integrity, overall_template = self.thresholds[-1]
        return Assessment(
            semantic_integrity=semantic_integrity,
            overall_assessment=overall_template.format(similarity=similarity_pct),
            tier=tier,
        )
