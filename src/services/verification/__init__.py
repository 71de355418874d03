"""
Verification package for OCR output quality assessment.

Split into focused modules:
- text_normalizer.py: Text canonicalization before comparison
- similarity_scorer.py: Word Jaccard + character bigram Dice scoring
- discrepancy_analyzer.py: Word count, line count and accuracy checks
- assessment_classifier.py: Threshold tables mapping scores to tiers
- verification_engine.py: VerificationEngine orchestration
"""
from .verification_engine import VerificationEngine, compare
from .assessment_classifier import Assessment, AssessmentClassifier
from .discrepancy_analyzer import DiscrepancyAnalyzer, DiscrepancyReport
from .similarity_scorer import SimilarityScorer
from .text_normalizer import TextNormalizer, normalize

__all__ = [
    'VerificationEngine',
    'compare',
    'Assessment',
    'AssessmentClassifier',
    'DiscrepancyAnalyzer',
    'DiscrepancyReport',
    'SimilarityScorer',
    'TextNormalizer',
    'normalize',
]
