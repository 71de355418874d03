"""Services package for OCR verification, metadata extraction and text statistics."""

from src.services.verification import VerificationEngine, compare
from src.services.metadata import MetadataExtractor, extract_metadata
from src.services.text_statistics import compute_text_statistics

__all__ = [
    'VerificationEngine',
    'compare',
    'MetadataExtractor',
    'extract_metadata',
    'compute_text_statistics',
]
