"""
Size counters for extracted text (characters, words, pages).
"""
import re

from src.core.constants import PAGE_MARKER_PATTERN
from src.models.verification_models import TextStatistics

_PAGE_MARKER = re.compile(PAGE_MARKER_PATTERN, re.IGNORECASE)


def compute_text_statistics(text: str) -> TextStatistics:
    """
    Count characters, words and page markers in a text.

    Args:
        text: Raw text, optionally containing "--- Page N ---" markers

    Returns:
        TextStatistics; pages is 0 when the text carries no page markers
    """
    text = text or ""
    return TextStatistics(
        characters=len(text),
        words=len(text.split()),
        pages=len(_PAGE_MARKER.findall(text)),
    )
