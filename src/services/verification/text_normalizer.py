"""
Text normalization utilities for content comparison.
"""
import re
import logging
import unicodedata

from src.core.constants import HEBREW_BLOCK, PAGE_MARKER_PATTERN

logger = logging.getLogger(__name__)


# Typographic quote variants
QUOTE_VARIANTS = {
    "‘": "'",  # LEFT SINGLE QUOTATION MARK
    "’": "'",  # RIGHT SINGLE QUOTATION MARK
    "‚": "'",  # SINGLE LOW-9 QUOTATION MARK
    "‛": "'",  # SINGLE HIGH-REVERSED-9 QUOTATION MARK
    "′": "'",  # PRIME
    "“": '"',  # LEFT DOUBLE QUOTATION MARK
    "”": '"',  # RIGHT DOUBLE QUOTATION MARK
    "„": '"',  # DOUBLE LOW-9 QUOTATION MARK
    "‟": '"',  # DOUBLE HIGH-REVERSED-9 QUOTATION MARK
    "«": '"',  # LEFT-POINTING DOUBLE ANGLE QUOTATION MARK
    "»": '"',  # RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
}

# Dash/hyphen variants
DASH_VARIANTS = {
    "‐": "-",  # HYPHEN
    "‑": "-",  # NON-BREAKING HYPHEN
    "‒": "-",  # FIGURE DASH
    "–": "-",  # EN DASH
    "—": "-",  # EM DASH
    "―": "-",  # HORIZONTAL BAR
    "−": "-",  # MINUS SIGN
}

_PUNCTUATION_TABLE = str.maketrans({**QUOTE_VARIANTS, **DASH_VARIANTS})


class TextNormalizer:
    """Canonicalize raw text so superficial formatting differences disappear."""

    WHITESPACE_PATTERN = re.compile(r'\s+')
    PAGE_MARKER = re.compile(PAGE_MARKER_PATTERN, re.IGNORECASE)
    # Anything that is not a word character, whitespace, or Hebrew
    DISALLOWED_CHARACTERS = re.compile(rf'[^\w\s{HEBREW_BLOCK}]')

    def normalize(self, text: str) -> str:
        """
        Normalize text for comparison.

        Steps (in order):
        1. Lowercase
        2. Collapse whitespace
        3. Drop "--- Page N ---" markers
        4. Map typographic quotes and dashes to ASCII
        5. Unicode NFKC
        6. Strip everything except word characters, whitespace and Hebrew
        7. Collapse whitespace again and trim

        Args:
            text: Raw text

        Returns:
            Normalized text (idempotent: normalizing twice gives the same result)
        """
        if not text:
            return ""

        normalized = text.lower()
        normalized = self.WHITESPACE_PATTERN.sub(' ', normalized)
        normalized = self.PAGE_MARKER.sub('', normalized)
        normalized = normalized.translate(_PUNCTUATION_TABLE)
        normalized = unicodedata.normalize('NFKC', normalized)
        normalized = self.DISALLOWED_CHARACTERS.sub('', normalized)
        normalized = self.WHITESPACE_PATTERN.sub(' ', normalized).strip()

        # NFKC can introduce uppercase (e.g. compatibility ligatures); fold again
        if normalized != normalized.lower():
            return self.normalize(normalized)

        return normalized

    def word_count(self, normalized_text: str) -> int:
        """Count whitespace-separated words in normalized text."""
        return len(normalized_text.split())


_default_normalizer = TextNormalizer()


def normalize(text: str) -> str:
    """Normalize text with the shared stateless normalizer."""
    return _default_normalizer.normalize(text)
