"""
Shared constants for OCR verification.

This module consolidates constants used across the codebase to ensure
consistency and make it easier to modify common values.
"""

# Page markers ("--- Page N ---") inserted between pages by upstream text extraction
PAGE_MARKER_PATTERN = r"---\s*page\s*\d+\s*---"

# Hebrew Unicode block (kept during normalization)
HEBREW_BLOCK = "\u0590-\u05FF"

# Messages for documents without usable reference text
NO_REFERENCE_SEMANTIC_INTEGRITY = "Cannot verify - no reference text available"
NO_REFERENCE_OVERALL_ASSESSMENT = (
    "No embedded text found - this is a scanned document. OCR is the only option."
)

# Discrepancy messages
WORD_COUNT_MISMATCH_TEMPLATE = (
    "Word count mismatch: OCR has {candidate} words, embedded text has {reference} words"
)
LINE_COUNT_MISMATCH_TEMPLATE = (
    "Line structure differs: OCR has {candidate} lines, embedded text has {reference} lines"
)
LOW_ACCURACY_TEMPLATE = "Character-level accuracy is below {threshold}% ({similarity}%)"

# Assessment profiles
ASSESSMENT_PROFILE_STRICT = "strict"
ASSESSMENT_PROFILE_LEGACY = "legacy"
