"""
Configuration settings for the application.
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # Options: "text", "json"
    LOG_INCLUDE_REQUEST_ID: bool = True  # Include X-Request-ID in logs

    # Performance Monitoring
    RESPONSE_TIME_WARNING_THRESHOLD_MS: int = 5000  # Warn if requests take longer than 5s (milliseconds)

    # Input Guardrails
    MAX_TEXT_LENGTH: int = 5_000_000  # Max characters accepted per text field

    # Reference Text Detection
    # Reference text must be longer than this (after trimming) to be used for verification
    MIN_REFERENCE_TEXT_LENGTH: int = 50

    # Similarity Scoring
    SIMILARITY_WORD_WEIGHT: float = 0.7  # Weight of word-level Jaccard
    SIMILARITY_BIGRAM_WEIGHT: float = 0.3  # Weight of character bigram Dice

    # Discrepancy Analysis
    DISCREPANCY_ANALYSIS_THRESHOLD: int = 95  # Analyze differences only below this similarity (%)
    WORD_COUNT_TOLERANCE: float = 0.1  # Allowed word count drift, as a fraction of reference words
    LINE_COUNT_TOLERANCE: int = 5  # Allowed absolute line count difference
    LOW_ACCURACY_THRESHOLD: int = 90  # Report low character accuracy below this similarity (%)

    # Assessment
    # Options: "strict" (99/95/90/80, canonical), "legacy" (95/85/70)
    ASSESSMENT_PROFILE: str = "strict"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Allow extra fields in .env for backward compatibility


settings = Settings()
