"""Pydantic models for verification results and API validation."""

from .verification_models import (
    AssessmentTier,
    ComparisonResult,
    DocumentMetadata,
    TextStatistics
)
from .api_models import (
    VerificationRequest,
    VerificationResponse,
    MetadataRequest,
    MetadataResponse
)

__all__ = [
    "AssessmentTier",
    "ComparisonResult",
    "DocumentMetadata",
    "TextStatistics",
    "VerificationRequest",
    "VerificationResponse",
    "MetadataRequest",
    "MetadataResponse",
]
