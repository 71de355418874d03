"""
Verification API endpoints.

Adapts JSON requests to the pure verification and metadata functions.
"""
import asyncio
from datetime import datetime, timezone
from typing import Optional
import logging

from fastapi import APIRouter

from src.core.config import settings
from src.core.error_handling import TextValidationError, handle_verification_errors
from src.models.api_models import (
    MetadataRequest,
    MetadataResponse,
    VerificationRequest,
    VerificationResponse,
)
from src.services.metadata import extract_metadata
from src.services.text_statistics import compute_text_statistics
from src.services.verification import compare

logger = logging.getLogger(__name__)
router = APIRouter()


def _ensure_within_limit(text: Optional[str], field_name: str) -> None:
    """Reject texts above the configured size limit."""
    if text is not None and len(text) > settings.MAX_TEXT_LENGTH:
        raise TextValidationError(
            f"{field_name} exceeds maximum length of {settings.MAX_TEXT_LENGTH} characters "
            f"(got {len(text)})"
        )


@router.post("/verify", response_model=VerificationResponse)
@handle_verification_errors("Failed to verify text")
async def verify_text(request: VerificationRequest):
    """
    Verify OCR text against embedded reference text.

    When reference_text is missing or too short the document is treated as
    scanned: similarity is 0 and the assessment says OCR is the only option.

    Args:
        request: JSON body with candidate text, optional reference text and options

    Returns:
        Comparison result, optional metadata, and text statistics
    """
    request_time = datetime.now(timezone.utc)
    _ensure_within_limit(request.candidate_text, "candidate_text")
    _ensure_within_limit(request.reference_text, "reference_text")

    # Scoring and metadata mining are CPU-bound; keep them off the event loop
    comparison = await asyncio.to_thread(compare, request.candidate_text, request.reference_text)
    metadata = (
        await asyncio.to_thread(extract_metadata, request.candidate_text)
        if request.include_metadata else None
    )

    logger.info(
        f"Verified text: similarity={comparison.similarity}%, tier={comparison.tier}, "
        f"issues={comparison.issue_count}"
    )

    return VerificationResponse(
        request_time=request_time,
        timestamp=datetime.now(timezone.utc),
        comparison=comparison,
        metadata=metadata,
        candidate_statistics=compute_text_statistics(request.candidate_text),
        reference_statistics=(
            compute_text_statistics(request.reference_text)
            if request.reference_text is not None else None
        ),
    )


@router.post("/metadata", response_model=MetadataResponse)
@handle_verification_errors("Failed to extract metadata")
async def extract_text_metadata(request: MetadataRequest):
    """
    Mine candidate text for document metadata.

    Args:
        request: JSON body with candidate text

    Returns:
        Metadata with all 12 categories and candidate text statistics
    """
    _ensure_within_limit(request.candidate_text, "candidate_text")

    metadata = await asyncio.to_thread(extract_metadata, request.candidate_text)

    return MetadataResponse(
        metadata=metadata,
        candidate_statistics=compute_text_statistics(request.candidate_text),
    )
