from fastapi import APIRouter

from src.core.config import settings
from src.services.verification.assessment_classifier import THRESHOLD_PROFILES

router = APIRouter()


@router.get("/")
async def root():
    """Basic health check endpoint."""
    return {"message": "OCR Verification API", "status": "healthy"}


@router.get("/health")
async def health_check():
    """
    Configuration health check.

    Reports the active verification settings and flags an unknown
    assessment profile, which makes verification requests fail.
    """
    health_status = {
        "status": "healthy",
        "service": "OCR Verification",
        "version": "1.0",
        "assessment_profile": settings.ASSESSMENT_PROFILE,
        "min_reference_text_length": settings.MIN_REFERENCE_TEXT_LENGTH,
        "similarity_weights": {
            "word_jaccard": settings.SIMILARITY_WORD_WEIGHT,
            "bigram_dice": settings.SIMILARITY_BIGRAM_WEIGHT,
        },
        "max_text_length": settings.MAX_TEXT_LENGTH,
    }

    warnings = []
    if settings.ASSESSMENT_PROFILE.lower() not in THRESHOLD_PROFILES:
        warnings.append(f"Unknown assessment profile '{settings.ASSESSMENT_PROFILE}'")

    weight_total = settings.SIMILARITY_WORD_WEIGHT + settings.SIMILARITY_BIGRAM_WEIGHT
    if abs(weight_total - 1.0) > 1e-9:
        warnings.append(f"Similarity weights sum to {weight_total:.2f}, expected 1.0")

    if warnings:
        health_status["status"] = "degraded"
        health_status["warnings"] = warnings

    return health_status
