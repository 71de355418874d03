"""
Pydantic models for API request and response structures.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.models.verification_models import ComparisonResult, DocumentMetadata, TextStatistics


class VerificationRequest(BaseModel):
    """Request model for verifying OCR text against reference text."""

    candidate_text: str = Field(..., description="Text recognized by OCR (or extracted directly)")
    reference_text: Optional[str] = Field(
        default=None,
        description="Embedded text extracted from the same document without OCR. Omit for scanned documents."
    )
    include_metadata: bool = Field(
        default=True,
        description="Also mine the candidate text for document metadata"
    )

    @field_validator('candidate_text')
    @classmethod
    def validate_candidate_text(cls, v: str) -> str:
        """Candidate text must contain something besides whitespace."""
        if not v.strip():
            raise ValueError("candidate_text cannot be empty")
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "candidate_text": "--- Page 1 ---\nPatient was seen on 05/10/2023 by Dr. John Smith at Memorial Hospital.",
                "reference_text": "--- Page 1 ---\nPatient was seen on 05/10/2023 by Dr. John Smith at Memorial Hospital.",
                "include_metadata": True
            }
        }
    }


class MetadataRequest(BaseModel):
    """Request model for metadata extraction only."""

    candidate_text: str = Field(..., description="Text to mine for document metadata")


class VerificationResponse(BaseModel):
    """Response model for /verify."""

    request_time: datetime = Field(..., description="When the request was received")
    timestamp: datetime = Field(..., description="When processing completed")
    comparison: ComparisonResult = Field(..., description="Verification result")
    metadata: Optional[DocumentMetadata] = Field(
        None,
        description="Document metadata (if include_metadata was set)"
    )
    candidate_statistics: TextStatistics
    reference_statistics: Optional[TextStatistics] = None


class MetadataResponse(BaseModel):
    """Response model for /metadata."""

    metadata: DocumentMetadata
    candidate_statistics: TextStatistics
