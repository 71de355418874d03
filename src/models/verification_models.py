"""
Result models for OCR verification and metadata extraction.

Both result types are plain values: created fresh per call, no references back
to the source texts. JSON output uses camelCase keys.
"""
from enum import Enum
from typing import List, Set

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class AssessmentTier(str, Enum):
    """Ordinal label summarizing a similarity score."""
    EXCELLENT = "Excellent"
    VERY_GOOD = "VeryGood"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    NO_REFERENCE_TEXT = "NoReferenceText"

    def __str__(self) -> str:
        """Return string value of the tier."""
        return self.value


class ComparisonResult(BaseModel):
    """Outcome of verifying candidate (OCR) text against reference text."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    has_embedded_text: bool = Field(..., description="Whether usable reference text was available")
    similarity: int = Field(0, ge=0, le=100, description="Combined similarity as an integer percentage")
    critical_errors: List[str] = Field(default_factory=list)
    structural_differences: List[str] = Field(default_factory=list)
    text_accuracy_issues: List[str] = Field(default_factory=list)
    semantic_integrity: str = Field(..., description="How well meaning is preserved")
    overall_assessment: str = Field(..., description="Human-readable verdict")
    tier: AssessmentTier = Field(..., description="Assessment tier")

    @property
    def issue_count(self) -> int:
        """Total number of discrepancy messages."""
        return (
            len(self.critical_errors)
            + len(self.structural_differences)
            + len(self.text_accuracy_issues)
        )


class DocumentMetadata(BaseModel):
    """Structured fields mined from recognized text.

    Every category is always present; each holds a duplicate-free set.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    dates: Set[str] = Field(default_factory=set)
    date_types: Set[str] = Field(default_factory=set)
    provider_name: Set[str] = Field(default_factory=set)
    institution_name: Set[str] = Field(default_factory=set)
    department_name: Set[str] = Field(default_factory=set)
    specialty: Set[str] = Field(default_factory=set)
    body_area: Set[str] = Field(default_factory=set)
    tests_performed: Set[str] = Field(default_factory=set)
    test_types: Set[str] = Field(default_factory=set)
    specific_medications: Set[str] = Field(default_factory=set)
    medication_types: Set[str] = Field(default_factory=set)
    diagnoses: Set[str] = Field(default_factory=set)

    @field_serializer("*")
    def _serialize_sorted(self, value: Set[str]) -> List[str]:
        # Sets have no stable order; emit sorted lists so JSON output is deterministic
        return sorted(value)

    @classmethod
    def categories(cls) -> List[str]:
        """Category keys in their canonical (camelCase) form."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in type(self).model_fields)


class TextStatistics(BaseModel):
    """Basic size counters for a text."""

    characters: int = Field(..., ge=0)
    words: int = Field(..., ge=0)
    pages: int = Field(..., ge=0, description="Number of page markers found")
