"""
Document metadata extraction from recognized text.

Mines 12 categories of structured fields:
1. dates                 7. bodyArea
2. dateTypes             8. testsPerformed
3. providerName          9. testTypes
4. institutionName      10. specificMedications
5. departmentName       11. medicationTypes
6. specialty            12. diagnoses

Rules work on the raw text (case and punctuation matter for names, dates and
medications) plus a lowercase copy for keyword containment.
"""
import logging
from typing import Callable, Dict, Iterable, List, Set

from src.models.verification_models import DocumentMetadata

from . import patterns

logger = logging.getLogger(__name__)


def _contained(keywords: Iterable[str], lower_text: str) -> Set[str]:
    """Keywords that occur anywhere in the lowercased text."""
    return {keyword for keyword in keywords if keyword in lower_text}


class MetadataExtractor:
    """Extracts structured document metadata with independent per-category rules."""

    def _extract_dates(self, text: str, lower_text: str) -> Set[str]:
        dates = set()
        for pattern in patterns.DATE_PATTERNS:
            dates.update(match.group(0) for match in pattern.finditer(text))
        return dates

    def _extract_date_types(self, text: str, lower_text: str) -> Set[str]:
        return {
            date_type
            for date_type, keywords in patterns.DATE_TYPE_KEYWORDS.items()
            if any(keyword in lower_text for keyword in keywords)
        }

    def _extract_provider_names(self, text: str, lower_text: str) -> Set[str]:
        providers = set()
        for pattern in patterns.PROVIDER_PATTERNS:
            providers.update(match.group(0).strip() for match in pattern.finditer(text))
        return providers

    def _extract_institution_names(self, text: str, lower_text: str) -> Set[str]:
        """Short lines mentioning an institution keyword."""
        institutions = set()
        for line in text.split('\n'):
            line = line.strip()
            if not line or len(line) >= patterns.INSTITUTION_MAX_LINE_LENGTH:
                continue
            line_lower = line.lower()
            if any(keyword in line_lower for keyword in patterns.INSTITUTION_KEYWORDS):
                institutions.add(line)
        return institutions

    def _extract_department_names(self, text: str, lower_text: str) -> Set[str]:
        departments = set()
        for pattern in patterns.DEPARTMENT_PATTERNS:
            for match in pattern.finditer(text):
                department = match.group(0).strip()
                if department:
                    departments.add(department)
        return departments

    def _extract_specialties(self, text: str, lower_text: str) -> Set[str]:
        return _contained(patterns.SPECIALTIES, lower_text)

    def _extract_body_areas(self, text: str, lower_text: str) -> Set[str]:
        return {
            area
            for area, pattern in patterns.BODY_AREA_PATTERNS.items()
            if pattern.search(lower_text)
        }

    def _extract_tests_performed(self, text: str, lower_text: str) -> Set[str]:
        return _contained(patterns.TEST_INDICATORS, lower_text)

    def _extract_test_types(self, text: str, lower_text: str) -> Set[str]:
        return _contained(patterns.TEST_TYPES, lower_text)

    def _extract_specific_medications(self, text: str, lower_text: str) -> Set[str]:
        return set(patterns.MEDICATION_PATTERN.findall(text))

    def _extract_medication_types(self, text: str, lower_text: str) -> Set[str]:
        return {
            medication_type
            for medication_type, keywords in patterns.MEDICATION_TYPE_KEYWORDS.items()
            if any(keyword in lower_text for keyword in keywords)
        }

    def _extract_diagnoses(self, text: str, lower_text: str) -> Set[str]:
        diagnoses = set()
        for pattern in patterns.DIAGNOSIS_PATTERNS:
            for match in pattern.finditer(text):
                diagnosis = match.group(1).strip()
                if len(diagnosis) >= patterns.DIAGNOSIS_MIN_LENGTH:
                    diagnoses.add(diagnosis)
        return diagnoses

    def _rule_registry(self) -> Dict[str, Callable[[str, str], Set[str]]]:
        """Maps DocumentMetadata field names to their extraction rules."""
        return {
            'dates': self._extract_dates,
            'date_types': self._extract_date_types,
            'provider_name': self._extract_provider_names,
            'institution_name': self._extract_institution_names,
            'department_name': self._extract_department_names,
            'specialty': self._extract_specialties,
            'body_area': self._extract_body_areas,
            'tests_performed': self._extract_tests_performed,
            'test_types': self._extract_test_types,
            'specific_medications': self._extract_specific_medications,
            'medication_types': self._extract_medication_types,
            'diagnoses': self._extract_diagnoses,
        }

    def extract(self, text: str) -> DocumentMetadata:
        """
        Extract metadata from recognized text.

        Args:
            text: Raw candidate text

        Returns:
            DocumentMetadata with every category present (empty when nothing matched)
        """
        text = text or ""
        lower_text = text.lower()

        fields: Dict[str, Set[str]] = {
            name: rule(text, lower_text)
            for name, rule in self._rule_registry().items()
        }

        found: List[str] = [f"{name}={len(values)}" for name, values in fields.items() if values]
        if found:
            logger.info(f"Metadata extracted: {', '.join(found)}")
        else:
            logger.debug("Metadata extraction found nothing")

        return DocumentMetadata(**fields)


def extract_metadata(candidate_text: str) -> DocumentMetadata:
    """Mine candidate text for document metadata using default rules."""
    return MetadataExtractor().extract(candidate_text)
