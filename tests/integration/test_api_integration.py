"""
Integration tests for API endpoints.

Sends JSON requests through the full application stack (middleware,
routes, error handlers) and validates the responses.
"""
import asyncio
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from main import app
from src.core.config import settings
from src.services.metadata import extract_metadata
from src.services.verification import compare

SENTENCE = "Patient was seen on 05/10/2023 by Dr. John Smith at Memorial Hospital."


@pytest.fixture(scope="module")
def api_client():
    """Create TestClient for API calls."""
    return TestClient(app)


def test_root(api_client):
    """Test basic health check."""
    response = api_client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "OCR Verification API", "status": "healthy"}


def test_health(api_client):
    """Test configuration health check."""
    response = api_client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["assessment_profile"] == settings.ASSESSMENT_PROFILE
    assert data["min_reference_text_length"] == 50


def test_health_degraded_on_unknown_profile(api_client):
    """Test that an unknown assessment profile is reported."""
    with patch.object(settings, "ASSESSMENT_PROFILE", "bogus"):
        data = api_client.get("/health").json()
    assert data["status"] == "degraded"
    assert len(data["warnings"]) == 1
    assert "bogus" in data["warnings"][0]


def test_health_reports_every_problem(api_client):
    """Test that all configuration problems are listed together."""
    with patch.object(settings, "ASSESSMENT_PROFILE", "bogus"), \
            patch.object(settings, "SIMILARITY_WORD_WEIGHT", 0.9):
        data = api_client.get("/health").json()
    assert data["status"] == "degraded"
    assert len(data["warnings"]) == 2
    assert "bogus" in data["warnings"][0]
    assert "weights sum to 1.20" in data["warnings"][1]


def test_verify_identical_texts(api_client):
    """Test the exact-match scenario end to end."""
    response = api_client.post(
        "/verify",
        json={"candidate_text": SENTENCE, "reference_text": SENTENCE}
    )
    assert response.status_code == 200
    assert response.headers.get("X-Request-ID")
    assert response.headers.get("X-Process-Time", "").endswith("ms")

    data = response.json()
    comparison = data["comparison"]
    assert comparison["hasEmbeddedText"] is True
    assert comparison["similarity"] == 100
    assert comparison["tier"] == "Excellent"
    assert comparison["criticalErrors"] == []
    assert comparison["structuralDifferences"] == []
    assert comparison["textAccuracyIssues"] == []

    metadata = data["metadata"]
    assert metadata["dates"] == ["05/10/2023"]
    assert "Dr. John Smith" in metadata["providerName"]
    assert SENTENCE in metadata["institutionName"]
    assert len(metadata) == 12

    assert data["candidate_statistics"]["characters"] == len(SENTENCE)
    assert data["reference_statistics"]["words"] == len(SENTENCE.split())


def test_verify_without_reference(api_client):
    """Test that a scanned document (no reference) is reported as such."""
    response = api_client.post("/verify", json={"candidate_text": SENTENCE})
    assert response.status_code == 200

    data = response.json()
    assert data["comparison"]["hasEmbeddedText"] is False
    assert data["comparison"]["similarity"] == 0
    assert data["comparison"]["tier"] == "NoReferenceText"
    assert "OCR is the only option" in data["comparison"]["overallAssessment"]
    assert data["reference_statistics"] is None


def test_verify_word_count_mismatch(api_client):
    """Test that discrepancy messages come through the API."""
    reference = " ".join(f"word{i}" for i in range(100))
    candidate = reference + " " + " ".join(f"extra{i}" for i in range(20))

    response = api_client.post(
        "/verify",
        json={"candidate_text": candidate, "reference_text": reference, "include_metadata": False}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["metadata"] is None
    assert len(data["comparison"]["criticalErrors"]) == 1
    assert data["comparison"]["structuralDifferences"] == []


def test_verify_empty_candidate(api_client):
    """Test that blank candidate text is a schema violation."""
    response = api_client.post("/verify", json={"candidate_text": "   "})
    assert response.status_code == 422
    data = response.json()
    assert data["detail"][0]["loc"] == ["body", "candidate_text"]
    assert data["request_id"]


def test_verify_text_too_long(api_client):
    """Test that oversized text is rejected with 400."""
    with patch.object(settings, "MAX_TEXT_LENGTH", 10):
        response = api_client.post("/verify", json={"candidate_text": SENTENCE})
    assert response.status_code == 400
    assert "exceeds maximum length" in response.json()["detail"]
    assert response.headers.get("X-Request-ID")


def test_verify_unknown_profile(api_client):
    """Test that a misconfigured assessment profile is a server error."""
    with patch.object(settings, "ASSESSMENT_PROFILE", "bogus"):
        response = api_client.post(
            "/verify",
            json={"candidate_text": SENTENCE, "reference_text": SENTENCE}
        )
    assert response.status_code == 500
    assert "Service configuration error" in response.json()["detail"]


def test_verify_legacy_profile(api_client):
    """Test that the assessment profile can be switched by configuration."""
    with patch.object(settings, "ASSESSMENT_PROFILE", "legacy"):
        response = api_client.post(
            "/verify",
            json={"candidate_text": SENTENCE, "reference_text": SENTENCE, "include_metadata": False}
        )
    assert response.status_code == 200
    assert response.json()["comparison"]["semanticIntegrity"].startswith("Excellent - ")


def test_metadata_endpoint(api_client):
    """Test metadata extraction without verification."""
    response = api_client.post(
        "/metadata",
        json={"candidate_text": "Prescribed Lisinopril for blood pressure.\n--- Page 2 ---\nDr. Jane Doe"}
    )
    assert response.status_code == 200

    data = response.json()
    assert len(data["metadata"]) == 12
    assert data["metadata"]["specificMedications"] == ["Lisinopril"]
    assert data["metadata"]["medicationTypes"] == ["blood pressure"]
    assert data["metadata"]["providerName"] == ["Dr. Jane Doe"]
    assert data["candidate_statistics"]["pages"] == 1


def test_request_id_echoed(api_client):
    """Test that a caller-supplied request ID is returned unchanged."""
    response = api_client.get("/", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def _runs_on_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
        return True
    except RuntimeError:
        return False


def test_verify_work_runs_off_event_loop(api_client):
    """Test that scoring and metadata mining run in a worker thread."""
    on_loop = []

    def tracked_compare(candidate_text, reference_text=None):
        on_loop.append(_runs_on_event_loop())
        return compare(candidate_text, reference_text)

    def tracked_extract(candidate_text):
        on_loop.append(_runs_on_event_loop())
        return extract_metadata(candidate_text)

    with patch("src.api.routes.verification.compare", side_effect=tracked_compare), \
            patch("src.api.routes.verification.extract_metadata", side_effect=tracked_extract):
        response = api_client.post(
            "/verify",
            json={"candidate_text": SENTENCE, "reference_text": SENTENCE}
        )
        assert response.status_code == 200

        response = api_client.post("/metadata", json={"candidate_text": SENTENCE})
        assert response.status_code == 200

    assert on_loop == [False, False, False]
