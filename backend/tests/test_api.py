import pytest
from fastapi.testclient import TestClient

from api.router import limiter
from config import settings
from main import app

pytestmark = pytest.mark.api

client = TestClient(app)


@pytest.fixture(autouse=True)
def _no_rate_limit(monkeypatch):
    monkeypatch.setattr(limiter, "enabled", False)


def _assert_error(response, status_code: int, error: str):
    assert response.status_code == status_code
    data = response.json()
    assert data["success"] is False
    assert data["error"] == error
    assert data["message"]


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["mode"] == "heuristic"
    assert "timestamp" in data


def test_root_describes_endpoint():
    data = client.get("/").json()
    assert data["endpoint"] == "POST /api/analyze"


def test_analyze_text(strong_resume):
    response = client.post("/api/analyze/text", json={"resume_text": strong_resume})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    analysis = data["analysis"]
    assert 85 <= analysis["ats_score"] <= 95
    assert analysis["analyzed_by"] == "ats_heuristic_engine"
    assert analysis["timestamp"]
    assert len(analysis["factors"]) == 15
    assert sum(f["max"] for f in analysis["factors"]) == 100
    assert all(i["priority"] in ("high", "medium", "low") for i in analysis["improvements"])


def test_analyze_text_too_short():
    response = client.post("/api/analyze/text", json={"resume_text": "John Doe"})
    _assert_error(response, 400, "Empty File")


def test_analyze_text_missing_body():
    response = client.post("/api/analyze/text", json={})
    _assert_error(response, 422, "Invalid Request")


def test_analyze_upload_text_file(strong_resume):
    response = client.post(
        "/api/analyze",
        files={"resume": ("resume.txt", strong_resume.encode("utf-8"), "text/plain")},
    )
    assert response.status_code == 200
    assert response.json()["analysis"]["word_count"] > 400


def test_analyze_upload_matches_text_endpoint(strong_resume):
    upload = client.post(
        "/api/analyze",
        files={"resume": ("resume.txt", strong_resume.encode("utf-8"), "text/plain")},
    ).json()["analysis"]
    direct = client.post("/api/analyze/text", json={"resume_text": strong_resume}).json()["analysis"]
    upload.pop("timestamp")
    direct.pop("timestamp")
    assert upload == direct


def test_analyze_without_file():
    _assert_error(client.post("/api/analyze"), 400, "No file uploaded")


def test_analyze_file_too_large(monkeypatch, strong_resume):
    monkeypatch.setattr(settings, "max_upload_size_mb", 0)
    response = client.post(
        "/api/analyze",
        files={"resume": ("resume.txt", strong_resume.encode("utf-8"), "text/plain")},
    )
    _assert_error(response, 413, "File Too Large")


def test_analyze_unreadable_pdf():
    response = client.post(
        "/api/analyze",
        files={"resume": ("broken.pdf", b"not a pdf", "application/pdf")},
    )
    _assert_error(response, 400, "File Error")


def test_analyze_blank_upload():
    response = client.post(
        "/api/analyze",
        files={"resume": ("blank.txt", b"   \n\n  ", "text/plain")},
    )
    _assert_error(response, 400, "Empty File")
