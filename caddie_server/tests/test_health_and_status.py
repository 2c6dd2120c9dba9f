from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from caddie_server.app import app
from caddie_server.config import DEFAULT_WEB_DIR, reset_settings_cache

from .conftest import SAMPLE_DOCUMENT


def test_health_reports_environment() -> None:
    response = TestClient(app).get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["env"]["app_env"] == "development"
    assert body["env"]["heygen_enabled"] is False
    assert "python" in body["runtime"]


def test_status_with_course_document(monkeypatch, tmp_path) -> None:
    document = tmp_path / "courses.txt"
    document.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    monkeypatch.setenv("COURSE_DATA_PATH", str(document))
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    reset_settings_cache()

    body = TestClient(app).get("/api/test").json()
    assert body["status"] == "API is working"
    assert body["courseDataLoaded"] is True
    assert body["courseDataSource"] == "document"
    assert body["availableCourses"] == ["Chateau", "Woodlands"]
    assert body["openaiConfigured"] is True
    assert body["heygenConfigured"] is False
    assert body["googleTtsConfigured"] is False


def test_status_with_missing_document_uses_fallback(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("COURSE_DATA_PATH", str(tmp_path / "missing.txt"))
    reset_settings_cache()

    client = TestClient(app)
    body = client.get("/api/test").json()
    assert body["courseDataSource"] == "fallback"
    assert body["availableCourses"] == ["Chateau", "Woodlands"]

    hole = client.post("/api/course-data", json={"course": "Woodlands", "hole": 13})
    assert hole.status_code == 200
    assert hole.json()["distance"] == 134


def test_metrics_endpoint_counts_requests(monkeypatch, tmp_path) -> None:
    document = tmp_path / "courses.txt"
    document.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    monkeypatch.setenv("COURSE_DATA_PATH", str(document))
    reset_settings_cache()

    client = TestClient(app)
    client.get("/health")
    client.get("/api/test")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert (
        'caddie_http_requests_total{route="/health",method="GET",status="200"}'
        in response.text
    )
    assert 'caddie_course_holes{source="document"} 5.0' in response.text


def test_unknown_paths_share_one_route_label() -> None:
    client = TestClient(app)
    assert client.get("/api/no-such-endpoint-1").status_code == 404
    assert client.get("/api/no-such-endpoint-2").status_code == 404

    text = client.get("/metrics").text
    assert 'route="/api/no-such-endpoint-1"' not in text
    assert 'caddie_http_requests_total{route="unmatched",method="GET",status="404"}' in text


@pytest.mark.skipif(not DEFAULT_WEB_DIR.is_dir(), reason="web assets not present")
def test_root_serves_front_end(monkeypatch) -> None:
    monkeypatch.setenv("CADDIE_PROVIDER", "mock")
    reset_settings_cache()
    with TestClient(app) as client:
        response = client.get("/")
    assert response.status_code == 200
    assert "AI Golf Caddie" in response.text
