from __future__ import annotations

from fastapi.testclient import TestClient

from caddie_server.app import app
from caddie_server.courses import CourseCatalog, FALLBACK_COURSES
from caddie_server.courses.store import get_course_catalog


def test_course_data_returns_selected_tee_distance(client: TestClient) -> None:
    response = client.post(
        "/api/course-data", json={"course": "Chateau", "hole": "6", "tee": "green"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "course": "Chateau",
        "courseKey": "Chateau",
        "hole": "6",
        "par": 3,
        "distance": 140,
        "teeColor": "green",
        "notes": "Excellent Option.",
        "allDistances": {"gold": 150, "green": 140, "white": 136},
    }


def test_course_data_defaults_to_white_tee(client: TestClient) -> None:
    response = client.post(
        "/api/course-data", json={"course": "woodlands", "hole": 13, "tee": "purple"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["courseKey"] == "Woodlands"
    assert data["hole"] == "13"
    assert data["teeColor"] == "white"
    assert data["distance"] == 134


def test_course_data_requires_course_and_hole(client: TestClient) -> None:
    response = client.post("/api/course-data", json={"course": "Chateau"})
    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "Missing course or hole parameter"


def test_course_data_unknown_course_lists_available(client: TestClient) -> None:
    response = client.post("/api/course-data", json={"course": "Augusta", "hole": "1"})
    assert response.status_code == 404
    detail = response.json()["detail"]
    assert detail["error"] == "Course not found"
    assert detail["availableCourses"] == ["Chateau", "Woodlands"]


def test_course_data_unknown_hole_lists_available(client: TestClient) -> None:
    response = client.post("/api/course-data", json={"course": "Chateau", "hole": "1"})
    assert response.status_code == 404
    detail = response.json()["detail"]
    assert detail["error"] == "Hole not found"
    assert detail["availableHoles"] == ["6", "8", "9"]


def test_course_data_ambiguous_course_is_conflict() -> None:
    catalog = CourseCatalog(
        courses={
            "Chateau": FALLBACK_COURSES["Chateau"],
            "Chateau North": FALLBACK_COURSES["Woodlands"],
        }
    )
    app.dependency_overrides[get_course_catalog] = lambda: catalog
    client = TestClient(app)
    response = client.post("/api/course-data", json={"course": "chateau n", "hole": "6"})
    assert response.status_code == 409
    assert response.json()["detail"]["candidates"] == ["Chateau", "Chateau North"]


def test_list_courses(client: TestClient) -> None:
    response = client.get("/api/courses")
    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "document"
    assert data["courses"] == [
        {"name": "Chateau", "holes": ["6", "8", "9"], "holeCount": 3},
        {"name": "Woodlands", "holes": ["2", "13"], "holeCount": 2},
    ]


def test_course_catalog_falls_back_when_document_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("COURSE_DATA_PATH", str(tmp_path / "missing.txt"))
    with TestClient(app) as client:
        response = client.get("/api/courses")
    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "fallback"
    assert [course["name"] for course in data["courses"]] == ["Chateau", "Woodlands"]
