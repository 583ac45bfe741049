"""
HTTP tests for the recommendation router, with the database dependency
pointed at the in-memory SQLite session.
"""

import json
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from db import get_db
from recommendation.errors import register_exception_handlers
from recommendation.logic.contracts import ENGINE_VERSION
from recommendation.models import RecCollege, RecJob, RecProfile, RecScholarship
from recommendation import routes
from recommendation.routes import router


PROFILE = {
    "id": "student-1",
    "current_course": "B.Tech CSE",
    "current_study_level": "UG 2nd year",
    "technical": 85,
    "numerical": 70,
    "logical": 60,
    "verbal": 40,
    "creative": 30,
    "preferred_state": "Uttar Pradesh",
}


@pytest.fixture
def client(db_session):
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)

    @contextmanager
    def session_scope():
        yield db_session

    app.dependency_overrides[get_db] = lambda: session_scope()
    return TestClient(app)


@pytest.fixture
def seeded(db_session):
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    db_session.add_all([
        RecCollege(id="c1", college_name="Lucknow Tech", state="Uttar Pradesh",
                   specialised_in="Engineering & Technology", rating=4.5),
        RecCollege(id="c2", college_name="Kanpur Medical", state="Uttar Pradesh",
                   specialised_in="Medical-Allopathy", college_type="Medical"),
        RecScholarship(id="s1", name="National Merit", status="open", target_locations=["National"]),
        RecJob(id="j1", role="Junior Developer", location="Noida", posting_date=now - timedelta(days=1),
               required_skills=["Python", "SQL"]),
        RecProfile(id="p1", current_course="B.Tech CSE", current_study_level="UG 2nd year",
                   technical_score=85, numerical_score=70, logical_score=60,
                   verbal_score=40, creative_score=30, preferred_state="Uttar Pradesh"),
    ])
    db_session.commit()


def test_health(client):
    response = client.get("/recommendations/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "engine_version": ENGINE_VERSION}


def test_rank_colleges(client):
    payload = {
        "profile": PROFILE,
        "candidates": [
            {"kind": "college", "college_name": "Lucknow Tech", "state": "Uttar Pradesh",
             "specialised_in": "Engineering & Technology"},
            {"kind": "college", "college_name": "Kanpur Medical", "state": "Uttar Pradesh",
             "specialised_in": "Medical-Allopathy"},
        ],
    }

    response = client.post("/recommendations/rank", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["variant"] == "college"
    assert [item["college_name"] for item in body["items"]] == ["Lucknow Tech"]
    assert body["items"][0]["is_user_state"] is True
    assert 0 <= body["items"][0]["confidence_score"] <= 100


def test_rank_empty_candidates(client):
    response = client.post("/recommendations/rank", json={"profile": PROFILE})
    assert response.status_code == 200
    assert response.json()["items"] == []


def test_rank_rejects_mixed_variants(client):
    payload = {
        "profile": PROFILE,
        "candidates": [
            {"kind": "college", "college_name": "Lucknow Tech"},
            {"kind": "job", "role": "Analyst"},
        ],
    }

    response = client.post("/recommendations/rank", json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == "MIXED_CANDIDATES"
    assert response.json()["field"] == "candidates"


def test_rank_rejects_out_of_range_aptitude(client):
    profile = {**PROFILE, "technical": 150}

    response = client.post("/recommendations/rank", json={"profile": profile, "candidates": []})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "INVALID_INPUT"
    assert body["field"].startswith("profile")


def test_explain(client):
    payload = {"profile": PROFILE, "ranked_sets": {"colleges": [{}, {}], "jobs": [{}]}}

    response = client.post("/recommendations/explain", json=payload)

    assert response.status_code == 200
    explanations = response.json()["explanations"]
    assert len(explanations) == 3
    assert explanations[0].startswith("Your top skills are technical, numerical, logical.")


def test_opportunities(client, seeded):
    response = client.post("/recommendations/opportunities", json={"profile": PROFILE})

    assert response.status_code == 200
    body = response.json()
    assert body["errors"] == []
    assert body["meta"]["profile_id"] == "student-1"
    recommendations = body["recommendations"]
    assert [c["id"] for c in recommendations["colleges"]] == ["c1"]
    assert [s["id"] for s in recommendations["scholarships"]] == ["s1"]
    assert [j["id"] for j in recommendations["jobs"]] == ["j1"]
    assert recommendations["future_courses"]
    assert len(body["explanations"]) == 4
    assert body["ai_explanation"] is None


def test_opportunities_reports_failed_source(client, seeded, sqlite_engine):
    RecJob.__table__.drop(bind=sqlite_engine)

    response = client.post("/recommendations/opportunities", json={"profile": PROFILE})

    assert response.status_code == 200
    body = response.json()
    assert [e["source"] for e in body["errors"]] == ["rec_jobs"]
    assert body["recommendations"]["jobs"] == []
    assert body["recommendations"]["colleges"]


def test_opportunities_ai_explanation_without_key(client, seeded):
    response = client.post("/recommendations/opportunities", json={"profile": PROFILE, "explain": True})
    assert response.status_code == 200
    assert response.json()["ai_explanation"] is None


def test_profile_colleges(client, seeded):
    response = client.get("/recommendations/profiles/p1/colleges")

    assert response.status_code == 200
    body = response.json()
    assert body["variant"] == "college"
    assert [c["id"] for c in body["items"]] == ["c1"]


def test_profile_future_courses(client, seeded):
    response = client.get("/recommendations/profiles/p1/future-courses")

    assert response.status_code == 200
    body = response.json()
    assert body["variant"] == "future_course"
    assert body["level_key"] == "ug_cs"
    assert all(item["name"] != "B.Tech CSE" for item in body["items"])


def test_unknown_profile_is_404(client):
    response = client.get("/recommendations/profiles/missing/colleges")

    assert response.status_code == 404
    assert response.json()["code"] == "PROFILE_NOT_FOUND"


def test_repeated_explain_requests_share_one_completion(client, seeded, monkeypatch):
    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        message = SimpleNamespace(content=json.dumps({"summary_explanation": "Good fit."}))
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    fake_client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    monkeypatch.setattr(routes.explainer, "client", fake_client)
    monkeypatch.setattr(routes.explainer, "cache", {})

    payload = {"profile": PROFILE, "explain": True}
    first = client.post("/recommendations/opportunities", json=payload).json()
    second = client.post("/recommendations/opportunities", json=payload).json()

    assert first["ai_explanation"] == {"summary_explanation": "Good fit."}
    assert second["ai_explanation"] == first["ai_explanation"]
    assert len(calls) == 1
    assert len(routes.explainer.cache) == 1
