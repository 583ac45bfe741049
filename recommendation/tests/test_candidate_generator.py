"""
Fetch-layer tests against an in-memory SQLite database.
"""

from datetime import datetime, timedelta

from recommendation.logic.candidate_generator import (
    catalog_courses,
    fetch_colleges,
    fetch_jobs,
    fetch_scholarships,
    filter_by_region,
    region_states,
)
from recommendation.logic.constants import DEFAULT_ENTRANCE_EXAMS, EducationLevelKey
from recommendation.logic.contracts import UserProfile
from recommendation.models import RecCollege, RecJob, RecScholarship

from conftest import make_college


NOW = datetime(2026, 3, 10, 12, 0, 0)


def _seed_colleges(db):
    db.add_all([
        RecCollege(id="c1", college_name="Lucknow Tech", state="Uttar Pradesh", rating=4.1),
        RecCollege(id="c2", college_name="Delhi Tech", state="delhi", rating=4.8),
        RecCollege(id="c3", college_name="Unrated", state="Uttar Pradesh", rating=None),
        RecCollege(id="c4", college_name="Chennai Tech", state="Tamil Nadu", rating=5.0),
        RecCollege(id="c5", college_name="Closed", state="Uttar Pradesh", rating=4.9, is_active=False),
    ])
    db.commit()


def test_region_states():
    assert region_states(UserProfile()) is None
    states = region_states(UserProfile(preferred_state="uttar pradesh"))
    assert states[0] == "Uttar Pradesh"
    assert "Delhi" in states and "Bihar" in states
    assert region_states(UserProfile(preferred_state="Atlantis")) == ["Atlantis"]


def test_fetch_colleges_region_and_order(db_session, cs_profile):
    _seed_colleges(db_session)

    colleges = fetch_colleges(db_session, cs_profile)

    assert [c.id for c in colleges] == ["c2", "c1", "c3"]
    assert colleges[0].state == "delhi"


def test_fetch_colleges_without_state_returns_all_active(db_session):
    _seed_colleges(db_session)

    colleges = fetch_colleges(db_session, UserProfile())

    assert [c.id for c in colleges] == ["c4", "c2", "c1", "c3"]


def test_fetch_colleges_limit(db_session):
    _seed_colleges(db_session)
    assert len(fetch_colleges(db_session, UserProfile(), max_candidates=2)) == 2


def test_filter_by_region_in_memory(cs_profile):
    colleges = [
        make_college(id="a"),
        make_college(id="b", state="Kerala"),
        make_college(id="c", state="BIHAR"),
        make_college(id="d", is_active=False),
    ]
    assert [c.id for c in filter_by_region(colleges, cs_profile)] == ["a", "c"]


def test_fetch_scholarships_open_only(db_session):
    db_session.add_all([
        RecScholarship(id="s1", name="Open One", status="open", target_locations=["National"]),
        RecScholarship(id="s2", name="Closed One", status="closed"),
        RecScholarship(id="s3", name="Open Two", status="OPEN"),
    ])
    db_session.commit()

    scholarships = fetch_scholarships(db_session)

    assert [s.id for s in scholarships] == ["s1", "s3"]
    assert scholarships[0].target_locations == ["National"]


def test_fetch_jobs_freshness_window(db_session):
    db_session.add_all([
        RecJob(id="j1", role="Fresh", posting_date=NOW - timedelta(days=2)),
        RecJob(id="j2", role="Stale", posting_date=NOW - timedelta(days=10)),
        RecJob(id="j3", role="Undated", posting_date=None),
        RecJob(id="j4", role="Edge", posting_date=NOW - timedelta(days=7)),
    ])
    db_session.commit()

    jobs = fetch_jobs(db_session, now=NOW)

    assert [j.id for j in jobs] == ["j1", "j4"]


def test_catalog_courses_fill_descriptions_and_exams():
    courses = {c.name: c for c in catalog_courses(EducationLevelKey.UG_SCIENCE)}

    assert courses["M.Sc"].description == "M.Sc - Higher education program for career advancement"
    assert courses["M.Sc"].entrance_exams == DEFAULT_ENTRANCE_EXAMS
    assert courses["MBA"].entrance_exams == ["CAT", "XAT", "MAT", "GMAT"]
    assert courses["MBA"].college_types == ["Science", "Engineering & Technology", "Management"]


def test_catalog_courses_keep_catalog_order():
    names = [c.name for c in catalog_courses(EducationLevelKey.DIPLOMA_ENGINEERING)]
    assert names == ["B.Tech (Lateral Entry)", "B.E. (Lateral Entry)"]
