"""
Lenient adapter tests: wrong-typed and null fields fall back to neutral values.
"""

from datetime import datetime

from recommendation.logic.adapter import (
    safe_parse_college,
    safe_parse_job,
    safe_parse_profile,
    safe_parse_scholarship,
)


def test_profile_from_nested_skills_and_aliases():
    profile = safe_parse_profile({
        "user_id": 7,
        "skills": {"quantitative": 150, "technical": "80", "interpersonal": 65},
        "interests": None,
        "current_course": None,
        "logical_score": -5,
    })

    assert profile.id == "7"
    assert profile.numerical == 100.0
    assert profile.technical == 80.0
    assert profile.interpersonal == 65.0
    assert profile.logical == 0.0
    assert profile.interests == []
    assert profile.current_course == ""


def test_profile_garbage_values():
    profile = safe_parse_profile({
        "verbal": "abc",
        "creative": True,
        "target_course_interest": "BCA",
        "preferred_state": {"name": "Bihar"},
    })

    assert profile.verbal == 0.0
    assert profile.creative == 0.0
    assert profile.target_course_interest == ["BCA"]
    assert profile.preferred_state == ""


def test_profile_from_none():
    profile = safe_parse_profile(None)
    assert profile.id is None
    assert profile.aptitude_scores() == {d: 0.0 for d in ("logical", "numerical", "technical", "verbal", "creative")}


def test_college_coercion():
    college = safe_parse_college({
        "id": 12,
        "college_name": None,
        "courses_offered": "BCA",
        "rating": "4.2",
        "fees": "n/a",
        "is_active": None,
    })

    assert college.id == "12"
    assert college.college_name == "Unknown College"
    assert college.courses_offered == ["BCA"]
    assert college.rating == 4.2
    assert college.fees is None
    assert college.is_active is True


def test_scholarship_defaults():
    scholarship = safe_parse_scholarship({"name": "NSP", "target_locations": ["National", "", None]})
    assert scholarship.target_locations == ["National"]
    assert scholarship.status == "open"
    assert scholarship.location_match is None


def test_job_posting_date_parsing():
    job = safe_parse_job({"role": "Analyst", "posting_date": "2026-01-05T10:00:00Z"})
    assert job.posting_date.year == 2026
    assert safe_parse_job({"role": "Analyst", "posting_date": "yesterday"}).posting_date is None
    assert safe_parse_job({"posting_date": datetime(2026, 1, 1)}).posting_date == datetime(2026, 1, 1)
