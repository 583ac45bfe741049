"""
Data Adapter for Recommendation Engine

Turns loosely-typed input (request dicts, ORM rows) into the engine's
contracts. Wrong-typed or null fields fall back to neutral values
(0 / "" / []) and aptitude numbers are clamped to [0, 100].

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO ranking/filtering
- NO DB writes
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from .contracts import College, JobPosting, Scholarship, UserProfile
from .constants import APTITUDE_DIMENSIONS

logger = logging.getLogger(__name__)


# Accepted source keys per aptitude dimension, first present wins
APTITUDE_SOURCE_KEYS: Dict[str, tuple] = {
    "logical": ("logical", "logical_score"),
    "numerical": ("numerical", "numerical_score", "quantitative"),
    "technical": ("technical", "technical_score"),
    "verbal": ("verbal", "verbal_score"),
    "creative": ("creative", "creative_score"),
    "interpersonal": ("interpersonal", "interpersonal_score"),
}

PROFILE_TEXT_FIELDS = (
    "current_course", "study_area", "current_study_level", "class_level",
    "academic_level", "preferred_state", "preferred_district",
)
PROFILE_LIST_FIELDS = ("target_course_interest", "interests", "preferred_locations")


def _safe_str(value: Any) -> str:
    """Coerce to a stripped string; None and containers become ''."""
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return ""
    return str(value).strip()


def _safe_float(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _clamp_score(value: Any) -> float:
    return max(0.0, min(100.0, _safe_float(value)))


def _safe_list(value: Any) -> List[str]:
    """Lists keep their non-empty string items; a bare string becomes a one-item list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [_safe_str(v) for v in value if _safe_str(v)]
    return []


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _first_present(data: Dict[str, Any], keys: tuple) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


# =============================================================================
# PROFILE
# =============================================================================

def safe_parse_profile(data: Optional[Dict[str, Any]]) -> UserProfile:
    """
    Build a UserProfile from an arbitrary dict without raising.

    Aptitude numbers may sit at the top level, under their *_score column
    names, or nested in a "skills" dict.
    """
    data = dict(data or {})
    skills = data.get("skills") if isinstance(data.get("skills"), dict) else {}
    merged = {**skills, **{k: v for k, v in data.items() if k != "skills"}}

    parsed: Dict[str, Any] = {
        "id": _safe_str(_first_present(merged, ("id", "user_id", "student_id"))) or None,
        "overall_score": _optional_float(merged.get("overall_score")),
    }
    for field in PROFILE_TEXT_FIELDS:
        parsed[field] = _safe_str(merged.get(field))
    for field in PROFILE_LIST_FIELDS:
        parsed[field] = _safe_list(merged.get(field))
    for dimension, keys in APTITUDE_SOURCE_KEYS.items():
        parsed[dimension] = _clamp_score(_first_present(merged, keys))

    return UserProfile(**parsed)


def profile_from_row(row) -> UserProfile:
    """Stored RecProfile row -> UserProfile."""
    return safe_parse_profile({
        "id": row.id,
        "current_course": row.current_course,
        "study_area": row.study_area,
        "current_study_level": row.current_study_level,
        "class_level": row.class_level,
        "target_course_interest": row.target_course_interest,
        "interests": row.interests,
        "preferred_state": row.preferred_state,
        "preferred_district": row.preferred_district,
        **{f"{dim}_score": getattr(row, f"{dim}_score") for dim in APTITUDE_DIMENSIONS},
        "overall_score": row.overall_score,
    })


# =============================================================================
# CANDIDATES
# =============================================================================

def safe_parse_college(data: Dict[str, Any]) -> College:
    is_active = data.get("is_active")
    return College(
        id=_safe_str(data.get("id")) or None,
        college_name=_safe_str(data.get("college_name")) or "Unknown College",
        state=_safe_str(data.get("state")),
        district=_safe_str(data.get("district")),
        specialised_in=_safe_str(data.get("specialised_in")),
        college_type=_safe_str(data.get("college_type")),
        courses_offered=_safe_list(data.get("courses_offered")),
        rating=_optional_float(data.get("rating")),
        fees=_optional_float(data.get("fees")),
        website=_safe_str(data.get("website")) or None,
        admission_link=_safe_str(data.get("admission_link")) or None,
        is_active=True if is_active is None else bool(is_active),
    )


def safe_parse_scholarship(data: Dict[str, Any]) -> Scholarship:
    location_match = data.get("location_match")
    return Scholarship(
        id=_safe_str(data.get("id")) or None,
        name=_safe_str(data.get("name")),
        provider=_safe_str(data.get("provider")),
        eligibility_summary=_safe_str(data.get("eligibility_summary")),
        amount=_safe_str(data.get("amount")),
        deadline=_safe_str(data.get("deadline")) or None,
        apply_url=_safe_str(data.get("apply_url")),
        official_domain=_safe_str(data.get("official_domain")),
        required_documents=_safe_list(data.get("required_documents")),
        target_locations=_safe_list(data.get("target_locations")),
        target_academic_level=_safe_list(data.get("target_academic_level")),
        location_match=location_match if isinstance(location_match, bool) else None,
        status=_safe_str(data.get("status")) or "open",
    )


def _parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    text = _safe_str(value)
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable posting date: {text}")
        return None


def safe_parse_job(data: Dict[str, Any]) -> JobPosting:
    return JobPosting(
        id=_safe_str(data.get("id")) or None,
        role=_safe_str(data.get("role")),
        company=_safe_str(data.get("company")),
        location=_safe_str(data.get("location")),
        salary_range=_safe_str(data.get("salary_range")) or None,
        apply_url=_safe_str(data.get("apply_url")),
        posting_date=_parse_datetime(data.get("posting_date")),
        source_site=_safe_str(data.get("source_site")),
        job_type=_safe_str(data.get("job_type")) or None,
        required_skills=_safe_list(data.get("required_skills")),
    )


def _row_to_dict(row) -> Dict[str, Any]:
    return {column.name: getattr(row, column.name) for column in row.__table__.columns}


def college_from_row(row) -> College:
    return safe_parse_college(_row_to_dict(row))


def scholarship_from_row(row) -> Scholarship:
    return safe_parse_scholarship(_row_to_dict(row))


def job_from_row(row) -> JobPosting:
    return safe_parse_job(_row_to_dict(row))


CANDIDATE_PARSERS = {
    "college": safe_parse_college,
    "scholarship": safe_parse_scholarship,
    "job": safe_parse_job,
}
