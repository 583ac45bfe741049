"""
Candidate Generator

Fetches candidate colleges, scholarships and jobs from the database and
builds future-course candidates from the static catalog. Region and
freshness pre-filters live here, at the data-fetch boundary; the scorers
never look at the clock or the database.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from .adapter import college_from_row, job_from_row, scholarship_from_row
from .contracts import College, FutureCourse, JobPosting, Scholarship, UserProfile
from .constants import (
    COURSE_DESCRIPTIONS,
    DEFAULT_ENTRANCE_EXAMS,
    ENTRANCE_EXAMS,
    FUTURE_COURSE_CATALOG,
    JOB_MAX_AGE_DAYS,
    MAX_COLLEGE_FETCH,
    NEARBY_STATES,
    EducationLevelKey,
)
from ..models import RecCollege, RecJob, RecScholarship

logger = logging.getLogger(__name__)


_NEARBY_BY_LOWER = {state.lower(): (state, neighbours) for state, neighbours in NEARBY_STATES.items()}


# =============================================================================
# REGION
# =============================================================================

def region_states(profile: UserProfile) -> Optional[List[str]]:
    """
    Preferred state plus its neighbours, or None when the profile has no
    preferred state (no state filter at all).
    """
    preferred = profile.preferred_state.strip()
    if not preferred:
        return None

    canonical, neighbours = _NEARBY_BY_LOWER.get(preferred.lower(), (preferred, ()))
    return [canonical, *neighbours]


def filter_by_region(colleges: Sequence[College], profile: UserProfile) -> List[College]:
    """In-memory twin of the SQL pre-filter for callers that supply their own rows."""
    states = region_states(profile)
    active = [c for c in colleges if c.is_active]
    if states is None:
        return active

    allowed = {s.lower() for s in states}
    return [c for c in active if c.state.strip().lower() in allowed]


# =============================================================================
# DATABASE FETCHES
# =============================================================================

def fetch_colleges(
    db: Session,
    profile: UserProfile,
    max_candidates: int = MAX_COLLEGE_FETCH,
) -> List[College]:
    """
    Active colleges in the user's region, best rated first (unrated last).

    Args:
        db: Database session
        profile: Student profile (only preferred_state is used)
        max_candidates: Row cap bounding scoring cost

    Returns:
        List of College contracts
    """
    query = db.query(RecCollege).filter(RecCollege.is_active.is_(True))

    states = region_states(profile)
    if states is not None:
        query = query.filter(func.lower(RecCollege.state).in_([s.lower() for s in states]))
        logger.info(f"🔍 Region filter applied: {states}")

    rows = (
        query.order_by(RecCollege.rating.is_(None), RecCollege.rating.desc(), RecCollege.id)
        .limit(max_candidates)
        .all()
    )
    logger.info(f"📊 Colleges fetched from DB: {len(rows)}")
    return [college_from_row(row) for row in rows]


def fetch_scholarships(db: Session) -> List[Scholarship]:
    """Open scholarships only; closed listings never reach the scorer."""
    rows = (
        db.query(RecScholarship)
        .filter(func.lower(RecScholarship.status) == "open")
        .order_by(RecScholarship.id)
        .all()
    )
    logger.info(f"📊 Open scholarships fetched from DB: {len(rows)}")
    return [scholarship_from_row(row) for row in rows]


def fetch_jobs(
    db: Session,
    now: Optional[datetime] = None,
    max_age_days: int = JOB_MAX_AGE_DAYS,
) -> List[JobPosting]:
    """Jobs posted within the last `max_age_days` days."""
    if now is None:
        now = datetime.now(timezone.utc).replace(tzinfo=None)
    cutoff = now - timedelta(days=max_age_days)

    rows = (
        db.query(RecJob)
        .filter(RecJob.posting_date.isnot(None), RecJob.posting_date >= cutoff)
        .order_by(RecJob.posting_date.desc(), RecJob.id)
        .all()
    )
    logger.info(f"📊 Recent jobs fetched from DB: {len(rows)} (since {cutoff.date()})")
    return [job_from_row(row) for row in rows]


# =============================================================================
# FUTURE-COURSE CATALOG
# =============================================================================

def catalog_courses(level_key: EducationLevelKey) -> List[FutureCourse]:
    """Catalog entries for a level key, with descriptions and entrance exams filled in."""
    entry = FUTURE_COURSE_CATALOG[level_key]
    return [
        FutureCourse(
            name=name,
            code=code,
            tags=list(tags),
            description=COURSE_DESCRIPTIONS.get(
                name, f"{name} - Higher education program for career advancement"
            ),
            entrance_exams=list(ENTRANCE_EXAMS.get(name, DEFAULT_ENTRANCE_EXAMS)),
            college_types=list(entry["college_types"]),
        )
        for name, code, tags in entry["courses"]
    ]
