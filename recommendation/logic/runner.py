"""
Engine Runner

Orchestrates the database-backed flows:
1. Loads or accepts a UserProfile
2. Fetches candidates via the candidate generator
3. Runs the recommendation engine
4. Returns ranked recommendations

This is a pure orchestration layer - NO scoring, NO business logic.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .adapter import profile_from_row
from .candidate_generator import fetch_colleges, fetch_jobs, fetch_scholarships
from .contracts import (
    OpportunityMeta,
    OpportunityResponse,
    OpportunitySets,
    RankedResult,
    SourceError,
    UserProfile,
)
from .engine import RecommendationEngine
from ..errors import PROFILE_NOT_FOUND, RecommendationError
from ..models import RecProfile
from utils.logging_utils import redact_pii

logger = logging.getLogger(__name__)


DATA_SOURCES = ["rec_colleges", "rec_scholarships", "rec_jobs", "future_course_catalog"]


def _fetch_source(db: Session, source: str, fetch: Callable[[], list], errors: List[SourceError]) -> list:
    """Run one source fetch; a database failure empties that source instead of failing the request."""
    try:
        return fetch()
    except SQLAlchemyError as e:
        logger.exception(f"❌ Fetch failed for {source}")
        db.rollback()
        errors.append(SourceError(source=source, message=str(e.__class__.__name__)))
        return []


def map_opportunities(
    db: Session,
    profile: UserProfile,
    now: Optional[datetime] = None,
) -> OpportunityResponse:
    """
    Main entry point: colleges, scholarships, jobs and future courses for
    one profile, with aggregate explanations.

    Args:
        db: Database session
        profile: Student profile snapshot
        now: Reference time for the job freshness window and the envelope

    Returns:
        OpportunityResponse; failed sources are listed in `errors`
    """
    now = now or datetime.now(timezone.utc)
    logger.info(f"🚀 Mapping opportunities for profile: {redact_pii(profile.model_dump())}")

    errors: List[SourceError] = []
    engine = RecommendationEngine()

    colleges = _fetch_source(db, "rec_colleges", lambda: fetch_colleges(db, profile), errors)
    scholarships = _fetch_source(db, "rec_scholarships", lambda: fetch_scholarships(db), errors)
    jobs = _fetch_source(
        db, "rec_jobs", lambda: fetch_jobs(db, now=now.replace(tzinfo=None)), errors
    )
    logger.info(
        f"📦 Fetched {len(colleges)} colleges, {len(scholarships)} scholarships, {len(jobs)} jobs"
    )

    recommendations = OpportunitySets(
        colleges=engine.rank_colleges(profile, colleges).items,
        scholarships=engine.rank_scholarships(profile, scholarships).items,
        jobs=engine.rank_jobs(profile, jobs).items,
        future_courses=engine.recommend_future_courses(profile).items,
    )

    response = OpportunityResponse(
        meta=OpportunityMeta(timestamp=now, profile_id=profile.id, sources=DATA_SOURCES),
        recommendations=recommendations,
        explanations=engine.explain(
            profile, recommendations.colleges, recommendations.scholarships, recommendations.jobs
        ),
        errors=errors,
    )

    logger.info(f"✨ Opportunity mapping complete ({len(errors)} source errors)")
    return response


def load_profile(db: Session, profile_id: str) -> UserProfile:
    """
    Raises:
        RecommendationError: no stored profile with this id (404)
    """
    row = db.query(RecProfile).filter(RecProfile.id == profile_id).first()
    if row is None:
        raise RecommendationError(
            f"Profile {profile_id} not found",
            code=PROFILE_NOT_FOUND,
            field="profile_id",
            status_code=404,
        )
    return profile_from_row(row)


def run_stream_college_recommendations(db: Session, profile_id: str) -> Tuple[UserProfile, RankedResult]:
    """Stored profile -> region-filtered colleges -> stream-ranked result."""
    profile = load_profile(db, profile_id)
    colleges = fetch_colleges(db, profile)
    result = RecommendationEngine().rank_colleges(profile, colleges)

    if not result.items:
        logger.warning(f"⚠️ No stream colleges for profile {profile_id}")
    return profile, result


def run_stream_future_courses(db: Session, profile_id: str) -> Tuple[UserProfile, RankedResult]:
    profile = load_profile(db, profile_id)
    return profile, RecommendationEngine().recommend_future_courses(profile)
