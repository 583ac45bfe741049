"""
Recommendation API Routes

Exposes the recommendation engine via REST API:
- POST /recommendations/rank           rank one candidate list
- POST /recommendations/explain        aggregate explanation strings
- POST /recommendations/opportunities  DB-backed map-opportunities flow
- GET  /recommendations/profiles/{id}/colleges
- GET  /recommendations/profiles/{id}/future-courses
"""

import logging
import traceback
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.orm import Session

from db import get_db
from .errors import RecommendationError
from .logic.contracts import (
    APTITUDE_FIELDS,
    CandidateEntity,
    ENGINE_VERSION,
    UserProfile,
)
from .logic.constants import StreamKey
from .logic.engine import RecommendationEngine
from .logic.runner import map_opportunities, run_stream_college_recommendations, run_stream_future_courses
from .ai.explainer import explainer

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class StrictProfile(UserProfile):
    """Profile as accepted at the network boundary: aptitude numbers must be in [0, 100]."""

    @field_validator(*APTITUDE_FIELDS)
    @classmethod
    def _in_range(cls, value: float) -> float:
        if not 0 <= value <= 100:
            raise ValueError("aptitude scores must be between 0 and 100")
        return value


class RankRequest(BaseModel):
    """Request body for the ranking endpoint."""
    profile: StrictProfile
    candidates: List[CandidateEntity] = Field(
        default_factory=list,
        description="Candidates of a single variant, tagged by `kind`",
    )
    stream_override: Optional[StreamKey] = None


class RankedSets(BaseModel):
    """Already ranked lists; only their sizes feed the explanation."""
    colleges: List[Dict[str, Any]] = Field(default_factory=list)
    scholarships: List[Dict[str, Any]] = Field(default_factory=list)
    jobs: List[Dict[str, Any]] = Field(default_factory=list)


class ExplainRequest(BaseModel):
    profile: StrictProfile
    ranked_sets: RankedSets = Field(default_factory=RankedSets)


class OpportunitiesRequest(BaseModel):
    profile: StrictProfile
    explain: bool = Field(
        default=False,
        description="Include AI-generated explanation"
    )


engine = RecommendationEngine()


def _server_error(e: Exception) -> JSONResponse:
    logger.error(f"❌ Recommendation request failed: {e}\n{traceback.format_exc()}")
    return JSONResponse(status_code=500, content={"error": str(e)})


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/health", summary="Engine health check")
def health():
    return {"status": "ok", "engine_version": ENGINE_VERSION}


@router.post("/rank", summary="Rank one candidate list")
def rank(request: RankRequest):
    """
    Rank colleges, scholarships, jobs or future courses for a profile.

    **Request Body:**
    - `profile`: Student profile with aptitude scores
    - `candidates`: One variant only; mixing variants is rejected
    - `stream_override`: Use this stream instead of classifying the profile
    """
    try:
        result = engine.rank(request.profile, request.candidates, request.stream_override)
        return result.model_dump(mode="json")
    except RecommendationError:
        raise
    except Exception as e:
        return _server_error(e)


@router.post("/explain", summary="Aggregate explanation for ranked sets")
def explain(request: ExplainRequest):
    sets = request.ranked_sets
    return {
        "explanations": engine.explain(request.profile, sets.colleges, sets.scholarships, sets.jobs)
    }


@router.post("/opportunities", summary="Map opportunities for a profile")
def opportunities(request: OpportunitiesRequest, db_session=Depends(get_db)):
    """
    Colleges, scholarships, recent jobs and next courses in one envelope.
    A failing data source is reported under `errors` with an empty list.
    """
    try:
        db: Session
        with db_session as db:
            response = map_opportunities(db, request.profile)

        response_data: Dict[str, Any] = response.model_dump(mode="json")

        # AI Explanation Layer; meta carries the request timestamp and stays out of the cache key
        if request.explain:
            response_data["ai_explanation"] = explainer.get_explanation(
                profile=request.profile.model_dump(mode="json", exclude={"id"}),
                engine_output=response.model_dump(mode="json", exclude={"meta", "ai_explanation"}),
            )

        return response_data
    except RecommendationError:
        raise
    except Exception as e:
        return _server_error(e)


@router.get("/profiles/{profile_id}/colleges", summary="Stream-based colleges for a stored profile")
def profile_colleges(profile_id: str, db_session=Depends(get_db)):
    try:
        with db_session as db:
            _, result = run_stream_college_recommendations(db, profile_id)
        return result.model_dump(mode="json")
    except RecommendationError:
        raise
    except Exception as e:
        return _server_error(e)


@router.get("/profiles/{profile_id}/future-courses", summary="Next courses for a stored profile")
def profile_future_courses(profile_id: str, db_session=Depends(get_db)):
    try:
        with db_session as db:
            _, result = run_stream_future_courses(db, profile_id)
        return result.model_dump(mode="json")
    except RecommendationError:
        raise
    except Exception as e:
        return _server_error(e)
