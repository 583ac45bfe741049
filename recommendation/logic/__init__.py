"""
Recommendation Logic Module

Provides the deterministic scoring engine for college, scholarship, job and
future-course recommendations.
"""

from .contracts import (
    UserProfile,
    College,
    Scholarship,
    JobPosting,
    FutureCourse,
    RecommendedCollege,
    ScoredScholarship,
    ScoredJob,
    RecommendedCourse,
    DimensionScore,
    RankedResult,
    OpportunityResponse,
)
from .engine import RecommendationEngine, get_recommendations
from .classifier import classify_stream
from .level_resolver import resolve_level_key
from .constants import StreamKey, EducationLevelKey

__all__ = [
    # Main engine
    "RecommendationEngine",
    "get_recommendations",
    "classify_stream",
    "resolve_level_key",

    # Contracts
    "UserProfile",
    "College",
    "Scholarship",
    "JobPosting",
    "FutureCourse",
    "RecommendedCollege",
    "ScoredScholarship",
    "ScoredJob",
    "RecommendedCourse",
    "DimensionScore",
    "RankedResult",
    "OpportunityResponse",

    # Enums
    "StreamKey",
    "EducationLevelKey",
]
