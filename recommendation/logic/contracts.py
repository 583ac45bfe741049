"""
Data Contracts for the Recommendation Scoring Engine

Defines Pydantic models for UserProfile (input), the candidate entity
variants (College, Scholarship, JobPosting, FutureCourse), their scored
copies and the RankedResult output. These contracts are the API boundary
for the scoring engine.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

from .constants import APTITUDE_DIMENSIONS, EducationLevelKey, StreamKey


ENGINE_VERSION = "2.0.0"


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

_TEXT_FIELDS = (
    "current_course", "study_area", "current_study_level", "class_level",
    "academic_level", "preferred_state", "preferred_district",
)
_LIST_FIELDS = ("target_course_interest", "interests", "preferred_locations")
APTITUDE_FIELDS = APTITUDE_DIMENSIONS + ("interpersonal",)


class UserProfile(BaseModel):
    """
    Input contract for the scoring engine.

    Immutable snapshot of a student's profile for one scoring pass. Aptitude
    numbers are in [0, 100]; absent values default to 0, absent text to ""
    and absent lists to [].
    """
    id: Optional[str] = Field(default=None, validation_alias=AliasChoices("id", "user_id", "student_id"))

    # Education
    current_course: str = ""
    study_area: str = ""
    current_study_level: str = ""
    class_level: str = ""
    academic_level: str = ""  # UG / PG / Diploma, used by scholarship scoring

    # Interests
    target_course_interest: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)

    # Location
    preferred_state: str = ""
    preferred_district: str = ""
    preferred_locations: List[str] = Field(default_factory=list)

    # Aptitude (column names and the quiz's "quantitative" are accepted too)
    logical: float = Field(default=0.0, validation_alias=AliasChoices("logical", "logical_score"))
    numerical: float = Field(
        default=0.0, validation_alias=AliasChoices("numerical", "numerical_score", "quantitative")
    )
    technical: float = Field(default=0.0, validation_alias=AliasChoices("technical", "technical_score"))
    verbal: float = Field(default=0.0, validation_alias=AliasChoices("verbal", "verbal_score"))
    creative: float = Field(default=0.0, validation_alias=AliasChoices("creative", "creative_score"))
    interpersonal: float = Field(
        default=0.0, validation_alias=AliasChoices("interpersonal", "interpersonal_score")
    )
    overall_score: Optional[float] = None

    class Config:
        frozen = True
        populate_by_name = True
        coerce_numbers_to_str = True

    @model_validator(mode="before")
    @classmethod
    def _flatten_skills(cls, data: Any) -> Any:
        # map-opportunities callers nest the aptitude numbers under "skills"
        if isinstance(data, dict) and isinstance(data.get("skills"), dict):
            flattened = {k: v for k, v in data.items() if k != "skills"}
            for name, value in data["skills"].items():
                flattened.setdefault(name, value)
            return flattened
        return data

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _none_to_empty_text(cls, value):
        return "" if value is None else value

    @field_validator(*_LIST_FIELDS, mode="before")
    @classmethod
    def _none_to_empty_list(cls, value):
        return [] if value is None else value

    @field_validator(*APTITUDE_FIELDS, mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        return 0.0 if value is None else value

    def aptitude(self, dimension: str) -> float:
        """Raw aptitude number for a dimension name, 0 when unknown."""
        return float(getattr(self, dimension, 0.0) or 0.0)

    def aptitude_scores(self) -> Dict[str, float]:
        return {dim: self.aptitude(dim) for dim in APTITUDE_DIMENSIONS}

    def location_preferences(self) -> List[str]:
        """Preferred locations plus state and district, de-duplicated in order."""
        seen: List[str] = []
        for loc in [*self.preferred_locations, self.preferred_state, self.preferred_district]:
            if loc and loc.strip() and loc.strip() not in seen:
                seen.append(loc.strip())
        return seen


# =============================================================================
# CANDIDATE ENTITIES
# =============================================================================

class College(BaseModel):
    """College row as read from storage."""
    kind: Literal["college"] = "college"
    id: Optional[str] = None
    college_name: str = "Unknown College"
    state: str = ""
    district: str = ""
    specialised_in: str = ""
    college_type: str = ""
    courses_offered: List[str] = Field(default_factory=list)
    rating: Optional[float] = None
    fees: Optional[float] = None
    website: Optional[str] = None
    admission_link: Optional[str] = None
    is_active: bool = True

    class Config:
        frozen = True
        coerce_numbers_to_str = True


class Scholarship(BaseModel):
    """Verified scholarship listing."""
    kind: Literal["scholarship"] = "scholarship"
    id: Optional[str] = None
    name: str = ""
    provider: str = ""
    eligibility_summary: str = ""
    amount: str = ""
    deadline: Optional[str] = None
    apply_url: str = ""
    official_domain: str = ""
    required_documents: List[str] = Field(default_factory=list)
    target_locations: List[str] = Field(default_factory=list)
    target_academic_level: List[str] = Field(default_factory=list)
    location_match: Optional[bool] = None  # explicit flag from curated sources
    status: str = "open"

    class Config:
        frozen = True
        coerce_numbers_to_str = True


class JobPosting(BaseModel):
    """Verified job posting."""
    kind: Literal["job"] = "job"
    id: Optional[str] = None
    role: str = ""
    company: str = ""
    location: str = ""
    salary_range: Optional[str] = None
    apply_url: str = ""
    posting_date: Optional[datetime] = None
    source_site: str = ""
    job_type: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
        coerce_numbers_to_str = True


class FutureCourse(BaseModel):
    """Catalog course a student could take next."""
    kind: Literal["future_course"] = "future_course"
    name: str
    code: str = ""
    tags: List[str] = Field(default_factory=list)
    description: str = ""
    entrance_exams: List[str] = Field(default_factory=list)
    college_types: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


CandidateEntity = Annotated[
    Union[College, Scholarship, JobPosting, FutureCourse],
    Field(discriminator="kind"),
]


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class DimensionScore(BaseModel):
    """Individual dimension sub-score (0-100) with explanation."""
    dimension: str
    score: float = Field(ge=0.0, le=100.0)
    weight: float = Field(ge=0.0, le=1.0)
    weighted_score: float = Field(ge=0.0, le=100.0)
    explanation: str = ""


class RecommendedCollege(College):
    confidence_score: int = Field(ge=0, le=100)
    match_reason: str = Field(min_length=1)
    is_user_state: bool = False
    dimension_scores: List[DimensionScore] = Field(default_factory=list)


class ScoredScholarship(Scholarship):
    confidence_score: int = Field(ge=0, le=100)
    match_reason: str = Field(min_length=1)
    eligibility_uncertain: bool = False


class ScoredJob(JobPosting):
    confidence_score: int = Field(ge=0, le=100)
    match_reason: str = Field(min_length=1)


class RecommendedCourse(FutureCourse):
    confidence_score: int = Field(ge=0, le=100)
    match_reason: str = Field(min_length=1)
    is_placeholder: bool = False


RankedItem = Annotated[
    Union[RecommendedCollege, ScoredScholarship, ScoredJob, RecommendedCourse],
    Field(discriminator="kind"),
]


class RankedResult(BaseModel):
    """
    Output contract for one ranking request: an ordered, truncated list of
    decorated candidates of a single variant.
    """
    variant: str
    stream: Optional[StreamKey] = None
    level_key: Optional[EducationLevelKey] = None
    items: List[RankedItem] = Field(default_factory=list)

    # Summary Statistics
    total_candidates_evaluated: int = 0
    total_after_filter: int = 0

    engine_version: str = ENGINE_VERSION
    warnings: List[str] = Field(default_factory=list)


class SourceError(BaseModel):
    """Partial-failure entry for one data source."""
    source: str
    message: str


class OpportunityMeta(BaseModel):
    timestamp: datetime
    profile_id: Optional[str] = None
    sources: List[str] = Field(default_factory=list)


class OpportunitySets(BaseModel):
    colleges: List[RecommendedCollege] = Field(default_factory=list)
    scholarships: List[ScoredScholarship] = Field(default_factory=list)
    jobs: List[ScoredJob] = Field(default_factory=list)
    future_courses: List[RecommendedCourse] = Field(default_factory=list)


class OpportunityResponse(BaseModel):
    """Envelope returned by the map-opportunities flow."""
    meta: OpportunityMeta
    recommendations: OpportunitySets
    explanations: List[str] = Field(default_factory=list)
    errors: List[SourceError] = Field(default_factory=list)
    ai_explanation: Optional[Dict[str, Any]] = None
