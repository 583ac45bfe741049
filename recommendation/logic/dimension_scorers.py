"""
Dimension Scorers

Individual sub-score functions for the college and future-course scorers.
Each scorer produces a sub-score between 0 and 100 plus an optional reason
fragment. All logic is deterministic - no AI/ML components.
"""

from typing import Dict, Iterable, Optional, Tuple

from .contracts import College, DimensionScore, FutureCourse, UserProfile
from .constants import (
    COLLEGE_DIMENSION_WEIGHTS,
    COURSE_TAG_FAMILIES,
    DEFAULT_APTITUDE_BLEND,
    FUTURE_COURSE_WEIGHTS,
    INTEREST_BASE_SCORE,
    INTEREST_MATCH_SCORE,
    LOCATION_DISTRICT_SCORE,
    LOCATION_NEARBY_SCORE,
    LOCATION_STATE_SCORE,
    STREAM_APTITUDE_BLENDS,
    STREAM_KEYWORDS,
    STREAM_MATCH_SCORE,
    STREAM_MISMATCH_SCORE,
    STRONG_APTITUDE_THRESHOLD,
    StreamKey,
)


ScoredDimension = Tuple[DimensionScore, Optional[str]]


# =============================================================================
# APTITUDE
# =============================================================================

def aptitude_blend_for(stream: StreamKey) -> Dict[str, float]:
    """Blend weights for a stream; unknown streams use the unweighted mean."""
    return STREAM_APTITUDE_BLENDS.get(stream, DEFAULT_APTITUDE_BLEND)


def blend_aptitude(profile: UserProfile, blend: Dict[str, float]) -> float:
    return sum(profile.aptitude(dim) * weight for dim, weight in blend.items())


def score_aptitude(profile: UserProfile, stream: StreamKey) -> ScoredDimension:
    """
    Score stream-specific aptitude.

    Computer Science / Engineering lean on technical ability, Medical on
    logical reasoning, Commerce on numerical, Arts on creative and verbal.
    """
    raw_score = _clamp(blend_aptitude(profile, aptitude_blend_for(stream)))
    fragment = "Strong aptitude match" if raw_score >= STRONG_APTITUDE_THRESHOLD else None

    return _dimension(
        "aptitude",
        raw_score,
        COLLEGE_DIMENSION_WEIGHTS["aptitude"],
        f"{stream.value} aptitude blend: {raw_score:.1f}",
    ), fragment


# =============================================================================
# COURSE INTEREST
# =============================================================================

def score_course_interest(profile: UserProfile, college: College) -> ScoredDimension:
    """
    Score target-course interest against what the college offers.

    The first interest found in the specialization or courses text wins;
    later interests only matter when earlier ones miss.
    """
    specialization = college.specialised_in.lower()
    courses_text = " ".join(college.courses_offered).lower()
    weight = COLLEGE_DIMENSION_WEIGHTS["course_interest"]

    for interest in profile.target_course_interest:
        needle = (interest or "").strip()
        if not needle:
            continue
        if needle.lower() in specialization or needle.lower() in courses_text:
            return _dimension(
                "course_interest", INTEREST_MATCH_SCORE, weight, f"Offers {needle}"
            ), f"Offers {needle}"

    return _dimension("course_interest", INTEREST_BASE_SCORE, weight, "No target course offered"), None


# =============================================================================
# LOCATION
# =============================================================================

def score_location(is_user_state: bool, is_user_district: bool) -> ScoredDimension:
    """
    Score location tier. Candidates are pre-filtered to the user's state and
    its neighbours, so anything outside the user's state is a nearby state.
    """
    weight = COLLEGE_DIMENSION_WEIGHTS["location"]

    if is_user_district:
        return _dimension("location", LOCATION_DISTRICT_SCORE, weight, "Same district"), "In your district"
    if is_user_state:
        return _dimension("location", LOCATION_STATE_SCORE, weight, "Same state"), "In your state"
    return _dimension("location", LOCATION_NEARBY_SCORE, weight, "Neighbouring state"), "Nearby state"


# =============================================================================
# STREAM
# =============================================================================

def text_matches_stream(texts: Iterable[Optional[str]], stream: StreamKey) -> bool:
    """True when any stream keyword appears in any of the given texts."""
    lowered = [(text or "").lower() for text in texts]
    return any(
        keyword.lower() in text
        for keyword in STREAM_KEYWORDS.get(stream, ())
        for text in lowered
    )


def college_matches_stream(college: College, stream: StreamKey) -> bool:
    """Stream hard-filter test over specialization, type and courses offered."""
    return text_matches_stream(
        [college.specialised_in, college.college_type, " ".join(college.courses_offered)],
        stream,
    )


def score_stream(college: College, stream: StreamKey) -> ScoredDimension:
    weight = COLLEGE_DIMENSION_WEIGHTS["stream"]

    if text_matches_stream([college.specialised_in, college.college_type], stream):
        return _dimension(
            "stream", STREAM_MATCH_SCORE, weight, f"Specializes in {stream.value}"
        ), f"{stream.value} specialization"

    return _dimension("stream", STREAM_MISMATCH_SCORE, weight, "Specialization outside stream"), None


# =============================================================================
# FUTURE COURSE
# =============================================================================

def course_aptitude_family(course: FutureCourse) -> Tuple[str, Dict[str, float]]:
    """Pick the aptitude blend for a course from its tags (first family wins)."""
    tags_text = " ".join(course.tags).lower()
    for family, keywords, stream in COURSE_TAG_FAMILIES:
        if any(keyword in tags_text for keyword in keywords):
            return family, STREAM_APTITUDE_BLENDS[stream]
    return "general", DEFAULT_APTITUDE_BLEND


def score_course_aptitude(profile: UserProfile, course: FutureCourse) -> ScoredDimension:
    family, blend = course_aptitude_family(course)
    raw_score = _clamp(blend_aptitude(profile, blend))
    fragment = f"Strong {family} aptitude" if raw_score >= STRONG_APTITUDE_THRESHOLD else None

    return _dimension(
        "aptitude", raw_score, FUTURE_COURSE_WEIGHTS["aptitude"], f"{family} blend: {raw_score:.1f}"
    ), fragment


def score_course_interest_match(profile: UserProfile, course: FutureCourse) -> ScoredDimension:
    haystacks = [tag.lower() for tag in course.tags] + [course.name.lower()]
    weight = FUTURE_COURSE_WEIGHTS["interest"]

    for interest in [*profile.interests, *profile.target_course_interest]:
        needle = (interest or "").strip()
        if needle and any(needle.lower() in hay for hay in haystacks):
            return _dimension(
                "interest", INTEREST_MATCH_SCORE, weight, f"Matches {needle}"
            ), f"Matches your interest in {needle}"

    return _dimension("interest", INTEREST_BASE_SCORE, weight, "No interest match"), None


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _dimension(name: str, score: float, weight: float, explanation: str) -> DimensionScore:
    return DimensionScore(
        dimension=name,
        score=score,
        weight=weight,
        weighted_score=score * weight,
        explanation=explanation,
    )
