"""
Ranker

Candidate filtering and selection: the stream hard filter, location flags,
the user-state-first college ordering, future-course exclusion and top-N
truncation.
"""

from typing import List, Sequence, Tuple, TypeVar

from .contracts import College, FutureCourse, RecommendedCollege, RecommendedCourse, UserProfile
from .dimension_scorers import college_matches_stream
from .constants import (
    MAX_COLLEGE_RECOMMENDATIONS,
    MAX_FUTURE_COURSE_RECOMMENDATIONS,
    PLACEHOLDER_COURSE_NAME,
    PLACEHOLDER_COURSE_REASON,
    StreamKey,
)


Scored = TypeVar("Scored")


def filter_by_stream(colleges: Sequence[College], stream: StreamKey) -> List[College]:
    """
    Drop every college whose specialization, type and courses offered all
    miss the stream's keywords. Non-matching colleges are excluded, never
    down-scored.
    """
    return [c for c in colleges if college_matches_stream(c, stream)]


def _same_place(left: str, right: str) -> bool:
    return bool(left.strip()) and left.strip().lower() == right.strip().lower()


def location_flags(profile: UserProfile, college: College) -> Tuple[bool, bool]:
    """(is_user_state, is_user_district) by equality with the profile fields."""
    is_user_state = _same_place(profile.preferred_state, college.state)
    is_user_district = _same_place(profile.preferred_district, college.district)
    return is_user_state, is_user_district


def select_colleges(
    scored: Sequence[RecommendedCollege],
    limit: int = MAX_COLLEGE_RECOMMENDATIONS,
) -> List[RecommendedCollege]:
    """
    User-state colleges first regardless of score, then by confidence
    descending. The sort is stable, so equal keys keep fetch order.
    """
    ranked = sorted(scored, key=lambda c: (not c.is_user_state, -c.confidence_score))
    return ranked[:limit]


def rank_by_score(scored: Sequence[Scored]) -> List[Scored]:
    """Confidence descending, stable; used for scholarships and jobs."""
    return sorted(scored, key=lambda item: -item.confidence_score)


def is_current_course(course: FutureCourse, current_course: str) -> bool:
    """True when the course's first name word or its code appears in current_course."""
    current = (current_course or "").lower()
    if not current.strip():
        return False

    words = course.name.split()
    first_word = words[0].lower() if words else ""
    code = course.code.strip().lower()

    return bool(first_word and first_word in current) or bool(code and code in current)


def exclude_current_courses(courses: Sequence[FutureCourse], current_course: str) -> List[FutureCourse]:
    return [c for c in courses if not is_current_course(c, current_course)]


def placeholder_course() -> RecommendedCourse:
    """Sentinel entry shown when every catalog course was excluded."""
    return RecommendedCourse(
        name=PLACEHOLDER_COURSE_NAME,
        confidence_score=0,
        match_reason=PLACEHOLDER_COURSE_REASON,
        is_placeholder=True,
    )


def select_future_courses(
    scored: Sequence[RecommendedCourse],
    limit: int = MAX_FUTURE_COURSE_RECOMMENDATIONS,
) -> List[RecommendedCourse]:
    if not scored:
        return [placeholder_course()]
    return rank_by_score(scored)[:limit]
