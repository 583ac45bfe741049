"""
Score Aggregator

Combines dimension sub-scores into a final confidence score per candidate
and attaches the human-readable match reason. Each variant has its own
scorer; none of them raise for missing optional fields.
"""

import math
import re
from typing import List, Optional

from .contracts import (
    College,
    FutureCourse,
    JobPosting,
    RecommendedCollege,
    RecommendedCourse,
    Scholarship,
    ScoredJob,
    ScoredScholarship,
    UserProfile,
)
from .dimension_scorers import (
    score_aptitude,
    score_course_aptitude,
    score_course_interest,
    score_course_interest_match,
    score_location,
    score_stream,
)
from .constants import (
    ACADEMIC_LEVEL_KEYWORDS,
    DEFAULT_MATCH_REASON,
    HIGH_RATING_THRESHOLD,
    JOB_BASE_SCORE,
    JOB_DEFAULT_REASON,
    JOB_LOCATION_BONUS,
    JOB_SKILL_FAMILIES,
    JOB_SKILL_THRESHOLD,
    MAX_REASON_FRAGMENTS,
    NATIONAL_LOCATION_TOKENS,
    REASON_SEPARATOR,
    SCHOLARSHIP_BASE_SCORE,
    SCHOLARSHIP_LEVEL_BONUS,
    SCHOLARSHIP_LOCATION_BONUS,
    SCHOLARSHIP_UNCERTAIN_PENALTY,
    StreamKey,
)


# Two-letter state subdomain of gov.in, e.g. scholarship.up.gov.in
STATE_GOV_DOMAIN = re.compile(r"(^|\.)[a-z]{2}\.gov\.in$")


def to_confidence(value: float) -> int:
    """Round half-up and clamp to [0, 100]."""
    return max(0, min(100, int(math.floor(value + 0.5))))


def join_reasons(fragments: List[Optional[str]], default: str = DEFAULT_MATCH_REASON) -> str:
    fired = [f for f in fragments if f]
    if not fired:
        return default
    return REASON_SEPARATOR.join(fired[:MAX_REASON_FRAGMENTS])


def _base_fields(entity, model) -> dict:
    # Re-scoring an already decorated copy must not duplicate engine fields
    return entity.model_dump(include=set(model.model_fields))


# =============================================================================
# COLLEGES
# =============================================================================

def score_college(
    profile: UserProfile,
    college: College,
    stream: StreamKey,
    is_user_state: bool,
    is_user_district: bool,
) -> RecommendedCollege:
    """
    Score one college against the profile.

    Args:
        profile: Student's profile
        college: Candidate college (already region and stream filtered)
        stream: Resolved stream
        is_user_state: College state equals the preferred state
        is_user_district: College district equals the preferred district

    Returns:
        New RecommendedCollege; the input row is left untouched
    """
    aptitude, aptitude_reason = score_aptitude(profile, stream)
    interest, interest_reason = score_course_interest(profile, college)
    location, location_reason = score_location(is_user_state, is_user_district)
    stream_score, stream_reason = score_stream(college, stream)

    dimension_scores = [aptitude, interest, location, stream_score]
    overall = sum(d.weighted_score for d in dimension_scores)

    rating_reason = None
    if college.rating is not None and college.rating >= HIGH_RATING_THRESHOLD:
        rating_reason = f"Rating: {college.rating:.1f}"

    return RecommendedCollege(
        **_base_fields(college, College),
        confidence_score=to_confidence(overall),
        match_reason=join_reasons(
            [aptitude_reason, interest_reason, location_reason, stream_reason, rating_reason]
        ),
        is_user_state=is_user_state,
        dimension_scores=dimension_scores,
    )


# =============================================================================
# SCHOLARSHIPS
# =============================================================================

def scholarship_location_match(profile: UserProfile, scholarship: Scholarship) -> bool:
    if scholarship.location_match:
        return True

    targets = [t.strip().lower() for t in scholarship.target_locations if t and t.strip()]
    if any(t in NATIONAL_LOCATION_TOKENS for t in targets):
        return True

    preferred = {loc.lower() for loc in profile.location_preferences()}
    return bool(preferred.intersection(targets))


def scholarship_level_match(profile: UserProfile, scholarship: Scholarship) -> bool:
    level = profile.academic_level.strip().lower()
    if not level:
        return False

    declared = [lvl.strip().lower() for lvl in scholarship.target_academic_level]
    if level in declared:
        return True

    summary = scholarship.eligibility_summary.lower()
    return any(keyword in summary for keyword in ACADEMIC_LEVEL_KEYWORDS.get(level, ()))


def is_state_government_domain(domain: Optional[str]) -> bool:
    return bool(STATE_GOV_DOMAIN.search((domain or "").strip().lower()))


def score_scholarship(profile: UserProfile, scholarship: Scholarship) -> ScoredScholarship:
    """
    Base 60, +20 for a location match, +15 for an academic-level match.
    A state-government scholarship that misses the user's location is
    flagged uncertain and loses 20.
    """
    score = SCHOLARSHIP_BASE_SCORE
    reason = "Eligible based on basic criteria"

    location_ok = scholarship_location_match(profile, scholarship)
    if location_ok:
        score += SCHOLARSHIP_LOCATION_BONUS
        reason = "Location match with preferred areas"

    if scholarship_level_match(profile, scholarship):
        score += SCHOLARSHIP_LEVEL_BONUS
        reason += " and academic level match"

    uncertain = not location_ok and is_state_government_domain(scholarship.official_domain)
    if uncertain:
        score -= SCHOLARSHIP_UNCERTAIN_PENALTY

    return ScoredScholarship(
        **_base_fields(scholarship, Scholarship),
        confidence_score=to_confidence(score),
        match_reason=reason,
        eligibility_uncertain=uncertain,
    )


# =============================================================================
# JOBS
# =============================================================================

def matched_job_skills(profile: UserProfile, job: JobPosting) -> List[str]:
    """Required skills credited to the profile, in posting order per family."""
    matched: List[str] = []
    for _family, keywords, aptitude_field, _bonus in JOB_SKILL_FAMILIES:
        if profile.aptitude(aptitude_field) < JOB_SKILL_THRESHOLD:
            continue
        for skill in job.required_skills:
            if any(k in skill.lower() for k in keywords) and skill not in matched:
                matched.append(skill)
    return matched


def score_job(profile: UserProfile, job: JobPosting) -> ScoredJob:
    """
    Base 40 plus additive skill-family bonuses (technical 30, quantitative
    25, interpersonal 25) when the posting asks for the family and the
    matching aptitude is at least 70, plus 15 for a preferred location.
    """
    score = JOB_BASE_SCORE
    skills_text = [skill.lower() for skill in job.required_skills]

    for _family, keywords, aptitude_field, bonus in JOB_SKILL_FAMILIES:
        wanted = any(k in skill for k in keywords for skill in skills_text)
        if wanted and profile.aptitude(aptitude_field) >= JOB_SKILL_THRESHOLD:
            score += bonus

    matched = matched_job_skills(profile, job)
    reason = f"Strong skills match: {', '.join(matched)}" if matched else JOB_DEFAULT_REASON

    job_location = job.location.lower()
    if any(loc.lower() in job_location for loc in profile.location_preferences()):
        score += JOB_LOCATION_BONUS
        reason += " in preferred location"

    return ScoredJob(
        **_base_fields(job, JobPosting),
        confidence_score=to_confidence(score),
        match_reason=reason,
    )


# =============================================================================
# FUTURE COURSES
# =============================================================================

def score_future_course(profile: UserProfile, course: FutureCourse) -> RecommendedCourse:
    aptitude, aptitude_reason = score_course_aptitude(profile, course)
    interest, interest_reason = score_course_interest_match(profile, course)

    return RecommendedCourse(
        **_base_fields(course, FutureCourse),
        confidence_score=to_confidence(aptitude.weighted_score + interest.weighted_score),
        match_reason=join_reasons([aptitude_reason, interest_reason]),
    )
