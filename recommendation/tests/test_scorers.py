"""
Entity scorer tests: sub-score arithmetic, weight conservation, rounding,
clamping and match-reason assembly.
"""

from datetime import datetime

import pytest

from recommendation.logic.aggregator import (
    is_state_government_domain,
    join_reasons,
    score_college,
    score_future_course,
    score_job,
    score_scholarship,
    to_confidence,
)
from recommendation.logic.contracts import FutureCourse, JobPosting, Scholarship, UserProfile
from recommendation.logic.constants import (
    COLLEGE_DIMENSION_WEIGHTS,
    DEFAULT_APTITUDE_BLEND,
    FUTURE_COURSE_WEIGHTS,
    STREAM_APTITUDE_BLENDS,
    StreamKey,
)
from recommendation.logic.dimension_scorers import score_aptitude

from conftest import make_college


# =============================================================================
# WEIGHTS AND ROUNDING
# =============================================================================

def test_college_weights_sum_to_one():
    assert sum(COLLEGE_DIMENSION_WEIGHTS.values()) == pytest.approx(1.0)


@pytest.mark.parametrize("stream", list(STREAM_APTITUDE_BLENDS))
def test_stream_blends_sum_to_one(stream):
    assert sum(STREAM_APTITUDE_BLENDS[stream].values()) == pytest.approx(1.0)


def test_default_blend_and_course_weights_sum_to_one():
    assert sum(DEFAULT_APTITUDE_BLEND.values()) == pytest.approx(1.0)
    assert sum(FUTURE_COURSE_WEIGHTS.values()) == pytest.approx(1.0)


@pytest.mark.parametrize("raw, expected", [
    (64.975, 65),
    (2.5, 3),
    (2.4, 2),
    (-12, 0),
    (130, 100),
    (0, 0),
])
def test_to_confidence_rounds_half_up_and_clamps(raw, expected):
    assert to_confidence(raw) == expected


def test_join_reasons_default_and_truncation():
    assert join_reasons([None, None]) == "General recommendation"
    assert join_reasons(["a", None, "b", "c", "d"]) == "a • b • c"


# =============================================================================
# COLLEGES
# =============================================================================

def test_worked_example_cs_student(cs_profile):
    college = make_college()
    scored = score_college(cs_profile, college, StreamKey.COMPUTER_SCIENCE, True, False)

    dims = {d.dimension: d for d in scored.dimension_scores}
    assert dims["aptitude"].score == pytest.approx(75.5)
    assert dims["course_interest"].score == 30
    assert dims["location"].score == 80
    assert dims["stream"].score == 100

    # 0.45*75.5 + 0.30*30 + 0.15*80 + 0.10*100 = 64.975
    assert scored.confidence_score == 65
    assert scored.match_reason == "Strong aptitude match • In your state • Computer Science specialization"
    assert scored.is_user_state is True


def test_first_matching_interest_names_the_reason(cs_profile):
    profile = cs_profile.model_copy(update={"target_course_interest": ["Computer Science", "Data Science"]})
    college = make_college(courses_offered=["B.Tech Data Science"])

    scored = score_college(profile, college, StreamKey.COMPUTER_SCIENCE, True, False)

    assert "Offers Data Science" in scored.match_reason
    # 0.45*75.5 + 0.30*100 + 0.15*80 + 0.10*100 = 85.975
    assert scored.confidence_score == 86


def test_district_location_tier(cs_profile):
    scored = score_college(cs_profile, make_college(), StreamKey.COMPUTER_SCIENCE, True, True)
    location = [d for d in scored.dimension_scores if d.dimension == "location"][0]
    assert location.score == 100
    assert "In your district" in scored.match_reason


def test_nearby_state_and_rating_fragments():
    profile = UserProfile()
    college = make_college(state="Delhi", rating=4.5)

    scored = score_college(profile, college, StreamKey.COMPUTER_SCIENCE, False, False)

    assert scored.match_reason == "Nearby state • Computer Science specialization • Rating: 4.5"


def test_stream_mismatch_scores_twenty():
    college = make_college(specialised_in="", college_type="", courses_offered=["BCA"])
    scored = score_college(UserProfile(), college, StreamKey.COMPUTER_SCIENCE, False, False)
    stream = [d for d in scored.dimension_scores if d.dimension == "stream"][0]
    assert stream.score == 20


def test_unknown_stream_uses_mean_of_five():
    profile = UserProfile(logical=50, numerical=60, technical=70, verbal=80, creative=90)
    dimension, _ = score_aptitude(profile, StreamKey.SCIENCE)
    assert dimension.score == pytest.approx(70.0)


def test_scoring_does_not_touch_the_input(cs_profile):
    college = make_college()
    before = college.model_dump()
    scored = score_college(cs_profile, college, StreamKey.COMPUTER_SCIENCE, True, False)
    assert college.model_dump() == before
    assert scored is not college


def test_rescoring_a_scored_copy(cs_profile):
    scored = score_college(cs_profile, make_college(), StreamKey.COMPUTER_SCIENCE, True, False)
    again = score_college(cs_profile, scored, StreamKey.COMPUTER_SCIENCE, True, False)
    assert again.confidence_score == scored.confidence_score


# =============================================================================
# SCHOLARSHIPS
# =============================================================================

def test_national_scholarship_gets_location_bonus():
    profile = UserProfile(preferred_state="Bihar")
    scholarship = Scholarship(name="NSP Merit", target_locations=["national"])

    scored = score_scholarship(profile, scholarship)

    assert scored.confidence_score == 80
    assert scored.match_reason == "Location match with preferred areas"
    assert scored.eligibility_uncertain is False


def test_academic_level_bonus():
    profile = UserProfile(preferred_state="Bihar", academic_level="UG")
    scholarship = Scholarship(name="NSP Merit", target_locations=["National"], target_academic_level=["UG", "PG"])

    scored = score_scholarship(profile, scholarship)

    assert scored.confidence_score == 95
    assert scored.match_reason == "Location match with preferred areas and academic level match"


def test_level_keywords_in_eligibility_summary():
    profile = UserProfile(academic_level="Diploma")
    scholarship = Scholarship(name="Polytechnic Aid", eligibility_summary="Students of any polytechnic")
    assert score_scholarship(profile, scholarship).confidence_score == 75


def test_out_of_state_government_scholarship_is_uncertain():
    profile = UserProfile(preferred_state="Bihar")
    scholarship = Scholarship(
        name="UP Post-Matric",
        target_locations=["Uttar Pradesh"],
        official_domain="scholarship.up.gov.in",
    )

    scored = score_scholarship(profile, scholarship)

    assert scored.eligibility_uncertain is True
    assert scored.confidence_score == 40


def test_in_state_government_scholarship_is_not_uncertain():
    profile = UserProfile(preferred_state="Uttar Pradesh")
    scholarship = Scholarship(
        name="UP Post-Matric",
        target_locations=["Uttar Pradesh"],
        official_domain="scholarship.up.gov.in",
    )

    scored = score_scholarship(profile, scholarship)

    assert scored.eligibility_uncertain is False
    assert scored.confidence_score == 80


@pytest.mark.parametrize("domain, expected", [
    ("scholarship.up.gov.in", True),
    ("up.gov.in", True),
    ("scholarships.gov.in", False),
    ("buddy4study.com", False),
    ("", False),
    (None, False),
])
def test_state_government_domain(domain, expected):
    assert is_state_government_domain(domain) is expected


# =============================================================================
# JOBS
# =============================================================================

def test_job_skill_families_are_additive_and_clamped():
    profile = UserProfile(technical=80, numerical=75, preferred_state="Uttar Pradesh")
    job = JobPosting(
        role="Data Engineer",
        location="Lucknow, Uttar Pradesh",
        required_skills=["Python programming", "Data analysis"],
        posting_date=datetime(2026, 1, 1),
    )

    scored = score_job(profile, job)

    # 40 + 30 + 25 + 15 = 110, clamped
    assert scored.confidence_score == 100
    assert scored.match_reason == "Strong skills match: Python programming, Data analysis in preferred location"


def test_job_skill_needs_aptitude_threshold():
    profile = UserProfile(technical=69)
    job = JobPosting(role="Developer", required_skills=["Software development"])

    scored = score_job(profile, job)

    assert scored.confidence_score == 40
    assert scored.match_reason == "Recent posting in your area"


def test_job_default_reason_with_location_bonus():
    profile = UserProfile(preferred_state="Bihar")
    job = JobPosting(role="Clerk", location="Patna, Bihar")

    scored = score_job(profile, job)

    assert scored.confidence_score == 55
    assert scored.match_reason == "Recent posting in your area in preferred location"


def test_interpersonal_family_uses_interpersonal_score():
    profile = UserProfile(interpersonal=80)
    job = JobPosting(role="Sales Associate", required_skills=["Communication"])
    assert score_job(profile, job).confidence_score == 65


# =============================================================================
# FUTURE COURSES
# =============================================================================

def test_future_course_aptitude_and_interest():
    profile = UserProfile(technical=80, numerical=80, logical=80, interests=["computing"])
    course = FutureCourse(name="MCA", code="MCA", tags=["technical", "computing"])

    scored = score_future_course(profile, course)

    # 0.6*80 + 0.4*100
    assert scored.confidence_score == 88
    assert scored.match_reason == "Strong technical aptitude • Matches your interest in computing"


def test_future_course_interest_matches_display_name():
    profile = UserProfile(target_course_interest=["MBA"])
    course = FutureCourse(name="MBA", code="MBA", tags=["business", "management"])
    assert "Matches your interest in MBA" in score_future_course(profile, course).match_reason


def test_future_course_without_signals_gets_generic_reason():
    course = FutureCourse(name="M.Sc", code="MSC", tags=["science", "research"])
    scored = score_future_course(UserProfile(), course)
    # 0.6*0 + 0.4*30
    assert scored.confidence_score == 12
    assert scored.match_reason == "General recommendation"
