"""
Aggregate explanation generator tests.
"""

from recommendation.logic.contracts import UserProfile
from recommendation.logic.engine import RecommendationEngine
from recommendation.logic.output_assembler import generate_explanations, top_skills


def test_top_skills_by_value():
    profile = UserProfile(logical=10, numerical=20, technical=90, verbal=80, creative=80)
    assert top_skills(profile) == ["technical", "verbal", "creative"]


def test_top_skill_ties_keep_fixed_order():
    assert top_skills(UserProfile()) == ["logical", "numerical", "technical"]
    profile = UserProfile(creative=50, verbal=50, logical=50)
    assert top_skills(profile) == ["logical", "verbal", "creative"]


def test_one_sentence_per_non_empty_list():
    profile = UserProfile(technical=90, numerical=80, logical=70)

    explanations = generate_explanations(profile, colleges=[1, 2], scholarships=[], jobs=[1])

    assert explanations == [
        "Your top skills are technical, numerical, logical. We've matched opportunities based on these strengths.",
        "Found 2 colleges in your preferred locations with programs matching your aptitude.",
        "1 recent job postings match your skill profile. All posted within last 7 days.",
    ]


def test_all_lists_present_gives_four_sentences():
    explanations = generate_explanations(UserProfile(), [1], [1, 2, 3], [1])
    assert len(explanations) == 4
    assert explanations[2] == "3 scholarships available. Apply early as deadlines approach."


def test_empty_lists_give_only_the_skills_sentence():
    assert len(generate_explanations(UserProfile())) == 1


def test_engine_explain_matches_generator():
    profile = UserProfile(verbal=70)
    engine = RecommendationEngine()
    assert engine.explain(profile, [1], [], []) == generate_explanations(profile, [1], [], [])
