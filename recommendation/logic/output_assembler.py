"""
Output Assembler

Builds the RankedResult contract from ranked items and generates the
aggregate explanation strings shown above a recommendation set.
"""

import logging
from typing import List, Optional, Sequence

from .contracts import RankedResult, UserProfile
from .constants import APTITUDE_DIMENSIONS, EducationLevelKey, StreamKey

logger = logging.getLogger(__name__)


TOP_SKILL_COUNT = 3


def top_skills(profile: UserProfile, count: int = TOP_SKILL_COUNT) -> List[str]:
    """
    Highest aptitude dimensions by value. Python's sort is stable, so ties
    keep the fixed order logical, numerical, technical, verbal, creative.
    """
    ranked = sorted(APTITUDE_DIMENSIONS, key=lambda dim: -profile.aptitude(dim))
    return list(ranked[:count])


def generate_explanations(
    profile: UserProfile,
    colleges: Sequence = (),
    scholarships: Sequence = (),
    jobs: Sequence = (),
) -> List[str]:
    """
    Template-filled summary of a recommendation set.

    Always starts with the top-skills sentence, then one sentence per
    non-empty list. Empty lists contribute nothing.
    """
    explanations = [
        f"Your top skills are {', '.join(top_skills(profile))}. "
        "We've matched opportunities based on these strengths."
    ]

    if colleges:
        explanations.append(
            f"Found {len(colleges)} colleges in your preferred locations with programs matching your aptitude."
        )

    if scholarships:
        explanations.append(
            f"{len(scholarships)} scholarships available. Apply early as deadlines approach."
        )

    if jobs:
        explanations.append(
            f"{len(jobs)} recent job postings match your skill profile. All posted within last 7 days."
        )

    return explanations


def assemble_result(
    variant: str,
    items: list,
    total_evaluated: int,
    total_after_filter: int,
    stream: Optional[StreamKey] = None,
    level_key: Optional[EducationLevelKey] = None,
) -> RankedResult:
    """
    Assemble the final RankedResult.

    Args:
        variant: Candidate variant name ("college", "scholarship", ...)
        items: Ranked, truncated, decorated candidates
        total_evaluated: Candidates received
        total_after_filter: Candidates left after hard filters
        stream: Resolved stream, when the variant uses one
        level_key: Resolved catalog key for future courses

    Returns:
        RankedResult
    """
    warnings = _generate_warnings(variant, items, total_evaluated, total_after_filter)
    for warning in warnings:
        logger.warning(f"⚠️ {warning}")

    return RankedResult(
        variant=variant,
        stream=stream,
        level_key=level_key,
        items=items,
        total_candidates_evaluated=total_evaluated,
        total_after_filter=total_after_filter,
        warnings=warnings,
    )


def _generate_warnings(variant: str, items: list, total_evaluated: int, total_after_filter: int) -> List[str]:
    warnings = []

    if total_evaluated == 0:
        warnings.append(f"No {variant} candidates were provided.")
    elif total_after_filter == 0 and variant == "college":
        warnings.append(f"No {variant} candidates matched your stream in the selected region.")

    if any(getattr(item, "is_placeholder", False) for item in items):
        warnings.append("All catalog courses match your current course; showing the quiz prompt instead.")

    return warnings
