"""
Classifier

Infers a user's academic stream (Computer Science, Medical, Commerce, Arts,
Science, Engineering) from free-text profile fields.

Classification is an ordered list of (predicate, stream) rules evaluated
first-match-wins; the order is the tie-break policy.
"""

from typing import Callable, List, Optional, Tuple

from .contracts import UserProfile
from .constants import (
    CLASSIFIER_KEYWORDS,
    DEFAULT_STREAM,
    SCIENCE_ENGINEERING_APTITUDE_THRESHOLD,
    StreamKey,
)


StreamRule = Tuple[Callable[[UserProfile], bool], StreamKey]


def _padded(text: Optional[str]) -> str:
    """Lower-case and pad with spaces so space-led tokens match at the edges."""
    return f" {(text or '').lower()} "


def matches_stream_keywords(text: Optional[str], stream: StreamKey) -> bool:
    """True when any classifier keyword of `stream` appears in `text`."""
    padded = _padded(text)
    return any(keyword in padded for keyword in CLASSIFIER_KEYWORDS[stream])


def _course_rule(stream: StreamKey) -> StreamRule:
    return (lambda profile: matches_stream_keywords(profile.current_course, stream), stream)


def _is_science_area(profile: UserProfile) -> bool:
    return profile.study_area.strip().lower() == "science"


def _science_leans_engineering(profile: UserProfile) -> bool:
    return _is_science_area(profile) and (
        profile.technical >= SCIENCE_ENGINEERING_APTITUDE_THRESHOLD
        or profile.numerical >= SCIENCE_ENGINEERING_APTITUDE_THRESHOLD
    )


def _study_area_is(area: str) -> Callable[[UserProfile], bool]:
    return lambda profile: profile.study_area.strip().lower() == area


def _target_interest_stream(profile: UserProfile) -> Optional[StreamKey]:
    for target in profile.target_course_interest:
        for stream in CLASSIFIER_KEYWORDS:
            if matches_stream_keywords(target, stream):
                return stream
    return None


# Current course keywords first, in the fixed family order. An Engineering
# keyword always yields Engineering, whether or not the profile also looks
# like PCM/science.
STREAM_RULES: List[StreamRule] = [
    *(_course_rule(stream) for stream in CLASSIFIER_KEYWORDS),
    (_science_leans_engineering, StreamKey.ENGINEERING),
    (_is_science_area, StreamKey.SCIENCE),
    (_study_area_is("commerce"), StreamKey.COMMERCE),
    (_study_area_is("arts"), StreamKey.ARTS),
]


def classify_stream(profile: UserProfile) -> StreamKey:
    """
    Classify a profile into a stream.

    Args:
        profile: User profile snapshot

    Returns:
        StreamKey; Science when no rule fires
    """
    for predicate, stream in STREAM_RULES:
        if predicate(profile):
            return stream

    from_targets = _target_interest_stream(profile)
    if from_targets is not None:
        return from_targets

    return DEFAULT_STREAM
