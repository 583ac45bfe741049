"""
Education-Level Resolver

Maps (study level, class level, current course, stream) to the catalog key
used to look up future courses.
"""

from typing import Callable, List, Tuple

from .contracts import UserProfile
from .constants import DEFAULT_LEVEL_KEY, EducationLevelKey, StreamKey


LevelRule = Tuple[Callable[[str, str], bool], Callable[[StreamKey, str], EducationLevelKey]]

UG_COURSE_HINTS = ("b.tech", "btech", "bca", "bsc", "b.sc", "bcom", "b.com")

UG_STREAM_KEYS = {
    StreamKey.COMPUTER_SCIENCE: EducationLevelKey.UG_CS,
    StreamKey.MEDICAL: EducationLevelKey.UG_MEDICAL,
    StreamKey.COMMERCE: EducationLevelKey.UG_COMMERCE,
    StreamKey.ARTS: EducationLevelKey.UG_ARTS,
}


def _has(text: str, *tokens: str) -> bool:
    return any(token in text for token in tokens)


def _twelfth_key(stream: StreamKey, course: str) -> EducationLevelKey:
    if stream in (StreamKey.COMPUTER_SCIENCE, StreamKey.ENGINEERING) or "pcm" in course:
        return EducationLevelKey.TWELFTH_SCIENCE_PCM
    if stream == StreamKey.MEDICAL or _has(course, "pcb", "biology"):
        return EducationLevelKey.TWELFTH_SCIENCE_PCB
    if stream == StreamKey.COMMERCE:
        return EducationLevelKey.TWELFTH_COMMERCE
    if stream == StreamKey.ARTS:
        return EducationLevelKey.TWELFTH_ARTS
    return EducationLevelKey.TWELFTH_SCIENCE_PCM


def _diploma_key(stream: StreamKey, course: str) -> EducationLevelKey:
    if stream == StreamKey.COMPUTER_SCIENCE or _has(f" {course} ", " cs", " it"):
        return EducationLevelKey.DIPLOMA_CS
    return EducationLevelKey.DIPLOMA_ENGINEERING


def _ug_key(stream: StreamKey, course: str) -> EducationLevelKey:
    return UG_STREAM_KEYS.get(stream, EducationLevelKey.UG_SCIENCE)


# PG students share the UG-science catalog (PhD-leaning suggestions)
# regardless of their undergraduate stream.
LEVEL_RULES: List[LevelRule] = [
    (lambda level, course: _has(level, "12", "intermediate", "hsc"), _twelfth_key),
    (lambda level, course: "diploma" in level, _diploma_key),
    (
        lambda level, course: _has(level, "ug", "undergraduate", "bachelor") or _has(course, *UG_COURSE_HINTS),
        _ug_key,
    ),
    (
        lambda level, course: _has(level, "pg", "postgraduate", "master"),
        lambda stream, course: EducationLevelKey.UG_SCIENCE,
    ),
    (lambda level, course: "10" in level, lambda stream, course: EducationLevelKey.TWELFTH_SCIENCE_PCM),
]


def resolve_level_key(profile: UserProfile, stream: StreamKey) -> EducationLevelKey:
    """
    Resolve the future-course catalog key for a profile.

    Study level and class level are inspected together; the current course
    only contributes hints (pcm/pcb, cs/it, UG degree names).
    """
    level = f"{profile.current_study_level} {profile.class_level}".lower()
    course = profile.current_course.lower()

    for predicate, resolve in LEVEL_RULES:
        if predicate(level, course):
            return resolve(stream, course)

    return DEFAULT_LEVEL_KEY
