"""
Recommendation Engine

Main orchestrator that combines the scoring components into per-variant
pipelines. This is the primary in-process entry point: pure, synchronous
and deterministic, with no I/O and no clock reads.
"""

import logging
import time
from typing import List, Optional, Sequence, Union

from .contracts import (
    College,
    FutureCourse,
    JobPosting,
    RankedResult,
    Scholarship,
    UserProfile,
    ENGINE_VERSION,
)
from .aggregator import score_college, score_future_course, score_job, score_scholarship
from .candidate_generator import catalog_courses
from .classifier import classify_stream
from .level_resolver import resolve_level_key
from .output_assembler import assemble_result, generate_explanations
from .ranker import (
    exclude_current_courses,
    filter_by_stream,
    location_flags,
    rank_by_score,
    select_colleges,
    select_future_courses,
)
from .constants import StreamKey
from ..errors import INVALID_INPUT, MIXED_CANDIDATES, RecommendationError

logger = logging.getLogger(__name__)


Candidate = Union[College, Scholarship, JobPosting, FutureCourse]


def _stream_token(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


_STREAMS_BY_TOKEN = {
    token: stream
    for stream in StreamKey
    for token in (_stream_token(stream.value), _stream_token(stream.name))
}


def parse_stream_key(value: Union[StreamKey, str]) -> StreamKey:
    """
    Accepts a StreamKey, its value ("Computer Science"), its member name
    ("COMPUTER_SCIENCE") or the unspaced form ("ComputerScience").

    Raises:
        RecommendationError: the value names no known stream
    """
    if isinstance(value, StreamKey):
        return value

    stream = _STREAMS_BY_TOKEN.get(_stream_token(str(value)))
    if stream is None:
        raise RecommendationError(
            f"Unknown stream: {value}",
            code=INVALID_INPUT,
            field="stream_override",
        )
    return stream


class RecommendationEngine:
    """
    Recommendation engine that orchestrates the scoring pipelines.

    College pipeline:
    1. Stream Classification - derive the stream from the profile
    2. Stream Hard Filter - drop colleges outside the stream
    3. Scoring - weighted sub-scores and match reason per college
    4. Ranking - user-state first, then score; top 50

    Future-course pipeline:
    1. Level Resolution - pick the catalog for the profile
    2. Exclusion - drop the course the student is already in
    3. Scoring & Ranking - top 7, or the quiz placeholder

    Scholarships and jobs are scored and sorted by score only.
    """

    def __init__(self):
        self.version = ENGINE_VERSION

    def resolve_stream(
        self,
        profile: UserProfile,
        stream_override: Optional[Union[StreamKey, str]] = None,
    ) -> StreamKey:
        if stream_override:
            return parse_stream_key(stream_override)
        return classify_stream(profile)

    def rank(
        self,
        profile: UserProfile,
        candidates: Sequence[Candidate],
        stream_override: Optional[Union[StreamKey, str]] = None,
    ) -> RankedResult:
        """
        Rank a single-variant candidate list.

        Args:
            profile: Student profile snapshot
            candidates: Candidates, all of the same variant
            stream_override: Skip classification and use this stream

        Returns:
            RankedResult; empty input yields an empty result

        Raises:
            RecommendationError: candidates mix variants
        """
        if not candidates:
            return assemble_result("empty", [], 0, 0)

        kinds = sorted({c.kind for c in candidates})
        if len(kinds) > 1:
            raise RecommendationError(
                f"Candidates must share one variant, got: {', '.join(kinds)}",
                code=MIXED_CANDIDATES,
                field="candidates",
            )

        kind = kinds[0]
        if kind == "college":
            return self.rank_colleges(profile, candidates, stream_override)
        if kind == "scholarship":
            return self.rank_scholarships(profile, candidates)
        if kind == "job":
            return self.rank_jobs(profile, candidates)
        return self.recommend_future_courses(profile, candidates, stream_override)

    def rank_colleges(
        self,
        profile: UserProfile,
        colleges: Sequence[College],
        stream_override: Optional[Union[StreamKey, str]] = None,
    ) -> RankedResult:
        """Colleges are expected to be region pre-filtered by the fetch layer."""
        start_time = time.perf_counter()
        stream = self.resolve_stream(profile, stream_override)

        matching = filter_by_stream(colleges, stream)
        logger.info(f"🎓 Stream {stream.value}: {len(matching)}/{len(colleges)} colleges pass stream filter")

        scored = [
            score_college(profile, college, stream, *location_flags(profile, college))
            for college in matching
        ]
        items = select_colleges(scored)

        logger.info(
            f"✅ Ranked {len(items)} colleges in {(time.perf_counter() - start_time) * 1000:.1f}ms"
        )
        return assemble_result("college", items, len(colleges), len(matching), stream=stream)

    def rank_scholarships(self, profile: UserProfile, scholarships: Sequence[Scholarship]) -> RankedResult:
        items = rank_by_score([score_scholarship(profile, s) for s in scholarships])
        return assemble_result("scholarship", items, len(scholarships), len(scholarships))

    def rank_jobs(self, profile: UserProfile, jobs: Sequence[JobPosting]) -> RankedResult:
        items = rank_by_score([score_job(profile, j) for j in jobs])
        return assemble_result("job", items, len(jobs), len(jobs))

    def recommend_future_courses(
        self,
        profile: UserProfile,
        courses: Optional[Sequence[FutureCourse]] = None,
        stream_override: Optional[Union[StreamKey, str]] = None,
    ) -> RankedResult:
        """
        Next-step courses for the profile.

        Args:
            profile: Student profile snapshot
            courses: Explicit candidates; defaults to the catalog for the
                resolved education level
            stream_override: Skip classification and use this stream
        """
        stream = self.resolve_stream(profile, stream_override)
        level_key = resolve_level_key(profile, stream)
        if courses is None:
            courses = catalog_courses(level_key)

        remaining = exclude_current_courses(courses, profile.current_course)
        logger.info(
            f"📚 Level {level_key.value}: {len(remaining)}/{len(courses)} courses after current-course exclusion"
        )

        items = select_future_courses([score_future_course(profile, c) for c in remaining])
        return assemble_result(
            "future_course", items, len(courses), len(remaining), stream=stream, level_key=level_key
        )

    def explain(
        self,
        profile: UserProfile,
        colleges: Sequence = (),
        scholarships: Sequence = (),
        jobs: Sequence = (),
    ) -> List[str]:
        return generate_explanations(profile, colleges, scholarships, jobs)


# Convenience function for simple usage
def get_recommendations(
    profile: UserProfile,
    candidates: Sequence[Candidate],
    stream_override: Optional[Union[StreamKey, str]] = None,
) -> RankedResult:
    """
    Convenience function to rank one candidate list.

    Args:
        profile: Student profile
        candidates: Single-variant candidate list
        stream_override: Optional stream to use instead of classification

    Returns:
        RankedResult
    """
    engine = RecommendationEngine()
    return engine.rank(profile, candidates, stream_override)
