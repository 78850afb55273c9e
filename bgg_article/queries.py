# queries.py - end-to-end lookups behind the builder, the quiz and the charts
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from .config import (
    BEST_MATCHES_K, BUILDER_MIN_MATCHES, BUILDER_PLAYTIME_TOLERANCE, BUILDER_TOP_N,
    BUILDER_WEIGHT_TOLERANCE, COMPLEXITY_SAMPLE_SIZE, DEFAULT_USER_RATING, DEFAULT_WEIGHT,
    RESULTS_BACKGROUND_SIZE, SIMILAR_GAMES_N, TOP_MECHANICS, WEIGHT_DOMAIN,
)
from .errors import DegenerateInputError, InsufficientDataError, InvalidPreferenceError
from .percentile import percentile_rank
from .preferences import PreferenceVector
from .ranking import rank, top_k
from .records import GameRecord, RecordStore
from .regression import TrendSegment, fit_line
from .sampling import sample_random, sample_stride
from .scoring import score_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class BuilderResult:
    """Outcome of the parameter builder.

    ``insufficient_data`` is the normal "not enough data" state: the filter
    kept fewer games than the builder needs to quote an average.
    """

    average_rating: Optional[float]
    top_matches: List[GameRecord]
    match_count: int

    @property
    def insufficient_data(self) -> bool:
        return self.average_rating is None

    def require_average(self) -> float:
        if self.average_rating is None:
            raise InsufficientDataError(self.match_count, BUILDER_MIN_MATCHES)
        return self.average_rating


@dataclass(frozen=True)
class QuizResult:
    background: List[GameRecord]
    top_similar: List[GameRecord]
    best_matches: List[GameRecord]
    user_position: Point
    weight_percentile: Optional[float]
    match_percentile: Optional[float]
    best_scores: List[float] = field(default_factory=list)

    @property
    def predicted_rating(self) -> Optional[float]:
        return self.best_matches[0].rating if self.best_matches else None


def _builder_match(record: GameRecord, prefs: PreferenceVector) -> bool:
    if record.weight is None or record.playtime is None or record.rating is None:
        return False
    if abs(record.weight - prefs.weight) > BUILDER_WEIGHT_TOLERANCE:
        return False
    if abs(record.playtime - prefs.playtime) > BUILDER_PLAYTIME_TOLERANCE:
        return False
    return not prefs.wants_mechanic or record.has_mechanic(prefs.mechanic)


def query_builder(records: Iterable[GameRecord], prefs: PreferenceVector) -> BuilderResult:
    """Average rating and best three games near the builder's sliders.

    This is a plain tolerance filter, not the match score used by the quiz.
    """
    if prefs.weight is None or prefs.playtime is None:
        raise InvalidPreferenceError("builder needs both a weight and a playtime")

    matches = [r for r in records if _builder_match(r, prefs)]
    top = sorted(matches, key=lambda r: r.rating, reverse=True)[:BUILDER_TOP_N]
    logger.debug("Builder w=%.1f t=%d mech=%s: %d matches",
                 prefs.weight, prefs.playtime, prefs.mechanic, len(matches))

    if len(matches) < BUILDER_MIN_MATCHES:
        return BuilderResult(average_rating=None, top_matches=top, match_count=len(matches))
    average = float(np.mean([r.rating for r in matches]))
    return BuilderResult(average_rating=average, top_matches=top, match_count=len(matches))


def query_quiz_result(records: Iterable[GameRecord], prefs: PreferenceVector,
                      rng: Optional[np.random.Generator] = None) -> QuizResult:
    """Everything the quiz results screen draws, computed in one pass."""
    eligible = [r for r in records if r.has_plot_position]
    background = sample_random(eligible, RESULTS_BACKGROUND_SIZE, rng=rng)

    # Scoring sees every eligible game, never just the background sample
    ranked = rank(score_records(eligible, prefs))
    similar = top_k(ranked, SIMILAR_GAMES_N)
    best = top_k(ranked, BEST_MATCHES_K)

    user_weight = prefs.weight if prefs.weight is not None else DEFAULT_WEIGHT
    user_rating = float(np.mean([s.record.rating for s in best])) if best else DEFAULT_USER_RATING

    if eligible:
        weight_pct = percentile_rank([r.weight for r in eligible], user_weight)
        match_pct = percentile_rank([s.score for s in ranked], best[0].score)
    else:
        logger.warning("No games with weight and rating; quiz percentiles unavailable")
        weight_pct = match_pct = None

    return QuizResult(
        background=background,
        top_similar=[s.record for s in similar],
        best_matches=[s.record for s in best],
        user_position=Point(user_weight, user_rating),
        weight_percentile=weight_pct,
        match_percentile=match_pct,
        best_scores=[s.score for s in best],
    )


def complexity_points(records: Sequence[GameRecord],
                      target_size: int = COMPLEXITY_SAMPLE_SIZE) -> Sequence[GameRecord]:
    return sample_stride([r for r in records if r.has_plot_position], target_size)


def complexity_trend(records: Iterable[GameRecord]) -> Optional[TrendSegment]:
    """Rating-on-weight trend across the whole weight axis, or None if undefined."""
    eligible = [r for r in records if r.has_plot_position]
    try:
        line = fit_line([r.weight for r in eligible], [r.rating for r in eligible])
    except (DegenerateInputError, ValueError) as e:
        logger.warning("No complexity trend line: %s", e)
        return None
    return line.segment(*WEIGHT_DOMAIN)


def mechanics_by_year(records: Iterable[GameRecord],
                      mechanics: Sequence[str] = tuple(TOP_MECHANICS)) -> pd.DataFrame:
    """Raw count of games per year using each tracked mechanic."""
    store = records if isinstance(records, RecordStore) else RecordStore(records)
    df = store.to_frame().dropna(subset=["year"]).copy()
    if df.empty:
        return pd.DataFrame(columns=["year", *mechanics, "games"])

    df["year"] = df["year"].astype(int)
    for m in mechanics:
        df[m] = df["mechanics"].apply(lambda ms, m=m: int(m in ms))
    yearly = df.groupby("year").agg({**{m: "sum" for m in mechanics}, "name": list}).reset_index()
    yearly.rename(columns={"name": "games"}, inplace=True)
    return yearly.sort_values("year").reset_index(drop=True)
