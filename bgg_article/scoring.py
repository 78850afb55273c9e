# scoring.py - weighted closeness between a game and a preference vector
import logging
from dataclasses import dataclass
from typing import Iterable, List

from .config import (
    DEFAULT_PLAYTIME, DEFAULT_WEIGHT, DEFAULT_YEAR,
    SCORE_MECHANIC_POINTS, SCORE_PLAYTIME_POINTS, SCORE_PLAYTIME_SPREAD,
    SCORE_WEIGHT_POINTS, SCORE_WEIGHT_SPREAD, SCORE_YEAR_POINTS, SCORE_YEAR_SPREAD,
)
from .preferences import PreferenceVector
from .records import GameRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredRecord:
    record: GameRecord
    score: float


def weight_term(game_weight: float, wanted: float) -> float:
    # Not clamped: a gap wider than the spread goes below zero
    return (1 - abs(game_weight - wanted) / SCORE_WEIGHT_SPREAD) * SCORE_WEIGHT_POINTS


def playtime_term(game_minutes: int, wanted: int) -> float:
    diff = abs(game_minutes - wanted)
    return (1 - min(diff / SCORE_PLAYTIME_SPREAD, 1)) * SCORE_PLAYTIME_POINTS


def mechanic_term(record: GameRecord, prefs: PreferenceVector) -> float:
    if prefs.wants_mechanic and record.has_mechanic(prefs.mechanic):
        return SCORE_MECHANIC_POINTS
    return 0.0


def year_term(game_year: int, wanted: int) -> float:
    diff = abs(game_year - wanted)
    return (1 - min(diff / SCORE_YEAR_SPREAD, 1)) * SCORE_YEAR_POINTS


def score(record: GameRecord, prefs: PreferenceVector) -> float:
    """Match score of one game, higher is closer (practically at most 100)."""
    if record.weight is None:
        raise ValueError(f"{record.name!r} has no weight and cannot be scored")
    wanted_weight = prefs.weight if prefs.weight is not None else DEFAULT_WEIGHT
    wanted_time = prefs.playtime if prefs.playtime is not None else DEFAULT_PLAYTIME
    wanted_year = prefs.year if prefs.year is not None else DEFAULT_YEAR

    total = weight_term(record.weight, wanted_weight)
    total += playtime_term(record.playtime if record.playtime is not None else DEFAULT_PLAYTIME, wanted_time)
    total += mechanic_term(record, prefs)
    total += year_term(record.year if record.year is not None else DEFAULT_YEAR, wanted_year)
    return total


def score_records(records: Iterable[GameRecord], prefs: PreferenceVector) -> List[ScoredRecord]:
    scored = [ScoredRecord(r, score(r, prefs)) for r in records]
    logger.debug("Scored %d games", len(scored))
    return scored
