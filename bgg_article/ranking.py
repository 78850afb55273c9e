# ranking.py - ordering scored games
from typing import Iterable, List, Sequence

from .scoring import ScoredRecord


def rank(scored: Iterable[ScoredRecord]) -> List[ScoredRecord]:
    """Sort by score, best first. Equal scores keep their input order."""
    # sorted() is stable; reverse=True keeps that guarantee for ties
    return sorted(scored, key=lambda s: s.score, reverse=True)


def top_k(ranked: Sequence[ScoredRecord], k: int) -> List[ScoredRecord]:
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    return list(ranked[:k])
