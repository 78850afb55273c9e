"""Tests for the builder, quiz and chart lookups."""

import numpy as np
import pytest

from bgg_article import (
    InsufficientDataError, InvalidPreferenceError, PreferenceVector, RecordStore,
    complexity_points, complexity_trend, mechanics_by_year, query_builder, query_quiz_result,
    score,
)

from .conftest import make_game


def _builder_store(n_inside):
    inside = [make_game(f"In {i}", weight=3.0 + (i % 3) * 0.2, playtime=50 + i * 5, rating=6.0 + i * 0.5)
              for i in range(n_inside)]
    outside = [
        make_game("Too Heavy", weight=4.0, playtime=60, rating=9.9),
        make_game("Too Long", weight=3.0, playtime=120, rating=9.8),
    ]
    return RecordStore(inside + outside)


def test_builder_averages_only_in_tolerance_games():
    store = _builder_store(6)
    result = query_builder(store, PreferenceVector(weight=3.0, playtime=60, mechanic="all"))
    assert not result.insufficient_data
    assert result.match_count == 6
    assert result.average_rating == pytest.approx(np.mean([6.0 + i * 0.5 for i in range(6)]))
    assert [g.name for g in result.top_matches] == ["In 5", "In 4", "In 3"]


def test_builder_insufficient_data():
    store = _builder_store(3)
    result = query_builder(store, PreferenceVector(weight=3.0, playtime=60, mechanic="all"))
    assert result.insufficient_data
    assert result.average_rating is None
    assert result.match_count == 3
    with pytest.raises(InsufficientDataError):
        result.require_average()


def test_builder_tolerance_edges_are_inclusive():
    games = [make_game(f"G{i}", weight=3.5, playtime=90, rating=7.0) for i in range(5)]
    result = query_builder(RecordStore(games), PreferenceVector(weight=3.0, playtime=60))
    assert result.match_count == 5


def test_builder_mechanic_filter():
    games = [make_game(f"D{i}", mechanics=["Dice Rolling"]) for i in range(5)]
    games += [make_game(f"H{i}", mechanics=["Hand Management"]) for i in range(5)]
    result = query_builder(RecordStore(games), PreferenceVector(weight=2.5, playtime=60, mechanic="Dice Rolling"))
    assert result.match_count == 5
    assert all(g.name.startswith("D") for g in result.top_matches)


def test_builder_skips_incomplete_records():
    games = [make_game(f"G{i}") for i in range(5)] + [make_game("No Time", playtime=None)]
    result = query_builder(RecordStore(games), PreferenceVector(weight=2.5, playtime=60))
    assert result.match_count == 5


def test_builder_needs_weight_and_playtime():
    with pytest.raises(InvalidPreferenceError):
        query_builder(RecordStore(), PreferenceVector(weight=2.5))


def test_quiz_result_scenario(large_store):
    prefs = PreferenceVector(weight=4.0, playtime=90, mechanic="Dice Rolling", year=2018, players=4)
    result = query_quiz_result(large_store, prefs, rng=np.random.default_rng(0))

    assert len(result.top_similar) <= 100
    assert len(result.best_matches) <= 5
    similar = {g.name for g in result.top_similar}
    outside = [score(g, prefs) for g in large_store if g.name not in similar]
    worst_best = min(score(g, prefs) for g in result.best_matches)
    assert all(worst_best >= s for s in outside)
    assert result.best_scores == sorted(result.best_scores, reverse=True)


def test_quiz_position_and_percentiles(large_store):
    prefs = PreferenceVector(weight=4.0, playtime=90, mechanic="Dice Rolling", year=2018)
    result = query_quiz_result(large_store, prefs)

    assert result.user_position.x == 4.0
    assert result.user_position.y == pytest.approx(np.mean([g.rating for g in result.best_matches]))
    weights = np.array([g.weight for g in large_store])
    assert result.weight_percentile == pytest.approx((weights < 4.0).mean() * 100)
    # the best score has nothing above it
    scores = np.array([score(g, prefs) for g in large_store])
    assert result.match_percentile == pytest.approx((scores < scores.max()).mean() * 100)
    assert result.predicted_rating == result.best_matches[0].rating


def test_quiz_background_is_bounded_sample(large_store):
    result = query_quiz_result(large_store, PreferenceVector(weight=2.0))
    assert len(result.background) == 1000  # under the 2000 budget, so everything
    big = RecordStore(list(large_store) * 3)
    result = query_quiz_result(big, PreferenceVector(weight=2.0))
    assert len(result.background) == 2000


def test_quiz_ignores_unplottable_games(small_store):
    result = query_quiz_result(small_store, PreferenceVector(weight=3.9))
    assert "No Weight" not in {g.name for g in result.top_similar}
    assert {g.name for g in result.best_matches[:2]} == {"Gloomhaven", "Brass"}


def test_quiz_empty_store_defaults():
    result = query_quiz_result(RecordStore(), PreferenceVector())
    assert result.best_matches == []
    assert result.user_position.x == 2.5
    assert result.user_position.y == 7.0
    assert result.weight_percentile is None and result.match_percentile is None
    assert result.predicted_rating is None


def test_complexity_trend_evaluated_on_weight_axis():
    games = [make_game(weight=w, rating=5.0 + w) for w in (1.0, 2.0, 3.0, 4.0)]
    seg = complexity_trend(RecordStore(games))
    assert (seg.x1, seg.x2) == (1.0, 5.0)
    assert seg.y1 == pytest.approx(6.0)
    assert seg.y2 == pytest.approx(10.0)


def test_complexity_trend_absent_when_degenerate(caplog):
    games = [make_game(weight=2.0, rating=r) for r in (6.0, 7.0, 8.0)]
    assert complexity_trend(RecordStore(games)) is None
    assert "No complexity trend line" in caplog.text
    assert complexity_trend(RecordStore()) is None


def test_complexity_points_stride_sampled(large_store):
    points = complexity_points(large_store, target_size=100)
    assert len(points) == 100
    assert points[1] is large_store[10]


def test_mechanics_by_year_counts():
    games = [
        make_game("A", year=2001, mechanics=["Dice Rolling"]),
        make_game("B", year=2001, mechanics=["Dice Rolling", "Hand Management"]),
        make_game("C", year=1999, mechanics=["Hand Management"]),
        make_game("D", year=None, mechanics=["Dice Rolling"]),
    ]
    yearly = mechanics_by_year(games, ["Dice Rolling", "Hand Management"])
    assert list(yearly["year"]) == [1999, 2001]
    assert list(yearly["Dice Rolling"]) == [0, 2]
    assert list(yearly["Hand Management"]) == [1, 1]
    assert yearly.loc[1, "games"] == ["A", "B"]


def test_mechanics_by_year_empty():
    assert mechanics_by_year([], ["Dice Rolling"]).empty


def test_mechanics_by_year_from_store(small_store):
    yearly = mechanics_by_year(small_store, ["Hand Management"])
    assert list(yearly["year"]) == [1995, 2010, 2017, 2018]
    assert list(yearly["Hand Management"]) == [0, 0, 1, 1]
    assert yearly.loc[2, "games"] == ["Gloomhaven", "Azul"]
