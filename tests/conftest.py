"""Shared fixtures for the article engine tests."""

import numpy as np
import pytest

from bgg_article import GameRecord, RecordStore

MECHANIC_POOL = ["Dice Rolling", "Hand Management", "Worker Placement", "Cooperative Game", "Set Collection"]


def make_game(name="Game", year=2015, weight=2.5, rating=7.0, playtime=60, mechanics=()):
    return GameRecord(name=name, year=year, weight=weight, rating=rating,
                      playtime=playtime, mechanics=frozenset(mechanics))


@pytest.fixture
def small_store() -> RecordStore:
    return RecordStore([
        make_game("Catan", 1995, 2.3, 7.1, 90, ["Dice Rolling", "Trading"]),
        make_game("Gloomhaven", 2017, 3.9, 8.7, 120, ["Cooperative Game", "Hand Management"]),
        make_game("Azul", 2017, 1.8, 7.8, 45, ["Pattern Building"]),
        make_game("No Weight", 2010, None, 6.0, 60, []),
        make_game("Brass", 2018, 3.9, 8.6, 120, ["Hand Management", "Network and Route Building"]),
    ])


@pytest.fixture
def large_store() -> RecordStore:
    """1000 synthetic games spread over the weight/rating plane."""
    rng = np.random.default_rng(42)
    games = []
    for i in range(1000):
        n_mech = int(rng.integers(0, 3))
        mechs = list(rng.choice(MECHANIC_POOL, size=n_mech, replace=False)) if n_mech else []
        games.append(make_game(
            name=f"Game {i}",
            year=int(rng.integers(1980, 2024)),
            weight=round(float(rng.uniform(1.0, 5.0)), 2),
            rating=round(float(rng.uniform(4.0, 9.0)), 2),
            playtime=int(rng.choice([20, 30, 45, 60, 90, 120, 180])),
            mechanics=mechs,
        ))
    return RecordStore(games)
