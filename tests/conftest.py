"""Shared pytest fixtures for Basketball Stats tests."""

import itertools
from datetime import date

import pytest

from hoopstats.models.game import GameStats


def make_game(game_date=date(2024, 12, 20), two_points=0, three_points=0,
              free_throws_made=0, free_throws_attempted=0, rebounds=0,
              steals=0, blocks=0, assists=0) -> GameStats:
    """Build a GameStats with zero defaults for any field not given."""
    return GameStats(
        date=game_date,
        two_points=two_points,
        three_points=three_points,
        free_throws_made=free_throws_made,
        free_throws_attempted=free_throws_attempted,
        rebounds=rebounds,
        steals=steals,
        blocks=blocks,
        assists=assists,
    )


@pytest.fixture
def game_factory():
    """Expose make_game to tests."""
    return make_game


@pytest.fixture
def sequential_ids():
    """Deterministic id factory: p1, p2, p3, ..."""
    counter = itertools.count(1)
    return lambda: f"p{next(counter)}"


@pytest.fixture
def sample_game():
    """Player A's game: 5 twos, 2 threes, 3/4 FT, 10 reb, 1 stl, 0 blk, 4 ast."""
    return make_game(
        two_points=5,
        three_points=2,
        free_throws_made=3,
        free_throws_attempted=4,
        rebounds=10,
        steals=1,
        blocks=0,
        assists=4,
    )


@pytest.fixture
def sample_games():
    """A few varied games for one player."""
    return [
        make_game(date(2024, 12, 20), two_points=8, three_points=3, free_throws_made=4,
                  free_throws_attempted=5, rebounds=8, steals=2, blocks=1, assists=7),
        make_game(date(2024, 12, 22), two_points=6, three_points=2, free_throws_made=4,
                  free_throws_attempted=4, rebounds=6, steals=1, blocks=0, assists=9),
        make_game(date(2024, 12, 18), two_points=4, three_points=0, free_throws_made=1,
                  free_throws_attempted=3, rebounds=11, steals=0, blocks=3, assists=2),
    ]


@pytest.fixture
def sample_form():
    """Raw form values as submitted from the game entry form."""
    return {
        'date': '2024-12-20',
        'twoPoints': '5',
        'threePoints': '2',
        'ftMade': '3',
        'ftAtt': '4',
        'rebounds': '10',
        'steals': '1',
        'blocks': '0',
        'assists': '4',
    }
