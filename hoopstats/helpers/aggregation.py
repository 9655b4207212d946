"""Aggregation - Pure functions turning a player's games into a stats report."""

from dataclasses import asdict, dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Sequence, Union

from ..models.game import GameStats

ZERO_RATE = '0.0'

TOTAL_FIELDS = [
    'two_points',
    'three_points',
    'free_throws_made',
    'free_throws_attempted',
    'rebounds',
    'steals',
    'blocks',
    'assists',
]


@dataclass(frozen=True)
class StatsReport:
    """Cumulative totals and per-game averages for one player."""
    games_played: int
    two_points: int
    three_points: int
    free_throws_made: int
    free_throws_attempted: int
    rebounds: int
    steals: int
    blocks: int
    assists: int
    total_points: int
    free_throw_pct: str
    points_per_game: str
    rebounds_per_game: str
    assists_per_game: str
    steals_per_game: str
    blocks_per_game: str

    def to_dict(self) -> Dict[str, Union[int, str]]:
        return asdict(self)


def format_one_decimal(numerator: int, denominator: int, scale: int = 1) -> str:
    """
    Divide two integers and format to exactly one decimal place.

    The quotient is computed as a float, then rounded half up on the
    float's exact binary value, so 7 / 20 (0.34999...) gives '0.3'.
    A zero denominator gives '0.0'.
    """
    if denominator == 0:
        return ZERO_RATE
    value = Decimal(numerator / denominator * scale)
    return str(value.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def calculate_totals(games: Sequence[GameStats], count_free_throws: bool = False) -> StatsReport:
    """
    Calculate totals and per-game rates for a sequence of games.

    This is a PURE FUNCTION:
    - Same input always gives same output
    - No side effects
    - Zero games is fine (every rate is '0.0')

    Total points are 2 * two_points + 3 * three_points. Made free throws are
    left out unless count_free_throws is set.

    Args:
        games: GameStats records in any order
        count_free_throws: Add one point per made free throw

    Returns:
        StatsReport for the games
    """
    games_played = len(games)
    totals = {name: 0 for name in TOTAL_FIELDS}
    for game in games:
        for name in TOTAL_FIELDS:
            totals[name] += getattr(game, name)

    total_points = totals['two_points'] * 2 + totals['three_points'] * 3
    if count_free_throws:
        total_points += totals['free_throws_made']

    return StatsReport(
        games_played=games_played,
        total_points=total_points,
        free_throw_pct=format_one_decimal(
            totals['free_throws_made'], totals['free_throws_attempted'], scale=100
        ),
        points_per_game=format_one_decimal(total_points, games_played),
        rebounds_per_game=format_one_decimal(totals['rebounds'], games_played),
        assists_per_game=format_one_decimal(totals['assists'], games_played),
        steals_per_game=format_one_decimal(totals['steals'], games_played),
        blocks_per_game=format_one_decimal(totals['blocks'], games_played),
        **totals,
    )
