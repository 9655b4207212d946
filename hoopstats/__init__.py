"""Basketball Pro Stats - Main package.

This package tracks per-game basketball stats for a roster of players and
computes totals and per-game averages.

Modules:
    models - Data models (dataclasses)
    store - Roster store (owns all mutation)
    helpers - Pure aggregation and summary functions
    export - JSON export
    config - Configuration
    cli - Command-line interface
"""

from .config import Config
from .models import GameStats, Player, Roster, InvalidGameStatsError
from .store import RosterStore, PlayerNotFoundError, EmptyPlayerNameError
from .helpers import calculate_totals, StatsReport
from .export import export_roster, roster_to_json

__all__ = [
    'Config',
    'GameStats',
    'Player',
    'Roster',
    'InvalidGameStatsError',
    'RosterStore',
    'PlayerNotFoundError',
    'EmptyPlayerNameError',
    'calculate_totals',
    'StatsReport',
    'export_roster',
    'roster_to_json',
]

__version__ = '1.0.0'
