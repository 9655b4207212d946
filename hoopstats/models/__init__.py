"""Data models - Dataclass definitions for all entities."""

from .game import GameStats, InvalidGameStatsError
from .player import Player, Roster

__all__ = [
    'GameStats',
    'InvalidGameStatsError',
    'Player',
    'Roster',
]
