"""Store - Roster ownership and mutation."""

from .roster import (
    RosterStore,
    RosterError,
    EmptyPlayerNameError,
    PlayerNotFoundError,
    new_player_id,
)

__all__ = [
    'RosterStore',
    'RosterError',
    'EmptyPlayerNameError',
    'PlayerNotFoundError',
    'new_player_id',
]
