"""Roster Store - Owns the roster and every change made to it."""

import logging
import uuid
from typing import Callable, Optional

from ..models.game import GameStats
from ..models.player import Player, Roster

logger = logging.getLogger(__name__)


class RosterError(Exception):
    """Base class for roster store errors."""


class EmptyPlayerNameError(RosterError):
    """Raised in strict mode when a player name is blank."""


class PlayerNotFoundError(RosterError):
    """Raised when a player id doesn't match anyone on the roster."""

    def __init__(self, player_id: str):
        super().__init__(f"No player with id {player_id!r}")
        self.player_id = player_id


def new_player_id() -> str:
    return str(uuid.uuid4())


class RosterStore:
    """Holds the current roster snapshot.

    Snapshots are immutable. Every mutation builds a new Roster, swaps it in
    and returns it, so a snapshot handed out earlier never changes.

    By default blank names and unknown ids are ignored (logged as warnings).
    With strict=True they raise EmptyPlayerNameError / PlayerNotFoundError.
    """

    def __init__(self, roster: Optional[Roster] = None, strict: bool = False,
                 id_factory: Callable[[], str] = new_player_id):
        self.roster = roster if roster is not None else Roster()
        self.strict = strict
        self._id_factory = id_factory

    def add_player(self, name: str) -> Roster:
        """Add a player with no games. Blank names are ignored."""
        name = (name or '').strip()
        if not name:
            if self.strict:
                raise EmptyPlayerNameError("Player name can't be blank")
            logger.warning("Ignoring blank player name")
            return self.roster

        player_id = self._id_factory()
        while player_id in self.roster:
            player_id = self._id_factory()

        player = Player(id=player_id, name=name)
        self.roster = Roster(self.roster.players + (player,))
        logger.info("Added player %s (%s)", name, player_id)
        return self.roster

    def remove_player(self, player_id: str) -> Roster:
        """Remove a player and their games. Unknown ids are ignored."""
        if player_id not in self.roster:
            self._unknown(player_id, "remove")
            return self.roster

        self.roster = Roster(tuple(p for p in self.roster if p.id != player_id))
        logger.info("Removed player %s", player_id)
        return self.roster

    def append_game(self, player_id: str, stats: GameStats) -> Roster:
        """Append a game to a player's history. Unknown ids are ignored."""
        if player_id not in self.roster:
            self._unknown(player_id, "append game for")
            return self.roster

        self.roster = Roster(tuple(
            p.with_game(stats) if p.id == player_id else p
            for p in self.roster
        ))
        logger.debug("Appended game %s for player %s", stats.date, player_id)
        return self.roster

    def get_player(self, player_id: str) -> Player:
        player = self.roster.get(player_id)
        if player is None:
            raise PlayerNotFoundError(player_id)
        return player

    def _unknown(self, player_id: str, action: str) -> None:
        if self.strict:
            raise PlayerNotFoundError(player_id)
        logger.warning("Cannot %s unknown player %s", action, player_id)
