from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .game import GameStats


@dataclass(frozen=True)
class Player:
    """A tracked player and their games in entry order."""
    id: str
    name: str
    games: Tuple[GameStats, ...] = ()

    @property
    def games_played(self) -> int:
        return len(self.games)

    def with_game(self, stats: GameStats) -> 'Player':
        """Return a copy of this player with one more game appended."""
        return Player(id=self.id, name=self.name, games=self.games + (stats,))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'games': [game.to_dict() for game in self.games],
        }


@dataclass(frozen=True)
class Roster:
    """Snapshot of every tracked player, in the order they were added."""
    players: Tuple[Player, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __contains__(self, player_id: object) -> bool:
        return any(p.id == player_id for p in self.players)

    @property
    def ids(self) -> List[str]:
        return [p.id for p in self.players]

    def get(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def find_by_name(self, name: str) -> Optional[Player]:
        """Find player by name (exact match first, then substring)."""
        needle = name.strip().lower()
        if not needle:
            return None
        for player in self.players:
            if player.name.lower() == needle:
                return player
        for player in self.players:
            if needle in player.name.lower():
                return player
        return None

    def find_by_exact_name(self, name: str) -> Optional[Player]:
        """Find the one player whose name matches exactly (case-insensitive).

        Returns None when nobody matches or when the name is shared.
        """
        needle = name.strip().lower()
        matches = [p for p in self.players if needle and p.name.lower() == needle]
        return matches[0] if len(matches) == 1 else None

    def to_list(self) -> List[Dict[str, Any]]:
        return [player.to_dict() for player in self.players]
