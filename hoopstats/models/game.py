from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional


class InvalidGameStatsError(ValueError):
    """Raised when raw game input cannot be turned into a GameStats record."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


# Counter fields: (attribute, form field, export key)
COUNTER_FIELDS = [
    ('two_points', 'twoPoints', 'twoPoints'),
    ('three_points', 'threePoints', 'threePoints'),
    ('free_throws_made', 'ftMade', 'freeThrowsMade'),
    ('free_throws_attempted', 'ftAtt', 'freeThrowsAttempted'),
    ('rebounds', 'rebounds', 'rebounds'),
    ('steals', 'steals', 'steals'),
    ('blocks', 'blocks', 'blocks'),
    ('assists', 'assists', 'assists'),
]


@dataclass(frozen=True)
class GameStats:
    """One player's stat line for a single game."""
    date: date
    two_points: int
    three_points: int
    free_throws_made: int
    free_throws_attempted: int
    rebounds: int
    steals: int
    blocks: int
    assists: int

    @property
    def points(self) -> int:
        return self.two_points * 2 + self.three_points * 3

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> 'GameStats':
        """
        Build a GameStats from raw form values.

        This is the only place game input is validated. Every field is
        required; counters must be non-negative integers and free throws
        made can't exceed free throws attempted.

        Args:
            form: Mapping keyed by form field name (ftMade, ftAtt, ...),
                  attribute name or export key

        Returns:
            GameStats record

        Raises:
            InvalidGameStatsError: If a field is missing or malformed
        """
        game_date = _parse_date(_lookup(form, 'date', 'date', 'date'))

        counters = {}
        for attr, form_key, export_key in COUNTER_FIELDS:
            raw = _lookup(form, attr, form_key, export_key)
            counters[attr] = _parse_counter(raw, form_key)

        if counters['free_throws_made'] > counters['free_throws_attempted']:
            raise InvalidGameStatsError(
                f"ftMade ({counters['free_throws_made']}) exceeds "
                f"ftAtt ({counters['free_throws_attempted']})",
                field='ftMade',
            )

        return cls(date=game_date, **counters)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the exported JSON shape."""
        data = {'date': self.date.isoformat()}
        for attr, _, export_key in COUNTER_FIELDS:
            data[export_key] = getattr(self, attr)
        return data


def _lookup(form: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in form and form[key] is not None:
            return form[key]
    raise InvalidGameStatsError(f"Missing required field: {keys[1]}", field=keys[1])


def _parse_counter(raw: Any, field: str) -> int:
    if isinstance(raw, bool):
        raise InvalidGameStatsError(f"{field} must be a whole number", field=field)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not text:
            raise InvalidGameStatsError(f"Missing required field: {field}", field=field)
        try:
            value = int(text)
        except ValueError:
            raise InvalidGameStatsError(
                f"{field} must be a whole number, got {text!r}", field=field
            ) from None
    if value < 0:
        raise InvalidGameStatsError(f"{field} can't be negative ({value})", field=field)
    return value


def _parse_date(raw: Any) -> date:
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    if not text:
        raise InvalidGameStatsError("Missing required field: date", field='date')
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidGameStatsError(
            f"date must be YYYY-MM-DD, got {text!r}", field='date'
        ) from None
