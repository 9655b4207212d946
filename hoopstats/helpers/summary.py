"""Summary - Tabulate stats reports for a whole roster."""

from dataclasses import fields

import pandas as pd

from ..models.player import Roster
from .aggregation import StatsReport, calculate_totals

SUMMARY_COLUMNS = ['player_id', 'name'] + [f.name for f in fields(StatsReport)]


def roster_summary(roster: Roster, count_free_throws: bool = False) -> pd.DataFrame:
    """
    Build a DataFrame with one row per player, in roster order.

    Reports are recomputed on every call.
    """
    rows = []
    for player in roster:
        report = calculate_totals(player.games, count_free_throws=count_free_throws)
        rows.append({'player_id': player.id, 'name': player.name, **report.to_dict()})
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
