"""Helpers - Pure utility functions with no side effects."""

from .aggregation import calculate_totals, format_one_decimal, StatsReport
from .summary import roster_summary, SUMMARY_COLUMNS

__all__ = [
    'calculate_totals',
    'format_one_decimal',
    'StatsReport',
    'roster_summary',
    'SUMMARY_COLUMNS',
]
