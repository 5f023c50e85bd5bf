"""
Analytics module for PilotBoard.

Matches pilots to watched airports and estimates ETD, EET and ETA.
"""

from pilot_board.analytics.estimates import (
    FlightRecord,
    MatchResult,
    match_pilots,
    calculate_etd,
    calculate_eet,
    calculate_eta,
    calculate_elapsed_eet,
    format_utc_clock,
    NOT_AVAILABLE,
)

__all__ = [
    'FlightRecord',
    'MatchResult',
    'match_pilots',
    'calculate_etd',
    'calculate_eet',
    'calculate_eta',
    'calculate_elapsed_eet',
    'format_utc_clock',
    'NOT_AVAILABLE',
]
