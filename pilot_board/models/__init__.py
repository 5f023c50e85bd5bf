"""
Database models for PilotBoard.

The only persistent data is the list of watched airports; pilot data is
fetched fresh for every board request and never stored.
"""

from pilot_board.models.base import (
    Base,
    build_engine,
    build_session_factory,
    init_db,
    session_scope,
)
from pilot_board.models.airport import Airport

__all__ = [
    'Base',
    'build_engine',
    'build_session_factory',
    'init_db',
    'session_scope',
    'Airport',
]
