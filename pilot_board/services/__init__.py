"""
Service layer.

The airport registry owns the watched-airport list; the tracker runs the
fetch-and-match chain for each board request.
"""

from pilot_board.services.airport_registry import (
    AirportRegistry,
    AirportInfo,
    RegistryResult,
    validate_airport,
)
from pilot_board.services.tracker import PilotTracker, TrackerSnapshot

__all__ = [
    'AirportRegistry',
    'AirportInfo',
    'RegistryResult',
    'validate_airport',
    'PilotTracker',
    'TrackerSnapshot',
]
